"""
Configuração do Django App para Créditos.
"""

from django.apps import AppConfig


class CreditsConfig(AppConfig):
    """Configuração do app Credits."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.credits'
    label = 'credits'
    verbose_name = 'Créditos'
