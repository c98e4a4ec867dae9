"""
Configuração do Django App para Clientes.
"""

from django.apps import AppConfig


class CustomersConfig(AppConfig):
    """Configuração do app Customers."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.customers'
    label = 'customers'
    verbose_name = 'Clientes'
