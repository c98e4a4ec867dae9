"""
URL Configuration para o Credit Application System.

Estrutura:
- /admin/ - Django Admin
- /api/customers - API de Clientes
- /api/credits - API de Créditos
- /health/ - Health check
"""

from django.contrib import admin
from django.urls import path, include

from src.adapters.django_app.shared.api import health_check

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # APIs
    path('', include('src.adapters.django_app.customers.urls')),
    path('', include('src.adapters.django_app.credits.urls')),

    # Health check
    path('health/', health_check, name='health'),
]
