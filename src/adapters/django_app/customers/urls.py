"""
URL patterns para o domínio de Clientes.

Endpoints API JSON:
- POST   /api/customers                 - Cadastrar cliente
- PATCH  /api/customers?customerId=<id> - Atualizar cliente
- GET    /api/customers/<id>            - Obter cliente
- DELETE /api/customers/<id>            - Remover cliente
"""

from django.urls import path

from . import api_views

app_name = 'customers'

urlpatterns = [
    path('api/customers', api_views.CustomerAPIListView.as_view(), name='api_list'),
    path('api/customers/<int:customer_id>', api_views.CustomerAPIDetailView.as_view(), name='api_detail'),
]
