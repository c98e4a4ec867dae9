"""
URL patterns para o domínio de Créditos.

Endpoints API JSON:
- POST /api/credits                              - Emitir crédito
- GET  /api/credits?customerId=<id>              - Listar créditos
- GET  /api/credits/<creditCode>?customerId=<id> - Obter crédito
"""

from django.urls import path

from . import api_views

app_name = 'credits'

urlpatterns = [
    path('api/credits', api_views.CreditAPIListView.as_view(), name='api_list'),
    path('api/credits/<uuid:credit_code>', api_views.CreditAPIDetailView.as_view(), name='api_detail'),
]
