"""
API Views JSON para o domínio de Clientes.

Endpoints:
- POST   /api/customers                 - Cadastrar cliente (201)
- PATCH  /api/customers?customerId=<id> - Atualizar cliente (200)
- GET    /api/customers/<id>            - Obter cliente (200)
- DELETE /api/customers/<id>            - Remover cliente e créditos (204)

Formato:
- Entrada: JSON (camelCase)
- Saída: JSON do cliente, ou envelope de erro
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.core.customers.dtos import RegisterCustomerInputDTO, UpdateCustomerInputDTO

from ..shared.api import BaseAPIView, get_query_int, validate_form
from .forms import CustomerForm, CustomerUpdateForm

logger = logging.getLogger(__name__)


class CustomerAPIListView(BaseAPIView):
    """
    POST /api/customers - Cadastra cliente
    PATCH /api/customers?customerId=<id> - Atualiza cliente
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        data = validate_form(CustomerForm(data=self.parse_body(request)))

        service = self.get_service('register_customer_service')
        output = service.execute(
            RegisterCustomerInputDTO(
                first_name=data['firstName'],
                last_name=data['lastName'],
                cpf=data['cpf'],
                email=data['email'],
                password=data['password'],
                income=data['income'],
                zip_code=data['zipCode'],
                street=data['street'],
            )
        )

        logger.info(f"Customer created via API: {output.id}")
        return JsonResponse(output.to_dict(), status=201)

    def patch(self, request: HttpRequest) -> JsonResponse:
        customer_id = get_query_int(request, 'customerId')
        data = validate_form(CustomerUpdateForm(data=self.parse_body(request)))

        service = self.get_service('update_customer_service')
        output = service.execute(
            UpdateCustomerInputDTO(
                customer_id=customer_id,
                first_name=data['firstName'],
                last_name=data['lastName'],
                income=data['income'],
                zip_code=data['zipCode'],
                street=data['street'],
            )
        )

        logger.info(f"Customer updated via API: {output.id}")
        return JsonResponse(output.to_dict(), status=200)


class CustomerAPIDetailView(BaseAPIView):
    """
    GET /api/customers/<id> - Obtém cliente
    DELETE /api/customers/<id> - Remove cliente
    """

    def get(self, request: HttpRequest, customer_id: int) -> JsonResponse:
        output = self.get_service('find_customer_service').execute(customer_id)
        return JsonResponse(output.to_dict(), status=200)

    def delete(self, request: HttpRequest, customer_id: int) -> HttpResponse:
        self.get_service('delete_customer_service').execute(customer_id)
        logger.info(f"Customer deleted via API: {customer_id}")
        return HttpResponse(status=204)
