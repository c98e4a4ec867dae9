"""
API Views JSON para o domínio de Créditos.

Endpoints:
- POST /api/credits                                - Emitir crédito (201)
- GET  /api/credits?customerId=<id>                - Listar créditos do cliente
- GET  /api/credits/<creditCode>?customerId=<id>   - Obter crédito do cliente
"""

import logging
import uuid

from django.http import HttpRequest, JsonResponse

from src.core.credits.dtos import IssueCreditInputDTO

from ..shared.api import BaseAPIView, get_query_int, validate_form
from .forms import CreditForm

logger = logging.getLogger(__name__)


class CreditAPIListView(BaseAPIView):
    """
    POST /api/credits - Emite crédito
    GET /api/credits?customerId=<id> - Lista créditos do cliente
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        data = validate_form(CreditForm(data=self.parse_body(request)))

        service = self.get_service('issue_credit_service')
        output = service.execute(
            IssueCreditInputDTO(
                credit_value=data['creditValue'],
                day_first_installment=data['dayFirstInstallment'],
                number_of_installments=data['numberOfInstallments'],
                customer_id=data['customerId'],
            )
        )

        logger.info(f"Credit {output.credit_code} created via API")
        return JsonResponse(output.to_dict(), status=201)

    def get(self, request: HttpRequest) -> JsonResponse:
        customer_id = get_query_int(request, 'customerId')
        items = self.get_service('list_credits_service').execute(customer_id)
        return JsonResponse([item.to_dict() for item in items], status=200, safe=False)


class CreditAPIDetailView(BaseAPIView):
    """
    GET /api/credits/<creditCode>?customerId=<id> - Obtém crédito
    """

    def get(self, request: HttpRequest, credit_code: uuid.UUID) -> JsonResponse:
        customer_id = get_query_int(request, 'customerId')
        output = self.get_service('find_credit_service').execute(customer_id, credit_code)
        return JsonResponse(output.to_dict(), status=200)
