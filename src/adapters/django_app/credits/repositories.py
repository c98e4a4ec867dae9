"""
Repositório Django para persistência de Créditos.

Implementa a interface (Port) definida em src/core/credits/ports.py.

Responsabilidades:
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM (select_related para o cliente)
- Traduzir IntegrityError em ConflictError
"""

from typing import List, Optional
import logging
import uuid

from django.db import IntegrityError, transaction

from src.core.credits.entities import CreditEntity
from src.core.shared.exceptions import ConflictError

from .models import CreditModel
from .mappers import CreditMapper

logger = logging.getLogger(__name__)


class DjangoCreditRepository:
    """
    Implementação Django do CreditRepository.

    Example:
        repo = DjangoCreditRepository()
        credit = repo.save(CreditEntity.create(...))
        repo.list_by_customer(credit.customer_id)
    """

    def __init__(self):
        self._mapper = CreditMapper()

    def save(self, credit: CreditEntity) -> CreditEntity:
        """
        Persiste crédito.

        O valor devolvido fica na escala da coluna (credit_value 14,2).

        Raises:
            ConflictError: Se o código já existir ou o cliente
                não puder ser referenciado
        """
        model = self._mapper.to_model(credit)

        try:
            with transaction.atomic():
                model.save(force_insert=credit.id is None)
        except IntegrityError as e:
            raise self._conflict_for(credit, e) from e

        model.refresh_from_db(fields=['credit_value'])
        credit.id = model.id
        credit.credit_value = model.credit_value
        logger.info(f"Credit saved: {credit.credit_code} (customer {credit.customer_id})")
        return credit

    def _conflict_for(self, credit: CreditEntity, error: IntegrityError) -> ConflictError:
        """Identifica qual constraint rejeitou o crédito."""
        if CreditModel.objects.filter(credit_code=credit.credit_code).exists():
            logger.info(f"Credit rejected by unique constraint: {credit.credit_code}")
            return ConflictError(
                f"Creditcode {credit.credit_code} already exists",
                constraint="credits_credit_code_key",
            )

        logger.warning(f"Credit {credit.credit_code} rejected by the database: {error}")
        return ConflictError(
            f"Customer {credit.customer_id} cannot receive credits",
            constraint="credits_customer_id_fkey",
        )

    def get_by_code(self, credit_code: uuid.UUID) -> Optional[CreditEntity]:
        model = (
            CreditModel.objects
            .select_related('customer')
            .filter(credit_code=credit_code)
            .first()
        )
        if model is None:
            logger.debug(f"Credit not found: {credit_code}")
            return None
        return self._mapper.to_entity(model)

    def list_by_customer(self, customer_id: int) -> List[CreditEntity]:
        """Lista créditos do cliente em ordem de criação."""
        models = (
            CreditModel.objects
            .select_related('customer')
            .filter(customer_id=customer_id)
            .order_by('id')
        )
        return self._mapper.to_entity_list(models)

    def delete_by_customer(self, customer_id: int) -> int:
        deleted_count, _ = CreditModel.objects.filter(customer_id=customer_id).delete()
        if deleted_count:
            logger.info(f"{deleted_count} credit(s) deleted for customer {customer_id}")
        return deleted_count

    def count(self) -> int:
        return CreditModel.objects.count()
