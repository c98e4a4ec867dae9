"""
Mappers para conversão entre CreditEntity (Core) e CreditModel (Django).

O cliente dono é convertido pelo CustomerMapper; repositórios
devem carregar créditos com select_related('customer').
"""

from decimal import Decimal
from typing import Iterable, List

from src.core.credits.entities import CreditEntity, CreditStatus
from src.adapters.django_app.customers.mappers import CustomerMapper

from .models import CreditModel


class CreditMapper:
    """
    Mapper para conversão entre CreditEntity e CreditModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    """

    @staticmethod
    def to_model(entity: CreditEntity) -> CreditModel:
        """
        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return CreditModel(
            id=entity.id,
            credit_code=entity.credit_code,
            credit_value=entity.credit_value,
            day_first_installment=entity.day_first_installment,
            number_of_installments=entity.number_of_installments,
            status=entity.status.value,
            customer_id=entity.customer_id,
        )

    @staticmethod
    def to_entity(model: CreditModel) -> CreditEntity:
        return CreditEntity(
            id=model.id,
            credit_code=model.credit_code,
            credit_value=Decimal(model.credit_value),
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=CreditStatus(model.status),
            customer=CustomerMapper.to_entity(model.customer),
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[CreditModel]) -> List[CreditEntity]:
        return [cls.to_entity(model) for model in models]
