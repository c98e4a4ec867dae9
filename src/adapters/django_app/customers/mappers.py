"""
Mappers para conversão entre CustomerEntity (Core) e CustomerModel (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from decimal import Decimal
from typing import Iterable, List

from src.core.customers.entities import Address, CustomerEntity

from .models import CustomerModel


class CustomerMapper:
    """
    Mapper para conversão entre CustomerEntity e CustomerModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_fields(): Entity → dict de colunas (para update/insert)
    """

    @staticmethod
    def to_fields(entity: CustomerEntity) -> dict:
        """Colunas persistidas, sem o ID."""
        return {
            'first_name': entity.first_name,
            'last_name': entity.last_name,
            'cpf': entity.cpf,
            'email': entity.email,
            'password': entity.password,
            'income': entity.income,
            'zip_code': entity.address.zip_code,
            'street': entity.address.street,
        }

    @classmethod
    def to_model(cls, entity: CustomerEntity) -> CustomerModel:
        """
        Converte CustomerEntity para CustomerModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return CustomerModel(id=entity.id, **cls.to_fields(entity))

    @staticmethod
    def to_entity(model: CustomerModel) -> CustomerEntity:
        """
        Converte CustomerModel para CustomerEntity.

        Bypassa validações do factory method .create()
        pois dados já foram validados na criação original.
        """
        return CustomerEntity(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            password=model.password,
            income=Decimal(model.income),
            address=Address(zip_code=model.zip_code, street=model.street),
        )

    @classmethod
    def to_entity_list(cls, models: Iterable[CustomerModel]) -> List[CustomerEntity]:
        return [cls.to_entity(model) for model in models]
