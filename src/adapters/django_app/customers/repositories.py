"""
Repositório Django para persistência de Clientes.

Implementa a interface (Port) definida em src/core/customers/ports.py.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.

Responsabilidades:
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM
- Traduzir IntegrityError em ConflictError
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction

from src.core.customers.entities import CustomerEntity
from src.core.shared.exceptions import ConflictError

from .models import CustomerModel
from .mappers import CustomerMapper

logger = logging.getLogger(__name__)


class DjangoCustomerRepository:
    """
    Implementação Django do CustomerRepository.

    Example:
        repo = DjangoCustomerRepository()

        customer = repo.save(CustomerEntity.create(...))
        print(customer.id)  # atribuído pelo banco

        repo.get_by_id(customer.id)
    """

    def __init__(self):
        self._mapper = CustomerMapper()

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        """
        Persiste cliente (insert se sem ID, update caso contrário).

        Devolve a entidade como ficou gravada, com ID atribuído
        e decimais na escala da coluna.

        O bloco atômico interno vira savepoint quando há transação
        externa, permitindo que a falha de unicidade seja tratada
        sem quebrar a transação do Unit of Work.

        Raises:
            ConflictError: Se CPF já cadastrado
        """
        fields = self._mapper.to_fields(customer)

        try:
            with transaction.atomic():
                if customer.id is None:
                    model = CustomerModel.objects.create(**fields)
                else:
                    model, _ = CustomerModel.objects.update_or_create(
                        id=customer.id,
                        defaults=fields,
                    )
        except IntegrityError as e:
            logger.info(f"Customer rejected by unique constraint: cpf={customer.cpf}")
            raise ConflictError(
                f"CPF {customer.cpf} already registered",
                constraint="customers_cpf_key",
            ) from e

        # Recarrega para devolver os valores na escala da coluna (income 14,2)
        model.refresh_from_db()

        logger.info(f"Customer saved: {model.id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        try:
            model = CustomerModel.objects.get(id=customer_id)
        except CustomerModel.DoesNotExist:
            logger.debug(f"Customer not found: {customer_id}")
            return None
        return self._mapper.to_entity(model)

    def delete(self, customer_id: int) -> None:
        """
        Remove cliente do banco.

        Raises:
            ConflictError: Se ainda houver créditos referenciando o cliente
        """
        try:
            with transaction.atomic():
                deleted_count, _ = CustomerModel.objects.filter(id=customer_id).delete()
        except IntegrityError as e:
            raise ConflictError(
                f"Customer {customer_id} still has credits",
                constraint="credits_customer_id_fkey",
            ) from e

        if deleted_count > 0:
            logger.info(f"Customer deleted: {customer_id}")
        else:
            logger.debug(f"Customer not found for deletion: {customer_id}")

    def exists(self, customer_id: int) -> bool:
        return CustomerModel.objects.filter(id=customer_id).exists()

    def count(self) -> int:
        return CustomerModel.objects.count()
