"""
Ports (Interfaces) do Domínio de Clientes.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência de clientes.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoCustomerRepository:
        def save(self, customer: CustomerEntity) -> CustomerEntity:
            model = CustomerMapper.to_model(customer)
            model.save()
"""

from itertools import count
from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import ConflictError

from .entities import CustomerEntity


@runtime_checkable
class CustomerRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoCustomerRepository (PostgreSQL/SQLite via ORM)
    - InMemoryCustomerRepository (para testes)
    """

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        """
        Persiste cliente (create ou update).

        Na criação o repositório atribui o ID.

        Returns:
            A entidade com ID atribuído

        Raises:
            ConflictError: Se o CPF já estiver cadastrado
        """
        ...

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        """Busca cliente por ID; None se não existir."""
        ...

    def delete(self, customer_id: int) -> None:
        """Remove cliente. Créditos devem ser removidos antes."""
        ...

    def exists(self, customer_id: int) -> bool:
        ...


class InMemoryCustomerRepository:
    """
    Implementação em memória do CustomerRepository.

    Útil para testes unitários e prototipagem. Atribui IDs
    sequenciais e aplica a mesma unicidade de CPF que o banco.

    Não usar em produção!
    """

    def __init__(self):
        self._customers: Dict[int, CustomerEntity] = {}
        self._ids = count(1)

    def save(self, customer: CustomerEntity) -> CustomerEntity:
        for other in self._customers.values():
            if other.cpf == customer.cpf and other.id != customer.id:
                raise ConflictError(
                    f"CPF {customer.cpf} already registered",
                    constraint="customers_cpf_key",
                )
        if customer.id is None:
            customer.id = next(self._ids)
        self._customers[customer.id] = customer
        return customer

    def get_by_id(self, customer_id: int) -> Optional[CustomerEntity]:
        return self._customers.get(customer_id)

    def delete(self, customer_id: int) -> None:
        self._customers.pop(customer_id, None)

    def exists(self, customer_id: int) -> bool:
        return customer_id in self._customers

    def count(self) -> int:
        return len(self._customers)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._customers.clear()
