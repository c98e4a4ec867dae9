"""
Domain Events do Domínio de Clientes.

Eventos:
- CustomerRegisteredEvent: Novo cliente cadastrado
- CustomerUpdatedEvent: Dados mutáveis do cliente alterados
- CustomerDeletedEvent: Cliente (e seus créditos) removido

Uso:
    with uow:
        customer = customer_repo.save(CustomerEntity.create(...))
        uow.publish_event(CustomerRegisteredEvent(aggregate_id=customer.id, ...))
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class CustomerRegisteredEvent(DomainEvent):
    """
    Evento: Cliente foi cadastrado.

    O CPF não é incluído para não espalhar dado pessoal
    por logs e filas.
    """

    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Customer"


@dataclass
class CustomerUpdatedEvent(DomainEvent):
    """Evento: Dados do cliente foram atualizados."""

    @property
    def aggregate_type(self) -> str:
        return "Customer"


@dataclass
class CustomerDeletedEvent(DomainEvent):
    """
    Evento: Cliente foi removido.

    Attributes:
        credits_deleted: Quantidade de créditos removidos junto
    """

    credits_deleted: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Customer"
