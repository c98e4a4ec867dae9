"""
Fixtures para testes unitários do Core.

Sem banco: repositórios em memória e Unit of Work fake.
"""

from datetime import date
from typing import List

import pytest

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import UnitOfWork
from src.core.customers.entities import CustomerEntity
from src.core.customers.ports import InMemoryCustomerRepository
from src.core.credits.ports import InMemoryCreditRepository


class FakeUnitOfWork(UnitOfWork):
    """
    Fake Unit of Work para testes.

    Permite testar:
    - Comportamento de commit/rollback
    - Eventos publicados (mantidos após commit para inspeção)
    """

    def __init__(self):
        super().__init__()
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self):
        pass

    def commit(self):
        self._committed = True

    def rollback(self):
        self._rolled_back = True
        self._events.clear()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def events_of(self, event_type: type) -> List[DomainEvent]:
        return [e for e in self._events if isinstance(e, event_type)]


class FixedClock:
    """Relógio fixo para regras dependentes de data."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def uow():
    """Fixture para Unit of Work fake."""
    return FakeUnitOfWork()


@pytest.fixture
def customer_repo():
    """Fixture para repositório de clientes em memória."""
    return InMemoryCustomerRepository()


@pytest.fixture
def credit_repo():
    """Fixture para repositório de créditos em memória."""
    return InMemoryCreditRepository()


@pytest.fixture
def saved_customer(customer_repo, customer_data):
    """Cliente já persistido no repositório em memória (id=1)."""
    return customer_repo.save(CustomerEntity.create(**customer_data))


@pytest.fixture
def fixed_clock():
    return FixedClock(date(2024, 1, 15))
