"""
Testes Unitários para Use Cases do Domínio de Clientes.

Estratégia de Teste:
- Usa repositórios em memória (fakes) para isolamento
- Usa FakeUnitOfWork para testar transações
- Verifica eventos publicados
- Testa cenários de sucesso e erro
"""

from datetime import date
from decimal import Decimal

import pytest

from src.core.customers.dtos import RegisterCustomerInputDTO, UpdateCustomerInputDTO
from src.core.customers.events import (
    CustomerRegisteredEvent,
    CustomerUpdatedEvent,
    CustomerDeletedEvent,
)
from src.core.customers.use_cases import (
    RegisterCustomerService,
    FindCustomerService,
    UpdateCustomerService,
    DeleteCustomerService,
)
from src.core.credits.entities import CreditEntity
from src.core.shared.exceptions import ConflictError, EntityNotFoundError, ValidationError


@pytest.fixture
def find_customer(customer_repo):
    return FindCustomerService(customer_repo)


class TestRegisterCustomerService:

    def test_register_assigns_id(self, customer_repo, uow, customer_data):
        service = RegisterCustomerService(customer_repo, uow)

        output = service.execute(RegisterCustomerInputDTO(**customer_data))

        assert output.id == 1
        assert output.cpf == "91852114789"
        assert customer_repo.exists(1)

    def test_register_publishes_event_and_commits(self, customer_repo, uow, customer_data):
        service = RegisterCustomerService(customer_repo, uow)

        service.execute(RegisterCustomerInputDTO(**customer_data))

        events = uow.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], CustomerRegisteredEvent)
        assert events[0].aggregate_id == "1"
        assert events[0].email == "me@layin.net"
        assert uow.committed is True

    def test_register_duplicate_cpf_conflict(self, customer_repo, uow, customer_data):
        service = RegisterCustomerService(customer_repo, uow)
        service.execute(RegisterCustomerInputDTO(**customer_data))

        with pytest.raises(ConflictError):
            service.execute(RegisterCustomerInputDTO(**customer_data))

        assert customer_repo.count() == 1
        assert uow.rolled_back is True

    def test_register_invalid_data(self, customer_repo, uow, customer_data):
        customer_data["income"] = Decimal("-10")
        service = RegisterCustomerService(customer_repo, uow)

        with pytest.raises(ValidationError):
            service.execute(RegisterCustomerInputDTO(**customer_data))

        assert customer_repo.count() == 0

    def test_output_never_exposes_password(self, customer_repo, uow, customer_data):
        output = RegisterCustomerService(customer_repo, uow).execute(
            RegisterCustomerInputDTO(**customer_data)
        )

        assert "password" not in output.to_dict()
        assert not hasattr(output, "password")


class TestFindCustomerService:

    def test_find_existing(self, find_customer, saved_customer):
        output = find_customer.execute(saved_customer.id)

        assert output.id == saved_customer.id
        assert output.to_dict()["firstName"] == "Layin"

    def test_find_missing_raises_not_found(self, find_customer):
        with pytest.raises(EntityNotFoundError) as exc_info:
            find_customer.execute(2)

        assert str(exc_info.value) == "Id 2 not found"
        assert exc_info.value.entity_id == "2"


class TestUpdateCustomerService:

    def _input(self, customer_id):
        return UpdateCustomerInputDTO(
            customer_id=customer_id,
            first_name="Aliny",
            last_name="Costta",
            income=Decimal("5000.0"),
            zip_code="857452",
            street="Inu Street",
        )

    def test_update_success(self, customer_repo, find_customer, uow, saved_customer):
        service = UpdateCustomerService(customer_repo, find_customer, uow)

        output = service.execute(self._input(saved_customer.id))

        assert output.first_name == "Aliny"
        assert output.last_name == "Costta"
        assert output.income == Decimal("5000.0")
        assert output.zip_code == "857452"
        assert output.street == "Inu Street"
        assert output.cpf == "91852114789"
        assert output.email == "me@layin.net"
        assert isinstance(uow.collect_events()[0], CustomerUpdatedEvent)

    def test_update_missing_customer(self, customer_repo, find_customer, uow):
        service = UpdateCustomerService(customer_repo, find_customer, uow)

        with pytest.raises(EntityNotFoundError):
            service.execute(self._input(99))

        assert uow.collect_events() == []


class TestDeleteCustomerService:

    def test_delete_removes_customer_and_credits(
        self, customer_repo, credit_repo, find_customer, uow, saved_customer
    ):
        for _ in range(2):
            credit_repo.save(
                CreditEntity.create(
                    credit_value=Decimal("500"),
                    day_first_installment=date(2024, 2, 1),
                    number_of_installments=10,
                    customer=saved_customer,
                )
            )
        service = DeleteCustomerService(customer_repo, credit_repo, find_customer, uow)

        service.execute(saved_customer.id)

        assert not customer_repo.exists(saved_customer.id)
        assert credit_repo.list_by_customer(saved_customer.id) == []
        event = uow.events_of(CustomerDeletedEvent)[0]
        assert event.credits_deleted == 2

    def test_delete_then_find_fails(
        self, customer_repo, credit_repo, find_customer, uow, saved_customer
    ):
        DeleteCustomerService(customer_repo, credit_repo, find_customer, uow).execute(
            saved_customer.id
        )

        with pytest.raises(EntityNotFoundError):
            find_customer.execute(saved_customer.id)

    def test_delete_missing_customer(self, customer_repo, credit_repo, find_customer, uow):
        service = DeleteCustomerService(customer_repo, credit_repo, find_customer, uow)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute(5)

        assert str(exc_info.value) == "Id 5 not found"
        assert uow.rolled_back is True
