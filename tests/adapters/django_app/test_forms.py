"""
Testes para os Django Forms (validação estrutural).
"""

from datetime import date, timedelta

import pytest
from django.core.exceptions import ValidationError as DjangoValidationError

from src.adapters.django_app.customers.forms import (
    CustomerForm,
    CustomerUpdateForm,
    validate_cpf,
)
from src.adapters.django_app.credits.forms import CreditForm
from src.adapters.django_app.shared.api import validate_form
from src.core.shared.exceptions import ValidationError


class TestValidateCpf:

    @pytest.mark.parametrize("cpf", ["91852114789", "52998224725"])
    def test_valid(self, cpf):
        validate_cpf(cpf)

    @pytest.mark.parametrize("cpf", [
        "91852114780",  # dígito verificador errado
        "11111111111",  # todos iguais
        "123",
        "9185211478a",
    ])
    def test_invalid(self, cpf):
        with pytest.raises(DjangoValidationError):
            validate_cpf(cpf)


class TestCustomerForm:

    def test_valid_payload(self, customer_payload):
        form = CustomerForm(data=customer_payload)

        assert form.is_valid(), form.errors
        assert form.cleaned_data["cpf"] == "91852114789"

    def test_masked_cpf_normalized(self, customer_payload):
        customer_payload["cpf"] = "918.521.147-89"
        form = CustomerForm(data=customer_payload)

        assert form.is_valid(), form.errors
        assert form.cleaned_data["cpf"] == "91852114789"

    def test_blank_first_name(self, customer_payload):
        customer_payload["firstName"] = "   "
        form = CustomerForm(data=customer_payload)

        assert not form.is_valid()
        assert "firstName" in form.errors

    def test_invalid_email_and_cpf_reported_together(self, customer_payload):
        customer_payload["email"] = "not-an-email"
        customer_payload["cpf"] = "12345678900"

        with pytest.raises(ValidationError) as exc_info:
            validate_form(CustomerForm(data=customer_payload))

        assert set(exc_info.value.errors) == {"email", "cpf"}

    def test_negative_income(self, customer_payload):
        customer_payload["income"] = -1

        assert "income" in CustomerForm(data=customer_payload).errors

    def test_blank_password(self, customer_payload):
        customer_payload["password"] = "  "

        assert "password" in CustomerForm(data=customer_payload).errors

    def test_missing_fields(self):
        form = CustomerForm(data={})

        assert not form.is_valid()
        assert set(form.errors) == {
            "firstName", "lastName", "cpf", "email",
            "password", "income", "zipCode", "street",
        }


class TestCustomerUpdateForm:

    def test_immutable_fields_ignored(self):
        form = CustomerUpdateForm(data={
            "firstName": "Aliny",
            "lastName": "Costta",
            "income": 5000.0,
            "zipCode": "857452",
            "street": "Inu Street",
            "cpf": "52998224725",
        })

        assert form.is_valid(), form.errors
        assert "cpf" not in form.cleaned_data


class TestCreditForm:

    def _payload(self, **overrides):
        payload = {
            "creditValue": 5000.0,
            "dayFirstInstallment": (date.today() + timedelta(days=30)).isoformat(),
            "numberOfInstallments": 24,
            "customerId": 1,
        }
        payload.update(overrides)
        return payload

    def test_valid(self):
        form = CreditForm(data=self._payload())

        assert form.is_valid(), form.errors
        assert form.cleaned_data["customerId"] == 1

    def test_past_date_rejected(self):
        form = CreditForm(data=self._payload(dayFirstInstallment=date.today().isoformat()))

        assert "dayFirstInstallment" in form.errors

    def test_future_date_follows_container_clock(self, container):
        container.clock.override(lambda: date(2024, 1, 15))
        try:
            accepted = CreditForm(data=self._payload(dayFirstInstallment="2024-01-16"))
            rejected = CreditForm(data=self._payload(dayFirstInstallment="2024-01-15"))

            assert accepted.is_valid(), accepted.errors
            assert "dayFirstInstallment" in rejected.errors
        finally:
            container.clock.reset_override()

    @pytest.mark.parametrize("value", [0, -10])
    def test_non_positive_value(self, value):
        assert "creditValue" in CreditForm(data=self._payload(creditValue=value)).errors

    @pytest.mark.parametrize("installments", [0, 49])
    def test_installments_bounds(self, installments):
        assert "numberOfInstallments" in CreditForm(
            data=self._payload(numberOfInstallments=installments)
        ).errors

    def test_missing_customer(self):
        payload = self._payload()
        del payload["customerId"]

        assert "customerId" in CreditForm(data=payload).errors
