"""
Testes para a API JSON (Views Django via test Client).

Testa:
- Status HTTP de sucesso por endpoint
- Envelope de erro e mapeamento de status
- Integração com Container DI
"""

from unittest.mock import patch
import uuid

import pytest

from src.adapters.django_app.shared.api import (
    BAD_REQUEST_TITLE,
    CONFLICT_TITLE,
    INTERNAL_ERROR_TITLE,
)


pytestmark = pytest.mark.django_db


def assert_envelope(body, status, exception, title=BAD_REQUEST_TITLE):
    assert body["status"] == status
    assert body["title"] == title
    assert body["exception"] == exception
    assert isinstance(body["details"], list) and body["details"]
    assert "T" in body["timestamp"]


@pytest.fixture
def registered(api, customer_payload):
    status, body = api.post("/api/customers", customer_payload)
    assert status == 201
    return body


# =============================================================================
# Clientes
# =============================================================================

class TestCustomerAPI:

    def test_register(self, api, customer_payload):
        status, body = api.post("/api/customers", customer_payload)

        assert status == 201
        assert body["id"] >= 1
        assert body["firstName"] == "Layin"
        assert body["zipCode"] == "00101"
        assert "password" not in body

    def test_register_publishes_event(self, api, customer_payload, published_events):
        api.post("/api/customers", customer_payload)

        assert len(published_events.get_events_by_type("CustomerRegisteredEvent")) == 1

    def test_register_duplicate_cpf_conflict(self, api, customer_payload, registered):
        status, body = api.post("/api/customers", customer_payload)

        assert status == 409
        assert_envelope(body, 409, "ConflictError", CONFLICT_TITLE)

    def test_register_invalid_payload(self, api, customer_payload):
        customer_payload["firstName"] = ""
        customer_payload["email"] = "nope"

        status, body = api.post("/api/customers", customer_payload)

        assert status == 400
        assert_envelope(body, 400, "ValidationError")
        assert any(d.startswith("firstName:") for d in body["details"])
        assert any(d.startswith("email:") for d in body["details"])

    def test_register_malformed_json(self, client):
        response = client.post("/api/customers", data="{not json", content_type="application/json")

        assert response.status_code == 400
        assert response.json()["exception"] == "ValidationError"

    def test_find(self, api, registered):
        status, body = api.get(f"/api/customers/{registered['id']}")

        assert status == 200
        assert body == registered
        assert body["income"] == "1000.00"

    def test_find_missing(self, api):
        status, body = api.get("/api/customers/999")

        assert status == 400
        assert_envelope(body, 400, "EntityNotFoundError")
        assert body["details"] == ["Id 999 not found"]

    def test_update(self, api, registered):
        status, body = api.patch(f"/api/customers?customerId={registered['id']}", {
            "firstName": "Aliny",
            "lastName": "Costta",
            "income": 5000.0,
            "zipCode": "857452",
            "street": "Inu Street",
        })

        assert status == 200
        assert body["firstName"] == "Aliny"
        assert body["street"] == "Inu Street"
        assert body["cpf"] == registered["cpf"]
        assert body["email"] == registered["email"]

    def test_update_response_matches_stored_record(self, api, registered):
        _, updated = api.patch(f"/api/customers?customerId={registered['id']}", {
            "firstName": "Aliny",
            "lastName": "Costta",
            "income": 5000.5,
            "zipCode": "857452",
            "street": "Inu Street",
        })

        _, found = api.get(f"/api/customers/{registered['id']}")

        assert updated == found
        assert found["income"] == "5000.50"

    def test_update_missing_customer(self, api):
        status, body = api.patch("/api/customers?customerId=999", {
            "firstName": "Aliny",
            "lastName": "Costta",
            "income": 5000.0,
            "zipCode": "857452",
            "street": "Inu Street",
        })

        assert status == 400
        assert body["exception"] == "EntityNotFoundError"

    def test_update_without_customer_id(self, api):
        status, body = api.patch("/api/customers", {"firstName": "Aliny"})

        assert status == 400
        assert body["details"] == ["customerId: This query parameter is required"]

    def test_delete(self, api, registered):
        status, body = api.delete(f"/api/customers/{registered['id']}")

        assert status == 204
        assert body is None
        status, _ = api.get(f"/api/customers/{registered['id']}")
        assert status == 400

    def test_delete_missing(self, api):
        status, body = api.delete("/api/customers/999")

        assert status == 400
        assert body["exception"] == "EntityNotFoundError"


# =============================================================================
# Créditos
# =============================================================================

class TestCreditAPI:

    def test_issue(self, api, registered, credit_payload):
        status, body = api.post("/api/credits", credit_payload(registered["id"]))

        assert status == 201
        uuid.UUID(body["creditCode"])
        assert body["status"] == "IN_PROGRESS"
        assert body["emailCustomer"] == "me@layin.net"
        assert body["numberOfInstallment"] == 24

    def test_issue_date_too_far(self, api, registered, credit_payload):
        status, body = api.post("/api/credits", credit_payload(registered["id"], days_ahead=93))

        assert status == 400
        assert_envelope(body, 400, "BusinessRuleViolationError")
        assert body["details"] == ["Invalid Date"]

    def test_issue_unknown_customer(self, api, credit_payload):
        status, body = api.post("/api/credits", credit_payload(999))

        assert status == 400
        assert body["exception"] == "EntityNotFoundError"

    def test_issue_invalid_payload(self, api, registered, credit_payload):
        status, body = api.post(
            "/api/credits",
            credit_payload(registered["id"], numberOfInstallments=60, creditValue=0),
        )

        assert status == 400
        assert body["exception"] == "ValidationError"
        assert len(body["details"]) == 2

    def test_list(self, api, registered, credit_payload):
        api.post("/api/credits", credit_payload(registered["id"]))
        api.post("/api/credits", credit_payload(registered["id"], days_ahead=40))

        status, body = api.get(f"/api/credits?customerId={registered['id']}")

        assert status == 200
        assert len(body) == 2
        assert set(body[0]) == {"creditCode", "creditValue", "numberOfInstallments"}

    def test_list_empty(self, api, registered):
        status, body = api.get(f"/api/credits?customerId={registered['id']}")

        assert status == 200
        assert body == []

    def test_list_requires_customer_id(self, api):
        status, body = api.get("/api/credits?customerId=abc")

        assert status == 400
        assert body["exception"] == "ValidationError"

    def test_find_by_code(self, api, registered, credit_payload):
        _, issued = api.post("/api/credits", credit_payload(registered["id"]))

        status, body = api.get(f"/api/credits/{issued['creditCode']}?customerId={registered['id']}")

        assert status == 200
        assert body == issued
        assert body["creditValue"] == "5000.00"
        assert body["incomeCustomer"] == "1000.00"

    def test_find_by_code_other_customer(self, api, registered, credit_payload):
        _, issued = api.post("/api/credits", credit_payload(registered["id"]))

        status, body = api.get(f"/api/credits/{issued['creditCode']}?customerId={registered['id'] + 1}")

        assert status == 400
        assert body["details"] == ["Contact admin"]

    def test_find_by_unknown_code(self, api, registered):
        code = uuid.uuid4()

        status, body = api.get(f"/api/credits/{code}?customerId={registered['id']}")

        assert status == 400
        assert body["details"] == [f"Creditcode {code} not found"]


# =============================================================================
# Erros inesperados e health
# =============================================================================

class TestErrorHandling:

    def test_unexpected_error_returns_500(self, api, registered):
        with patch(
            "src.core.customers.use_cases.FindCustomerService.execute",
            side_effect=RuntimeError("boom"),
        ):
            status, body = api.get(f"/api/customers/{registered['id']}")

        assert status == 500
        assert_envelope(body, 500, "RuntimeError", INTERNAL_ERROR_TITLE)

    def test_method_not_allowed(self, client):
        response = client.put("/api/credits")

        assert response.status_code == 405

    def test_health(self, api):
        assert api.get("/health/") == (200, {"status": "ok"})
