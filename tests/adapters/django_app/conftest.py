"""
Fixtures para testes dos adapters Django.

Django já está configurado pelo tests/conftest.py (SQLite em memória,
EVENT_PUBLISHER_MODE='memory').
"""

import json
from datetime import date, timedelta
from decimal import Decimal

import pytest


@pytest.fixture(autouse=True)
def reset_di_container():
    """Reset container entre testes."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def container():
    from src.config.container import get_container
    return get_container()


@pytest.fixture
def published_events(container):
    """Eventos publicados pelo InMemoryEventPublisher do container."""
    return container.event_publisher()


@pytest.fixture
def customer_model_factory(db):
    """Factory para criar CustomerModel para testes."""
    from src.adapters.django_app.customers.models import CustomerModel

    def create_customer(**kwargs):
        defaults = {
            'first_name': 'Layin',
            'last_name': 'Costa',
            'cpf': '91852114789',
            'email': 'me@layin.net',
            'password': '12345',
            'income': Decimal('1000.00'),
            'zip_code': '00101',
            'street': 'Neko Street',
        }
        defaults.update(kwargs)
        return CustomerModel.objects.create(**defaults)

    return create_customer


@pytest.fixture
def credit_model_factory(db):
    """Factory para criar CreditModel para testes."""
    from src.adapters.django_app.credits.models import CreditModel

    def create_credit(customer, **kwargs):
        defaults = {
            'credit_value': Decimal('5000.00'),
            'day_first_installment': date.today() + timedelta(days=30),
            'number_of_installments': 24,
            'customer': customer,
        }
        defaults.update(kwargs)
        return CreditModel.objects.create(**defaults)

    return create_credit


@pytest.fixture
def api(client):
    """Cliente HTTP que envia e recebe JSON."""

    class JsonClient:

        def _send(self, method, path, payload=None):
            kwargs = {}
            if payload is not None:
                kwargs = {'data': json.dumps(payload), 'content_type': 'application/json'}
            response = getattr(client, method)(path, **kwargs)
            body = response.json() if response.content else None
            return response.status_code, body

        def get(self, path):
            return self._send('get', path)

        def post(self, path, payload):
            return self._send('post', path, payload)

        def patch(self, path, payload):
            return self._send('patch', path, payload)

        def delete(self, path):
            return self._send('delete', path)

    return JsonClient()


@pytest.fixture
def credit_payload():
    def build(customer_id, days_ahead=30, **overrides):
        payload = {
            'creditValue': 5000.0,
            'dayFirstInstallment': (date.today() + timedelta(days=days_ahead)).isoformat(),
            'numberOfInstallments': 24,
            'customerId': customer_id,
        }
        payload.update(overrides)
        return payload

    return build
