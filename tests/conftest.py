"""
Configurações globais do Pytest para o Credit Application System.

Este arquivo é carregado automaticamente pelo pytest e:
- Configura Django (SQLite em memória) antes da coleta
- Fornece fixtures compartilhadas
"""

from decimal import Decimal
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    from django.conf import settings

    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'django.contrib.staticfiles',
                'src.adapters.django_app.customers',
                'src.adapters.django_app.credits',
            ],
            MIDDLEWARE=[
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.middleware.common.CommonMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
                'django.contrib.messages.middleware.MessageMiddleware',
            ],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'django.template.context_processors.request',
                        'django.contrib.auth.context_processors.auth',
                        'django.contrib.messages.context_processors.messages',
                    ],
                },
            }],
            ROOT_URLCONF='src.config.urls',
            APPEND_SLASH=False,
            STATIC_URL='/static/',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            CREDIT_RULES={
                'FIRST_INSTALLMENT_MAX_MONTHS': 3,
                'FIRST_INSTALLMENT_INCLUSIVE': True,
                'MAX_INSTALLMENTS': 48,
            },
            EVENT_PUBLISHER_MODE='memory',
            CELERY_TASK_ALWAYS_EAGER=True,
            CELERY_BROKER_URL='memory://',
            CELERY_RESULT_BACKEND='cache+memory://',
        )

        import django
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def customer_data():
    """Dados válidos de cadastro (campos do RegisterCustomerInputDTO)."""
    return {
        'first_name': 'Layin',
        'last_name': 'Costa',
        'cpf': '91852114789',
        'email': 'me@layin.net',
        'password': '12345',
        'income': Decimal('1000.0'),
        'zip_code': '00101',
        'street': 'Neko Street',
    }


@pytest.fixture
def customer_payload():
    """Corpo JSON válido para POST /api/customers."""
    return {
        'firstName': 'Layin',
        'lastName': 'Costa',
        'cpf': '91852114789',
        'email': 'me@layin.net',
        'password': '12345',
        'income': 1000.0,
        'zipCode': '00101',
        'street': 'Neko Street',
    }
