#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria clientes e créditos de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import date, timedelta
from decimal import Decimal

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_CUSTOMERS = [
    {
        'first_name': 'Layin',
        'last_name': 'Costa',
        'cpf': '91852114789',
        'email': 'me@layin.net',
        'password': '12345',
        'income': Decimal('1000.0'),
        'zip_code': '00101',
        'street': 'Neko Street',
    },
    {
        'first_name': 'Aliny',
        'last_name': 'Costta',
        'cpf': '52998224725',
        'email': 'aliny@costta.net',
        'password': '857452',
        'income': Decimal('5000.0'),
        'zip_code': '00102',
        'street': 'Inu Street',
    },
]

SAMPLE_CREDITS = [
    {'credit_value': Decimal('5000.0'), 'days_ahead': 30, 'number_of_installments': 24},
    {'credit_value': Decimal('1500.0'), 'days_ahead': 45, 'number_of_installments': 12},
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'
    os.environ.pop('DATABASE_HOST', None)

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data(container=None, today=None):
    """
    Cria clientes e créditos de exemplo através dos casos de uso.

    Clientes já cadastrados (CPF repetido) são ignorados.

    Returns:
        Lista de (CustomerOutputDTO, [CreditOutputDTO, ...])
    """
    from src.config.container import get_container
    from src.core.customers.dtos import RegisterCustomerInputDTO
    from src.core.credits.dtos import IssueCreditInputDTO
    from src.core.shared.exceptions import ConflictError

    container = container or get_container()
    today = today or date.today()
    created = []

    print("📝 Criando clientes de exemplo...")

    for customer_data in SAMPLE_CUSTOMERS:
        try:
            customer = container.register_customer_service().execute(
                RegisterCustomerInputDTO(**customer_data)
            )
        except ConflictError:
            print(f"   - CPF {customer_data['cpf']} já cadastrado, ignorando")
            continue

        credits = []
        for credit_data in SAMPLE_CREDITS:
            credits.append(
                container.issue_credit_service().execute(
                    IssueCreditInputDTO(
                        credit_value=credit_data['credit_value'],
                        day_first_installment=today + timedelta(days=credit_data['days_ahead']),
                        number_of_installments=credit_data['number_of_installments'],
                        customer_id=customer.id,
                    )
                )
            )

        print(f"   ✓ {customer.first_name} {customer.last_name} ({len(credits)} créditos)")
        created.append((customer, credits))

    print(f"✅ {len(created)} clientes criados!")
    return created


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection
    from django.db.utils import Error

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Error as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Event Publisher: {settings.EVENT_PUBLISHER_MODE}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/api/customers/1")
    print("\n")


def build_parser():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar clientes e créditos de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print("\n" + "=" * 60)
    print("🔧 Credit Application System - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
