"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para injeção explícita.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Regras de crédito e modo de eventos, lidos do settings

Importante: este módulo importa models Django; só deve ser importado
depois de django.setup() (views, scripts e testes já garantem isso).
"""

from datetime import date
from typing import Optional

from dependency_injector import containers, providers
from django.conf import settings

from src.core.customers.use_cases import (
    RegisterCustomerService,
    FindCustomerService,
    UpdateCustomerService,
    DeleteCustomerService,
)
from src.core.credits.entities import FirstInstallmentRule
from src.core.credits.use_cases import (
    IssueCreditService,
    ListCreditsByCustomerService,
    FindCreditByCodeService,
)
from src.adapters.django_app.customers.repositories import DjangoCustomerRepository
from src.adapters.django_app.credits.repositories import DjangoCreditRepository
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.adapters.django_app.events.publishers import (
    LoggingEventPublisher,
    CeleryEventPublisher,
    InMemoryEventPublisher,
)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings.CREDIT_RULES e EVENT_PUBLISHER_MODE
    - Infrastructure: Publicador de eventos
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = get_container()
        service = container.register_customer_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    clock = providers.Object(date.today)

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Selector(
        config.event_publisher_mode,
        sync=providers.Singleton(LoggingEventPublisher),
        celery=providers.Singleton(CeleryEventPublisher),
        memory=providers.Singleton(InMemoryEventPublisher),
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    customer_repository = providers.Singleton(DjangoCustomerRepository)

    credit_repository = providers.Singleton(DjangoCreditRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        DjangoUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Domain rules
    # =========================================================================

    first_installment_rule = providers.Factory(
        FirstInstallmentRule,
        max_months=config.credit_rules.first_installment_max_months,
        inclusive=config.credit_rules.first_installment_inclusive,
    )

    # =========================================================================
    # Services / Use Cases - Clientes
    # =========================================================================

    find_customer_service = providers.Factory(
        FindCustomerService,
        customer_repo=customer_repository,
    )

    register_customer_service = providers.Factory(
        RegisterCustomerService,
        customer_repo=customer_repository,
        uow=unit_of_work,
    )

    update_customer_service = providers.Factory(
        UpdateCustomerService,
        customer_repo=customer_repository,
        find_customer=find_customer_service,
        uow=unit_of_work,
    )

    delete_customer_service = providers.Factory(
        DeleteCustomerService,
        customer_repo=customer_repository,
        credit_repo=credit_repository,
        find_customer=find_customer_service,
        uow=unit_of_work,
    )

    # =========================================================================
    # Services / Use Cases - Créditos
    # =========================================================================

    issue_credit_service = providers.Factory(
        IssueCreditService,
        credit_repo=credit_repository,
        find_customer=find_customer_service,
        uow=unit_of_work,
        rule=first_installment_rule,
        max_installments=config.credit_rules.max_installments,
        clock=clock,
    )

    list_credits_service = providers.Factory(
        ListCreditsByCustomerService,
        credit_repo=credit_repository,
    )

    find_credit_service = providers.Factory(
        FindCreditByCodeService,
        credit_repo=credit_repository,
    )


def settings_to_config() -> dict:
    """Traduz settings do Django para o dicionário de configuração do container."""
    rules = getattr(settings, 'CREDIT_RULES', {})
    return {
        'event_publisher_mode': getattr(settings, 'EVENT_PUBLISHER_MODE', 'sync'),
        'credit_rules': {
            'first_installment_max_months': rules.get('FIRST_INSTALLMENT_MAX_MONTHS', 3),
            'first_installment_inclusive': rules.get('FIRST_INSTALLMENT_INCLUSIVE', True),
            'max_installments': rules.get('MAX_INSTALLMENTS', 48),
        },
    }


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria e configura a partir do settings se não existir.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(settings_to_config())

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo, relendo o settings.
    """
    global _container
    _container = None
