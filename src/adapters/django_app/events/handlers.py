"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados em modo 'celery'. Isso permite:

- Desacoplamento: Produtores não conhecem consumidores
- Resiliência: Retry automático em falhas
- Auditoria: Registro de todos os eventos processados

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        # Processar evento
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)

audit_logger = logging.getLogger('src.audit')


def _payload(event_data: Dict[str, Any]) -> Dict[str, Any]:
    return event_data.get('data') or {}


# =============================================================================
# Event Handlers - Clientes
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_customer_registered(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para evento CustomerRegisteredEvent.

    Registra trilha de auditoria do cadastro.
    """
    customer_id = event_data.get('aggregate_id')
    email = _payload(event_data).get('email', '')

    audit_logger.info(f"[AUDIT] CustomerRegistered: {customer_id} | email={email}")


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_customer_updated(self, event_data: Dict[str, Any]) -> None:
    """Handler para evento CustomerUpdatedEvent."""
    audit_logger.info(f"[AUDIT] CustomerUpdated: {event_data.get('aggregate_id')}")


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_customer_deleted(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para evento CustomerDeletedEvent.

    Registra quantos créditos foram removidos junto com o cliente.
    """
    customer_id = event_data.get('aggregate_id')
    credits_deleted = _payload(event_data).get('credits_deleted', 0)

    audit_logger.info(
        f"[AUDIT] CustomerDeleted: {customer_id} | "
        f"credits_deleted={credits_deleted}"
    )


# =============================================================================
# Event Handlers - Créditos
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_credit_issued(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para evento CreditIssuedEvent.

    Registra trilha de auditoria da emissão.
    """
    credit_code = event_data.get('aggregate_id')
    data = _payload(event_data)

    audit_logger.info(
        f"[AUDIT] CreditIssued: {credit_code} | "
        f"customer={data.get('customer_id')} | "
        f"value={data.get('credit_value')} | "
        f"installments={data.get('number_of_installments')} | "
        f"first={data.get('day_first_installment')}"
    )


EVENT_HANDLERS = {
    'CustomerRegisteredEvent': handle_customer_registered,
    'CustomerUpdatedEvent': handle_customer_updated,
    'CustomerDeletedEvent': handle_customer_deleted,
    'CreditIssuedEvent': handle_credit_issued,
}


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> bool:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados.

    Returns:
        True se havia handler para o tipo do evento
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler is None:
        logger.warning(f"[DISPATCHER] No handler for {event_type}")
        return False

    logger.info(f"[DISPATCHER] Routing {event_type} to handler")
    handler.delay(event_data)
    return True
