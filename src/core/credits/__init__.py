"""
Domínio de Créditos - Emissão e consulta de empréstimos.

Este módulo contém a lógica de negócio de créditos:
- Entidades (CreditEntity, CreditStatus, FirstInstallmentRule)
- Use Cases (emitir, listar por cliente, obter por código)
- Domain Events (CreditIssued)
- DTOs (Input/Output)
- Ports (Interface do repositório)

Características do Domínio:
- Primeira parcela em até 3 meses (configurável)
- Até 48 parcelas
- Crédito só é consultável pelo próprio cliente
"""

from .entities import CreditEntity, CreditStatus, FirstInstallmentRule, add_months
from .events import CreditIssuedEvent
from .dtos import IssueCreditInputDTO, CreditOutputDTO, CreditListItemDTO
from .ports import CreditRepository, InMemoryCreditRepository
from .use_cases import (
    IssueCreditService,
    ListCreditsByCustomerService,
    FindCreditByCodeService,
)

__all__ = [
    # Entities
    "CreditEntity",
    "CreditStatus",
    "FirstInstallmentRule",
    "add_months",
    # Events
    "CreditIssuedEvent",
    # DTOs
    "IssueCreditInputDTO",
    "CreditOutputDTO",
    "CreditListItemDTO",
    # Ports
    "CreditRepository",
    "InMemoryCreditRepository",
    # Use Cases
    "IssueCreditService",
    "ListCreditsByCustomerService",
    "FindCreditByCodeService",
]
