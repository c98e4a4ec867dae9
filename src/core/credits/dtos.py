"""
Data Transfer Objects (DTOs) do Domínio de Créditos.

Tipos de DTOs:
- Input DTOs: Recebem dados já validados pelos Forms
- Output DTOs: Visão completa de um crédito (consulta por código)
- List DTOs: Visão enxuta para listagem por cliente
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
import uuid

from .entities import CreditEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class IssueCreditInputDTO:
    """
    DTO de entrada para emitir crédito.

    Attributes:
        credit_value: Valor do crédito
        day_first_installment: Data da primeira parcela
        number_of_installments: Quantidade de parcelas
        customer_id: ID do cliente dono
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CreditOutputDTO:
    """
    DTO de saída completo de um crédito.

    Inclui email e renda do cliente para conferência no back office.
    """

    credit_code: uuid.UUID
    credit_value: Decimal
    day_first_installment: date
    number_of_installment: int
    status: str
    email_customer: str
    income_customer: Decimal

    @classmethod
    def from_entity(cls, entity: CreditEntity) -> "CreditOutputDTO":
        return cls(
            credit_code=entity.credit_code,
            credit_value=entity.credit_value,
            day_first_installment=entity.day_first_installment,
            number_of_installment=entity.number_of_installments,
            status=entity.status.value,
            email_customer=entity.customer.email,
            income_customer=entity.customer.income,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "creditCode": str(self.credit_code),
            "creditValue": str(self.credit_value),
            "dayFirstInstallment": self.day_first_installment.isoformat(),
            "numberOfInstallment": self.number_of_installment,
            "status": self.status,
            "emailCustomer": self.email_customer,
            "incomeCustomer": str(self.income_customer),
        }


@dataclass
class CreditListItemDTO:
    """
    DTO otimizado para listagens de créditos de um cliente.

    Contém apenas campos necessários para exibição em lista.
    """

    credit_code: uuid.UUID
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, entity: CreditEntity) -> "CreditListItemDTO":
        return cls(
            credit_code=entity.credit_code,
            credit_value=entity.credit_value,
            number_of_installments=entity.number_of_installments,
        )

    def to_dict(self) -> dict:
        return {
            "creditCode": str(self.credit_code),
            "creditValue": str(self.credit_value),
            "numberOfInstallments": self.number_of_installments,
        }
