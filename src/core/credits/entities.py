"""
Entidades do Domínio de Créditos.

Entidades:
- CreditEntity: Crédito emitido para um cliente
- CreditStatus: Estados possíveis de um crédito
- FirstInstallmentRule: Janela permitida para a primeira parcela

Regras de Negócio Encapsuladas:
- Valor do crédito positivo
- Número de parcelas entre 1 e o teto configurado (48)
- Primeira parcela no máximo N meses após a data de emissão
- Código (UUID) gerado na construção
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional
import uuid

from src.core.shared.exceptions import ValidationError
from src.core.customers.entities import CustomerEntity


class CreditStatus(Enum):
    """
    Estados possíveis de um crédito.

    Todo crédito nasce IN_PROGRESS. APPROVED e REJECTED são
    apenas armazenados; não existe fluxo de aprovação.
    """

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


def add_months(day: date, months: int) -> date:
    """
    Soma meses a uma data de calendário.

    Se o dia não existir no mês de destino, usa o último dia
    do mês (31/01 + 1 mês = 28/02 ou 29/02).
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


@dataclass(frozen=True)
class FirstInstallmentRule:
    """
    Janela da primeira parcela.

    A data é válida quando não passa de hoje + max_months.
    Com inclusive=True a própria data limite é aceita.

    Example:
        rule = FirstInstallmentRule(max_months=3, inclusive=True)
        rule.is_valid(date(2024, 4, 15), today=date(2024, 1, 15))  # True
    """

    max_months: int = 3
    inclusive: bool = True

    def latest_allowed(self, today: date) -> date:
        return add_months(today, self.max_months)

    def is_valid(self, day_first_installment: date, today: date) -> bool:
        limit = self.latest_allowed(today)
        if self.inclusive:
            return day_first_installment <= limit
        return day_first_installment < limit


@dataclass
class CreditEntity:
    """
    Entidade de Domínio: Crédito.

    Invariantes:
    - credit_value > 0
    - 1 <= number_of_installments <= MAX_INSTALLMENTS
    - Pertence a exatamente um cliente já persistido
    - credit_code único, gerado na construção

    Attributes:
        id: Identificador numérico (None até ser persistido)
        credit_code: Referência externa opaca (UUID)
        credit_value: Valor do crédito
        day_first_installment: Data da primeira parcela
        number_of_installments: Quantidade de parcelas
        status: Estado atual (default IN_PROGRESS)
        customer: Cliente dono do crédito
    """

    credit_value: Decimal = Decimal("0")
    day_first_installment: Optional[date] = None
    number_of_installments: int = 0
    customer: Optional[CustomerEntity] = None
    credit_code: uuid.UUID = field(default_factory=uuid.uuid4)
    status: CreditStatus = CreditStatus.IN_PROGRESS
    id: Optional[int] = None

    MAX_INSTALLMENTS: ClassVar[int] = 48

    @classmethod
    def create(
        cls,
        credit_value: Decimal,
        day_first_installment: date,
        number_of_installments: int,
        customer: CustomerEntity,
        max_installments: int = None,
    ) -> "CreditEntity":
        """
        Factory method para criar crédito com validações.

        A janela da primeira parcela é regra de negócio e fica no
        caso de uso (depende do relógio); aqui ficam só os invariantes
        estruturais.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        max_installments = max_installments or cls.MAX_INSTALLMENTS
        errors = {}

        if credit_value is None or Decimal(credit_value) <= 0:
            errors["credit_value"] = ["must be greater than 0"]

        if day_first_installment is None:
            errors["day_first_installment"] = ["is required"]

        if not number_of_installments or not 1 <= number_of_installments <= max_installments:
            errors["number_of_installments"] = [
                f"must be between 1 and {max_installments}"
            ]

        if customer is None or customer.id is None:
            errors["customer"] = ["must be a registered customer"]

        if errors:
            raise ValidationError("Invalid credit data", errors=errors)

        return cls(
            credit_value=Decimal(credit_value),
            day_first_installment=day_first_installment,
            number_of_installments=number_of_installments,
            customer=customer,
            status=CreditStatus.IN_PROGRESS,
        )

    @property
    def customer_id(self) -> Optional[int]:
        return self.customer.id if self.customer else None

    def belongs_to(self, customer_id: int) -> bool:
        return self.customer_id == customer_id

    def __repr__(self) -> str:
        return (
            f"CreditEntity("
            f"id={self.id}, "
            f"credit_code={self.credit_code}, "
            f"status={self.status.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação pelo código (identidade externa)."""
        if not isinstance(other, CreditEntity):
            return False
        return self.credit_code == other.credit_code

    def __hash__(self) -> int:
        return hash(self.credit_code)
