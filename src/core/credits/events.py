"""
Domain Events do Domínio de Créditos.

Eventos:
- CreditIssuedEvent: Novo crédito emitido para um cliente
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class CreditIssuedEvent(DomainEvent):
    """
    Evento: Crédito foi emitido.

    aggregate_id é o código do crédito (UUID em string).

    Handlers típicos:
    - Registrar trilha de auditoria
    - Encaminhar para análise de crédito

    Attributes:
        customer_id: ID do cliente dono
        credit_value: Valor (string, para serializar sem perda)
        number_of_installments: Quantidade de parcelas
        day_first_installment: Data ISO da primeira parcela
    """

    customer_id: int = 0
    credit_value: str = ""
    number_of_installments: int = 0
    day_first_installment: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Credit"
