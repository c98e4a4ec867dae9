"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para a camada HTTP.

Tipos de DTOs:
- Input DTOs: Recebem dados já validados pelos Forms
- Output DTOs: Formatam dados para resposta (JSON em camelCase)
"""

from dataclasses import dataclass
from decimal import Decimal

from .entities import CustomerEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class RegisterCustomerInputDTO:
    """
    DTO de entrada para cadastrar cliente.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    password: str
    income: Decimal
    zip_code: str
    street: str


@dataclass(frozen=True)
class UpdateCustomerInputDTO:
    """
    DTO de entrada para atualizar cliente.

    Carrega somente os campos mutáveis; CPF, email e senha
    ficam de fora por construção.
    """

    customer_id: int
    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CustomerOutputDTO:
    """
    DTO de saída com dados do cliente.

    A senha nunca é exposta.
    """

    id: int
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, entity: CustomerEntity) -> "CustomerOutputDTO":
        return cls(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            cpf=entity.cpf,
            email=entity.email,
            income=entity.income,
            zip_code=entity.address.zip_code,
            street=entity.address.street,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "cpf": self.cpf,
            "email": self.email,
            "income": str(self.income),
            "zipCode": self.zip_code,
            "street": self.street,
        }
