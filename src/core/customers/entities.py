"""
Entidades do Domínio de Clientes.

Entidades:
- CustomerEntity: Agregado principal (dono dos créditos)
- Address: Value Object de endereço embutido no cliente

Regras de Negócio Encapsuladas:
- Campos textuais obrigatórios e não vazios
- Renda não negativa
- CPF, email e senha imutáveis após o cadastro
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.core.shared.exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Endereço do cliente (Value Object, comparado por valor)."""

    zip_code: str
    street: str


@dataclass
class CustomerEntity:
    """
    Entidade de Domínio: Cliente.

    Invariantes:
    - Nome, sobrenome, CPF, email, senha e endereço não vazios
    - Renda >= 0
    - O ID é atribuído pelo repositório; o domínio nunca inventa IDs

    Attributes:
        id: Identificador numérico (None até ser persistido)
        first_name: Primeiro nome
        last_name: Sobrenome
        cpf: Cadastro de Pessoa Física (chave natural única)
        email: Email de contato
        password: Segredo opaco, armazenado como recebido
        income: Renda mensal
        address: Endereço embutido

    Example:
        customer = CustomerEntity.create(
            first_name="Layin",
            last_name="Costa",
            cpf="91852114789",
            email="me@layin.net",
            password="12345",
            income=Decimal("1000.0"),
            zip_code="00101",
            street="Neko Street",
        )
    """

    first_name: str = ""
    last_name: str = ""
    cpf: str = ""
    email: str = ""
    password: str = ""
    income: Decimal = Decimal("0")
    address: Address = field(default_factory=lambda: Address(zip_code="", street=""))
    id: Optional[int] = None

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        cpf: str,
        email: str,
        password: str,
        income: Decimal,
        zip_code: str,
        street: str,
    ) -> "CustomerEntity":
        """
        Factory method para criar cliente com validações.

        Raises:
            ValidationError: Se algum campo violar os invariantes
        """
        errors = {}
        for name, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("cpf", cpf),
            ("email", email),
            ("password", password),
            ("zip_code", zip_code),
            ("street", street),
        ):
            if not value or not str(value).strip():
                errors[name] = ["must not be blank"]
        if income is None or Decimal(income) < 0:
            errors["income"] = ["must be greater than or equal to 0"]

        if errors:
            raise ValidationError("Invalid customer data", errors=errors)

        return cls(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            cpf=cpf.strip(),
            email=email.strip(),
            password=password,
            income=Decimal(income),
            address=Address(zip_code=zip_code.strip(), street=street.strip()),
        )

    def update_profile(
        self,
        first_name: str,
        last_name: str,
        income: Decimal,
        zip_code: str,
        street: str,
    ) -> None:
        """
        Altera apenas os campos mutáveis do cliente.

        CPF, email e senha não são tocados.

        Raises:
            ValidationError: Se algum campo violar os invariantes
        """
        errors = {}
        for name, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("zip_code", zip_code),
            ("street", street),
        ):
            if not value or not str(value).strip():
                errors[name] = ["must not be blank"]
        if income is None or Decimal(income) < 0:
            errors["income"] = ["must be greater than or equal to 0"]

        if errors:
            raise ValidationError("Invalid customer data", errors=errors)

        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.income = Decimal(income)
        self.address = Address(zip_code=zip_code.strip(), street=street.strip())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"CustomerEntity(id={self.id}, cpf={self.cpf})"

    def __eq__(self, other: object) -> bool:
        """Comparação por ID; entidades não persistidas só são iguais a si mesmas."""
        if not isinstance(other, CustomerEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
