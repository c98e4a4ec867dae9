"""
Use Cases (Application Services) do Domínio de Créditos.

Use Cases implementados:
- IssueCreditService: Emite crédito para um cliente existente
- ListCreditsByCustomerService: Lista créditos de um cliente
- FindCreditByCodeService: Obtém crédito pelo código, restrito ao dono

Responsabilidades dos Use Cases:
- Aplicar regras de negócio (janela da primeira parcela, posse)
- Coordenar entidades e repositórios
- Gerenciar transações (via UoW)
- Retornar DTOs de saída
"""

from datetime import date
from typing import Callable, List, Optional
import uuid

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import BusinessRuleViolationError
from src.core.customers.use_cases import FindCustomerService

from .ports import CreditRepository
from .entities import CreditEntity, FirstInstallmentRule
from .dtos import IssueCreditInputDTO, CreditOutputDTO, CreditListItemDTO
from .events import CreditIssuedEvent


class IssueCreditService:
    """
    Use Case: Emitir crédito.

    Fluxo:
    1. Validar janela da primeira parcela contra o relógio
    2. Resolver o cliente (NotFound propaga)
    3. Criar entidade com código novo e status IN_PROGRESS
    4. Persistir e disparar CreditIssued

    Attributes:
        credit_repo: Repositório de créditos
        find_customer: Use case de consulta de cliente
        uow: Unit of Work para transações
        rule: Janela permitida para a primeira parcela
        max_installments: Teto de parcelas
        clock: Fonte de "hoje" (injetável para testes)

    Example:
        service = IssueCreditService(credit_repo, find_customer, uow)
        output = service.execute(IssueCreditInputDTO(
            credit_value=Decimal("5000.0"),
            day_first_installment=date.today() + timedelta(days=30),
            number_of_installments=24,
            customer_id=1,
        ))
    """

    def __init__(
        self,
        credit_repo: CreditRepository,
        find_customer: FindCustomerService,
        uow: UnitOfWork,
        rule: Optional[FirstInstallmentRule] = None,
        max_installments: int = CreditEntity.MAX_INSTALLMENTS,
        clock: Callable[[], date] = date.today,
    ):
        self.credit_repo = credit_repo
        self.find_customer = find_customer
        self.uow = uow
        self.rule = rule or FirstInstallmentRule()
        self.max_installments = max_installments
        self.clock = clock

    def execute(self, input_dto: IssueCreditInputDTO) -> CreditOutputDTO:
        """
        Raises:
            BusinessRuleViolationError: Se a primeira parcela estiver fora da janela
            EntityNotFoundError: Se o cliente não existe
            ValidationError: Se dados inválidos
        """
        if not self.rule.is_valid(input_dto.day_first_installment, today=self.clock()):
            raise BusinessRuleViolationError(
                "Invalid Date",
                rule="first_installment_window",
            )

        with self.uow:
            customer = self.find_customer.get_entity(input_dto.customer_id)

            credit = CreditEntity.create(
                credit_value=input_dto.credit_value,
                day_first_installment=input_dto.day_first_installment,
                number_of_installments=input_dto.number_of_installments,
                customer=customer,
                max_installments=self.max_installments,
            )

            credit = self.credit_repo.save(credit)

            self.uow.publish_event(
                CreditIssuedEvent(
                    aggregate_id=str(credit.credit_code),
                    customer_id=customer.id,
                    credit_value=str(credit.credit_value),
                    number_of_installments=credit.number_of_installments,
                    day_first_installment=credit.day_first_installment.isoformat(),
                )
            )

        return CreditOutputDTO.from_entity(credit)


class ListCreditsByCustomerService:
    """
    Use Case: Listar créditos de um cliente.

    Não usa UoW pois é operação de leitura. Cliente sem créditos
    (ou inexistente) resulta em lista vazia.
    """

    def __init__(self, credit_repo: CreditRepository):
        self.credit_repo = credit_repo

    def execute(self, customer_id: int) -> List[CreditListItemDTO]:
        credits = self.credit_repo.list_by_customer(customer_id)
        return [CreditListItemDTO.from_entity(c) for c in credits]


class FindCreditByCodeService:
    """
    Use Case: Obter crédito pelo código.

    O crédito só é devolvido ao cliente dono. Código de outro
    cliente gera "Contact admin", distinto de "não encontrado",
    para não confirmar a existência do crédito alheio.
    """

    def __init__(self, credit_repo: CreditRepository):
        self.credit_repo = credit_repo

    def execute(self, customer_id: int, credit_code: uuid.UUID) -> CreditOutputDTO:
        """
        Raises:
            BusinessRuleViolationError: Código inexistente ou de outro cliente
        """
        credit = self.credit_repo.get_by_code(credit_code)

        if credit is None:
            raise BusinessRuleViolationError(
                f"Creditcode {credit_code} not found",
                rule="credit_code_exists",
            )

        if not credit.belongs_to(customer_id):
            raise BusinessRuleViolationError(
                "Contact admin",
                rule="credit_ownership",
            )

        return CreditOutputDTO.from_entity(credit)
