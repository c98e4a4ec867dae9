"""
Use Cases (Application Services) do Domínio de Clientes.

Use Cases implementados:
- RegisterCustomerService: Cadastra cliente
- FindCustomerService: Obtém cliente por ID
- UpdateCustomerService: Atualiza campos mutáveis
- DeleteCustomerService: Remove cliente e seus créditos

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Erros sobem tipados, sem tradução; a camada HTTP converte
"""

from typing import TYPE_CHECKING

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError

from .ports import CustomerRepository
from .entities import CustomerEntity
from .dtos import (
    RegisterCustomerInputDTO,
    UpdateCustomerInputDTO,
    CustomerOutputDTO,
)
from .events import (
    CustomerRegisteredEvent,
    CustomerUpdatedEvent,
    CustomerDeletedEvent,
)

if TYPE_CHECKING:
    from src.core.credits.ports import CreditRepository


class RegisterCustomerService:
    """
    Use Case: Cadastrar um novo cliente.

    Fluxo:
    1. Criar entidade com endereço embutido
    2. Persistir via repositório (ID atribuído pelo banco)
    3. Disparar evento CustomerRegistered
    4. Retornar DTO de saída

    Não há pré-checagem de CPF duplicado: a constraint única do
    banco decide e o repositório lança ConflictError.

    Example:
        service = RegisterCustomerService(customer_repo, uow)
        output = service.execute(RegisterCustomerInputDTO(...))
        print(output.id)
    """

    def __init__(self, customer_repo: CustomerRepository, uow: UnitOfWork):
        self.customer_repo = customer_repo
        self.uow = uow

    def execute(self, input_dto: RegisterCustomerInputDTO) -> CustomerOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            ConflictError: Se CPF já cadastrado
        """
        with self.uow:
            customer = CustomerEntity.create(
                first_name=input_dto.first_name,
                last_name=input_dto.last_name,
                cpf=input_dto.cpf,
                email=input_dto.email,
                password=input_dto.password,
                income=input_dto.income,
                zip_code=input_dto.zip_code,
                street=input_dto.street,
            )

            customer = self.customer_repo.save(customer)

            self.uow.publish_event(
                CustomerRegisteredEvent(
                    aggregate_id=customer.id,
                    email=customer.email,
                )
            )

        return CustomerOutputDTO.from_entity(customer)


class FindCustomerService:
    """
    Use Case: Obter cliente por ID.

    Também é usado por outros casos de uso (atualização, remoção,
    emissão de crédito) via get_entity, para que todos compartilhem
    a mesma falha de "não encontrado".
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    def get_entity(self, customer_id: int) -> CustomerEntity:
        """
        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        customer = self.customer_repo.get_by_id(customer_id)

        if customer is None:
            raise EntityNotFoundError(
                f"Id {customer_id} not found",
                entity_type="Customer",
                entity_id=str(customer_id),
            )

        return customer

    def execute(self, customer_id: int) -> CustomerOutputDTO:
        return CustomerOutputDTO.from_entity(self.get_entity(customer_id))


class UpdateCustomerService:
    """
    Use Case: Atualizar dados mutáveis do cliente.

    Apenas nome, sobrenome, renda e endereço mudam.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        find_customer: FindCustomerService,
        uow: UnitOfWork,
    ):
        self.customer_repo = customer_repo
        self.find_customer = find_customer
        self.uow = uow

    def execute(self, input_dto: UpdateCustomerInputDTO) -> CustomerOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se cliente não existe
            ValidationError: Se dados inválidos
        """
        with self.uow:
            customer = self.find_customer.get_entity(input_dto.customer_id)

            customer.update_profile(
                first_name=input_dto.first_name,
                last_name=input_dto.last_name,
                income=input_dto.income,
                zip_code=input_dto.zip_code,
                street=input_dto.street,
            )

            customer = self.customer_repo.save(customer)

            self.uow.publish_event(CustomerUpdatedEvent(aggregate_id=customer.id))

        return CustomerOutputDTO.from_entity(customer)


class DeleteCustomerService:
    """
    Use Case: Remover cliente.

    Os créditos do cliente são removidos explicitamente, na mesma
    transação, antes do cliente.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        credit_repo: "CreditRepository",
        find_customer: FindCustomerService,
        uow: UnitOfWork,
    ):
        self.customer_repo = customer_repo
        self.credit_repo = credit_repo
        self.find_customer = find_customer
        self.uow = uow

    def execute(self, customer_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        with self.uow:
            customer = self.find_customer.get_entity(customer_id)

            credits_deleted = self.credit_repo.delete_by_customer(customer.id)
            self.customer_repo.delete(customer.id)

            self.uow.publish_event(
                CustomerDeletedEvent(
                    aggregate_id=customer.id,
                    credits_deleted=credits_deleted,
                )
            )
