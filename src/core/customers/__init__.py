"""
Domínio de Clientes - Cadastro de tomadores de crédito.

Este módulo contém a lógica de negócio de clientes:
- Entidades (CustomerEntity, Address)
- Use Cases (cadastrar, obter, atualizar, remover)
- Domain Events (CustomerRegistered, CustomerUpdated, CustomerDeleted)
- DTOs (Input/Output)
- Ports (Interface do repositório)

Características do Domínio:
- CPF é chave natural única, garantida pelo banco
- CPF, email e senha não mudam após o cadastro
"""

from .entities import CustomerEntity, Address
from .events import (
    CustomerRegisteredEvent,
    CustomerUpdatedEvent,
    CustomerDeletedEvent,
)
from .dtos import (
    RegisterCustomerInputDTO,
    UpdateCustomerInputDTO,
    CustomerOutputDTO,
)
from .ports import CustomerRepository, InMemoryCustomerRepository
from .use_cases import (
    RegisterCustomerService,
    FindCustomerService,
    UpdateCustomerService,
    DeleteCustomerService,
)

__all__ = [
    # Entities
    "CustomerEntity",
    "Address",
    # Events
    "CustomerRegisteredEvent",
    "CustomerUpdatedEvent",
    "CustomerDeletedEvent",
    # DTOs
    "RegisterCustomerInputDTO",
    "UpdateCustomerInputDTO",
    "CustomerOutputDTO",
    # Ports
    "CustomerRepository",
    "InMemoryCustomerRepository",
    # Use Cases
    "RegisterCustomerService",
    "FindCustomerService",
    "UpdateCustomerService",
    "DeleteCustomerService",
]
