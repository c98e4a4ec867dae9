"""
Ports (Interfaces) do Domínio de Créditos.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência e consulta de créditos.
"""

from itertools import count
from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from src.core.shared.exceptions import ConflictError

from .entities import CreditEntity


@runtime_checkable
class CreditRepository(Protocol):
    """
    Interface para persistência de Créditos.

    Implementações:
    - DjangoCreditRepository (PostgreSQL/SQLite via ORM)
    - InMemoryCreditRepository (para testes)

    Methods:
        save: Persiste crédito, atribuindo ID
        get_by_code: Busca pelo código (UUID)
        list_by_customer: Lista créditos de um cliente, em ordem de criação
        delete_by_customer: Remove todos os créditos de um cliente
    """

    def save(self, credit: CreditEntity) -> CreditEntity:
        """
        Raises:
            ConflictError: Se o código já existir
        """
        ...

    def get_by_code(self, credit_code: uuid.UUID) -> Optional[CreditEntity]:
        ...

    def list_by_customer(self, customer_id: int) -> List[CreditEntity]:
        ...

    def delete_by_customer(self, customer_id: int) -> int:
        """
        Returns:
            Quantidade de créditos removidos
        """
        ...


class InMemoryCreditRepository:
    """
    Implementação em memória do CreditRepository.

    Mantém ordem de inserção e aplica unicidade do código.

    Não usar em produção!
    """

    def __init__(self):
        self._credits: Dict[int, CreditEntity] = {}
        self._ids = count(1)

    def save(self, credit: CreditEntity) -> CreditEntity:
        for other in self._credits.values():
            if other.credit_code == credit.credit_code and other.id != credit.id:
                raise ConflictError(
                    f"Creditcode {credit.credit_code} already exists",
                    constraint="credits_credit_code_key",
                )
        if credit.id is None:
            credit.id = next(self._ids)
        self._credits[credit.id] = credit
        return credit

    def get_by_code(self, credit_code: uuid.UUID) -> Optional[CreditEntity]:
        for credit in self._credits.values():
            if credit.credit_code == credit_code:
                return credit
        return None

    def list_by_customer(self, customer_id: int) -> List[CreditEntity]:
        return [c for c in self._credits.values() if c.customer_id == customer_id]

    def delete_by_customer(self, customer_id: int) -> int:
        ids = [c.id for c in self._credits.values() if c.customer_id == customer_id]
        for credit_id in ids:
            del self._credits[credit_id]
        return len(ids)

    def count(self) -> int:
        return len(self._credits)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._credits.clear()
