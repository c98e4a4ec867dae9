"""
Exceções de Domínio do Credit Application System.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação estrutural de entrada)
    ├── EntityNotFoundError (entidade não existe)
    ├── ConflictError (restrição de unicidade violada)
    └── BusinessRuleViolationError (regra de negócio violada)

A tradução para status HTTP acontece em um único ponto
(src/adapters/django_app/shared/api.py).
"""

from typing import Dict, List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(customer_id)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def details(self) -> List[str]:
        """Mensagens de detalhe expostas na resposta de erro."""
        return [self.message]

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Agrega mensagens por campo. Lançada pelos Forms na fronteira
    de entrada e pelas entidades ao verificar invariantes.

    Example:
        raise ValidationError("Invalid input", errors={
            "firstName": ["This field must not be blank"],
        })
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        self.field = field
        self.errors: Dict[str, List[str]] = dict(errors or {})
        if field and field not in self.errors:
            self.errors[field] = [message]
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    @property
    def details(self) -> List[str]:
        if not self.errors:
            return [self.message]
        return [
            f"{field}: {message}"
            for field, messages in self.errors.items()
            for message in messages
        ]

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        customer = repo.get_by_id(customer_id)
        if not customer:
            raise EntityNotFoundError(f"Id {customer_id} not found")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class ConflictError(DomainException):
    """
    Violação de restrição de unicidade.

    Lançada pelos repositórios quando o banco rejeita uma escrita
    por chave duplicada (ex: CPF já cadastrado). O domínio não faz
    pré-verificação; a garantia vem da constraint do banco.
    """

    def __init__(self, message: str, constraint: str = None):
        self.constraint = constraint
        super().__init__(message, "CONFLICT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.constraint:
            result["constraint"] = self.constraint
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.

    Example:
        if not rule.is_valid(day_first_installment):
            raise BusinessRuleViolationError(
                "Invalid Date",
                rule="first_installment_window"
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result
