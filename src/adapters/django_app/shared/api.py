"""
Fronteira JSON compartilhada pelas APIs de clientes e créditos.

Fornece:
- Parsing de body JSON
- Conversão de erros de Form em ValidationError
- Envelope de erro padronizado
- BaseAPIView com tradução de exceções em um único ponto

Mapeamento de status:
- ValidationError            -> 400
- EntityNotFoundError        -> 400
- BusinessRuleViolationError -> 400
- ConflictError              -> 409
- qualquer outra exceção     -> 500 (traceback logado)
"""

import json
import logging
from typing import Any, Dict, Optional

from django import forms
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    ConflictError,
    DomainException,
    ValidationError,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)


BAD_REQUEST_TITLE = "Bad Request! Consult the documentation"
CONFLICT_TITLE = "Conflict! Consult the documentation"
INTERNAL_ERROR_TITLE = "Internal Server Error! Consult the documentation"


# =============================================================================
# Helpers
# =============================================================================

def parse_json_body(request: HttpRequest) -> Dict[str, Any]:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Malformed JSON: {e}", field="body")

    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object", field="body")

    return data


def form_errors_to_exception(form: forms.BaseForm) -> ValidationError:
    """Converte erros de um Form Django em ValidationError agregada."""
    errors = {
        field: [str(message) for message in messages]
        for field, messages in form.errors.items()
    }
    return ValidationError("Invalid input", errors=errors)


def validate_form(form: forms.BaseForm) -> Dict[str, Any]:
    """
    Valida o Form e devolve cleaned_data.

    Raises:
        ValidationError: Com todas as mensagens de campo
    """
    if not form.is_valid():
        raise form_errors_to_exception(form)
    return form.cleaned_data


def error_envelope(exc: Exception, status: int, title: str) -> Dict[str, Any]:
    """Monta o corpo padrão de erro."""
    if isinstance(exc, DomainException):
        details = exc.details
    else:
        details = [str(exc) or exc.__class__.__name__]

    return {
        "title": title,
        "timestamp": timezone.now().isoformat(),
        "status": status,
        "exception": exc.__class__.__name__,
        "details": details,
    }


def exception_to_response(exc: Exception) -> JsonResponse:
    """
    Traduz exceção em resposta HTTP.

    Único ponto de tradução entre a taxonomia de erros e os status HTTP.
    """
    if isinstance(exc, ConflictError):
        status, title = 409, CONFLICT_TITLE
    elif isinstance(exc, DomainException):
        status, title = 400, BAD_REQUEST_TITLE
    else:
        logger.exception(f"Unexpected API error: {exc}")
        status, title = 500, INTERNAL_ERROR_TITLE

    if status < 500:
        logger.info(f"Request rejected ({status}): {exc.__class__.__name__}: {exc}")

    return JsonResponse(error_envelope(exc, status, title), status=status)


def get_query_int(request: HttpRequest, name: str) -> int:
    """
    Lê parâmetro inteiro obrigatório da query string.

    Raises:
        ValidationError: Se ausente ou não numérico
    """
    raw: Optional[str] = request.GET.get(name)
    if raw is None or raw.strip() == "":
        raise ValidationError("This query parameter is required", field=name)
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Enter a whole number", field=name)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name="dispatch")
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado (toda exceção vira envelope)
    """

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict[str, Any]:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        return exception_to_response(e)


def health_check(request: HttpRequest) -> JsonResponse:
    """GET /health/ - verificação simples de disponibilidade."""
    return JsonResponse({"status": "ok"})
