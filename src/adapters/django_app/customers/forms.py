"""
Django Forms para validação de entrada de Clientes.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Responsabilidades:
- Validação estrutural (campos obrigatórios, tipos, formato de CPF)
- Sanitização de entrada

Os nomes dos campos seguem o JSON da API (camelCase), de modo que
as mensagens de erro apontam diretamente para a chave recebida.
"""

from decimal import Decimal

from django import forms
from django.core.exceptions import ValidationError


def validate_cpf(value: str) -> None:
    """
    Valida CPF: 11 dígitos e dígitos verificadores corretos.

    CPFs com todos os dígitos iguais (ex: 111.111.111-11) passam
    no cálculo mas são inválidos.
    """
    if len(value) != 11 or not value.isdigit():
        raise ValidationError('CPF must have exactly 11 digits', code='invalid_cpf')

    if value == value[0] * 11:
        raise ValidationError('Invalid CPF', code='invalid_cpf')

    digits = [int(d) for d in value]
    for position in (9, 10):
        total = sum(
            digit * weight
            for digit, weight in zip(digits[:position], range(position + 1, 1, -1))
        )
        check = 11 - total % 11
        if check >= 10:
            check = 0
        if digits[position] != check:
            raise ValidationError('Invalid CPF', code='invalid_cpf')


class NonBlankCharField(forms.CharField):
    """CharField obrigatório que rejeita strings só com espaços."""

    default_error_messages = {
        'required': 'This field must not be blank.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('strip', True)
        super().__init__(**kwargs)


class CustomerUpdateForm(forms.Form):
    """
    Form para atualização de cliente.

    Apenas os campos mutáveis são aceitos; CPF, email e senha
    enviados no corpo são ignorados.
    """

    firstName = NonBlankCharField(max_length=100)
    lastName = NonBlankCharField(max_length=100)
    income = forms.DecimalField(
        min_value=Decimal('0'),
        max_digits=14,
        decimal_places=2,
        error_messages={
            'min_value': 'Income must be greater than or equal to 0.',
        },
    )
    zipCode = NonBlankCharField(max_length=20)
    street = NonBlankCharField(max_length=255)


class CustomerForm(CustomerUpdateForm):
    """
    Form para cadastro de cliente.

    Valida dados básicos antes de passar para RegisterCustomerService.
    """

    cpf = NonBlankCharField(max_length=14)
    email = forms.EmailField(max_length=254)
    password = NonBlankCharField(max_length=128, strip=False)

    field_order = [
        'firstName', 'lastName', 'cpf', 'email',
        'password', 'income', 'zipCode', 'street',
    ]

    def clean_cpf(self):
        """Aceita CPF com máscara (000.000.000-00) e normaliza para dígitos."""
        cpf = self.cleaned_data['cpf'].replace('.', '').replace('-', '')
        validate_cpf(cpf)
        return cpf

    def clean_password(self):
        password = self.cleaned_data['password']
        if not password.strip():
            raise ValidationError('This field must not be blank.', code='required')
        return password
