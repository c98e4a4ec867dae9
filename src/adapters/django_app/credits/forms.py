"""
Django Forms para validação de entrada de Créditos.

Validação estrutural apenas. A janela da primeira parcela
(até N meses à frente) é regra de negócio e fica no caso de uso.
"""

from decimal import Decimal

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from src.config.container import get_container


def max_installments() -> int:
    return getattr(settings, 'CREDIT_RULES', {}).get('MAX_INSTALLMENTS', 48)


def today():
    """Data corrente pelo mesmo relógio injetado no IssueCreditService."""
    return get_container().clock()()


class CreditForm(forms.Form):
    """
    Form para emissão de crédito.

    Valida dados básicos antes de passar para IssueCreditService.
    """

    creditValue = forms.DecimalField(
        max_digits=14,
        decimal_places=2,
    )

    dayFirstInstallment = forms.DateField(
        input_formats=['%Y-%m-%d'],
    )

    numberOfInstallments = forms.IntegerField(
        min_value=1,
    )

    customerId = forms.IntegerField()

    def clean_creditValue(self):
        value = self.cleaned_data['creditValue']
        if value <= Decimal('0'):
            raise ValidationError('Ensure this value is greater than 0.', code='min_value')
        return value

    def clean_dayFirstInstallment(self):
        day = self.cleaned_data['dayFirstInstallment']
        if day <= today():
            raise ValidationError('Date must be in the future.', code='future_date')
        return day

    def clean_numberOfInstallments(self):
        installments = self.cleaned_data['numberOfInstallments']
        limit = max_installments()
        if installments > limit:
            raise ValidationError(
                f'Ensure this value is less than or equal to {limit}.',
                code='max_value',
            )
        return installments
