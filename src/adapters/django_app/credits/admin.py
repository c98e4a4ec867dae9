"""
Django Admin para o domínio de Créditos.

Inspeção de créditos pelo back office. O código é somente leitura.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import CreditModel


@admin.register(CreditModel)
class CreditAdmin(admin.ModelAdmin):
    """Admin para CreditModel."""

    list_display = [
        'codigo_curto',
        'credit_value',
        'number_of_installments',
        'day_first_installment',
        'status_badge',
        'customer',
    ]

    list_filter = [
        'status',
        'day_first_installment',
    ]

    search_fields = [
        'credit_code',
        'customer__cpf',
    ]

    readonly_fields = [
        'id',
        'credit_code',
    ]

    list_select_related = ['customer']

    ordering = ['id']

    def codigo_curto(self, obj):
        """Exibe código curto (primeiros 8 caracteres)."""
        return str(obj.credit_code)[:8] + '...'
    codigo_curto.short_description = 'Código'

    def status_badge(self, obj):
        """Exibe status com badge colorido."""
        colors = {
            'IN_PROGRESS': '#ffc107',
            'APPROVED': '#28a745',
            'REJECTED': '#dc3545',
        }
        color = colors.get(obj.status, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'
