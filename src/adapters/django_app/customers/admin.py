"""
Django Admin para o domínio de Clientes.

Inspeção de clientes pelo back office.
"""

from django.contrib import admin

from .models import CustomerModel


@admin.register(CustomerModel)
class CustomerAdmin(admin.ModelAdmin):
    """Admin para CustomerModel."""

    list_display = [
        'id',
        'nome_completo',
        'cpf',
        'email',
        'income',
        'total_creditos',
    ]

    search_fields = [
        'cpf',
        'email',
        'first_name',
        'last_name',
    ]

    readonly_fields = [
        'id',
        'cpf',
    ]

    exclude = [
        'password',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'first_name', 'last_name', 'cpf', 'email'],
        }),
        ('Financeiro', {
            'fields': ['income'],
        }),
        ('Endereço', {
            'fields': ['zip_code', 'street'],
        }),
    ]

    ordering = ['id']

    def nome_completo(self, obj):
        return f"{obj.first_name} {obj.last_name}"
    nome_completo.short_description = 'Nome'

    def total_creditos(self, obj):
        return obj.credits.count()
    total_creditos.short_description = 'Créditos'
