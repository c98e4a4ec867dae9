"""
Django Models para o domínio de Clientes.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/customers/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

O endereço (Address) é embutido: zip_code e street são colunas
da própria tabela de clientes.
"""

from django.db import models


class CustomerModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        id: Auto-incrementing PK (atribuído pelo banco)
        first_name: Primeiro nome
        last_name: Sobrenome
        cpf: CPF (único, imutável)
        email: Email de contato
        password: Segredo opaco
        income: Renda mensal
        zip_code: CEP do endereço
        street: Logradouro do endereço
    """

    id = models.BigAutoField(primary_key=True)

    first_name = models.CharField(
        max_length=100,
        help_text="Primeiro nome"
    )

    last_name = models.CharField(
        max_length=100,
        help_text="Sobrenome"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF (somente dígitos)"
    )

    email = models.EmailField(
        max_length=254,
        help_text="Email de contato"
    )

    password = models.CharField(
        max_length=128,
        help_text="Senha (armazenada como recebida)"
    )

    income = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=0,
        help_text="Renda mensal"
    )

    # Address (embutido)
    zip_code = models.CharField(
        max_length=20,
        help_text="CEP"
    )

    street = models.CharField(
        max_length=255,
        help_text="Logradouro"
    )

    class Meta:
        db_table = 'customers'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['id']

    def __str__(self):
        return f"[{self.id}] {self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<CustomerModel id={self.id} cpf={self.cpf}>"
