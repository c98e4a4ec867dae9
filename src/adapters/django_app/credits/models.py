"""
Django Models para o domínio de Créditos.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/credits/entities.py.

Relacionamentos:
- CreditModel.customer: FK para CustomerModel com PROTECT.
  A remoção de créditos é feita explicitamente pelo caso de uso
  DeleteCustomerService, nunca em cascata pelo ORM.
"""

import uuid

from django.db import models

from src.adapters.django_app.customers.models import CustomerModel


class CreditStatusChoices(models.TextChoices):
    """Choices para status de crédito (espelha CreditStatus do Core)."""
    IN_PROGRESS = 'IN_PROGRESS', 'Em andamento'
    APPROVED = 'APPROVED', 'Aprovado'
    REJECTED = 'REJECTED', 'Rejeitado'


class CreditModel(models.Model):
    """
    Model Django para persistência de Créditos.

    Fields:
        id: Auto-incrementing PK (atribuído pelo banco)
        credit_code: UUID único, referência externa
        credit_value: Valor do crédito
        day_first_installment: Data da primeira parcela
        number_of_installments: Quantidade de parcelas
        status: Estado atual (choices)
        customer: Cliente dono
    """

    id = models.BigAutoField(primary_key=True)

    credit_code = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        help_text="Código externo do crédito"
    )

    credit_value = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        help_text="Valor do crédito"
    )

    day_first_installment = models.DateField(
        help_text="Data da primeira parcela"
    )

    number_of_installments = models.PositiveSmallIntegerField(
        help_text="Quantidade de parcelas"
    )

    status = models.CharField(
        max_length=20,
        choices=CreditStatusChoices.choices,
        default=CreditStatusChoices.IN_PROGRESS,
        db_index=True,
        help_text="Estado atual do crédito"
    )

    customer = models.ForeignKey(
        CustomerModel,
        on_delete=models.PROTECT,
        related_name='credits',
        help_text="Cliente dono do crédito"
    )

    class Meta:
        db_table = 'credits'
        verbose_name = 'Crédito'
        verbose_name_plural = 'Créditos'
        ordering = ['id']

    def __str__(self):
        return f"[{str(self.credit_code)[:8]}] {self.credit_value}"

    def __repr__(self):
        return f"<CreditModel id={self.id} status={self.status}>"
