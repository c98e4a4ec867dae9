"""
Migration inicial para o domínio de Créditos.

Cria as tabelas:
- credits: Créditos emitidos, com FK protegida para customers
"""

from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CreditModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False
                )),
                ('credit_code', models.UUIDField(
                    default=uuid.uuid4,
                    unique=True,
                    editable=False,
                    help_text='Código externo do crédito'
                )),
                ('credit_value', models.DecimalField(
                    max_digits=14,
                    decimal_places=2,
                    help_text='Valor do crédito'
                )),
                ('day_first_installment', models.DateField(
                    help_text='Data da primeira parcela'
                )),
                ('number_of_installments', models.PositiveSmallIntegerField(
                    help_text='Quantidade de parcelas'
                )),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('IN_PROGRESS', 'Em andamento'),
                        ('APPROVED', 'Aprovado'),
                        ('REJECTED', 'Rejeitado'),
                    ],
                    default='IN_PROGRESS',
                    db_index=True,
                    help_text='Estado atual do crédito'
                )),
                ('customer', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='credits',
                    to='customers.customermodel',
                    help_text='Cliente dono do crédito'
                )),
            ],
            options={
                'verbose_name': 'Crédito',
                'verbose_name_plural': 'Créditos',
                'db_table': 'credits',
                'ordering': ['id'],
            },
        ),
    ]
