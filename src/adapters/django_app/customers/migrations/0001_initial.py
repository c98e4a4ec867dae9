"""
Migration inicial para o domínio de Clientes.

Cria as tabelas:
- customers: Clientes com endereço embutido
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CustomerModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False
                )),
                ('first_name', models.CharField(
                    max_length=100,
                    help_text='Primeiro nome'
                )),
                ('last_name', models.CharField(
                    max_length=100,
                    help_text='Sobrenome'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF (somente dígitos)'
                )),
                ('email', models.EmailField(
                    max_length=254,
                    help_text='Email de contato'
                )),
                ('password', models.CharField(
                    max_length=128,
                    help_text='Senha (armazenada como recebida)'
                )),
                ('income', models.DecimalField(
                    max_digits=14,
                    decimal_places=2,
                    default=0,
                    help_text='Renda mensal'
                )),
                ('zip_code', models.CharField(
                    max_length=20,
                    help_text='CEP'
                )),
                ('street', models.CharField(
                    max_length=255,
                    help_text='Logradouro'
                )),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'customers',
                'ordering': ['id'],
            },
        ),
    ]
