"""
Apps Django do Credit Application System.

- customers: Cadastro de clientes
- credits: Emissão e consulta de créditos
- shared: Unit of Work e fronteira JSON
- events: Publicadores e handlers de eventos
"""
