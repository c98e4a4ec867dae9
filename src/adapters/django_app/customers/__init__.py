"""App Django de Clientes."""
