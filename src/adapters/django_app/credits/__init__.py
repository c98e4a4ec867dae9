"""App Django de Créditos."""
