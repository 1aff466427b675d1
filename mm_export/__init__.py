"""Exportador de gastos de respaldos de Money Manager."""

__version__ = "0.1.0"
