"""
Modelo de dominio: Transacción tal como sale de la base.

Una RawTransactionRow es una fila de la consulta de gastos, ya con tipos
de Python pero sin ninguna transformación de formato. La produce la
fuente de transacciones y la consume el RecordNormalizer.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RawTransactionRow:
    """Fila cruda de un gasto."""

    timestamp: float
    """ZDATE: timestamp Cocoa (segundos desde 2001-01-01). Solo se usa para
    ordenar; nunca se muestra."""

    date_string: str
    """ZTXDATESTR: fecha 'YYYY-MM-DD' tal como la guarda Money Manager."""

    category_name: str
    description: str

    amount: Decimal
    """Importe del gasto. Money Manager lo guarda positivo."""

    payment_method_name: str
    """Nombre del activo (ZASSET.ZNICNAME): 'Efectivo', 'PayPal', etc."""
