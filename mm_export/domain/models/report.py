"""
Modelos de dominio del reporte de salida.

- ReportRow: una línea del reporte, todos los campos ya como texto.
- ReportSummary: lo que queda al terminar (cantidad de filas y total).
"""

from dataclasses import dataclass
from decimal import Decimal

HEADER: tuple[str, ...] = ("fecha", "categoría", "comentario", "importe", "forma pago")
"""Encabezado del reporte, en el idioma original de la planilla."""


@dataclass(frozen=True)
class ReportRow:
    """Fila normalizada del reporte.

    Se escribe inmediatamente y no se guarda (salvo en el ExcelWriter,
    que necesita todas las filas para armar la hoja).
    """

    fecha: str
    """'DD/MM/YYYY'."""

    categoria: str
    comentario: str

    importe: str
    """Importe con coma decimal: '1234,50'."""

    forma_pago: str
    """Código de forma de pago ('E', 'TC', ...) o 'INVALID'."""

    def as_fields(self) -> tuple[str, str, str, str, str]:
        """Campos en el orden del encabezado."""
        return (self.fecha, self.categoria, self.comentario, self.importe, self.forma_pago)


@dataclass(frozen=True)
class ReportSummary:
    """Resultado de emitir un reporte completo."""

    num_rows: int
    total: Decimal
