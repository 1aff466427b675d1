"""
Modelo de dominio: Rango de fechas resuelto.

Es lo que produce el DateRangeResolver y lo que consume la fuente de
transacciones. Guarda objetos `date` y expone además las versiones en
texto 'YYYY-MM-DD' con ceros, que son las que se pasan a la consulta SQL.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from mm_export.domain.shared.date_parser import format_iso_date


class ResolutionMode(Enum):
    """Camino por el que se resolvió el rango."""

    MONTH = "month"
    """Se pidió un mes con --month. Las fechas explícitas se ignoran."""

    EXPLICIT = "explicit"
    """Fechas explícitas y/o por defecto (mes anterior)."""


@dataclass(frozen=True)
class DateRange:
    """Rango cerrado [start, end] de fechas a exportar."""

    start: date
    end: date
    mode: ResolutionMode = ResolutionMode.EXPLICIT

    @property
    def start_iso(self) -> str:
        return format_iso_date(self.start)

    @property
    def end_iso(self) -> str:
        return format_iso_date(self.end)

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"El rango está invertido: inicio {self.start_iso} > fin {self.end_iso}"
            )

    def __str__(self) -> str:
        return f"{self.start_iso}..{self.end_iso}"
