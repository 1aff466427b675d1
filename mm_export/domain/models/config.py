"""
Modelo de dominio: Configuración resuelta de una ejecución.

Es la versión "procesada" de los argumentos de línea de comandos: sin
valores opcionales para las fechas, ya validadas y normalizadas. Se crea
una vez por ejecución y no cambia.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from mm_export.domain.models.date_range import DateRange, ResolutionMode


@dataclass(frozen=True)
class ResolvedConfig:
    """Configuración inmutable de una ejecución."""

    source_path: Path
    """Archivo de respaldo de Money Manager (base SQLite)."""

    start_date: date
    end_date: date

    debug_level: int = 0
    """Cantidad de veces que se pasó -d. No afecta el contenido del reporte."""

    xlsx_path: Path | None = None
    """Si se indica, el reporte también se escribe a un Excel."""

    mode: ResolutionMode = ResolutionMode.EXPLICIT

    def __post_init__(self) -> None:
        if self.debug_level < 0:
            raise ValueError(f"debug_level no puede ser negativo: {self.debug_level}")
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date ({self.start_date}) no puede ser posterior a end_date ({self.end_date})"
            )

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date, mode=self.mode)

    @classmethod
    def from_range(
        cls,
        source_path: Path,
        date_range: DateRange,
        debug_level: int = 0,
        xlsx_path: Path | None = None,
    ) -> "ResolvedConfig":
        return cls(
            source_path=source_path,
            start_date=date_range.start,
            end_date=date_range.end,
            debug_level=debug_level,
            xlsx_path=xlsx_path,
            mode=date_range.mode,
        )
