"""
Adaptador de salida: Logger a consola.

Implementación de ProcessLogger que imprime los eventos a stderr, para
que nunca se mezclen con el reporte (que sale por stdout).

El nivel de detalle depende de cuántas veces se pasó -d:
    0  → solo advertencias y errores
    1  → además configuración, rango consultado y resumen final
    2+ → además cada fila cruda y su versión normalizada
"""

import sys
from decimal import Decimal
from typing import TextIO

from mm_export.domain.models.config import ResolvedConfig
from mm_export.domain.models.date_range import DateRange
from mm_export.domain.models.report import ReportRow
from mm_export.domain.models.transaction import RawTransactionRow
from mm_export.domain.ports.process_logger import ProcessLogger
from mm_export.domain.shared.money import format_total


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de la exportación a stderr."""

    def __init__(self, debug_level: int = 0, stream: TextIO | None = None) -> None:
        self._debug_level = debug_level
        self._stream = stream
        self._filas: int = 0
        self._advertencias: list[str] = []
        self._errores: list[str] = []

    @property
    def debug_level(self) -> int:
        return self._debug_level

    # --- Resolución de fechas ---

    def log_month_not_recognized(self, token: str) -> None:
        mensaje = f"Month '{token}' not recognized; using start/end dates instead"
        self._advertencias.append(mensaje)
        self._print(f"⚠️  {mensaje}")

    def log_explicit_dates_ignored(self, start: str | None, end: str | None) -> None:
        self._debug(1, f"🗓️  --month given, ignoring start={start!r} end={end!r}")

    def log_config_resolved(self, config: ResolvedConfig) -> None:
        self._debug(1, f"⚙️  File:       {config.source_path}")
        self._debug(1, f"⚙️  Start date: {config.start_date.isoformat()}")
        self._debug(1, f"⚙️  End date:   {config.end_date.isoformat()}")
        self._debug(1, f"⚙️  Mode:       {config.mode.value}")
        if config.xlsx_path is not None:
            self._debug(1, f"⚙️  Excel:      {config.xlsx_path}")

    # --- Consulta y reporte ---

    def log_query(self, date_range: DateRange) -> None:
        self._debug(1, f"🔍 Querying expenses {date_range}")

    def log_row(self, raw: RawTransactionRow, row: ReportRow) -> None:
        self._filas += 1
        self._debug(
            2,
            f"  {raw.date_string} | {raw.category_name!r} | {raw.amount} | "
            f"{raw.payment_method_name!r} → {';'.join(row.as_fields())}",
        )

    def log_report_complete(self, num_rows: int, total: Decimal) -> None:
        self._debug(1, f"✅ {num_rows} expenses, total {format_total(total)}")

    def log_error(self, error: Exception) -> None:
        self._errores.append(str(error))
        self._print(str(error))

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "filas": self._filas,
            "advertencias": self._advertencias,
            "errores": self._errores,
        }

    def _debug(self, level: int, message: str) -> None:
        if self._debug_level >= level:
            self._print(message)

    def _print(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(message, file=stream)
