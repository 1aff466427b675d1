"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio de una exportación, no el mecanismo:
- "Se resolvió el rango de fechas" (no "DEBUG: start=...")
- "El mes pedido no se reconoció" (no "WARNING: bad token")

La implementación decide dónde y con qué nivel de detalle se muestran.
En la consola van a stderr para no mezclarse con el reporte, que sale
por stdout. En tests se puede acumular en memoria y hacer asserts.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from mm_export.domain.models.config import ResolvedConfig
from mm_export.domain.models.date_range import DateRange
from mm_export.domain.models.report import ReportRow
from mm_export.domain.models.transaction import RawTransactionRow


class ProcessLogger(ABC):
    """Interfaz para la bitácora de la exportación."""

    # --- Resolución de fechas ---

    @abstractmethod
    def log_month_not_recognized(self, token: str) -> None:
        """El valor de --month no es un mes válido; se siguen las fechas
        explícitas o por defecto."""
        ...

    @abstractmethod
    def log_explicit_dates_ignored(self, start: str | None, end: str | None) -> None:
        """Se pidió un mes y además fechas explícitas; el mes gana."""
        ...

    @abstractmethod
    def log_config_resolved(self, config: ResolvedConfig) -> None:
        """Registra la configuración final de la ejecución."""
        ...

    # --- Consulta y reporte ---

    @abstractmethod
    def log_query(self, date_range: DateRange) -> None:
        """Registra que se va a consultar la fuente para un rango."""
        ...

    @abstractmethod
    def log_row(self, raw: RawTransactionRow, row: ReportRow) -> None:
        """Registra una fila cruda y su versión normalizada."""
        ...

    @abstractmethod
    def log_report_complete(self, num_rows: int, total: Decimal) -> None:
        """Registra el fin del reporte."""
        ...

    @abstractmethod
    def log_error(self, error: Exception) -> None:
        """Registra un error fatal antes de terminar."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de la ejecución.

        Returns:
            Diccionario con métricas:
            {
                'filas': int,
                'advertencias': list[str],
                'errores': list[str],
            }
        """
        ...
