"""
Puerto de salida: Escritor del reporte.

El ReportEmitter no sabe si el reporte va a la consola como texto
separado por ';' o a un Excel. Solo llama, en este orden:

    write_header(campos)
    write_row(fila)          (cero o más veces)
    write_total(total)
    close()
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from mm_export.domain.models.report import ReportRow


class ReportWriter(ABC):
    """Interfaz para escribir el reporte de gastos."""

    @abstractmethod
    def write_header(self, fields: tuple[str, ...]) -> None:
        """Escribe la línea de encabezado."""
        ...

    @abstractmethod
    def write_row(self, row: ReportRow) -> None:
        """Escribe una fila. Los escritores de texto la emiten de inmediato."""
        ...

    @abstractmethod
    def write_total(self, total: Decimal) -> None:
        """Escribe el total acumulado con los importes crudos."""
        ...

    def close(self) -> None:
        """Termina la escritura. Por defecto no hace nada.

        Raises:
            OutputError: Si el escritor persiste a archivo y falla.
        """
