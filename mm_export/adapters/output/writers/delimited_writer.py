"""
Adaptador de salida: Reporte como texto separado por ';'.

Es la salida principal: se imprime a stdout para pegar en una planilla
o redirigir a un archivo. Cada fila se escribe apenas llega.

Limitación conocida: los campos NO se escapan. Un comentario que
contenga ';' rompe las columnas de esa fila.
"""

import sys
from decimal import Decimal
from typing import TextIO

from mm_export.domain.models.report import ReportRow
from mm_export.domain.ports.report_writer import ReportWriter
from mm_export.domain.shared.money import format_total


class DelimitedTextWriter(ReportWriter):
    """Escribe el reporte línea por línea en un stream de texto."""

    def __init__(self, stream: TextIO | None = None, delimiter: str = ";") -> None:
        """
        Args:
            stream: Destino. Si es None se usa sys.stdout en el momento de
                    escribir (así capsys de pytest lo captura).
            delimiter: Separador de campos.
        """
        self._stream = stream
        self._delimiter = delimiter

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_header(self, fields: tuple[str, ...]) -> None:
        self._write_line(self._delimiter.join(fields))

    def write_row(self, row: ReportRow) -> None:
        self._write_line(self._delimiter.join(row.as_fields()))

    def write_total(self, total: Decimal) -> None:
        self._write_line(f"Total: {format_total(total)}")

    def close(self) -> None:
        self.stream.flush()

    def _write_line(self, line: str) -> None:
        self.stream.write(line + "\n")
