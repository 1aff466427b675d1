"""
Adaptador de salida: Escritor de Excel.

Salida opcional (--xlsx) con el mismo contenido que el reporte de texto,
en un libro de 2 hojas:
- Hoja "Gastos": una fila por gasto (fecha, categoría, comentario,
  importe, forma pago). El importe va como número para poder sumar.
- Hoja "Resumen": rango exportado, cantidad de gastos y total.

A diferencia del escritor de texto, necesita todas las filas antes de
generar el archivo, así que las acumula y escribe todo en close().
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pandas as pd

from mm_export.domain.exceptions import OutputError
from mm_export.domain.models.report import ReportRow
from mm_export.domain.ports.report_writer import ReportWriter


class ExcelWriter(ReportWriter):
    """Genera un .xlsx con los gastos del rango."""

    def __init__(self, output_path: Path, start: date | None = None, end: date | None = None) -> None:
        """
        Args:
            output_path: Ruta del archivo. Si no termina en .xlsx, se le
                         agrega la extensión.
            start, end: Rango exportado, solo para la hoja Resumen.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")
        self._output_path = output_path
        self._start = start
        self._end = end
        self._header: tuple[str, ...] = ()
        self._rows: list[ReportRow] = []
        self._total: Decimal | None = None

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write_header(self, fields: tuple[str, ...]) -> None:
        self._header = fields

    def write_row(self, row: ReportRow) -> None:
        self._rows.append(row)

    def write_total(self, total: Decimal) -> None:
        self._total = total

    def close(self) -> None:
        """Genera el archivo Excel.

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel()
        except Exception as e:
            raise OutputError(self._output_path, str(e)) from e

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self) -> None:
        # --- Hoja Gastos ---
        filas_gastos = []
        for row in self._rows:
            fecha, categoria, comentario, importe, forma_pago = row.as_fields()
            filas_gastos.append(
                {
                    self._header[0]: fecha,
                    self._header[1]: categoria,
                    self._header[2]: comentario,
                    # '1234,50' → 1234.50 para que Excel lo trate como número
                    self._header[3]: float(importe.replace(",", ".")),
                    self._header[4]: forma_pago,
                }
            )
        df_gastos = pd.DataFrame(filas_gastos, columns=list(self._header))

        # --- Hoja Resumen ---
        total = self._total if self._total is not None else Decimal("0")
        df_resumen = pd.DataFrame(
            [
                {
                    "Desde": self._start.isoformat() if self._start else "",
                    "Hasta": self._end.isoformat() if self._end else "",
                    "Num Gastos": len(self._rows),
                    "Total": float(total),
                }
            ]
        )

        with pd.ExcelWriter(self._output_path, engine="xlsxwriter") as writer:
            df_gastos.to_excel(writer, index=False, sheet_name="Gastos")
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")

            workbook = writer.book
            ws_gastos = writer.sheets["Gastos"]
            ws_resumen = writer.sheets["Resumen"]

            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_gastos.set_column("A:A", 12)  # Fecha
            ws_gastos.set_column("B:B", 20)  # Categoría
            ws_gastos.set_column("C:C", 40)  # Comentario
            ws_gastos.set_column("D:D", 14, money_format)  # Importe
            ws_gastos.set_column("E:E", 10)  # Forma pago

            ws_resumen.set_column("A:B", 12)  # Desde / Hasta
            ws_resumen.set_column("C:C", 12)  # Num Gastos
            ws_resumen.set_column("D:D", 16, money_format)  # Total
