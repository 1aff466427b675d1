"""
Servicio de dominio: Emisión del reporte.

Orquesta el pipeline para un rango ya resuelto:
1. Pide las filas a la fuente de transacciones.
2. Escribe el encabezado en todos los escritores.
3. Normaliza cada fila y la escribe en cuanto se lee (sin acumular).
4. Suma el importe CRUDO (Decimal) de cada fila al total.
5. Escribe el total y cierra los escritores.

El total se acumula con Decimal y no con float para que muchos importes
pequeños no arrastren error de redondeo.
"""

from collections.abc import Sequence
from decimal import Decimal

from mm_export.domain.models.date_range import DateRange
from mm_export.domain.models.report import HEADER, ReportSummary
from mm_export.domain.ports.process_logger import ProcessLogger
from mm_export.domain.ports.report_writer import ReportWriter
from mm_export.domain.ports.transaction_source import TransactionSource
from mm_export.domain.services.record_normalizer import normalize


class ReportEmitter:
    """Produce el reporte de gastos de un rango.

    Recibe sus dependencias por constructor. No abre ni cierra la fuente:
    el ciclo de vida de la conexión es de quien la crea (el CLI, con `with`).
    """

    def __init__(
        self,
        source: TransactionSource,
        writers: Sequence[ReportWriter],
        logger: ProcessLogger,
    ) -> None:
        self._source = source
        self._writers = writers
        self._logger = logger

    def emit(self, date_range: DateRange) -> ReportSummary:
        """Emite el reporte completo y devuelve el resumen.

        Raises:
            StoreError, RowDecodeError: Propagados desde la fuente o el
                normalizador. Las filas ya escritas quedan escritas.
            OutputError: Si un escritor falla al cerrar.
        """
        # La consulta va antes del encabezado: si falla, no se imprime nada
        self._logger.log_query(date_range)
        rows = self._source.query(date_range.start_iso, date_range.end_iso)

        for writer in self._writers:
            writer.write_header(HEADER)

        total = Decimal("0")
        num_rows = 0
        for raw in rows:
            row = normalize(raw)
            self._logger.log_row(raw, row)
            for writer in self._writers:
                writer.write_row(row)
            total += raw.amount
            num_rows += 1

        for writer in self._writers:
            writer.write_total(total)
        for writer in self._writers:
            writer.close()

        self._logger.log_report_complete(num_rows, total)
        return ReportSummary(num_rows=num_rows, total=total)
