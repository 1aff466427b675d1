"""
Tests para ReportEmitter con una fuente en memoria.

La fuente falsa implementa el puerto TransactionSource, así se prueba
el pipeline sin SQLite.
"""

import io
from datetime import date
from decimal import Decimal

import pytest

from mm_export.adapters.output.loggers.console_logger import ConsoleLogger
from mm_export.adapters.output.writers.delimited_writer import DelimitedTextWriter
from mm_export.domain.exceptions import RowDecodeError
from mm_export.domain.models.date_range import DateRange
from mm_export.domain.models.transaction import RawTransactionRow
from mm_export.domain.ports.transaction_source import TransactionSource
from mm_export.domain.services.report_emitter import ReportEmitter


class InMemorySource(TransactionSource):
    """Filtra por texto igual que la consulta SQL."""

    def __init__(self, rows: list[RawTransactionRow]) -> None:
        self._rows = rows
        self.queries: list[tuple[str, str]] = []
        self.closed = False

    def query(self, start, end):
        self.queries.append((start, end))
        return iter(
            sorted(
                (r for r in self._rows if start <= r.date_string <= end),
                key=lambda r: r.timestamp,
            )
        )

    def close(self):
        self.closed = True


def _raw(ts, date_string, amount, method="Efectivo", category="Comida", description="x"):
    return RawTransactionRow(ts, date_string, category, description, Decimal(amount), method)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def logger():
    return ConsoleLogger(debug_level=2, stream=io.StringIO())


class TestReportEmitter:
    def test_escenario_mayo(self, out, logger):
        source = InMemorySource(
            [
                _raw(1.0, "2023-05-01", "10.0", "Efectivo", description="Pan"),
                _raw(2.0, "2023-05-15", "20.5", "PayPal", description="Libro"),
                _raw(3.0, "2023-06-01", "5.0"),
            ]
        )
        emitter = ReportEmitter(source, [DelimitedTextWriter(out)], logger)

        summary = emitter.emit(DateRange(date(2023, 5, 1), date(2023, 5, 31)))

        assert out.getvalue().splitlines() == [
            "fecha;categoría;comentario;importe;forma pago",
            "01/05/2023;Comida;Pan;10,00;E",
            "15/05/2023;Comida;Libro;20,50;P",
            "Total: 30.50",
        ]
        assert summary.num_rows == 2
        assert summary.total == Decimal("30.5")
        assert source.queries == [("2023-05-01", "2023-05-31")]

    def test_orden_por_timestamp(self, out, logger):
        source = InMemorySource(
            [
                _raw(20.0, "2023-05-02", "2"),
                _raw(10.0, "2023-05-03", "1"),
            ]
        )
        ReportEmitter(source, [DelimitedTextWriter(out)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 31))
        )
        lines = out.getvalue().splitlines()
        assert lines[1].startswith("03/05/2023")
        assert lines[2].startswith("02/05/2023")

    def test_sin_filas(self, out, logger):
        summary = ReportEmitter(InMemorySource([]), [DelimitedTextWriter(out)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 31))
        )
        assert out.getvalue().splitlines() == [
            "fecha;categoría;comentario;importe;forma pago",
            "Total: 0.00",
        ]
        assert summary.num_rows == 0

    def test_total_sin_deriva_de_float(self, out, logger):
        rows = [_raw(float(i), "2023-05-01", "0.1") for i in range(1000)]
        summary = ReportEmitter(InMemorySource(rows), [DelimitedTextWriter(out)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 1))
        )
        assert summary.total == Decimal("100.0")
        assert out.getvalue().splitlines()[-1] == "Total: 100.00"

    def test_total_usa_importe_crudo(self, out, logger):
        """0.004 + 0.004 se muestran como 0,00 pero el total es 0.01."""
        rows = [_raw(1.0, "2023-05-01", "0.004"), _raw(2.0, "2023-05-01", "0.004")]
        ReportEmitter(InMemorySource(rows), [DelimitedTextWriter(out)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 1))
        )
        lines = out.getvalue().splitlines()
        assert lines[1].endswith(";0,00;E")
        assert lines[-1] == "Total: 0.01"

    def test_varios_escritores_reciben_lo_mismo(self, logger):
        out1, out2 = io.StringIO(), io.StringIO()
        source = InMemorySource([_raw(1.0, "2023-05-01", "3")])
        ReportEmitter(source, [DelimitedTextWriter(out1), DelimitedTextWriter(out2)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 1))
        )
        assert out1.getvalue() == out2.getvalue()

    def test_fila_mal_formada_propaga_error(self, out, logger):
        # '2023-0501' cae dentro del rango por comparación de texto
        source = InMemorySource([_raw(1.0, "2023-05-01", "3"), _raw(2.0, "2023-0501", "3")])
        with pytest.raises(RowDecodeError):
            ReportEmitter(source, [DelimitedTextWriter(out)], logger).emit(
                DateRange(date(2023, 1, 1), date(2023, 12, 31))
            )
        lines = out.getvalue().splitlines()
        assert lines[1] == "01/05/2023;Comida;x;3,00;E"
        assert "Total" not in out.getvalue()

    def test_bitacora_registra_filas(self, out):
        stream = io.StringIO()
        logger = ConsoleLogger(debug_level=2, stream=stream)
        ReportEmitter(InMemorySource([_raw(1.0, "2023-05-01", "3")]), [DelimitedTextWriter(out)], logger).emit(
            DateRange(date(2023, 5, 1), date(2023, 5, 1))
        )
        assert logger.get_summary()["filas"] == 1
        assert "01/05/2023;Comida;x;3,00;E" in stream.getvalue()
