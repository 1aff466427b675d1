"""
Tests para los modelos de dominio.

Verifican validaciones, propiedades derivadas e inmutabilidad.
"""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from mm_export.domain.models import (
    HEADER,
    DateRange,
    RawTransactionRow,
    ReportRow,
    ResolutionMode,
    ResolvedConfig,
)


class TestDateRange:
    def test_iso_con_ceros(self):
        rango = DateRange(start=date(2023, 2, 1), end=date(2023, 2, 28))
        assert rango.start_iso == "2023-02-01"
        assert rango.end_iso == "2023-02-28"
        assert str(rango) == "2023-02-01..2023-02-28"

    def test_un_solo_dia(self):
        rango = DateRange(start=date(2023, 2, 1), end=date(2023, 2, 1))
        assert rango.start == rango.end

    def test_rango_invertido_lanza_error(self):
        with pytest.raises(ValueError, match="invertido"):
            DateRange(start=date(2023, 3, 1), end=date(2023, 2, 1))

    def test_modo_por_defecto_explicito(self):
        rango = DateRange(start=date(2023, 2, 1), end=date(2023, 2, 1))
        assert rango.mode is ResolutionMode.EXPLICIT

    def test_inmutable(self):
        rango = DateRange(start=date(2023, 2, 1), end=date(2023, 2, 1))
        with pytest.raises(FrozenInstanceError):
            rango.start = date(2020, 1, 1)  # type: ignore[misc]


class TestResolvedConfig:
    def test_desde_rango(self):
        rango = DateRange(date(2024, 2, 1), date(2024, 2, 29), ResolutionMode.MONTH)
        config = ResolvedConfig.from_range(Path("b.mmbak"), rango, debug_level=2)
        assert config.start_date == date(2024, 2, 1)
        assert config.end_date == date(2024, 2, 29)
        assert config.debug_level == 2
        assert config.xlsx_path is None
        assert config.date_range == rango

    def test_debug_negativo_lanza_error(self):
        with pytest.raises(ValueError, match="debug_level"):
            ResolvedConfig(Path("b"), date(2024, 1, 1), date(2024, 1, 2), debug_level=-1)

    def test_inicio_posterior_al_fin_lanza_error(self):
        with pytest.raises(ValueError, match="posterior"):
            ResolvedConfig(Path("b"), date(2024, 1, 3), date(2024, 1, 2))


class TestReportRow:
    def test_campos_en_orden_del_encabezado(self):
        row = ReportRow("01/05/2023", "Comida", "Pan", "10,00", "E")
        assert row.as_fields() == ("01/05/2023", "Comida", "Pan", "10,00", "E")
        assert len(row.as_fields()) == len(HEADER)

    def test_encabezado(self):
        assert ";".join(HEADER) == "fecha;categoría;comentario;importe;forma pago"


class TestRawTransactionRow:
    def test_inmutable(self):
        raw = RawTransactionRow(1.0, "2023-05-01", "Comida", "Pan", Decimal("10"), "Efectivo")
        with pytest.raises(FrozenInstanceError):
            raw.amount = Decimal("0")  # type: ignore[misc]
