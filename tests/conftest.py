"""
Fixtures compartidas: respaldos SQLite de Money Manager de juguete.

Se arma una base con el mismo esquema mínimo que usa la consulta
(ZASSET, ZCATEGORY, ZINOUTCOME) en tmp_path, así los tests de adaptador
y de CLI no necesitan un respaldo real.
"""

import sqlite3
from pathlib import Path

import pytest

SCHEMA = """
CREATE TABLE ZASSET (ZUID TEXT PRIMARY KEY, ZNICNAME TEXT);
CREATE TABLE ZCATEGORY (ZUID TEXT PRIMARY KEY, ZNAME TEXT);
CREATE TABLE ZINOUTCOME (
    Z_PK INTEGER PRIMARY KEY,
    ZDATE REAL,
    ZTXDATESTR TEXT,
    ZCONTENT TEXT,
    ZAMOUNT REAL,
    ZISDEL INTEGER DEFAULT 0,
    ZDO_TYPE INTEGER,
    ZASSETUID TEXT,
    ZCATEGORYUID TEXT
);
"""

ASSETS = {
    "a-cash": "Efectivo",
    "a-paypal": "PayPal",
    "a-credit": "T. Crédito",
    "a-weird": "Cuenta rara",
}

CATEGORIES = {
    "c-food": "Comida",
    "c-home": " Casa ",
    "c-salary": "Sueldo",
}


class MoneyManagerDb:
    """Constructor de respaldos de prueba."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._conn = sqlite3.connect(path)
        self._conn.executescript(SCHEMA)
        self._conn.executemany("INSERT INTO ZASSET VALUES (?, ?)", ASSETS.items())
        self._conn.executemany("INSERT INTO ZCATEGORY VALUES (?, ?)", CATEGORIES.items())
        self._conn.commit()
        self._next_timestamp = 700000000.0

    def add(
        self,
        date_str: str,
        amount,
        asset: str = "a-cash",
        category: str = "c-food",
        content: str | None = "Compra",
        do_type: int = 1,
        is_del: int = 0,
        timestamp: float | None = None,
    ) -> "MoneyManagerDb":
        if timestamp is None:
            timestamp = self._next_timestamp
            self._next_timestamp += 3600.0
        self._conn.execute(
            "INSERT INTO ZINOUTCOME "
            "(ZDATE, ZTXDATESTR, ZCONTENT, ZAMOUNT, ZISDEL, ZDO_TYPE, ZASSETUID, ZCATEGORYUID) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (timestamp, date_str, content, amount, is_del, do_type, asset, category),
        )
        self._conn.commit()
        return self

    def close(self) -> None:
        self._conn.close()


@pytest.fixture
def mm_db(tmp_path):
    """Respaldo vacío (con activos y categorías) listo para agregar gastos."""
    db = MoneyManagerDb(tmp_path / "backup.mmbak")
    yield db
    db.close()


@pytest.fixture
def may_2023_db(mm_db):
    """El escenario de punta a punta: dos gastos en mayo y uno en junio."""
    mm_db.add("2023-05-01", 10.0, asset="a-cash", content="Pan")
    mm_db.add("2023-05-15", 20.5, asset="a-paypal", content="Libro")
    mm_db.add("2023-06-01", 5.0, asset="a-cash", content="Café")
    return mm_db
