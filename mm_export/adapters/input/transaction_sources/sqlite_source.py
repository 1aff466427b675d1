"""
Adaptador de entrada: Fuente de transacciones sobre el respaldo SQLite
de Money Manager.

El respaldo (.mmbak / .sqlite) es una base Core Data. Las tablas que
interesan son:

    ZINOUTCOME  → cada ingreso/gasto (ZDATE, ZTXDATESTR, ZCONTENT,
                  ZAMOUNT, ZISDEL, ZDO_TYPE, ZASSETUID, ZCATEGORYUID)
    ZCATEGORY   → categorías (ZUID, ZNAME)
    ZASSET      → activos / formas de pago (ZUID, ZNICNAME)

La base se abre en modo solo lectura. Nunca se modifica.
"""

import os
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from mm_export.domain.exceptions import FileAccessError, RowDecodeError, StoreError
from mm_export.domain.models.transaction import RawTransactionRow
from mm_export.domain.ports.transaction_source import TransactionSource
from mm_export.domain.shared.money import to_decimal

EXPENSE_TYPE = 1
"""ZDO_TYPE de los gastos (0 es ingreso)."""

EXPENSES_QUERY = (
    "SELECT z.zdate, z.ztxdatestr, c.zname, z.zcontent, z.zamount, a.znicname "
    "FROM ZASSET a, ZCATEGORY c, ZINOUTCOME z "
    "WHERE z.ztxdatestr BETWEEN ? AND ? "
    "AND z.zisdel = 0 "  # zisdel marca las entradas borradas
    f"AND z.zdo_type = {EXPENSE_TYPE} "
    "AND z.ZASSETUID = a.ZUID "  # forma de pago
    "AND z.ZCATEGORYUID = c.ZUID "  # categoría
    "ORDER BY z.zdate ASC"
)


def check_readable(file_path: Path) -> None:
    """Verifica que el respaldo exista, sea un archivo y se pueda leer.

    Raises:
        FileAccessError: Si alguna de las condiciones no se cumple.
    """
    if not file_path.exists():
        raise FileAccessError(file_path, "file does not exist")
    if not file_path.is_file():
        raise FileAccessError(file_path, "not a regular file")
    if not os.access(file_path, os.R_OK):
        raise FileAccessError(file_path, "permission denied")


class SqliteTransactionSource(TransactionSource):
    """Lee los gastos de un respaldo de Money Manager.

    La conexión se abre en la primera consulta y se cierra con close()
    (o al salir del bloque `with`).
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def query(self, start: str, end: str) -> Iterator[RawTransactionRow]:
        conn = self._connect()
        try:
            cursor = conn.execute(EXPENSES_QUERY, (start, end))
        except sqlite3.Error as e:
            raise StoreError(self._file_path, str(e)) from e
        return self._iter_rows(cursor)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            # mode=ro: falla si el archivo no existe en vez de crear uno vacío
            uri = f"{self._file_path.resolve().as_uri()}?mode=ro"
            try:
                self._conn = sqlite3.connect(uri, uri=True)
            except sqlite3.Error as e:
                raise StoreError(self._file_path, str(e)) from e
        return self._conn

    def _iter_rows(self, cursor: sqlite3.Cursor) -> Iterator[RawTransactionRow]:
        try:
            for db_row in cursor:
                yield self._decode_row(db_row)
        except sqlite3.Error as e:
            raise StoreError(self._file_path, str(e)) from e
        finally:
            cursor.close()

    @staticmethod
    def _decode_row(db_row: tuple) -> RawTransactionRow:
        """Convierte una tupla de sqlite3 en RawTransactionRow.

        Raises:
            RowDecodeError: Si algún campo tiene un tipo inesperado.
        """
        timestamp, date_string, category, content, amount, asset = db_row

        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise RowDecodeError("zdate", timestamp, "expected a numeric timestamp")
        for campo, valor in (("ztxdatestr", date_string), ("zname", category), ("znicname", asset)):
            if not isinstance(valor, str):
                raise RowDecodeError(campo, valor, "expected text")
        # Los gastos sin comentario tienen ZCONTENT NULL
        if content is None:
            content = ""
        elif not isinstance(content, str):
            raise RowDecodeError("zcontent", content, "expected text")

        try:
            decimal_amount = to_decimal(amount)
        except ValueError as e:
            raise RowDecodeError("zamount", amount, str(e)) from e

        return RawTransactionRow(
            timestamp=float(timestamp),
            date_string=date_string,
            category_name=category,
            description=content,
            amount=decimal_amount,
            payment_method_name=asset,
        )
