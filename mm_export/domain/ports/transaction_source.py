"""
Puerto de entrada: Fuente de transacciones.

El dominio solo necesita "dado un rango de fechas, dame los gastos en
orden". No sabe que detrás hay SQLite ni cómo se llaman las tablas de
Money Manager.

La secuencia devuelta se consume una sola vez, de principio a fin. No se
puede rebobinar ni volver a consultar sobre el mismo iterador.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from types import TracebackType

from mm_export.domain.models.transaction import RawTransactionRow


class TransactionSource(ABC):
    """Interfaz para obtener los gastos de un rango de fechas.

    Es un context manager: el recurso subyacente (conexión) se libera al
    salir del bloque `with`, haya error o no.
    """

    @abstractmethod
    def query(self, start: str, end: str) -> Iterator[RawTransactionRow]:
        """Devuelve los gastos no borrados con fecha entre start y end.

        Args:
            start: Fecha inicial 'YYYY-MM-DD' (con ceros), inclusive.
            end: Fecha final 'YYYY-MM-DD' (con ceros), inclusive.

        Returns:
            Iterador de RawTransactionRow ordenado por timestamp ascendente.

        Raises:
            StoreError: Si falla la conexión o la consulta.
            RowDecodeError: Si una fila tiene un campo con tipo inesperado.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Libera el recurso. Llamarlo más de una vez no es un error."""
        ...

    def __enter__(self) -> "TransactionSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
