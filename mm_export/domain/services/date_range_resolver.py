"""
Servicio de dominio: Resolución del rango de fechas.

Convierte las tres formas de pedir un periodo en un único DateRange:

1. Modo mes (--month válido): el mes completo del año en curso.
   Las fechas explícitas se ignoran.
2. --month inválido: se trata como si no se hubiera pedido mes y se
   sigue con el paso 3. Se conserva por compatibilidad, pero se avisa
   por la bitácora para que un error de tipeo no pase desapercibido.
3. Fechas explícitas o por defecto:
   - inicio: --start-date, o el 1 del mes anterior a hoy.
   - fin: --end-date, o el último día del mes del inicio.

Los errores se lanzan como DateParseError; el CLI decide el código de
salida. Nada aquí termina el proceso.
"""

from datetime import date

from mm_export.domain.exceptions import DateParseError, MonthTokenError
from mm_export.domain.models.date_range import DateRange, ResolutionMode
from mm_export.domain.ports.process_logger import ProcessLogger
from mm_export.domain.shared.calendar_utils import (
    first_day_of_previous_month,
    last_day_of_month,
)
from mm_export.domain.shared.date_parser import parse_iso_date
from mm_export.domain.shared.month_map import resolve_month


class DateRangeResolver:
    """Resuelve el rango [inicio, fin] a exportar.

    Recibe el logger por constructor para poder avisar del mes no
    reconocido sin depender de la consola.
    """

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def resolve(
        self,
        explicit_start: str | None,
        explicit_end: str | None,
        month_token: str | None,
        today: date,
    ) -> DateRange:
        """Devuelve el rango resuelto.

        Args:
            explicit_start: Valor de --start-date o None.
            explicit_end: Valor de --end-date o None.
            month_token: Valor de --month o None.
            today: Fecha de referencia (año del modo mes, mes anterior).

        Raises:
            DateParseError: Si una fecha explícita no es YYYY-MM-DD válida,
                            o si el fin queda antes del inicio.
        """
        month = self._month_or_none(month_token)
        if month is not None:
            if explicit_start is not None or explicit_end is not None:
                self._logger.log_explicit_dates_ignored(explicit_start, explicit_end)
            return DateRange(
                start=date(today.year, month, 1),
                end=last_day_of_month(today.year, month),
                mode=ResolutionMode.MONTH,
            )

        # --- Inicio ---
        if explicit_start is None:
            start = first_day_of_previous_month(today)
        else:
            start = self._parse("start", explicit_start)

        # --- Fin ---
        if explicit_end is None:
            end = last_day_of_month(start.year, start.month)
        else:
            end = self._parse("end", explicit_end)

        if end < start:
            raise DateParseError(
                "end",
                explicit_end or end.isoformat(),
                f"end date is before start date {start.isoformat()}",
            )

        return DateRange(start=start, end=end, mode=ResolutionMode.EXPLICIT)

    def _month_or_none(self, month_token: str | None) -> int | None:
        """Mes pedido, o None si no se pidió o no se reconoce."""
        try:
            return resolve_month(month_token)
        except MonthTokenError as e:
            self._logger.log_month_not_recognized(e.token)
            return None

    @staticmethod
    def _parse(campo: str, valor: str) -> date:
        try:
            return parse_iso_date(valor)
        except ValueError as e:
            raise DateParseError(campo, valor) from e
