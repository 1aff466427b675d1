"""
Parseo estricto de fechas YYYY-MM-DD.

Las fechas de --start-date y --end-date se comparan contra la columna
ZTXDATESTR de la base, que guarda texto 'YYYY-MM-DD' con ceros a la
izquierda. La consulta usa BETWEEN sobre texto (comparación
lexicográfica), así que '2023-2-1' tiene que llegar como '2023-02-01'
o el rango no funciona. Por eso siempre se parsea a `date` y se vuelve a
serializar con `format_iso_date`.
"""

import re
from datetime import date

# Año de 4 dígitos; mes y día de 1 o 2 dígitos ('2023-2-1' es válido).
_ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")


def parse_iso_date(date_text: str) -> date:
    """Parsea una fecha 'YYYY-MM-DD' (mes y día pueden venir sin cero).

    Raises:
        ValueError: Si el formato no coincide o la fecha no existe
                    (mes 13, 30 de febrero, etc.).

    Ejemplos:
        >>> parse_iso_date("2023-2-1")
        datetime.date(2023, 2, 1)
    """
    text = date_text.strip()
    m = _ISO_DATE.match(text)
    if not m:
        raise ValueError(f"Formato de fecha no reconocido: '{date_text}'. Se esperaba YYYY-MM-DD")

    year, month, day = (int(g) for g in m.groups())
    return _build_date(year, month, day, date_text)


def format_iso_date(value: date) -> str:
    """Serializa a 'YYYY-MM-DD' con ceros a la izquierda."""
    return value.isoformat()


def normalize_iso_date(date_text: str) -> str:
    """Parsea y vuelve a serializar: '2023-2-1' → '2023-02-01'."""
    return format_iso_date(parse_iso_date(date_text))


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con un mensaje que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day}: {e}"
        ) from e
