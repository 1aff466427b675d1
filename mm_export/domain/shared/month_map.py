"""
Mapeo de nombres de meses a números para la opción --month.

El usuario puede pedir un mes completo del año en curso escribiéndolo
en inglés o en español, abreviado o completo, o como número:

    --month ene    --month January    --month 3    --month Diciembre

El diccionario se construye una sola vez al importar el módulo y se
expone como solo lectura (MappingProxyType).
"""

import re
from types import MappingProxyType

from mm_export.domain.exceptions import MonthTokenError

_MONTH_MAP = MappingProxyType(
    {
        # --- Enero ---
        "JAN": 1,
        "JANUARY": 1,
        "ENE": 1,
        "ENERO": 1,
        # --- Febrero ---
        "FEB": 2,
        "FEBRUARY": 2,
        "FEBRERO": 2,
        # --- Marzo ---
        "MAR": 3,
        "MARCH": 3,
        "MARZO": 3,
        # --- Abril ---
        "APR": 4,
        "APRIL": 4,
        "ABR": 4,
        "ABRIL": 4,
        # --- Mayo (MAY es igual en ambos idiomas) ---
        "MAY": 5,
        "MAYO": 5,
        # --- Junio ---
        "JUN": 6,
        "JUNE": 6,
        "JUNIO": 6,
        # --- Julio ---
        "JUL": 7,
        "JULY": 7,
        "JULIO": 7,
        # --- Agosto ---
        "AUG": 8,
        "AUGUST": 8,
        "AGO": 8,
        "AGOSTO": 8,
        # --- Septiembre ---
        "SEP": 9,
        "SEPT": 9,
        "SEPTEMBER": 9,
        "SEPTIEMBRE": 9,
        # --- Octubre ---
        "OCT": 10,
        "OCTOBER": 10,
        "OCTUBRE": 10,
        # --- Noviembre ---
        "NOV": 11,
        "NOVEMBER": 11,
        "NOVIEMBRE": 11,
        # --- Diciembre ---
        "DEC": 12,
        "DECEMBER": 12,
        "DIC": 12,
        "DICIEMBRE": 12,
    }
)

# Solo dígitos, con '+' opcional. int() solo aceptaría también "1_0" y "٣".
_NUMERIC_MONTH = re.compile(r"^\+?[0-9]+$")


def month_to_int(month_name: str) -> int:
    """Convierte un nombre de mes o un número '1'-'12' a int.

    El lookup es case-insensitive: 'ene', 'ENE', 'Ene' → 1.
    Se admiten ceros a la izquierda: '03' → 3.

    Raises:
        MonthTokenError: Si el token no es un mes reconocido ni un número
                         dentro de 1..12.

    Ejemplos:
        >>> month_to_int("Enero")
        1
        >>> month_to_int("dic")
        12
        >>> month_to_int("7")
        7
    """
    normalized = month_name.strip().upper()

    # Primero por nombre
    result = _MONTH_MAP.get(normalized)
    if result is not None:
        return result

    # Después como número
    if _NUMERIC_MONTH.match(normalized):
        number = int(normalized)
        if 1 <= number <= 12:
            return number

    raise MonthTokenError(month_name)


def resolve_month(token: str | None) -> int | None:
    """Resuelve el valor de --month.

    Distingue tres resultados:
    - None en la entrada → None ("no se pidió mes").
    - Token reconocido → número de mes 1..12.
    - Token no reconocido → MonthTokenError. Quien llama decide si es fatal.

    Ejemplos:
        >>> resolve_month(None) is None
        True
        >>> resolve_month("February")
        2
    """
    if token is None:
        return None
    return month_to_int(token)


def known_month_names() -> list[str]:
    """Nombres aceptados en minúsculas, ordenados por número de mes."""
    return [name.lower() for name, _ in sorted(_MONTH_MAP.items(), key=lambda kv: (kv[1], kv[0]))]
