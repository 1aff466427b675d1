"""
Aritmética de calendario para resolver rangos de fechas.

No se usa una tabla de días por mes: la duración se obtiene restando el
primer día del mes al primer día del mes siguiente. Así los años
bisiestos y el cambio de año en diciembre salen solos.
"""

from datetime import date


def days_in_month(year: int, month: int) -> int:
    """Número de días del mes (28, 29, 30 o 31).

    Args:
        year: Año (cualquiera soportado por datetime.date).
        month: Mes 1..12. Un valor fuera de rango es un error de programación
               y date() lanza ValueError.

    Ejemplos:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
        >>> days_in_month(2023, 12)
        31
    """
    first_of_month = date(year, month, 1)
    if month == 12 and year == date.max.year:
        # No existe el 1 de enero siguiente; diciembre termina en date.max
        return (date.max - first_of_month).days + 1
    if month == 12:
        first_of_next = date(year + 1, 1, 1)
    else:
        first_of_next = date(year, month + 1, 1)
    return (first_of_next - first_of_month).days


def last_day_of_month(year: int, month: int) -> date:
    """Fecha del último día del mes.

    Ejemplos:
        >>> last_day_of_month(2024, 2)
        datetime.date(2024, 2, 29)
    """
    return date(year, month, days_in_month(year, month))


def first_day_of_previous_month(today: date) -> date:
    """Primer día del mes calendario anterior a `today`.

    En enero devuelve el 1 de diciembre del año anterior.

    Ejemplos:
        >>> first_day_of_previous_month(date(2024, 1, 10))
        datetime.date(2023, 12, 1)
        >>> first_day_of_previous_month(date(2024, 3, 31))
        datetime.date(2024, 2, 1)
    """
    if today.month == 1:
        return date(today.year - 1, 12, 1)
    return date(today.year, today.month - 1, 1)
