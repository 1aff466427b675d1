"""
Utilidades compartidas del dominio.

No dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python (str, int, date, Decimal).

Uso:
    from mm_export.domain.shared.month_map import resolve_month, month_to_int
    from mm_export.domain.shared.calendar_utils import days_in_month, last_day_of_month
    from mm_export.domain.shared.date_parser import parse_iso_date, format_iso_date
    from mm_export.domain.shared.money import to_decimal, format_amount, format_total
"""
