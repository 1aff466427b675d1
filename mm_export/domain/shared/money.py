"""
Utilidades para manejo de importes.

Money Manager guarda los importes como REAL (float) en SQLite. Para no
acumular errores de redondeo al sumar muchos importes pequeños, se
convierten a Decimal al leer la fila y el total se suma con Decimal.

Hay dos formatos de salida, y la asimetría es intencional (compatibilidad
con las hojas de cálculo que ya consumen el reporte):
- Cada fila usa coma decimal: "1234,50".
- El total usa punto decimal: "30.50".
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")


def to_decimal(value: object) -> Decimal:
    """Convierte un importe leído de la base a Decimal.

    Los float se pasan por str() (la representación más corta), así
    20.5 → Decimal('20.5') y no Decimal('20.5000000000000000001...').

    Raises:
        ValueError: Si el valor no es numérico (bool incluido), no es
                    finito o es demasiado grande para redondear a centavos.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError(f"Se esperaba un importe numérico, se recibió {type(value).__name__}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Importe no convertible: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Importe no finito: {value!r}")
    # format_amount y format_total redondean a centavos; un valor que no
    # entra en la precisión del contexto no se puede redondear.
    try:
        result.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Importe fuera de rango: {value!r}") from e
    return result


def format_amount(amount: Decimal) -> str:
    """Formatea un importe con coma decimal y 2 decimales.

    Se redondea a centavos (mitad hacia arriba) ANTES de separar parte
    entera y fracción, así 1.999 da "2,00" y no "1,100".

    Ejemplos:
        >>> format_amount(Decimal("1234.5"))
        '1234,50'
        >>> format_amount(Decimal("0"))
        '0,00'
        >>> format_amount(Decimal("0.125"))
        '0,13'
    """
    quantized = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    cents = int(abs(quantized) * 100)
    integer_part, decimal_part = divmod(cents, 100)
    return f"{sign}{integer_part},{decimal_part:02d}"


def format_total(total: Decimal) -> str:
    """Formatea el total con punto decimal y exactamente 2 decimales.

    Ejemplos:
        >>> format_total(Decimal("30.5"))
        '30.50'
    """
    return f"{total.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"
