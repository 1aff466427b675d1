"""
Servicio de dominio: Normalización de filas.

Transforma una RawTransactionRow en una ReportRow. Son funciones puras,
sin estado compartido entre filas:

    fecha        '2023-05-07'  → '07/05/2023'
    categoría    '  Comida '   → 'Comida'
    comentario   ' Súper  '    → 'Súper'
    importe      1234.5        → '1234,50'
    forma pago   'T. Crédito'  → 'TC'
"""

from decimal import Decimal
from types import MappingProxyType

from mm_export.domain.exceptions import RowDecodeError
from mm_export.domain.models.report import ReportRow
from mm_export.domain.models.transaction import RawTransactionRow
from mm_export.domain.shared.money import format_amount

INVALID_PAYMENT_METHOD = "INVALID"

# Nombre del activo en Money Manager → código corto de la planilla.
# Coincidencia exacta (con tildes y puntos).
PAYMENT_METHOD_CODES = MappingProxyType(
    {
        "Tickets": "Ti",
        "Transferencia": "T",
        "Efectivo": "E",
        "T. Débito": "TD",
        "T. Crédito": "TC",
        "PayPal": "P",
    }
)


def process_date(date_string: str) -> str:
    """'YYYY-MM-DD' → 'DD/MM/YYYY' invirtiendo los componentes.

    Raises:
        RowDecodeError: Si el texto no tiene exactamente tres componentes.
    """
    parts = date_string.split("-")
    if len(parts) != 3:
        raise RowDecodeError("date", date_string, "expected YYYY-MM-DD")
    return "/".join(reversed(parts))


def process_category(category: str) -> str:
    # Money Manager ya no usa 'categoría/sub-categoría', solo categoría
    return category.strip()


def process_description(description: str) -> str:
    return description.strip()


def process_amount(amount: Decimal) -> str:
    """Importe con coma decimal y dos decimales."""
    return format_amount(amount)


def process_payment_method(payment_method: str) -> str:
    """Código de forma de pago, o 'INVALID' si el nombre no se conoce.

    Un nombre desconocido no es un error fatal: queda visible en el
    reporte para que el usuario lo corrija en la planilla.
    """
    return PAYMENT_METHOD_CODES.get(payment_method, INVALID_PAYMENT_METHOD)


def normalize(raw: RawTransactionRow) -> ReportRow:
    """Aplica todas las transformaciones a una fila cruda."""
    return ReportRow(
        fecha=process_date(raw.date_string),
        categoria=process_category(raw.category_name),
        comentario=process_description(raw.description),
        importe=process_amount(raw.amount),
        forma_pago=process_payment_method(raw.payment_method_name),
    )
