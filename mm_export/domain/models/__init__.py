"""
Modelos de dominio del proyecto mm-export.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from mm_export.domain.models import DateRange, RawTransactionRow, ReportRow
"""

from mm_export.domain.models.config import ResolvedConfig
from mm_export.domain.models.date_range import DateRange, ResolutionMode
from mm_export.domain.models.report import HEADER, ReportRow, ReportSummary
from mm_export.domain.models.transaction import RawTransactionRow

__all__ = [
    "HEADER",
    "DateRange",
    "RawTransactionRow",
    "ReportRow",
    "ReportSummary",
    "ResolutionMode",
    "ResolvedConfig",
]
