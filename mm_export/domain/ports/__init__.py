"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from mm_export.domain.ports import TransactionSource, ReportWriter, ProcessLogger
"""

from mm_export.domain.ports.process_logger import ProcessLogger
from mm_export.domain.ports.report_writer import ReportWriter
from mm_export.domain.ports.transaction_source import TransactionSource

__all__ = [
    "ProcessLogger",
    "ReportWriter",
    "TransactionSource",
]
