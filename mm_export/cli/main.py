"""
Punto de entrada CLI: mm-export.

Uso:
    # Gastos del mes pasado
    mm-export respaldo.mmbak

    # Un rango explícito
    mm-export respaldo.mmbak -s 2023-05-01 -e 2023-05-31

    # Marzo del año en curso (también '3', 'mar', 'marzo')
    mm-export respaldo.mmbak -m march

    # Además a Excel, con detalle en stderr
    mm-export respaldo.mmbak -m 5 -x mayo.xlsx -dd

Este módulo es el ÚNICO lugar donde se ensamblan los componentes y el
único que convierte errores en códigos de salida:
    0 → éxito
    1 → archivo ilegible, fecha inválida, error de la base o de salida
"""

import argparse
import sys
from datetime import date, datetime, timezone
from pathlib import Path

from mm_export import __version__
from mm_export.adapters.input.transaction_sources.sqlite_source import (
    SqliteTransactionSource,
    check_readable,
)
from mm_export.adapters.output.loggers.console_logger import ConsoleLogger
from mm_export.adapters.output.writers.delimited_writer import DelimitedTextWriter
from mm_export.adapters.output.writers.excel_writer import ExcelWriter
from mm_export.domain.exceptions import ExportBaseError
from mm_export.domain.models.config import ResolvedConfig
from mm_export.domain.models.report import ReportSummary
from mm_export.domain.ports.process_logger import ProcessLogger
from mm_export.domain.ports.report_writer import ReportWriter
from mm_export.domain.services.date_range_resolver import DateRangeResolver
from mm_export.domain.services.report_emitter import ReportEmitter
from mm_export.domain.shared.month_map import known_month_names

EXIT_OK = 0
EXIT_ERROR = 1


def main(argv: list[str] | None = None, today: date | None = None) -> int:
    """Punto de entrada principal del CLI.

    Args:
        argv: Argumentos (sin el nombre del programa). None → sys.argv.
        today: Fecha de referencia. None → fecha actual en UTC.

    Returns:
        Código de salida del proceso.
    """
    args = _parse_args(argv)
    logger = ConsoleLogger(debug_level=args.debug)

    try:
        config = build_config(args, today or _utc_today(), logger)
        logger.log_config_resolved(config)
        run_export(config, logger)
    except ExportBaseError as e:
        logger.log_error(e)
        return EXIT_ERROR

    return EXIT_OK


def build_config(args: argparse.Namespace, today: date, logger: ProcessLogger) -> ResolvedConfig:
    """Valida el archivo y resuelve el rango de fechas.

    Raises:
        FileAccessError: Si el respaldo no se puede leer.
        DateParseError: Si alguna fecha explícita es inválida.
    """
    source_path = Path(args.file_name)
    check_readable(source_path)

    resolver = DateRangeResolver(logger)
    date_range = resolver.resolve(
        explicit_start=args.start_date,
        explicit_end=args.end_date,
        month_token=args.month,
        today=today,
    )

    return ResolvedConfig.from_range(
        source_path=source_path,
        date_range=date_range,
        debug_level=args.debug,
        xlsx_path=Path(args.xlsx) if args.xlsx else None,
    )


def run_export(config: ResolvedConfig, logger: ProcessLogger) -> ReportSummary:
    """Consulta la base y escribe el reporte.

    La conexión se cierra al salir del `with`, también ante errores.
    """
    writers: list[ReportWriter] = [DelimitedTextWriter()]
    if config.xlsx_path is not None:
        writers.append(ExcelWriter(config.xlsx_path, config.start_date, config.end_date))

    with SqliteTransactionSource(config.source_path) as source:
        emitter = ReportEmitter(source=source, writers=writers, logger=logger)
        return emitter.emit(config.date_range)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="mm-export",
        description="Exports Money Manager transactions in a suitable format for later analysis",
        epilog="Accepted month names: " + ", ".join(known_month_names()),
    )

    parser.add_argument(
        "file_name",
        help="The exported backup file from Money Manager",
    )

    parser.add_argument(
        "-s",
        "--start-date",
        dest="start_date",
        help='Start date in format "YYYY-MM-DD". '
        "If not provided, the first day of last month is used",
    )

    parser.add_argument(
        "-e",
        "--end-date",
        dest="end_date",
        help='End date in format "YYYY-MM-DD". '
        "If not provided, the last day of the start date's month is used",
    )

    parser.add_argument(
        "-m",
        "--month",
        help="Process full month from current year. "
        "Accepted values are numeric or Jan/January/Ene/Enero, etc",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="count",
        default=0,
        help="Increase program debug messages. Can be specified multiple times",
    )

    parser.add_argument(
        "-x",
        "--xlsx",
        help="Also write the report to this Excel file",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
