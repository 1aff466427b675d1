"""
Excepciones de dominio del proyecto mm-export.

¿Por qué excepciones propias en lugar de terminar el proceso donde se
detecta el problema? Porque así las funciones de resolución de fechas y
normalización se pueden probar sin matar el proceso de pytest, y un único
manejador en el CLI decide el código de salida.

Jerarquía:
    ExportBaseError
    ├── FileAccessError     → El archivo de respaldo no existe o no se puede leer
    ├── DateParseError      → Fecha explícita inválida (o rango invertido)
    ├── MonthTokenError     → Mes no reconocido (NO fatal, ver resolver)
    ├── StoreError          → Falla de conexión o consulta a SQLite
    ├── RowDecodeError      → Una fila tiene un campo con forma inesperada
    └── OutputError         → Error al generar el archivo de salida (Excel)
"""

from pathlib import Path


class ExportBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    El CLI captura `ExportBaseError` y la convierte en código de salida 1.
    """


class FileAccessError(ExportBaseError):
    """Se lanza cuando el archivo de respaldo de Money Manager no existe,
    no es un archivo regular o no tiene permisos de lectura."""

    def __init__(self, archivo: str | Path, detalle: str = ""):
        self.archivo = str(archivo)
        self.detalle = detalle
        mensaje = f"Cannot read database file '{archivo}'"
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class DateParseError(ExportBaseError):
    """Se lanza cuando una fecha explícita no tiene formato YYYY-MM-DD o
    no es una fecha real del calendario.

    `campo` es 'start' o 'end' para que el mensaje diga cuál de las dos
    opciones de línea de comandos está mal.
    """

    EXPECTED_FORMAT = "YYYY-MM-DD"

    def __init__(self, campo: str, valor: str, detalle: str = ""):
        self.campo = campo
        self.valor = valor
        self.detalle = detalle
        mensaje = (
            f"Invalid {campo} date provided: '{valor}'. "
            f"Please use format {self.EXPECTED_FORMAT} and a valid date"
        )
        if detalle:
            mensaje += f" ({detalle})"
        super().__init__(mensaje)


class MonthTokenError(ExportBaseError):
    """Se lanza cuando un token de mes no está en el vocabulario ni es un
    número entre 1 y 12.

    No es fatal: el DateRangeResolver la captura, emite una advertencia y
    continúa con las fechas explícitas o por defecto.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Unrecognized month: '{token}'. "
            f"Use a number 1-12 or a month name (Jan/January/Ene/Enero, ...)"
        )


class StoreError(ExportBaseError):
    """Se lanza cuando falla la conexión o la consulta a la base SQLite."""

    def __init__(self, archivo: str | Path, causa: str):
        self.archivo = str(archivo)
        self.causa = causa
        super().__init__(f"Error querying '{archivo}': {causa}")


class RowDecodeError(ExportBaseError):
    """Se lanza cuando un campo de una fila no tiene el tipo o la forma
    esperada (por ejemplo, un importe que no es numérico)."""

    def __init__(self, campo: str, valor: object, causa: str = ""):
        self.campo = campo
        self.valor = valor
        self.causa = causa
        mensaje = f"Unexpected value for '{campo}': {valor!r}"
        if causa:
            mensaje += f" ({causa})"
        super().__init__(mensaje)


class OutputError(ExportBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    """

    def __init__(self, ruta_salida: str | Path, causa: str):
        self.ruta_salida = str(ruta_salida)
        self.causa = causa
        super().__init__(f"Error writing output to '{ruta_salida}': {causa}")
