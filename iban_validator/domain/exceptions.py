"""
Excepciones de dominio del proyecto iban-validator.

validate_iban() NUNCA lanza: todos los fallos de validación viajan en el
campo `error` del ValidationResult. Estas excepciones existen para los
puntos del sistema donde sí tiene sentido interrumpir el flujo:

- check_iban(): la variante estricta, para quien prefiere try/except a
  revisar `is_valid` (por ejemplo, al dar de alta un beneficiario).
- Los adaptadores de entrada/salida (leer un PDF, escribir un Excel).

Jerarquía:
    IbanBaseError
    ├── IbanValidationError          → El IBAN no pasó alguna verificación
    │   ├── IbanTooShortError        → Menos de 15 caracteres tras limpiar
    │   ├── PaisNoSoportadoError     → Código de país fuera de la tabla
    │   ├── LongitudInvalidaError    → Longitud distinta a la del país
    │   ├── CaracteresInvalidosError → Caracteres fuera de A-Z / 0-9
    │   └── ChecksumInvalidoError    → MOD-97-10 distinto de 1
    ├── FormatoInvalidoError         → El archivo no tiene el formato esperado
    ├── ExtractionError              → Error al extraer texto del archivo
    └── OutputError                  → Error al generar el reporte
"""

from iban_validator.domain.models.validation_result import ValidationResult


class IbanBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar cualquier error del proyecto con un solo
    `except IbanBaseError` en el CLI.
    """


class IbanValidationError(IbanBaseError):
    """El IBAN no pasó alguna de las verificaciones del pipeline.

    Conserva el ValidationResult completo para que quien capture la
    excepción tenga acceso a los campos que sí se llegaron a calcular
    (por ejemplo, `country` y `country_name` en un error de longitud).
    """

    def __init__(self, resultado: ValidationResult):
        self.resultado = resultado
        self.iban = resultado.iban
        super().__init__(f"IBAN inválido '{resultado.iban}': {resultado.error}")


class IbanTooShortError(IbanValidationError):
    """Menos de 15 caracteres después de quitar espacios."""


class PaisNoSoportadoError(IbanValidationError):
    """Los 2 primeros caracteres no están en la tabla de países."""


class LongitudInvalidaError(IbanValidationError):
    """La longitud no coincide con la requerida por el país."""


class CaracteresInvalidosError(IbanValidationError):
    """Hay caracteres fuera de A-Z y 0-9."""


class ChecksumInvalidoError(IbanValidationError):
    """El cálculo MOD-97-10 no da 1."""


class FormatoInvalidoError(IbanBaseError):
    """Se lanza cuando un archivo de entrada no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un PDF pero el archivo es un .docx.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(IbanBaseError):
    """Se lanza cuando falla la extracción de texto de un archivo.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña.
    - pdfplumber no puede leer el archivo.
    - El archivo de texto no está en UTF-8.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class OutputError(IbanBaseError):
    """Se lanza cuando falla la generación del reporte de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No hay resultados que escribir.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
