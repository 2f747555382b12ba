"""
Servicio de dominio: Validador de IBAN.

Pipeline de compuertas (gates). La primera que falla decide el error y
el resultado se devuelve de inmediato, con solo los campos que se
alcanzaron a calcular:

1. Normalizar: quitar espacios en blanco y pasar a mayúsculas.
2. Longitud mínima (15).
3. Extraer el código de país (2 primeros caracteres, sean o no letras).
4. País soportado (tabla country_specs).
5. Longitud exacta del país.
6. Solo A-Z y 0-9.
7. MOD-97-10 == 1.
8. Éxito: formato en bloques de 4, BBAN, bank_code / account_number.

El ORDEN importa: "DE1234" debe fallar por corto, nunca por checksum.

validate_iban() es pura: no lanza, no escribe en consola, no guarda estado.
Es segura de llamar desde varios hilos a la vez.
"""

from iban_validator.domain.exceptions import (
    CaracteresInvalidosError,
    ChecksumInvalidoError,
    IbanTooShortError,
    IbanValidationError,
    LongitudInvalidaError,
    PaisNoSoportadoError,
)
from iban_validator.domain.models.validation_result import IbanErrorCode, ValidationResult
from iban_validator.domain.shared.checksum import iban_checksum
from iban_validator.domain.shared.country_specs import get_country_spec
from iban_validator.domain.shared.text_cleaner import group_in_blocks, normalize_iban

# Ningún país emite IBANs más cortos (Noruega: 15).
MIN_IBAN_LENGTH = 15

# El BBAN se parte en bank_code (8) + account_number (resto).
# Es una simplificación: no sigue el layout real de cada país.
BANK_CODE_LENGTH = 8

_ALLOWED_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")

_EXCEPTION_BY_CODE: dict[IbanErrorCode, type[IbanValidationError]] = {
    IbanErrorCode.TOO_SHORT: IbanTooShortError,
    IbanErrorCode.UNSUPPORTED_COUNTRY: PaisNoSoportadoError,
    IbanErrorCode.LENGTH_MISMATCH: LongitudInvalidaError,
    IbanErrorCode.INVALID_CHARACTERS: CaracteresInvalidosError,
    IbanErrorCode.CHECKSUM_FAILED: ChecksumInvalidoError,
}


def validate_iban(raw: str) -> ValidationResult:
    """Valida un IBAN y, si es válido, lo descompone.

    Nunca lanza excepción: cualquier entrada (vacía, basura, muy larga)
    produce un ValidationResult. Los errores van en `error` / `error_code`.

    Args:
        raw: IBAN tal como lo escribió el usuario. Puede tener espacios,
             minúsculas, tabs. None se trata como "" y cualquier otro
             tipo se convierte con str().

    Returns:
        ValidationResult con `iban` igual a la entrada original.

    Ejemplos:
        >>> validate_iban("gb82 west 1234 5698 7654 32").formatted
        'GB82 WEST 1234 5698 7654 32'
        >>> validate_iban("DE1234").error
        'IBAN too short'
    """
    if raw is None:
        raw = ""
    elif not isinstance(raw, str):
        raw = str(raw)

    # Paso 1: Normalizar
    cleaned = normalize_iban(raw)

    # Paso 2: Longitud mínima
    if len(cleaned) < MIN_IBAN_LENGTH:
        return ValidationResult.failure(raw, IbanErrorCode.TOO_SHORT, "IBAN too short")

    # Paso 3: País (se guarda aunque no esté soportado)
    country = cleaned[:2]

    # Paso 4: País soportado
    spec = get_country_spec(country)
    if spec is None:
        return ValidationResult.failure(
            raw,
            IbanErrorCode.UNSUPPORTED_COUNTRY,
            f"Country code {country} not supported",
            country=country,
        )

    # Paso 5: Longitud exacta del país
    if len(cleaned) != spec.length:
        return ValidationResult.failure(
            raw,
            IbanErrorCode.LENGTH_MISMATCH,
            f"Invalid length: expected {spec.length}, got {len(cleaned)}",
            country=country,
            country_name=spec.name,
            flag=spec.flag,
        )

    # Paso 6: Caracteres permitidos
    # Se compara contra un conjunto ASCII explícito: str.isalnum() acepta
    # letras acentuadas y dígitos de otros alfabetos.
    if not _ALLOWED_CHARS.issuperset(cleaned):
        return ValidationResult.failure(
            raw,
            IbanErrorCode.INVALID_CHARACTERS,
            "IBAN contains invalid characters",
            country=country,
            country_name=spec.name,
            flag=spec.flag,
        )

    # Paso 7: MOD-97-10
    if iban_checksum(cleaned) != 1:
        return ValidationResult.failure(
            raw,
            IbanErrorCode.CHECKSUM_FAILED,
            "Invalid checksum (MOD-97-10 check failed)",
            country=country,
            country_name=spec.name,
            flag=spec.flag,
        )

    # Paso 8: Éxito
    bban = cleaned[4:]
    bank_code = None
    account_number = None
    if len(bban) >= BANK_CODE_LENGTH:
        bank_code = bban[:BANK_CODE_LENGTH]
        account_number = bban[BANK_CODE_LENGTH:]

    return ValidationResult.success(
        raw,
        country=country,
        country_name=spec.name,
        flag=spec.flag,
        formatted=group_in_blocks(cleaned),
        bban=bban,
        bank_code=bank_code,
        account_number=account_number,
    )


def check_iban(raw: str) -> ValidationResult:
    """Versión "estricta" de validate_iban que lanza excepción si es inválido.

    ¿Cuándo usar esta en lugar de validate_iban?
    - Cuando un IBAN inválido debe cortar el flujo (alta de beneficiario,
      importación que no admite filas malas).

    ¿Cuándo NO usarla?
    - Para reportar muchos IBANs: ahí conviene validate_iban y revisar
      `is_valid` de cada uno.

    Raises:
        IbanValidationError: La subclase que corresponde a la compuerta que
            falló. La excepción conserva el ValidationResult en `.resultado`.
    """
    resultado = validate_iban(raw)
    if not resultado.is_valid:
        raise _EXCEPTION_BY_CODE[resultado.error_code](resultado)
    return resultado


def is_valid_iban(raw: str) -> bool:
    """Atajo: True si el IBAN pasa todas las verificaciones.

    Ejemplos:
        >>> is_valid_iban("DE89 3704 0044 0532 0130 00")
        True
        >>> is_valid_iban("DE89 3704 0044 0532 0130 01")
        False
    """
    return validate_iban(raw).is_valid
