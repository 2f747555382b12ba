"""
Modelo de dominio: Resultado de validar un IBAN.

Se crea UNA vez por llamada a validate_iban() y no cambia después.

Decisiones de diseño:
- En lugar de un objeto mutable que se va llenando paso a paso, el
  validador retorna en cada compuerta (gate) un resultado ya completo:
  `ValidationResult.failure(...)` con solo los campos que se alcanzaron
  a calcular, o `ValidationResult.success(...)` con todos.
- Los campos ausentes son None (no cadena vacía) para distinguir
  "no se calculó" de "se calculó y está vacío". Ejemplo: `account_number`
  puede ser "" si el BBAN mide exactamente 8 caracteres.
- `error_code` acompaña al mensaje para que el código que consume el
  resultado no tenga que comparar strings.
"""

from dataclasses import asdict, dataclass
from enum import Enum


class IbanErrorCode(str, Enum):
    """Taxonomía de errores de validación, en el orden del pipeline."""

    TOO_SHORT = "too_short"
    UNSUPPORTED_COUNTRY = "unsupported_country"
    LENGTH_MISMATCH = "length_mismatch"
    INVALID_CHARACTERS = "invalid_characters"
    CHECKSUM_FAILED = "checksum_failed"


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de validar un IBAN.

    frozen=True: el resultado de una validación es un hecho, no un estado.
    """

    iban: str
    """Entrada original, sin limpiar. Siempre presente."""

    is_valid: bool
    """True solo si pasaron TODAS las verificaciones."""

    error: str | None = None
    """Mensaje legible. Presente si y solo si is_valid es False."""

    error_code: IbanErrorCode | None = None
    """Compuerta que falló. Presente si y solo si is_valid es False."""

    country: str | None = None
    """Los 2 primeros caracteres de la entrada limpia. Se guarda en cuanto
    la entrada mide al menos 15 caracteres, aunque el país no se soporte."""

    country_name: str | None = None
    """Nombre del país. Solo si el código está en la tabla."""

    flag: str | None = None
    """Bandera (emoji) del país. Solo si el código está en la tabla."""

    formatted: str | None = None
    """IBAN limpio en bloques de 4: 'GB82 WEST 1234 5698 7654 32'."""

    bban: str | None = None
    """IBAN limpio sin país ni dígitos de control (primeros 4 caracteres)."""

    bank_code: str | None = None
    """Primeros 8 caracteres del BBAN. División simplificada, no es el
    layout real de cada país."""

    account_number: str | None = None
    """Resto del BBAN después del bank_code."""

    def __post_init__(self) -> None:
        if self.is_valid and (self.error is not None or self.error_code is not None):
            raise ValueError("Un resultado válido no puede tener error")
        if not self.is_valid and (not self.error or self.error_code is None):
            raise ValueError("Un resultado inválido debe tener error y error_code")

    # --- Constructores ---

    @classmethod
    def failure(
        cls,
        iban: str,
        error_code: IbanErrorCode,
        error: str,
        country: str | None = None,
        country_name: str | None = None,
        flag: str | None = None,
    ) -> "ValidationResult":
        """Resultado de una compuerta fallida.

        Solo acepta los campos que pueden existir ANTES del éxito, así es
        imposible construir un fallo con `formatted` o `bban`.
        """
        return cls(
            iban=iban,
            is_valid=False,
            error=error,
            error_code=error_code,
            country=country,
            country_name=country_name,
            flag=flag,
        )

    @classmethod
    def success(
        cls,
        iban: str,
        country: str,
        country_name: str,
        flag: str,
        formatted: str,
        bban: str,
        bank_code: str | None = None,
        account_number: str | None = None,
    ) -> "ValidationResult":
        """Resultado de un IBAN que pasó todas las compuertas.

        `bank_code` y `account_number` quedan en None cuando el BBAN mide
        menos de 8 caracteres.
        """
        return cls(
            iban=iban,
            is_valid=True,
            country=country,
            country_name=country_name,
            flag=flag,
            formatted=formatted,
            bban=bban,
            bank_code=bank_code,
            account_number=account_number,
        )

    # --- Serialización ---

    def to_dict(self) -> dict:
        """Devuelve solo los campos presentes (los None se omiten).

        `error_code` se serializa como su valor string.

        Ejemplos:
            >>> ValidationResult.failure("X", IbanErrorCode.TOO_SHORT, "IBAN too short").to_dict()
            {'iban': 'X', 'is_valid': False, 'error': 'IBAN too short', 'error_code': 'too_short'}
        """
        data = {key: value for key, value in asdict(self).items() if value is not None}
        if self.error_code is not None:
            data["error_code"] = self.error_code.value
        return data
