"""
Modelos de dominio del proyecto iban-validator.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from iban_validator.domain.models import ValidationResult, CountrySpec
"""

from iban_validator.domain.models.country_spec import CountrySpec
from iban_validator.domain.models.page_text import PageText
from iban_validator.domain.models.resultado_archivo import ResultadoArchivo
from iban_validator.domain.models.resumen_validacion import ResumenValidacion
from iban_validator.domain.models.validation_result import IbanErrorCode, ValidationResult

__all__ = [
    "CountrySpec",
    "IbanErrorCode",
    "PageText",
    "ResultadoArchivo",
    "ResumenValidacion",
    "ValidationResult",
]
