"""
Modelo de dominio: Resumen de una validación por lotes.

Alimenta la hoja "Resumen" del reporte Excel y el resumen final del CLI.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from iban_validator.domain.models.validation_result import ValidationResult


@dataclass(frozen=True)
class ResumenValidacion:
    """Totales de un lote de ValidationResult."""

    total: int
    """Cantidad de IBANs validados."""

    validos: int
    """Cantidad de IBANs válidos."""

    invalidos: int
    """Cantidad de IBANs inválidos."""

    por_error: dict[str, int] = field(default_factory=dict)
    """Inválidos agrupados por error_code (valor string). Ejemplo:
    {'checksum_failed': 2, 'too_short': 1}"""

    @property
    def porcentaje_validos(self) -> float:
        """Porcentaje de válidos (0-100). 0.0 si el lote está vacío."""
        if self.total == 0:
            return 0.0
        return round(100.0 * self.validos / self.total, 2)

    @classmethod
    def from_results(cls, resultados: Iterable[ValidationResult]) -> "ResumenValidacion":
        resultados = list(resultados)
        validos = sum(1 for r in resultados if r.is_valid)
        errores = Counter(r.error_code.value for r in resultados if r.error_code is not None)
        return cls(
            total=len(resultados),
            validos=validos,
            invalidos=len(resultados) - validos,
            por_error=dict(sorted(errores.items())),
        )

    def __post_init__(self) -> None:
        if self.validos + self.invalidos != self.total:
            raise ValueError(
                f"Totales inconsistentes: {self.validos} válidos + "
                f"{self.invalidos} inválidos != {self.total}"
            )
