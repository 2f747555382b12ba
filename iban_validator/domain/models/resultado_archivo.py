"""
Modelo de dominio: Resultados de validar los IBANs de un archivo.

Es el objeto que fluye entre el BatchValidator y los OutputWriter:
- Lo PRODUCE el BatchValidator (uno por archivo o por lote del CLI).
- Lo CONSUME el ExcelWriter.

Guarda el origen para que el reporte diga de qué archivo salió cada IBAN.
"""

from dataclasses import dataclass, field

from iban_validator.domain.models.validation_result import ValidationResult


@dataclass(frozen=True)
class ResultadoArchivo:
    """Resultados de validación de un origen (archivo o argumentos del CLI)."""

    archivo: str
    """Nombre del archivo de origen, o 'cli' para IBANs pasados como argumento."""

    resultados: list[ValidationResult] = field(default_factory=list)
    """Un ValidationResult por IBAN candidato, en el orden en que aparecen."""

    @property
    def num_validos(self) -> int:
        return sum(1 for r in self.resultados if r.is_valid)

    @property
    def num_invalidos(self) -> int:
        return len(self.resultados) - self.num_validos

    def __post_init__(self) -> None:
        if not self.archivo:
            raise ValueError("El origen (archivo) no puede estar vacío")
