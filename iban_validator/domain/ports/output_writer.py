"""
Puerto de salida: Escritor de reportes.

Define el contrato para escribir los resultados de validación en algún
formato persistente. Hoy es Excel; mañana podría ser CSV o JSON sin
tocar el dominio.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from iban_validator.domain.models.resultado_archivo import ResultadoArchivo


class OutputWriter(ABC):
    """Interfaz para escribir reportes de validación."""

    @abstractmethod
    def write(self, resultados: Sequence[ResultadoArchivo], output_path: Path) -> Path:
        """Escribe el reporte de uno o varios orígenes.

        Args:
            resultados: Resultados agrupados por archivo de origen.
            output_path: Ruta donde crear el reporte.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura o no hay nada que escribir.
        """
        ...
