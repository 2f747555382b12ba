"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la validación por lotes.

¿Por qué no usar simplemente el módulo `logging` de Python?
Porque `logging` es una herramienta de infraestructura (HOW), mientras que
este puerto define los EVENTOS de negocio (WHAT):
- "Se recibió un archivo" (no "INFO: archivo recibido")
- "El IBAN no pasó el checksum" (no "WARNING: iban inválido")

La implementación puede usar `logging` internamente, pero el dominio
solo conoce los eventos. En tests se puede acumular en memoria.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from iban_validator.domain.models.validation_result import ValidationResult


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar.

        Args:
            file_path: Ruta del archivo.
            file_type: Extensión del archivo: '.pdf', '.txt', '.csv'.
        """
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .docx no soportada"
        """
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de extracción de texto."""
        ...

    @abstractmethod
    def log_extraction_complete(self, file_path: Path, num_pages: int, num_candidates: int) -> None:
        """Registra el fin exitoso de la extracción.

        Args:
            file_path: Ruta del archivo procesado.
            num_pages: Cantidad de páginas leídas.
            num_candidates: Cantidad de IBANs candidatos encontrados.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error de lectura/escritura de un archivo."""
        ...

    # --- Validación ---

    @abstractmethod
    def log_iban_valid(self, source: str, resultado: ValidationResult) -> None:
        """Registra un IBAN válido."""
        ...

    @abstractmethod
    def log_iban_invalid(self, source: str, resultado: ValidationResult) -> None:
        """Registra un IBAN inválido, con su error."""
        ...

    # --- Reporte ---

    @abstractmethod
    def log_report_written(self, output_path: Path) -> None:
        """Registra que se generó el reporte de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'ibans_validos': int,
                'ibans_invalidos': int,
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
