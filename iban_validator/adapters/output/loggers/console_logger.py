"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Desarrollo y debugging.
"""

from pathlib import Path

from iban_validator.domain.models.validation_result import ValidationResult
from iban_validator.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de validación a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si False, solo se imprimen IBANs inválidos y errores.
                     Los contadores se llevan igual.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_descartados: int = 0
        self._ibans_validos: int = 0
        self._ibans_invalidos: int = 0
        self._errores: list[dict] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._archivos_recibidos += 1
        if self._verbose:
            print(f"  📄 Recibido: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name} — {reason}")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        if self._verbose:
            print(f"  🔍 Extrayendo texto ({extractor_name}): {file_path.name}")

    def log_extraction_complete(self, file_path: Path, num_pages: int, num_candidates: int) -> None:
        if self._verbose:
            print(
                f"  ✅ Leído: {file_path.name} — "
                f"{num_pages} páginas, {num_candidates} IBANs candidatos"
            )

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    # --- Validación ---

    def log_iban_valid(self, source: str, resultado: ValidationResult) -> None:
        self._ibans_validos += 1
        if self._verbose:
            print(f"  ✅ {resultado.flag} {resultado.formatted} ({resultado.country_name})")

    def log_iban_invalid(self, source: str, resultado: ValidationResult) -> None:
        self._ibans_invalidos += 1
        print(f"  ❌ {resultado.iban!r} [{source}] — {resultado.error}")

    # --- Reporte ---

    def log_report_written(self, output_path: Path) -> None:
        print(f"\n📁 Reporte generado: {output_path}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_descartados": self._archivos_descartados,
            "archivos_con_error": len(self._errores),
            "ibans_validos": self._ibans_validos,
            "ibans_invalidos": self._ibans_invalidos,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE VALIDACIÓN")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Archivos descartados: {self._archivos_descartados}")
        print(f"  Archivos con error:   {len(self._errores)}")
        print(f"  IBANs válidos:        {self._ibans_validos}")
        print(f"  IBANs inválidos:      {self._ibans_invalidos}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
