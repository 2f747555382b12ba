"""
Servicio de dominio: Validación por lotes.

Orquesta la validación de muchos IBANs:
1. Recibe una ruta a un archivo (o una lista de IBANs del CLI).
2. Selecciona el TextExtractor adecuado (can_handle).
3. Extrae texto de las páginas.
4. Busca los IBANs candidatos en cada página.
5. Valida cada candidato con validate_iban().
6. Devuelve un ResultadoArchivo por origen.

Los errores de lectura se registran en la bitácora y el archivo se
omite; un archivo ilegible no detiene el lote.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from iban_validator.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_validator.domain.models.page_text import PageText
from iban_validator.domain.models.resultado_archivo import ResultadoArchivo
from iban_validator.domain.models.validation_result import ValidationResult
from iban_validator.domain.ports.process_logger import ProcessLogger
from iban_validator.domain.ports.text_extractor import TextExtractor
from iban_validator.domain.services.iban_validator import validate_iban
from iban_validator.domain.shared.text_cleaner import normalize_iban


class BatchValidator:
    """Valida IBANs de archivos o listas y produce ResultadoArchivo.

    Recibe sus dependencias por constructor (Dependency Injection).
    No sabe qué TextExtractor concretos se están usando, solo conoce
    las interfaces (puertos).
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            text_extractors: Extractores disponibles, en orden de prioridad.
                            Se usa el primero cuyo can_handle devuelva True.
            logger: Logger para la bitácora de procesamiento.
        """
        self._extractors = text_extractors
        self._logger = logger

    def validate_values(self, values: Iterable[str], source: str = "cli") -> ResultadoArchivo:
        """Valida una lista de IBANs que no vienen de un archivo.

        Args:
            values: IBANs tal como los escribió el usuario.
            source: Etiqueta de origen para el reporte.
        """
        resultados = [self._validate(value, source) for value in values]
        return ResultadoArchivo(archivo=source, resultados=resultados)

    def process_file(self, file_path: Path) -> ResultadoArchivo | None:
        """Procesa un archivo y devuelve los resultados de sus IBANs.

        Returns:
            ResultadoArchivo si el archivo se pudo leer (aunque no tenga
            ningún IBAN candidato).
            None si el archivo fue descartado o no se pudo leer.
        """
        self._logger.log_file_received(file_path, file_path.suffix.lower())

        extractor = self._find_extractor(file_path)
        if extractor is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        self._logger.log_extraction_start(file_path, extractor.name)
        try:
            pages = extractor.extract(file_path)
        except (ExtractionError, FormatoInvalidoError) as e:
            self._logger.log_error(file_path, e)
            return None

        candidatos = self._collect_candidates(extractor, pages)
        self._logger.log_extraction_complete(file_path, len(pages), len(candidatos))

        resultados = [self._validate(raw, file_path.name) for raw in candidatos]
        return ResultadoArchivo(archivo=file_path.name, resultados=resultados)

    def process_directory(self, dir_path: Path) -> list[ResultadoArchivo]:
        """Procesa todos los archivos soportados de un directorio (recursivo).

        Los archivos que ningún extractor maneja se ignoran sin registrarlos,
        para no llenar la bitácora con imágenes, hojas de cálculo, etc.

        Returns:
            Lista de ResultadoArchivo (solo de los archivos que se leyeron).
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p for p in dir_path.glob("**/*") if p.is_file() and self._find_extractor(p) is not None
        )

        resultados: list[ResultadoArchivo] = []
        for archivo in archivos:
            resultado = self.process_file(archivo)
            if resultado is not None:
                resultados.append(resultado)

        return resultados

    def _find_extractor(self, file_path: Path) -> TextExtractor | None:
        """Encuentra el primer extractor que pueda manejar el archivo."""
        for extractor in self._extractors:
            if extractor.can_handle(file_path):
                return extractor
        return None

    @staticmethod
    def _collect_candidates(extractor: TextExtractor, pages: list[PageText]) -> list[str]:
        """Junta los candidatos de todas las páginas, en orden.

        Un mismo IBAN que aparece en varias páginas (encabezado repetido en
        cada página de un estado de cuenta) se valida una sola vez. La
        comparación ignora espacios y mayúsculas.
        """
        vistos: set[str] = set()
        candidatos: list[str] = []
        for page in pages:
            if page.is_empty:
                continue
            for raw in extractor.find_candidates(page):
                clave = normalize_iban(raw)
                if clave in vistos:
                    continue
                vistos.add(clave)
                candidatos.append(raw)
        return candidatos

    def _validate(self, raw: str, source: str) -> ValidationResult:
        resultado = validate_iban(raw)
        if resultado.is_valid:
            self._logger.log_iban_valid(source, resultado)
        else:
            self._logger.log_iban_invalid(source, resultado)
        return resultado
