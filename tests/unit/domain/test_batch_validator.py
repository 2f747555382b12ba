"""
Tests para BatchValidator.

Se usan un extractor y un logger falsos en memoria para probar la
orquestación sin leer PDFs reales: selección de extractor, manejo de
errores de lectura, deduplicación de candidatos entre páginas y eventos
de la bitácora.
"""

from pathlib import Path

import pytest

from iban_validator.domain.exceptions import ExtractionError
from iban_validator.domain.models import IbanErrorCode, PageText
from iban_validator.domain.ports import ProcessLogger, TextExtractor
from iban_validator.domain.services.batch_validator import BatchValidator


class FakeExtractor(TextExtractor):
    """Extractor que devuelve páginas predefinidas para archivos .fake."""

    def __init__(self, pages: list[PageText] | None = None, error: Exception | None = None):
        self._pages = pages or []
        self._error = error
        self.llamadas: list[Path] = []

    @property
    def name(self) -> str:
        return "fake"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix == ".fake"

    def extract(self, file_path: Path) -> list[PageText]:
        self.llamadas.append(file_path)
        if self._error is not None:
            raise self._error
        return self._pages


class MemoryLogger(ProcessLogger):
    """Acumula los eventos en una lista para hacer asserts."""

    def __init__(self) -> None:
        self.eventos: list[tuple] = []

    def log_file_received(self, file_path, file_type):
        self.eventos.append(("received", file_path.name, file_type))

    def log_file_skipped(self, file_path, reason):
        self.eventos.append(("skipped", file_path.name))

    def log_extraction_start(self, file_path, extractor_name):
        self.eventos.append(("start", file_path.name, extractor_name))

    def log_extraction_complete(self, file_path, num_pages, num_candidates):
        self.eventos.append(("complete", file_path.name, num_pages, num_candidates))

    def log_error(self, file_path, error):
        self.eventos.append(("error", file_path.name, str(error)))

    def log_iban_valid(self, source, resultado):
        self.eventos.append(("valid", source, resultado.formatted))

    def log_iban_invalid(self, source, resultado):
        self.eventos.append(("invalid", source, resultado.error_code))

    def log_report_written(self, output_path):
        self.eventos.append(("report", output_path))

    def get_summary(self):
        return {"eventos": len(self.eventos)}

    def tipos(self) -> list[str]:
        return [e[0] for e in self.eventos]


@pytest.fixture
def logger() -> MemoryLogger:
    return MemoryLogger()


class TestValidateValues:
    def test_valida_cada_valor(self, logger):
        validator = BatchValidator(text_extractors=[], logger=logger)
        resultado = validator.validate_values(["GB82 WEST 1234 5698 7654 32", "DE1234"])

        assert resultado.archivo == "cli"
        assert [r.is_valid for r in resultado.resultados] == [True, False]
        assert logger.eventos == [
            ("valid", "cli", "GB82 WEST 1234 5698 7654 32"),
            ("invalid", "cli", IbanErrorCode.TOO_SHORT),
        ]

    def test_lista_vacia(self, logger):
        validator = BatchValidator(text_extractors=[], logger=logger)
        resultado = validator.validate_values([])
        assert resultado.resultados == []


class TestProcessFile:
    def test_encuentra_y_valida_candidatos(self, logger, tmp_path):
        extractor = FakeExtractor(
            pages=[
                PageText(page_num=1, text="Beneficiario: NL91 ABNA 0417 1643 00"),
                PageText(page_num=2, text="Otro: GB82WEST12345698765431"),
            ]
        )
        validator = BatchValidator(text_extractors=[extractor], logger=logger)

        resultado = validator.process_file(tmp_path / "estado.fake")

        assert resultado is not None
        assert resultado.archivo == "estado.fake"
        assert [r.iban for r in resultado.resultados] == [
            "NL91 ABNA 0417 1643 00",
            "GB82WEST12345698765431",
        ]
        assert resultado.num_validos == 1
        assert resultado.resultados[1].error_code is IbanErrorCode.CHECKSUM_FAILED
        assert ("complete", "estado.fake", 2, 2) in logger.eventos

    def test_iban_repetido_en_varias_paginas_se_valida_una_vez(self, logger, tmp_path):
        """El encabezado de un estado de cuenta repite el IBAN en cada página."""
        extractor = FakeExtractor(
            pages=[
                PageText(page_num=1, text="Cuenta DE89 3704 0044 0532 0130 00"),
                PageText(page_num=2, text="Cuenta DE89370400440532013000"),
                PageText(page_num=3, text=""),
            ]
        )
        validator = BatchValidator(text_extractors=[extractor], logger=logger)

        resultado = validator.process_file(tmp_path / "estado.fake")

        assert len(resultado.resultados) == 1
        assert resultado.resultados[0].is_valid

    def test_sin_candidatos_devuelve_resultado_vacio(self, logger, tmp_path):
        extractor = FakeExtractor(pages=[PageText(page_num=1, text="Sin datos bancarios")])
        validator = BatchValidator(text_extractors=[extractor], logger=logger)

        resultado = validator.process_file(tmp_path / "factura.fake")

        assert resultado is not None
        assert resultado.resultados == []

    def test_extension_no_soportada_se_descarta(self, logger, tmp_path):
        validator = BatchValidator(text_extractors=[FakeExtractor()], logger=logger)

        assert validator.process_file(tmp_path / "foto.jpg") is None
        assert logger.tipos() == ["received", "skipped"]

    def test_error_de_extraccion_se_registra_y_no_se_propaga(self, logger, tmp_path):
        extractor = FakeExtractor(error=ExtractionError("roto.fake", "PDF corrupto"))
        validator = BatchValidator(text_extractors=[extractor], logger=logger)

        assert validator.process_file(tmp_path / "roto.fake") is None
        assert logger.tipos() == ["received", "start", "error"]
        assert "PDF corrupto" in logger.eventos[-1][2]

    def test_usa_el_primer_extractor_compatible(self, logger, tmp_path):
        primero = FakeExtractor(pages=[PageText(page_num=1, text="")])
        segundo = FakeExtractor(pages=[PageText(page_num=1, text="")])
        validator = BatchValidator(text_extractors=[primero, segundo], logger=logger)

        validator.process_file(tmp_path / "a.fake")

        assert len(primero.llamadas) == 1
        assert segundo.llamadas == []


class TestProcessDirectory:
    def test_procesa_solo_archivos_soportados(self, logger, tmp_path):
        (tmp_path / "a.fake").write_text("x")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.fake").write_text("x")
        (tmp_path / "foto.jpg").write_text("x")

        extractor = FakeExtractor(pages=[PageText(page_num=1, text="GB82WEST12345698765432")])
        validator = BatchValidator(text_extractors=[extractor], logger=logger)

        resultados = validator.process_directory(tmp_path)

        assert [r.archivo for r in resultados] == ["a.fake", "b.fake"]
        assert "skipped" not in logger.tipos()

    def test_ruta_que_no_es_directorio_lanza_error(self, logger, tmp_path):
        validator = BatchValidator(text_extractors=[], logger=logger)
        with pytest.raises(ValueError, match="No es un directorio"):
            validator.process_directory(tmp_path / "no_existe")
