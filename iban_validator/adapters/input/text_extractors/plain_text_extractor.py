"""
Adaptador de entrada: Extractor de archivos de texto plano.

Maneja listas de IBANs exportadas de otros sistemas:
- .txt: un IBAN por línea.
- .csv: el IBAN en la primera columna. Un encabezado "IBAN" se ignora.

A diferencia del extractor de PDFs, aquí cada línea ES un candidato,
aunque no tenga forma de IBAN. Así una línea mal escrita ("DE89 370")
aparece en el reporte como inválida en vez de desaparecer.
"""

import csv
import io
from pathlib import Path

from iban_validator.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_validator.domain.models.page_text import PageText
from iban_validator.domain.ports.text_extractor import TextExtractor
from iban_validator.domain.shared.text_cleaner import clean_extracted_text, split_lines

_EXTENSIONES = (".txt", ".csv")


class PlainTextExtractor(TextExtractor):
    """Lee archivos .txt / .csv con un IBAN por línea."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Args:
            encoding: Codificación del archivo. Se acepta BOM de UTF-8
                      (Excel lo agrega al exportar CSV).
        """
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "texto-plano"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in _EXTENSIONES

    def extract(self, file_path: Path) -> list[PageText]:
        """Lee el archivo completo como una sola página.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o la extensión no es .txt/.csv.
            ExtractionError: Si el archivo no se puede decodificar.
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "TXT/CSV", "El archivo no existe")

        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "TXT/CSV",
                f"Extensión inesperada: {file_path.suffix}",
            )

        encoding = "utf-8-sig" if self._encoding.lower() in ("utf-8", "utf8") else self._encoding
        try:
            raw_text = file_path.read_text(encoding=encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(str(file_path), f"No es texto {self._encoding}: {e}")
        except OSError as e:
            raise ExtractionError(str(file_path), str(e))

        text = clean_extracted_text(raw_text)
        if file_path.suffix.lower() == ".csv":
            text = self._first_column(text)

        return [PageText(page_num=1, text=text)]

    def find_candidates(self, page: PageText) -> list[str]:
        """Cada línea no vacía es un candidato."""
        return split_lines(page.text)

    @staticmethod
    def _first_column(text: str) -> str:
        """Deja solo la primera columna del CSV, una por línea.

        El delimitador se detecta con csv.Sniffer (',' o ';'). Si la
        detección falla se asume ','.
        """
        try:
            dialect = csv.Sniffer().sniff(text[:2048], delimiters=",;\t")
        except csv.Error:
            dialect = csv.excel

        celdas: list[str] = []
        for row in csv.reader(io.StringIO(text), dialect):
            if not row:
                continue
            celda = row[0].strip()
            if celda.upper() == "IBAN":
                continue
            celdas.append(celda)
        return "\n".join(celdas)
