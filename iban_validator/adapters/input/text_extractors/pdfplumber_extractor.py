"""
Adaptador de entrada: Extractor de texto usando pdfplumber.

pdfplumber lee PDFs nativos (con texto embebido): estados de cuenta,
facturas, formatos de alta de proveedor. Los IBANs que aparecen ahí se
encuentran después con find_iban_candidates().

Este adaptador:
1. Abre el PDF con pdfplumber.
2. Extrae el texto plano de cada página (extract_text).
3. Lo envuelve en objetos PageText del dominio.

PDFs escaneados (solo imagen) devuelven páginas vacías: no hay OCR.
"""

from pathlib import Path

import pdfplumber
from pdfminer.pdfparser import PDFSyntaxError

from iban_validator.domain.exceptions import ExtractionError, FormatoInvalidoError
from iban_validator.domain.models.page_text import PageText
from iban_validator.domain.ports.text_extractor import TextExtractor
from iban_validator.domain.shared.text_cleaner import clean_extracted_text


class PdfplumberExtractor(TextExtractor):
    """Extrae texto de PDFs nativos usando pdfplumber."""

    def __init__(self, password: str | None = None) -> None:
        """
        Args:
            password: Contraseña para PDFs protegidos. None si no tiene.
        """
        self._password = password

    @property
    def name(self) -> str:
        return "pdfplumber"

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos con extensión .pdf."""
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto de cada página del PDF.

        Returns:
            Lista de PageText, una por página. Páginas sin texto se incluyen
            con text="" para mantener la correspondencia page_num ↔ índice.

        Raises:
            ExtractionError: Si pdfplumber no puede abrir el PDF
                            (corrupto, protegido con contraseña, etc.)
            FormatoInvalidoError: Si el archivo no existe o no es PDF.
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "PDF", "El archivo no existe")

        if file_path.suffix.lower() != ".pdf":
            raise FormatoInvalidoError(
                str(file_path),
                "PDF",
                f"Extensión inesperada: {file_path.suffix}",
            )

        pages: list[PageText] = []

        try:
            with pdfplumber.open(file_path, password=self._password) as pdf:
                if len(pdf.pages) == 0:
                    raise ExtractionError(str(file_path), "El PDF no tiene páginas")

                for page_num, page in enumerate(pdf.pages, start=1):
                    raw_text = page.extract_text() or ""
                    pages.append(PageText(page_num=page_num, text=clean_extracted_text(raw_text)))

        except ExtractionError:
            raise
        except PDFSyntaxError as e:
            raise ExtractionError(str(file_path), f"PDF corrupto o inválido: {e}")
        except Exception as e:
            # pdfplumber/pdfminer lanzan varios tipos según el problema
            # (PDFs protegidos, encoding roto, etc.)
            if "password" in str(e).lower() or "encrypt" in str(e).lower():
                raise ExtractionError(
                    str(file_path),
                    "El PDF está protegido con contraseña. Usar --pdf-password.",
                )
            raise ExtractionError(str(file_path), str(e))

        return pages
