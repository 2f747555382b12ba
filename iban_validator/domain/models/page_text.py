"""
Modelo de dominio: Texto extraído de una página.

Puente entre los adaptadores de extracción de texto (pdfplumber, texto
plano) y la búsqueda de IBANs candidatos. El BatchValidator recorre las
páginas en orden, salta las vacías y junta los candidatos de todas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageText:
    """Texto extraído de una página individual de un documento.

    Para archivos sin concepto de "páginas" (.txt, .csv) el extractor
    devuelve una sola PageText con todo el contenido.
    """

    page_num: int
    """Número de página (1-indexed). La primera página es 1, no 0."""

    text: str
    """Texto completo de la página. Puede contener saltos de línea."""

    @property
    def is_empty(self) -> bool:
        """Indica si la página no tiene texto útil."""
        return not self.text.strip()

    def __post_init__(self) -> None:
        if self.page_num < 1:
            raise ValueError(f"page_num es 1-indexed, se recibió: {self.page_num}")
