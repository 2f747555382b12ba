"""
Puerto de entrada: Extractor de texto.

Define el contrato para sacar texto de un archivo y encontrar en él los
IBANs candidatos. Cada tipo de archivo tiene su propio adaptador:

    TextExtractor (interfaz)
    ├── PlainTextExtractor      → .txt / .csv, un IBAN por línea
    └── PdfplumberExtractor     → PDFs nativos (texto embebido)

¿Por qué es una Abstract Base Class (ABC)?
Porque queremos que Python lance un error si alguien crea un adaptador
que no implementa todos los métodos.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from iban_validator.domain.models.page_text import PageText
from iban_validator.domain.shared.text_cleaner import find_iban_candidates


class TextExtractor(ABC):
    """Interfaz para extraer texto (e IBANs candidatos) de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El BatchValidator usa el primer extractor cuyo can_handle
        devuelva True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> list[PageText]:
        """Extrae el texto del archivo, separado por páginas.

        Para archivos sin concepto de "páginas" se devuelve una sola
        PageText con todo el contenido.

        Raises:
            ExtractionError: Si falla la extracción.
            FormatoInvalidoError: Si el archivo no existe o no es del tipo esperado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para logging.

        Ejemplo: 'pdfplumber', 'texto-plano'
        """
        ...

    def find_candidates(self, page: PageText) -> list[str]:
        """IBANs candidatos de una página.

        Por defecto busca patrones con forma de IBAN en texto libre.
        Los extractores de archivos "un IBAN por línea" lo sobreescriben
        para que las líneas mal escritas también se reporten.
        """
        return find_iban_candidates(page.text)
