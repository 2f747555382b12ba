"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from iban_validator.domain.ports import TextExtractor, OutputWriter, ProcessLogger
"""

from iban_validator.domain.ports.output_writer import OutputWriter
from iban_validator.domain.ports.process_logger import ProcessLogger
from iban_validator.domain.ports.text_extractor import TextExtractor

__all__ = [
    "OutputWriter",
    "ProcessLogger",
    "TextExtractor",
]
