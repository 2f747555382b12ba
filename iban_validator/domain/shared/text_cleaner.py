"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar IBANs y para encontrar IBANs
candidatos dentro de texto extraído de archivos (PDF, .txt, .csv).

Estas funciones NO validan nada (no saben de países ni de checksums).
Solo operan sobre strings puros.
"""

import re

# Dos letras y dos dígitos, seguidos de:
# - 11 a 30 alfanuméricos pegados ("DE89370400440532013000"), o
# - grupos de 4 separados por UN espacio, con un último grupo opcional
#   de 1-4 ("DE89 3704 0044 0532 0130 00").
# Solo mayúsculas: en texto de PDFs los IBANs impresos siempre lo están,
# y así "Gracias" después de un IBAN no se pega al candidato.
_IBAN_CANDIDATE_RE = re.compile(
    r"\b[A-Z]{2}[0-9]{2}"
    r"(?:[A-Z0-9]{11,30}|(?: [A-Z0-9]{4}){2,7}(?: [A-Z0-9]{1,4})?)"
    r"\b"
)

# Espacio en blanco: el \s de Python menos los separadores de
# información (U+001C-U+001F) y NEL (U+0085), más el BOM (U+FEFF).
_WHITESPACE_RE = re.compile(r"(?:[^\S\x1c-\x1f\x85]|\ufeff)")


def normalize_iban(raw: str) -> str:
    """Quita TODOS los caracteres de espacio en blanco y pasa a mayúsculas.

    Incluye espacios, tabs, saltos de línea, espacios Unicode (por ejemplo
    el espacio de no separación que dejan algunos PDFs) y el BOM que Excel
    deja al inicio de un CSV. Los caracteres de control U+001C-U+001F no
    cuentan como espacio: se quedan y la validación los rechaza.

    Ejemplos:
        >>> normalize_iban("  gb82 west 1234 5698 7654 32  ")
        'GB82WEST12345698765432'
        >>> normalize_iban("DE89\\t3704\\n0044")
        'DE8937040044'
        >>> normalize_iban("\\ufeffDE89")
        'DE89'
    """
    return _WHITESPACE_RE.sub("", raw).upper()


def group_in_blocks(text: str, size: int = 4) -> str:
    """Agrupa el texto en bloques de `size` caracteres separados por espacio.

    El último bloque puede ser más corto.

    Ejemplos:
        >>> group_in_blocks("GB82WEST12345698765432")
        'GB82 WEST 1234 5698 7654 32'
        >>> group_in_blocks("")
        ''
    """
    return " ".join(text[i:i + size] for i in range(0, len(text), size))


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Los archivos pueden usar \\r\\n (Windows), \\r (Mac antiguo), o \\n (Unix).
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (control chars) excepto \\n, \\r, \\t.

    Ejemplos:
        >>> remove_non_printable("GB82\\x00WEST")
        'GB82 WEST'
    """
    return "".join(char if (char.isprintable() or char in "\n\r\t") else " " for char in text)


def clean_extracted_text(text: str) -> str:
    """Limpieza estándar que los extractores aplican al texto crudo.

    1. Eliminar caracteres no imprimibles.
    2. Normalizar saltos de línea.
    (No colapsa espacios: se perderían los \\n.)
    """
    return normalize_line_endings(remove_non_printable(text))


def split_lines(text: str) -> list[str]:
    """Líneas no vacías, sin espacios alrededor.

    Ejemplos:
        >>> split_lines("GB82WEST12345698765432\\n\\n  DE89370400440532013000 \\n")
        ['GB82WEST12345698765432', 'DE89370400440532013000']
    """
    return [line.strip() for line in normalize_line_endings(text).split("\n") if line.strip()]


def find_iban_candidates(text: str) -> list[str]:
    """Busca strings con forma de IBAN dentro de un texto libre.

    No valida: un candidato puede tener checksum incorrecto o un país no
    soportado. La validación la hace validate_iban() después.

    Se devuelven los candidatos tal como aparecen en el texto (con sus
    espacios), sin duplicados y en orden de aparición. Dos apariciones
    del mismo IBAN con distinto espaciado cuentan como duplicado.

    Ejemplos:
        >>> find_iban_candidates("Cuenta: DE89 3704 0044 0532 0130 00. Gracias")
        ['DE89 3704 0044 0532 0130 00']
        >>> find_iban_candidates("sin datos bancarios")
        []
    """
    vistos: set[str] = set()
    candidatos: list[str] = []
    for match in _IBAN_CANDIDATE_RE.finditer(text):
        raw = match.group(0)
        clave = normalize_iban(raw)
        if clave in vistos:
            continue
        vistos.add(clave)
        candidatos.append(raw)
    return candidatos
