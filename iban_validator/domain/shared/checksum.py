"""
Cálculo MOD-97-10 (ISO 7064) para IBAN.

PROCEDIMIENTO:
1. Mover los 4 primeros caracteres (país + dígitos de control) al final.
2. Sustituir cada letra por su número: A=10, B=11, ..., Z=35.
3. Calcular el residuo módulo 97 del número resultante.
4. El IBAN es válido si el residuo es 1.

El número del paso 3 puede tener más de 30 dígitos. Python soporta enteros
de precisión arbitraria, pero mod97() procesa el número en bloques de 9
dígitos igual que las implementaciones de referencia, y DEBE seguir
haciéndolo así: el resultado sobre entradas de borde (último bloque corto,
residuo final de 1-2 caracteres) tiene que coincidir exactamente.
"""

# 9 dígitos: 10**9 * 97 cabe holgado en un entero de 64 bits.
CHUNK_SIZE = 9


def mod97(digits: str) -> int:
    """Residuo módulo 97 de un string numérico, procesado por bloques.

    Mientras queden más de 2 caracteres:
    - Se toma el bloque de los primeros 9 (o menos si no alcanzan).
    - Se reemplaza por str(int(bloque) % 97), SIN rellenar con ceros,
      seguido del resto del string.
    Con 2 caracteres o menos, se devuelve int(resto) % 97.

    Args:
        digits: String con solo dígitos decimales (ya sin letras).

    Returns:
        Entero entre 0 y 96.

    Ejemplos:
        >>> mod97("3214282912345698765432161182")
        1
        >>> mod97("97")
        0
        >>> mod97("98")
        1
    """
    remainder = digits
    while len(remainder) > 2:
        block = remainder[:CHUNK_SIZE]
        remainder = str(int(block) % 97) + remainder[len(block):]
    return int(remainder) % 97


def letters_to_digits(text: str) -> str:
    """Sustituye cada letra A-Z por su valor (A=10 ... Z=35).

    Los dígitos pasan sin cambio. Se espera texto en mayúsculas y solo
    A-Z / 0-9 (el validador lo garantiza antes de llamar).

    Ejemplos:
        >>> letters_to_digits("WEST12")
        '3214282912'
        >>> letters_to_digits("GB82")
        '161182'
    """
    return "".join(str(ord(char) - 55) if "A" <= char <= "Z" else char for char in text)


def rearrange(iban: str) -> str:
    """Mueve los 4 primeros caracteres al final.

    Ejemplos:
        >>> rearrange("GB82WEST12345698765432")
        'WEST12345698765432GB82'
    """
    return iban[4:] + iban[:4]


def iban_checksum(iban: str) -> int:
    """Residuo MOD-97-10 de un IBAN limpio (mayúsculas, sin espacios).

    Un IBAN correcto da 1.
    """
    return mod97(letters_to_digits(rearrange(iban)))


def compute_check_digits(country_code: str, bban: str) -> str:
    """Calcula los 2 dígitos de control que corresponden a un BBAN.

    Se calcula el checksum con dígitos "00" y se resta de 98.
    Útil para armar IBANs de prueba válidos a partir de un BBAN.

    Ejemplos:
        >>> compute_check_digits("GB", "WEST12345698765432")
        '82'
        >>> compute_check_digits("DE", "370400440532013000")
        '89'
    """
    residuo = iban_checksum(f"{country_code}00{bban}")
    return f"{98 - residuo:02d}"
