"""
Tests para iban_validator.domain.shared.checksum

mod97() procesa el número en bloques de 9 caracteres. Los casos de borde
(último bloque corto, residuo final de 1-2 caracteres) se prueban contra
el resultado del módulo directo con enteros de Python: el procesamiento
por bloques debe dar EXACTAMENTE lo mismo.
"""

import pytest

from iban_validator.domain.shared.checksum import (
    CHUNK_SIZE,
    compute_check_digits,
    iban_checksum,
    letters_to_digits,
    mod97,
    rearrange,
)


class TestMod97:
    """Pruebas para mod97 (por bloques de 9)."""

    def test_iban_de_referencia_da_uno(self):
        # GB82WEST12345698765432 reordenado y con letras sustituidas
        assert mod97("3214282912345698765432161182") == 1

    @pytest.mark.parametrize(
        "digits, expected",
        [
            ("0", 0),
            ("12", 12),
            ("97", 0),
            ("98", 1),
            ("100", 3),
            ("1234567890", 2),
        ],
    )
    def test_valores_pequenos(self, digits, expected):
        assert mod97(digits) == expected

    @pytest.mark.parametrize(
        "digits",
        [
            "123456789",  # exactamente un bloque
            "1234567891",  # un bloque + 1 dígito
            "12345678901234567",  # último bloque corto
            "000000000000000000001",  # ceros a la izquierda
            "9" * 40,  # más largo que cualquier IBAN
            "100000000000000000000000000000000000",
        ],
    )
    def test_coincide_con_modulo_directo(self, digits):
        """El procesamiento por bloques no cambia el resultado."""
        assert mod97(digits) == int(digits) % 97

    def test_chunk_size_es_nueve(self):
        assert CHUNK_SIZE == 9


class TestLettersToDigits:
    """Pruebas para la sustitución A=10 ... Z=35."""

    def test_extremos_del_alfabeto(self):
        assert letters_to_digits("A") == "10"
        assert letters_to_digits("Z") == "35"

    def test_digitos_pasan_sin_cambio(self):
        assert letters_to_digits("0123456789") == "0123456789"

    def test_mezcla(self):
        assert letters_to_digits("WEST12") == "3214282912"
        assert letters_to_digits("GB82") == "161182"


class TestRearrange:
    def test_mueve_cuatro_primeros_al_final(self):
        assert rearrange("GB82WEST12345698765432") == "WEST12345698765432GB82"


class TestIbanChecksum:
    @pytest.mark.parametrize(
        "iban",
        [
            "GB82WEST12345698765432",
            "DE89370400440532013000",
            "FR1420041010050500013M02606",
            "NL91ABNA0417164300",
            "NO9386011117947",
        ],
    )
    def test_ibans_validos_dan_uno(self, iban):
        assert iban_checksum(iban) == 1

    def test_iban_alterado_no_da_uno(self):
        assert iban_checksum("GB82WEST12345698765431") != 1


class TestComputeCheckDigits:
    """compute_check_digits calcula los dígitos de control de un BBAN."""

    def test_reino_unido(self):
        assert compute_check_digits("GB", "WEST12345698765432") == "82"

    def test_alemania(self):
        assert compute_check_digits("DE", "370400440532013000") == "89"

    def test_siempre_dos_digitos(self):
        digitos = compute_check_digits("XK", "1212012345678906")
        assert len(digitos) == 2
        assert digitos.isdigit()

    def test_iban_armado_es_valido(self):
        bban = "12345678901234567890"
        iban = f"PL{compute_check_digits('PL', bban)}{bban}"
        assert iban_checksum(iban) == 1
