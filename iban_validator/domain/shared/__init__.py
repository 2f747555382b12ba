"""
Utilidades compartidas del dominio.

No dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from iban_validator.domain.shared.checksum import mod97, iban_checksum
    from iban_validator.domain.shared.country_specs import IBAN_SPECS, get_country_spec
    from iban_validator.domain.shared.text_cleaner import normalize_iban, find_iban_candidates
"""
