"""
Tabla de especificaciones IBAN por país.

Cada país que emite IBAN fija una longitud TOTAL exacta (país + 2 dígitos
de control + BBAN). Esa longitud es lo único que el validador necesita
del país además del nombre y la bandera para mostrar.

Fuente: registro IBAN de SWIFT (ISO 13616).

Agregar un país = agregar UNA entrada aquí. El validador no se toca.

El lookup es EXACTO: el código debe venir ya en mayúsculas. El validador
normaliza la entrada antes de consultar la tabla.
"""

from collections.abc import Mapping
from types import MappingProxyType

from iban_validator.domain.models.country_spec import CountrySpec

_IBAN_SPECS: dict[str, CountrySpec] = {
    # --- Zona SEPA: Unión Europea ---
    "AT": CountrySpec("Austria", "🇦🇹", 20),
    "BE": CountrySpec("Belgium", "🇧🇪", 16),
    "BG": CountrySpec("Bulgaria", "🇧🇬", 22),
    "CY": CountrySpec("Cyprus", "🇨🇾", 28),
    "CZ": CountrySpec("Czech Republic", "🇨🇿", 24),
    "DE": CountrySpec("Germany", "🇩🇪", 22),
    "DK": CountrySpec("Denmark", "🇩🇰", 18),
    "EE": CountrySpec("Estonia", "🇪🇪", 20),
    "ES": CountrySpec("Spain", "🇪🇸", 24),
    "FI": CountrySpec("Finland", "🇫🇮", 18),
    "FR": CountrySpec("France", "🇫🇷", 27),
    "GR": CountrySpec("Greece", "🇬🇷", 27),
    "HR": CountrySpec("Croatia", "🇭🇷", 21),
    "HU": CountrySpec("Hungary", "🇭🇺", 28),
    "IE": CountrySpec("Ireland", "🇮🇪", 22),
    "IT": CountrySpec("Italy", "🇮🇹", 27),
    "LT": CountrySpec("Lithuania", "🇱🇹", 20),
    "LU": CountrySpec("Luxembourg", "🇱🇺", 20),
    "LV": CountrySpec("Latvia", "🇱🇻", 21),
    "MT": CountrySpec("Malta", "🇲🇹", 31),
    "NL": CountrySpec("Netherlands", "🇳🇱", 18),
    "PL": CountrySpec("Poland", "🇵🇱", 28),
    "PT": CountrySpec("Portugal", "🇵🇹", 25),
    "RO": CountrySpec("Romania", "🇷🇴", 24),
    "SE": CountrySpec("Sweden", "🇸🇪", 24),
    "SI": CountrySpec("Slovenia", "🇸🇮", 19),
    "SK": CountrySpec("Slovakia", "🇸🇰", 24),
    # --- Zona SEPA: fuera de la UE ---
    "AD": CountrySpec("Andorra", "🇦🇩", 24),
    "CH": CountrySpec("Switzerland", "🇨🇭", 21),
    "GB": CountrySpec("United Kingdom", "🇬🇧", 22),
    "GI": CountrySpec("Gibraltar", "🇬🇮", 23),
    "IS": CountrySpec("Iceland", "🇮🇸", 26),
    "LI": CountrySpec("Liechtenstein", "🇱🇮", 21),
    "MC": CountrySpec("Monaco", "🇲🇨", 27),
    "NO": CountrySpec("Norway", "🇳🇴", 15),
    "SM": CountrySpec("San Marino", "🇸🇲", 27),
    "VA": CountrySpec("Vatican City", "🇻🇦", 22),
    # --- Resto de Europa ---
    "AL": CountrySpec("Albania", "🇦🇱", 28),
    "BA": CountrySpec("Bosnia and Herzegovina", "🇧🇦", 20),
    "BY": CountrySpec("Belarus", "🇧🇾", 28),
    "FO": CountrySpec("Faroe Islands", "🇫🇴", 18),
    "GL": CountrySpec("Greenland", "🇬🇱", 18),
    "MD": CountrySpec("Moldova", "🇲🇩", 24),
    "ME": CountrySpec("Montenegro", "🇲🇪", 22),
    "MK": CountrySpec("North Macedonia", "🇲🇰", 19),
    "RS": CountrySpec("Serbia", "🇷🇸", 22),
    "RU": CountrySpec("Russia", "🇷🇺", 33),
    "UA": CountrySpec("Ukraine", "🇺🇦", 29),
    "XK": CountrySpec("Kosovo", "🇽🇰", 20),
    # --- Cáucaso y Asia ---
    "AZ": CountrySpec("Azerbaijan", "🇦🇿", 28),
    "GE": CountrySpec("Georgia", "🇬🇪", 22),
    "KZ": CountrySpec("Kazakhstan", "🇰🇿", 20),
    "MN": CountrySpec("Mongolia", "🇲🇳", 20),
    "PK": CountrySpec("Pakistan", "🇵🇰", 24),
    "TL": CountrySpec("Timor-Leste", "🇹🇱", 23),
    "TR": CountrySpec("Turkey", "🇹🇷", 26),
    # --- Medio Oriente ---
    "AE": CountrySpec("United Arab Emirates", "🇦🇪", 23),
    "BH": CountrySpec("Bahrain", "🇧🇭", 22),
    "IL": CountrySpec("Israel", "🇮🇱", 23),
    "IQ": CountrySpec("Iraq", "🇮🇶", 23),
    "JO": CountrySpec("Jordan", "🇯🇴", 30),
    "KW": CountrySpec("Kuwait", "🇰🇼", 30),
    "LB": CountrySpec("Lebanon", "🇱🇧", 28),
    "OM": CountrySpec("Oman", "🇴🇲", 23),
    "PS": CountrySpec("Palestine", "🇵🇸", 29),
    "QA": CountrySpec("Qatar", "🇶🇦", 29),
    "SA": CountrySpec("Saudi Arabia", "🇸🇦", 24),
    "YE": CountrySpec("Yemen", "🇾🇪", 30),
    # --- África ---
    "BI": CountrySpec("Burundi", "🇧🇮", 27),
    "DJ": CountrySpec("Djibouti", "🇩🇯", 27),
    "EG": CountrySpec("Egypt", "🇪🇬", 29),
    "LY": CountrySpec("Libya", "🇱🇾", 25),
    "MR": CountrySpec("Mauritania", "🇲🇷", 27),
    "MU": CountrySpec("Mauritius", "🇲🇺", 30),
    "SC": CountrySpec("Seychelles", "🇸🇨", 31),
    "SD": CountrySpec("Sudan", "🇸🇩", 18),
    "SO": CountrySpec("Somalia", "🇸🇴", 23),
    "ST": CountrySpec("São Tomé and Príncipe", "🇸🇹", 25),
    "TN": CountrySpec("Tunisia", "🇹🇳", 24),
    # --- América ---
    "BR": CountrySpec("Brazil", "🇧🇷", 29),
    "CR": CountrySpec("Costa Rica", "🇨🇷", 22),
    "DO": CountrySpec("Dominican Republic", "🇩🇴", 28),
    "FK": CountrySpec("Falkland Islands", "🇫🇰", 18),
    "GT": CountrySpec("Guatemala", "🇬🇹", 28),
    "HN": CountrySpec("Honduras", "🇭🇳", 28),
    "LC": CountrySpec("Saint Lucia", "🇱🇨", 32),
    "NI": CountrySpec("Nicaragua", "🇳🇮", 28),
    "SV": CountrySpec("El Salvador", "🇸🇻", 28),
    "VG": CountrySpec("British Virgin Islands", "🇻🇬", 24),
}

# Vista de solo lectura. Se crea una vez al importar el módulo.
IBAN_SPECS: Mapping[str, CountrySpec] = MappingProxyType(_IBAN_SPECS)


def get_country_spec(country_code: str) -> CountrySpec | None:
    """Busca la especificación de un país por su código exacto.

    Un código ausente NO es un error del sistema: es un IBAN de un país
    no soportado, y el validador lo reporta como fallo de validación.
    Por eso devuelve None en vez de lanzar excepción.

    Ejemplos:
        >>> get_country_spec("DE").length
        22
        >>> get_country_spec("de") is None
        True
        >>> get_country_spec("XX") is None
        True
    """
    return _IBAN_SPECS.get(country_code)


def supported_countries() -> list[str]:
    """Códigos de país soportados, ordenados alfabéticamente."""
    return sorted(_IBAN_SPECS.keys())
