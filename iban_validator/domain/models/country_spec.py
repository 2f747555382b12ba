"""
Modelo de dominio: Especificación IBAN de un país.

Una entrada de la tabla de países (ver domain/shared/country_specs.py).
Es dato puro: cambiar una longitud es corregir datos, no código.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CountrySpec:
    """Nombre, bandera y longitud total del IBAN de un país."""

    name: str
    """Nombre legible del país. Ejemplo: 'Germany'."""

    flag: str
    """Bandera en emoji. Ejemplo: '🇩🇪'."""

    length: int
    """Longitud EXACTA del IBAN completo (país + dígitos de control + BBAN).
    Va de 15 (Noruega) a 33 (Rusia)."""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("El nombre del país no puede estar vacío")
        if self.length <= 4:
            raise ValueError(
                f"Longitud inválida para {self.name}: {self.length}. "
                f"Debe ser mayor a 4 (país + dígitos de control)"
            )
