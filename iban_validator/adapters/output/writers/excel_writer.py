"""
Adaptador de salida: Escritor de Excel.

Genera el reporte de validación con el layout estándar de 2 hojas:
- Hoja 1 (Resumen): totales por archivo y por tipo de error.
- Hoja 2 (Validaciones): una fila por IBAN con su descomposición.

Se usa pandas para armar las tablas y xlsxwriter como motor para el
formato de columnas.
"""

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from iban_validator.domain.exceptions import OutputError
from iban_validator.domain.models.resultado_archivo import ResultadoArchivo
from iban_validator.domain.models.resumen_validacion import ResumenValidacion
from iban_validator.domain.models.validation_result import IbanErrorCode
from iban_validator.domain.ports.output_writer import OutputWriter

COLUMNAS_VALIDACIONES = [
    "Archivo",
    "IBAN",
    "Válido",
    "Formato",
    "País",
    "Nombre País",
    "Bandera",
    "BBAN",
    "Código Banco",
    "Número Cuenta",
    "Error",
]

COLUMNAS_RESUMEN = [
    "Archivo",
    "Total",
    "Válidos",
    "Inválidos",
    "% Válidos",
] + [code.value for code in IbanErrorCode]

_XLSX_OPTIONS = {"strings_to_formulas": False, "strings_to_urls": False}


class ExcelWriter(OutputWriter):
    """Genera el reporte de validación en Excel."""

    def write(self, resultados: Sequence[ResultadoArchivo], output_path: Path) -> Path:
        """Escribe el reporte de uno o varios orígenes.

        Args:
            resultados: Resultados agrupados por archivo.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.

        Raises:
            OutputError: Si no hay resultados o falla la escritura.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para el reporte")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # Construcción de filas (sin dependencia de Excel, testeable)
    # =================================================================

    @staticmethod
    def filas_validaciones(resultados: Sequence[ResultadoArchivo]) -> list[dict]:
        """Una fila por IBAN. Los campos ausentes quedan como cadena vacía."""
        filas = []
        for resultado_archivo in resultados:
            for r in resultado_archivo.resultados:
                filas.append(
                    {
                        "Archivo": resultado_archivo.archivo,
                        "IBAN": r.iban,
                        "Válido": "SI" if r.is_valid else "NO",
                        "Formato": r.formatted or "",
                        "País": r.country or "",
                        "Nombre País": r.country_name or "",
                        "Bandera": r.flag or "",
                        "BBAN": r.bban or "",
                        "Código Banco": r.bank_code or "",
                        "Número Cuenta": r.account_number or "",
                        "Error": r.error or "",
                    }
                )
        return filas

    @staticmethod
    def filas_resumen(resultados: Sequence[ResultadoArchivo]) -> list[dict]:
        """Una fila por archivo más una fila TOTAL al final.

        Las columnas de error usan el valor de IbanErrorCode
        ('checksum_failed', ...) y valen 0 cuando no hubo ese error.
        """
        filas = []
        todos = []
        for resultado_archivo in resultados:
            todos.extend(resultado_archivo.resultados)
            filas.append(_fila_resumen(resultado_archivo.archivo, resultado_archivo.resultados))
        filas.append(_fila_resumen("TOTAL", todos))
        return filas

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, resultados: Sequence[ResultadoArchivo], output_path: Path) -> None:
        df_validaciones = pd.DataFrame(
            self.filas_validaciones(resultados), columns=COLUMNAS_VALIDACIONES
        )
        df_resumen = pd.DataFrame(self.filas_resumen(resultados), columns=COLUMNAS_RESUMEN)

        # Las celdas guardan el texto tal como vino del archivo: un valor que
        # empieza con "=" o parece URL se escribe como texto, no como fórmula.
        with pd.ExcelWriter(
            output_path,
            engine="xlsxwriter",
            engine_kwargs={"options": _XLSX_OPTIONS},
        ) as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_validaciones.to_excel(writer, index=False, sheet_name="Validaciones")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_validaciones = writer.sheets["Validaciones"]

            # Formato texto: el BBAN y la cuenta pueden empezar con ceros
            text_format = workbook.add_format({"num_format": "@"})
            percent_format = workbook.add_format({"num_format": "0.00"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 30)  # Archivo
            ws_resumen.set_column("B:D", 10)  # Total / Válidos / Inválidos
            ws_resumen.set_column("E:E", 10, percent_format)  # % Válidos
            ws_resumen.set_column("F:J", 20)  # Errores por tipo

            # --- Formato Hoja Validaciones ---
            ws_validaciones.set_column("A:A", 30)  # Archivo
            ws_validaciones.set_column("B:B", 36, text_format)  # IBAN
            ws_validaciones.set_column("C:C", 8)  # Válido
            ws_validaciones.set_column("D:D", 42, text_format)  # Formato
            ws_validaciones.set_column("E:E", 6)  # País
            ws_validaciones.set_column("F:F", 24)  # Nombre País
            ws_validaciones.set_column("G:G", 8)  # Bandera
            ws_validaciones.set_column("H:J", 30, text_format)  # BBAN / Banco / Cuenta
            ws_validaciones.set_column("K:K", 45)  # Error

            ws_validaciones.freeze_panes(1, 0)
            ws_validaciones.autofilter(0, 0, len(df_validaciones), len(COLUMNAS_VALIDACIONES) - 1)


def _fila_resumen(archivo: str, resultados: list) -> dict:
    resumen = ResumenValidacion.from_results(resultados)
    fila = {
        "Archivo": archivo,
        "Total": resumen.total,
        "Válidos": resumen.validos,
        "Inválidos": resumen.invalidos,
        "% Válidos": resumen.porcentaje_validos,
    }
    for code in IbanErrorCode:
        fila[code.value] = resumen.por_error.get(code.value, 0)
    return fila
