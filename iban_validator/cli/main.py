"""
Punto de entrada CLI: iban-validator.

Uso:
    # Validar IBANs sueltos
    iban-validator "GB82 WEST 1234 5698 7654 32" DE89370400440532013000

    # Validar un archivo (.txt/.csv un IBAN por línea, o un PDF)
    iban-validator -f /ruta/beneficiarios.csv

    # Validar todos los archivos de una carpeta y generar reporte Excel
    iban-validator -f /ruta/carpeta -o /ruta/reporte.xlsx

Código de salida:
    0 → todos los IBANs son válidos.
    1 → hubo algún IBAN inválido, o no se pudo procesar nada.

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PlainTextExtractor, ExcelWriter, etc.)
- Las inyecta en el BatchValidator.
- Ejecuta la validación.

No contiene lógica de negocio, solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from iban_validator.adapters.input.text_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from iban_validator.adapters.input.text_extractors.plain_text_extractor import (
    PlainTextExtractor,
)
from iban_validator.adapters.output.loggers.console_logger import ConsoleLogger
from iban_validator.adapters.output.writers.excel_writer import ExcelWriter
from iban_validator.domain.exceptions import OutputError
from iban_validator.domain.models.resultado_archivo import ResultadoArchivo
from iban_validator.domain.services.batch_validator import BatchValidator
from iban_validator.domain.shared.country_specs import supported_countries


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        Código de salida (0 = todo válido, 1 = algo inválido o sin datos).
    """
    args = _parse_args(argv)

    if not args.ibans and args.input_path is None:
        print("❌ Indica al menos un IBAN o un archivo con -f.")
        return 1

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=not args.quiet)

    text_extractors = [
        PlainTextExtractor(encoding=args.encoding),
        PdfplumberExtractor(password=args.pdf_password),
    ]

    validator = BatchValidator(text_extractors=text_extractors, logger=logger)

    print("=" * 60)
    print("IBAN VALIDATOR")
    print("=" * 60)
    print(f"  Países soportados: {len(supported_countries())}")
    print()

    # --- Validar ---
    resultados: list[ResultadoArchivo] = []

    if args.ibans:
        resultados.append(validator.validate_values(args.ibans))

    if args.input_path is not None:
        input_path = Path(args.input_path)
        if input_path.is_file():
            resultado = validator.process_file(input_path)
            if resultado is not None:
                resultados.append(resultado)
        elif input_path.is_dir():
            resultados.extend(validator.process_directory(input_path))
        else:
            print(f"❌ La ruta no existe: {input_path}")
            return 1

    total = sum(len(r.resultados) for r in resultados)
    if total == 0:
        print("\n❌ No se encontró ningún IBAN para validar.")
        logger.print_summary()
        return 1

    # --- Reporte ---
    if args.output_path:
        try:
            output_file = ExcelWriter().write(resultados, Path(args.output_path))
        except OutputError as e:
            print(f"\n❌ {e}")
            return 1
        logger.log_report_written(output_file)

    # --- Resumen final ---
    logger.print_summary()

    invalidos = sum(r.num_invalidos for r in resultados)
    return 1 if invalidos else 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="iban-validator",
        description="Validador de IBAN (longitud por país y checksum MOD-97-10)",
        epilog="Ejemplo: iban-validator -f /ruta/ibans.csv -o /ruta/reporte.xlsx",
    )

    parser.add_argument(
        "ibans",
        nargs="*",
        help="IBANs a validar. Si tienen espacios, ponerlos entre comillas.",
    )

    parser.add_argument(
        "-f",
        "--file",
        dest="input_path",
        help="Archivo (.txt, .csv, .pdf) o directorio con archivos a validar.",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        help="Ruta del reporte Excel. Si no se especifica, no se genera reporte.",
    )

    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Codificación de los archivos .txt/.csv (por defecto utf-8).",
    )

    parser.add_argument(
        "--pdf-password",
        dest="pdf_password",
        default=None,
        help="Contraseña para PDFs protegidos.",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Solo muestra IBANs inválidos, errores y el resumen.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
