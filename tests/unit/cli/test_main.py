"""
Tests del CLI (iban_validator.cli.main).

Se llama a main() con una lista de argumentos y se revisa el código de
salida y lo impreso en consola.
"""

import pandas as pd

from iban_validator.cli.main import main


class TestIbansComoArgumentos:
    def test_todos_validos_sale_con_cero(self, capsys):
        codigo = main(["GB82 WEST 1234 5698 7654 32", "DE89370400440532013000"])
        out = capsys.readouterr().out
        assert codigo == 0
        assert "IBANs válidos:        2" in out

    def test_alguno_invalido_sale_con_uno(self, capsys):
        codigo = main(["GB82WEST12345698765432", "GB82WEST12345698765431"])
        out = capsys.readouterr().out
        assert codigo == 1
        assert "Invalid checksum (MOD-97-10 check failed)" in out

    def test_sin_argumentos(self, capsys):
        assert main([]) == 1
        assert "al menos un IBAN" in capsys.readouterr().out

    def test_quiet_oculta_validos(self, capsys):
        main(["-q", "NL91ABNA0417164300"])
        out = capsys.readouterr().out
        assert "NL91 ABNA 0417 1643 00" not in out
        assert "RESUMEN DE VALIDACIÓN" in out


class TestArchivos:
    def test_archivo_txt(self, tmp_path, capsys):
        archivo = tmp_path / "ibans.txt"
        archivo.write_text("NL91ABNA0417164300\nBE68 5390 0754 7034\n", encoding="utf-8")

        assert main(["-f", str(archivo)]) == 0
        assert "ibans.txt" in capsys.readouterr().out

    def test_directorio(self, tmp_path):
        (tmp_path / "a.txt").write_text("NL91ABNA0417164300\n", encoding="utf-8")
        (tmp_path / "b.csv").write_text("IBAN\nDE1234\n", encoding="utf-8")

        assert main(["-f", str(tmp_path)]) == 1

    def test_ruta_inexistente(self, tmp_path, capsys):
        assert main(["-f", str(tmp_path / "no_existe.txt")]) == 1
        assert "La ruta no existe" in capsys.readouterr().out

    def test_archivo_sin_ibans(self, tmp_path, capsys):
        archivo = tmp_path / "vacio.txt"
        archivo.write_text("\n\n", encoding="utf-8")

        assert main(["-f", str(archivo)]) == 1
        assert "No se encontró ningún IBAN" in capsys.readouterr().out

    def test_archivos_y_argumentos_juntos(self, tmp_path):
        archivo = tmp_path / "ibans.txt"
        archivo.write_text("NL91ABNA0417164300\n", encoding="utf-8")

        assert main(["AT611904300234573201", "-f", str(archivo)]) == 0


class TestReporte:
    def test_genera_excel(self, tmp_path, capsys):
        salida = tmp_path / "reporte.xlsx"

        codigo = main(["GB82WEST12345698765432", "DE1234", "-o", str(salida)])

        assert codigo == 1
        assert salida.exists()
        assert "Reporte generado" in capsys.readouterr().out
        df = pd.read_excel(salida, sheet_name="Validaciones")
        assert list(df["Válido"]) == ["SI", "NO"]
        assert list(df["Archivo"]) == ["cli", "cli"]
