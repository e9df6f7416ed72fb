#!/usr/bin/env python3
"""CLI tests (python -m spectral_fatigue)."""

import pytest


@pytest.fixture
def psd_file(tmp_path):
    path = tmp_path / "psd.txt"
    path.write_text("Frequency\tPSD\n10\t1.0\n55\t1.0\n100\t1.0\n", encoding="utf-8")
    return path


class TestCLI:
    """__main__.py"""

    def test_quick_reference(self, capsys):
        from spectral_fatigue.__main__ import main

        assert main([]) == 0
        assert "Quick Reference" in capsys.readouterr().out

    def test_materials(self, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["materials"]) == 0
        out = capsys.readouterr().out
        assert "Structural Steel" in out
        assert "460" in out

    def test_sn_fit_points(self, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["sn-fit", "--points", "1000", "414", "1e6", "230"]) == 0
        out = capsys.readouterr().out
        assert "m               : 11.7" in out

    def test_sn_fit_table(self, tmp_path, capsys):
        from spectral_fatigue.__main__ import main

        table = tmp_path / "sn.txt"
        table.write_text("1000 414\n1000000 230\n", encoding="utf-8")
        assert main(["sn-fit", "--table", str(table)]) == 0
        assert "K" in capsys.readouterr().out

    def test_analyze(self, psd_file, capsys):
        from spectral_fatigue.__main__ import main

        rc = main(["analyze", str(psd_file), "--rm", "460", "--duration", "2", "--unit", "hours"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "3 points" in out
        assert "D_NB" in out
        assert "7200.0 s" in out

    def test_analyze_explicit_params(self, psd_file, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["analyze", str(psd_file), "--m", "5", "--K", "1e14"]) == 0
        assert "m          = 5.0000" in capsys.readouterr().out

    def test_analyze_material_preset(self, psd_file, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["analyze", str(psd_file), "--material", "Structural Steel"]) == 0
        assert "m          = 11.7" in capsys.readouterr().out

    def test_several_sn_sources_rejected(self, psd_file, capsys):
        """one S-N source only; nothing is picked silently"""
        from spectral_fatigue.__main__ import main

        assert main(["analyze", str(psd_file), "--m", "5", "--K", "1e14", "--rm", "460"]) == 1
        err = capsys.readouterr().err
        assert "Error" in err
        assert "--m/--K" in err and "--rm" in err
        assert main(["sn-fit", "--rm", "460", "--points", "1000", "414", "1e6", "230"]) == 1
        assert "only one S-N source" in capsys.readouterr().err

    def test_se_needs_strength_source(self, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["sn-fit", "--points", "1000", "414", "1e6", "230", "--se", "200"]) == 1
        assert "--se" in capsys.readouterr().err
        assert main(["sn-fit", "--material", "Structural Steel", "--se", "200"]) == 0

    def test_missing_sn_source(self, psd_file, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["analyze", str(psd_file)]) == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_points(self, capsys):
        from spectral_fatigue.__main__ import main

        assert main(["sn-fit", "--points", "1000", "200", "1e6", "300"]) == 1
        assert "Invalid S-N data" in capsys.readouterr().err

    def test_degenerate_spectrum(self, tmp_path, capsys):
        from spectral_fatigue.__main__ import main

        path = tmp_path / "zero.txt"
        path.write_text("10 0\n20 0\n", encoding="utf-8")
        assert main(["analyze", str(path), "--rm", "460"]) == 1
        assert "moments are zero" in capsys.readouterr().err

    def test_curve_plot(self, tmp_path, capsys):
        pytest.importorskip("matplotlib")
        from spectral_fatigue.__main__ import main

        out = tmp_path / "sn.png"
        assert main(["curve", "--rm", "460", "--n-points", "20", "--out", str(out)]) == 0
        assert out.exists()
