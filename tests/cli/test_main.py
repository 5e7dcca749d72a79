import pytest

import main


@pytest.fixture(autouse=True)
def environment(monkeypatch):
    """Fixture to run the driver with the default parameters and untouched logging."""
    for name in ("VDF_GENERATOR", "VDF_TABLE_MODULUS", "VDF_KAPPA", "VDF_GAMMA", "VDF_SECRET_ORDER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main, "configure_logging", lambda: None)


def test_main_runs_both_evaluators(capsys):
    assert main.main(["12345", "16"]) == 0

    out = capsys.readouterr().out
    assert "Verification: True" in out
    assert "Optimized y: 90\n" in out
    assert "Optimized π: 0\n" in out
    assert "OptimizedEval Verification: True" in out
    assert "TrapdoorSK Time:" in out
    assert "OptimizedEval Time:" in out


def test_main_uses_environment_parameters(monkeypatch, capsys):
    monkeypatch.setenv("VDF_GAMMA", "4")
    assert main.main(["12345", "16"]) == 0

    # table (2, 37, 78) with every block selected: y = g * 15^4 (mod 101)
    assert "Optimized y: 10\n" in capsys.readouterr().out


@pytest.mark.parametrize("argv, message", [(["12x", "16"], "Invalid value for x: 12x"), (["12345", "-3"], "Invalid value for t: -3")])
def test_main_rejects_malformed_integers(capsys, argv, message):
    assert main.main(argv) == 1
    assert message in capsys.readouterr().out


def test_main_reports_invalid_parameters(capsys):
    assert main.main(["12345", "0"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_main_requires_two_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["12345"])
    assert excinfo.value.code == 2
