import logging

import pytest

from vdf_engine.utils import EnvironmentManager, EnvironmentVariables, configure_logging


def test_defaults(monkeypatch):
    """Test the defaults used by the command line driver."""
    for var in EnvironmentVariables:
        monkeypatch.delenv(var.env_name, raising=False)

    assert EnvironmentManager.get_int(EnvironmentVariables.GENERATOR) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.TABLE_MODULUS) == 101
    assert EnvironmentManager.get_int(EnvironmentVariables.KAPPA) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.GAMMA) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.SECRET_ORDER) == 101
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "WARNING"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("VDF_GAMMA", "8")
    assert EnvironmentManager.get_int(EnvironmentVariables.GAMMA) == 8


def test_override_default(monkeypatch):
    monkeypatch.delenv("VDF_KAPPA", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.KAPPA, 5) == 5


def test_invalid_int_falls_back_to_default(monkeypatch, caplog):
    monkeypatch.setenv("VDF_KAPPA", "wide")
    with caplog.at_level(logging.WARNING):
        assert EnvironmentManager.get_int(EnvironmentVariables.KAPPA) == 2
    assert "VDF_KAPPA" in caplog.text


@pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), ("INFO", logging.INFO), ("nonsense", logging.WARNING)])
def test_configure_logging(monkeypatch, level, expected):
    monkeypatch.setenv("LOG_LEVEL", level)
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    root.handlers[:] = []
    try:
        assert configure_logging() == expected
        assert root.level == expected
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
