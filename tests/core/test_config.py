"""Tests for core configuration module."""

import pytest


def test_get_config_summary_returns_string():
    """Config summary should return a formatted string."""
    from aero_erp.core.config import get_config_summary

    summary = get_config_summary()
    assert isinstance(summary, str)
    assert "Import default method" in summary


def test_config_summary_masks_api_key(monkeypatch):
    """The API key itself should never appear in the summary."""
    from aero_erp.core import config

    monkeypatch.setattr(config, "ANTHROPIC_API_KEY", "sk-ant-secret-value")
    summary = config.get_config_summary()

    assert "sk-ant-secret-value" not in summary
    assert "Configured" in summary


def test_output_dir_default():
    """OUTPUT_DIR should have a default value."""
    from aero_erp.core.config import OUTPUT_DIR

    assert OUTPUT_DIR is not None
    assert isinstance(OUTPUT_DIR, str)


def test_default_methods_are_known_values():
    """Both call-path defaults should be valid shipping methods."""
    from aero_erp.core.config import FORM_DEFAULT_METHOD, IMPORT_DEFAULT_METHOD

    assert IMPORT_DEFAULT_METHOD in ("Air", "Sea", "Rail")
    assert FORM_DEFAULT_METHOD in ("Air", "Sea", "Rail")


def test_validate_config_exits_without_api_key(monkeypatch):
    """Missing API key should stop the AI commands."""
    from aero_erp.core import config

    monkeypatch.setattr(config, "ANTHROPIC_API_KEY", None)
    with pytest.raises(SystemExit):
        config.validate_config()


def test_validate_config_rejects_unknown_method(monkeypatch, capsys):
    """A misspelled default method should be reported."""
    from aero_erp.core import config

    monkeypatch.setattr(config, "ANTHROPIC_API_KEY", "key")
    monkeypatch.setattr(config, "FORM_DEFAULT_METHOD", "Boat")
    with pytest.raises(SystemExit):
        config.validate_config()
    assert "FORM_DEFAULT_METHOD" in capsys.readouterr().err


def test_exchange_rate_env_reaches_normalizer_and_calculators(monkeypatch):
    """DEFAULT_EXCHANGE_RATE from the environment is the fallback everywhere."""
    import importlib
    from dataclasses import replace

    from aero_erp.calculators.unit_economics import unit_profit
    from aero_erp.core import config
    from aero_erp.core.normalizer import normalize_product

    monkeypatch.setenv("DEFAULT_EXCHANGE_RATE", "6.5")
    importlib.reload(config)
    try:
        assert config.DEFAULT_EXCHANGE_RATE == 6.5

        product = normalize_product({"price": 10, "financials": {"costOfGoods": 13}})
        assert product.exchangeRate == 6.5

        unrated = replace(product, exchangeRate=0.0)
        assert unit_profit(unrated).goods_cost == pytest.approx(2.0)
    finally:
        monkeypatch.undo()
        importlib.reload(config)
