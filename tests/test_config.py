"""Tests for environment-backed configuration."""

from __future__ import annotations

import pytest

from fintrack.config import BaseConfig, TestConfig
from fintrack.models import AllocationTargets


def test_default_settings_match_dashboard_defaults(monkeypatch):
    for name in (
        "FINTRACK_EMERGENCY_FUND_MONTHS",
        "FINTRACK_EMI_TO_INCOME_MAX_PERCENT",
        "FINTRACK_CC_UTILIZATION_MAX_PERCENT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = BaseConfig().default_settings()

    assert settings.emergency_fund_months_target == 6
    assert settings.emi_to_income_max_percent == 35
    assert settings.cc_utilization_max_percent == 30
    assert settings.allocation_targets == AllocationTargets()
    assert sum(settings.allocation_targets.as_dict().values()) == 100


def test_thresholds_read_from_environment(monkeypatch):
    monkeypatch.setenv("FINTRACK_EMERGENCY_FUND_MONTHS", "9")
    monkeypatch.setenv("FINTRACK_CC_UTILIZATION_MAX_PERCENT", "20")

    settings = BaseConfig().default_settings()

    assert settings.emergency_fund_months_target == 9.0
    assert settings.cc_utilization_max_percent == 20.0


def test_non_numeric_threshold_rejected(monkeypatch):
    monkeypatch.setenv("FINTRACK_EMI_TO_INCOME_MAX_PERCENT", "lots")

    with pytest.raises(ValueError, match="FINTRACK_EMI_TO_INCOME_MAX_PERCENT"):
        BaseConfig()


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("off", False), ("no", False)])
def test_dev_mode_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("FINTRACK_DEV_MODE", raw)

    assert BaseConfig().DEV_MODE is expected


def test_test_config_overrides_data_dir(tmp_path):
    assert TestConfig(data_dir=tmp_path).DATA_DIR == tmp_path


def test_settings_to_dict_uses_camel_case():
    payload = BaseConfig().default_settings().to_dict()

    assert set(payload) == {
        "emergencyFundMonthsTarget",
        "emiToIncomeMaxPercent",
        "ccUtilizationMaxPercent",
        "allocationTargets",
    }
