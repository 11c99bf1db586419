"""Application configuration objects and engine constants."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models.settings import AllocationTargets, UserSettings

load_dotenv()

# Simulation limits
MAX_SIMULATION_MONTHS = 600  # 50 years
PAID_OFF_TOLERANCE = 0.01

# Strategy comparison: avalanche wins only when it saves more than this much interest
RECOMMENDATION_THRESHOLD = 1000.0

# Rule catalogue cutoffs
HIGH_APR_THRESHOLD = 0.15
EMERGENCY_FUND_HIGH_MONTHS = 3
EMERGENCY_FUND_MEDIUM_MONTHS = 5
CC_UTILIZATION_HIGH_PERCENT = 100
CC_UTILIZATION_MEDIUM_PERCENT = 50
EMI_INCOME_HIGH_PERCENT = 50
EMI_INCOME_MEDIUM_PERCENT = 40
SAVINGS_RATE_TARGET_PERCENT = 20
SAVINGS_RATE_MEDIUM_PERCENT = 5
ALLOCATION_DRIFT_THRESHOLD = 10  # percentage points


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a numeric environment variable, falling back to *default*."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be numeric, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "fintrack"
    LOG_FILENAME = "fintrack.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("FINTRACK_DEV_MODE", default=True)
        self.EMERGENCY_FUND_MONTHS_TARGET = _env_float("FINTRACK_EMERGENCY_FUND_MONTHS", 6.0)
        self.EMI_TO_INCOME_MAX_PERCENT = _env_float("FINTRACK_EMI_TO_INCOME_MAX_PERCENT", 35.0)
        self.CC_UTILIZATION_MAX_PERCENT = _env_float("FINTRACK_CC_UTILIZATION_MAX_PERCENT", 30.0)

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("FINTRACK_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()

    def default_settings(self) -> UserSettings:
        """Build user thresholds from the environment-backed defaults."""

        return UserSettings(
            emergency_fund_months_target=self.EMERGENCY_FUND_MONTHS_TARGET,
            emi_to_income_max_percent=self.EMI_TO_INCOME_MAX_PERCENT,
            cc_utilization_max_percent=self.CC_UTILIZATION_MAX_PERCENT,
            allocation_targets=AllocationTargets(),
        )


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; logs stay under a temp dir."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self, data_dir: Path | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)
