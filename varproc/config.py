import logging
import os
from dataclasses import dataclass
from typing import Optional

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover
    load_dotenv = None
else:
    load_dotenv()


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BIAS = 1.0


@dataclass
class Settings:
    calibration_path: str = ""
    log_level: str = DEFAULT_LOG_LEVEL
    use_splines: bool = True
    default_bias: float = DEFAULT_BIAS


def _coerce_float_env(var_name: str, default: float) -> float:
    """Return a float environment variable or a default on failure."""

    raw_value = os.getenv(var_name)
    if raw_value is None:
        return default

    stripped = raw_value.strip()
    if stripped == "":
        return default

    try:
        return float(stripped)
    except ValueError:
        return default


def _coerce_bool_env(var_name: str, default: bool) -> bool:
    raw_value = os.getenv(var_name)
    if raw_value is None or raw_value.strip() == "":
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _coerce_level_env(var_name: str, default: str) -> str:
    raw_value = os.getenv(var_name)
    if raw_value is None:
        return default
    level = raw_value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def load_settings() -> Settings:
    """Load configuration from environment variables."""

    return Settings(
        calibration_path=os.getenv("VARPROC_CALIBRATION_YAML", ""),
        log_level=_coerce_level_env("VARPROC_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        use_splines=_coerce_bool_env("VARPROC_USE_SPLINES", True),
        default_bias=_coerce_float_env("VARPROC_DEFAULT_BIAS", DEFAULT_BIAS),
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the root logger."""

    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_value(explicit: Optional[str], fallback: str) -> str:
    return explicit if explicit not in (None, "") else fallback


__all__ = [
    "Settings",
    "load_settings",
    "configure_logging",
    "resolve_value",
    "DEFAULT_BIAS",
    "DEFAULT_LOG_LEVEL",
]
