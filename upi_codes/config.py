"""Configuration management for upi-codes."""

import os
from dataclasses import dataclass

from upi_codes.exceptions import ConfigurationError


@dataclass
class SimulationConfig:
    """Settings for the outcome simulators and the demo script."""

    success_rate: float = 0.8
    mandate_success_rate: float = 0.8
    seed: int | None = None
    locale: str = "en_IN"
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Create config from environment variables."""
        seed = os.getenv("SEED")

        return cls(
            success_rate=_env_float("UPI_SUCCESS_RATE", 0.8),
            mandate_success_rate=_env_float("UPI_MANDATE_SUCCESS_RATE", 0.8),
            seed=_parse(int, "SEED", seed) if seed else None,
            locale=os.getenv("FAKER_LOCALE", "en_IN"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    return _parse(float, name, raw)


def _parse(kind: type, name: str, raw: str):
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a valid {kind.__name__}, got {raw!r}") from e
