"""Tests for config and logging."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from upi_codes.config import SimulationConfig
from upi_codes.exceptions import ConfigurationError
from upi_codes.logging import JsonFormatter, get_logger, outcome_log_fields, setup_logging
from upi_codes.models import (
    MANDATE_REGISTRATION,
    Category,
    CodeRecord,
    SimulatedOutcome,
    Status,
    TransactionType,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSimulationConfig:
    """Tests for SimulationConfig."""

    def test_default_values(self) -> None:
        config = SimulationConfig()

        assert config.success_rate == 0.8
        assert config.mandate_success_rate == 0.8
        assert config.seed is None
        assert config.locale == "en_IN"
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            config = SimulationConfig.from_env()

        assert config == SimulationConfig()

    def test_from_env_custom(self) -> None:
        env = {
            "UPI_SUCCESS_RATE": "0.5",
            "UPI_MANDATE_SUCCESS_RATE": "0.25",
            "SEED": "7",
            "FAKER_LOCALE": "en_US",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict("os.environ", env, clear=True):
            config = SimulationConfig.from_env()

        assert config.success_rate == 0.5
        assert config.mandate_success_rate == 0.25
        assert config.seed == 7
        assert config.locale == "en_US"
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_rate(self) -> None:
        with patch.dict("os.environ", {"UPI_SUCCESS_RATE": "most"}, clear=True):
            with pytest.raises(ConfigurationError, match="UPI_SUCCESS_RATE"):
                SimulationConfig.from_env()

    def test_from_env_invalid_seed(self) -> None:
        with patch.dict("os.environ", {"SEED": "1.5"}, clear=True):
            with pytest.raises(ConfigurationError, match="SEED must be a valid int"):
                SimulationConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("upi_codes").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        handlers = logging.getLogger().handlers
        assert any(isinstance(h.formatter, JsonFormatter) for h in handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_faker_logger_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="upi_codes.lookup",
            level=kwargs.pop("level", logging.INFO),
            pathname="/path/to/lookup.py",
            lineno=42,
            msg=kwargs.pop("msg", "Unknown response code %r"),
            args=kwargs.pop("args", ("ZZ",)),
            exc_info=kwargs.pop("exc_info", None),
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "upi_codes.lookup"
        assert data["message"] == "Unknown response code 'ZZ'"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = self._record(level=logging.ERROR, msg="Error occurred", args=(), exc_info=exc_info)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"code": "ZZ"}

        data = json.loads(JsonFormatter().format(record))

        assert data["code"] == "ZZ"


class TestOutcomeLogFields:
    """Tests for outcome_log_fields."""

    def test_flattens_enums(self) -> None:
        record = CodeRecord("091", "Timeout", Category.TECHNICAL, Status.PENDING, "Wait; do not reinitiate.")
        outcome = SimulatedOutcome.from_record(TransactionType.PAY, record, transaction_id="t-1", rrn="123456789012")

        assert outcome_log_fields(outcome) == {
            "extra": {
                "transaction_type": "Pay Request (Push)",
                "code": "091",
                "status": "Pending",
                "category": "Technical",
                "rrn": "123456789012",
                "transaction_id": "t-1",
            }
        }

    def test_mandate_label_passes_through(self) -> None:
        record = CodeRecord("AP39", "OTP invalid", Category.TECHNICAL, Status.REJECTED, "")
        outcome = SimulatedOutcome.from_record(MANDATE_REGISTRATION, record)

        assert outcome_log_fields(outcome)["extra"]["transaction_type"] == "Mandate Registration"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("upi_codes.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "upi_codes.test"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("upi_codes.same") is get_logger("upi_codes.same")


class TestPackageInit:
    """Tests for upi_codes __init__.py."""

    def test_version_exported(self) -> None:
        from upi_codes import __version__

        assert isinstance(__version__, str)

    def test_public_surface(self) -> None:
        import upi_codes

        for name in upi_codes.__all__:
            assert hasattr(upi_codes, name)
