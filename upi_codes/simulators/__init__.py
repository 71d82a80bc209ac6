"""Outcome simulators."""

from upi_codes.simulators.base import BaseSimulator
from upi_codes.simulators.transaction import (
    DEFAULT_SUCCESS_RATE,
    MandateSimulator,
    TransactionSimulator,
    simulate_mandate_registration,
    simulate_transaction,
)

__all__ = [
    "DEFAULT_SUCCESS_RATE",
    "BaseSimulator",
    "MandateSimulator",
    "TransactionSimulator",
    "simulate_mandate_registration",
    "simulate_transaction",
]
