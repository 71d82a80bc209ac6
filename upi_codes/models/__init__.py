"""Domain models for UPI outcome codes."""

from upi_codes.models.enums import Category, Status, TransactionType
from upi_codes.models.records import (
    MANDATE_REGISTRATION,
    CodeRecord,
    DisputeRecord,
    EdgeCaseAdvice,
    SimulatedOutcome,
)

__all__ = [
    "MANDATE_REGISTRATION",
    "Category",
    "CodeRecord",
    "DisputeRecord",
    "EdgeCaseAdvice",
    "SimulatedOutcome",
    "Status",
    "TransactionType",
]
