"""Reference tables and lookups for UPI transaction outcome codes."""

from upi_codes.exceptions import (
    CodeTableError,
    ConfigurationError,
    InvalidArgumentError,
    UpiCodesError,
)
from upi_codes.lookup import get_code_info, get_dispute_info, handle_edge_case
from upi_codes.models import (
    MANDATE_REGISTRATION,
    Category,
    CodeRecord,
    DisputeRecord,
    EdgeCaseAdvice,
    SimulatedOutcome,
    Status,
    TransactionType,
)
from upi_codes.simulators import (
    MandateSimulator,
    TransactionSimulator,
    simulate_mandate_registration,
    simulate_transaction,
)
from upi_codes.tables import DISPUTE_REASON_CODES, MANDATE_ERROR_CODES, UPI_ERROR_CODES

__version__ = "0.1.0"

__all__ = [
    "DISPUTE_REASON_CODES",
    "MANDATE_ERROR_CODES",
    "MANDATE_REGISTRATION",
    "UPI_ERROR_CODES",
    "Category",
    "CodeRecord",
    "CodeTableError",
    "ConfigurationError",
    "DisputeRecord",
    "EdgeCaseAdvice",
    "InvalidArgumentError",
    "MandateSimulator",
    "SimulatedOutcome",
    "Status",
    "TransactionSimulator",
    "TransactionType",
    "UpiCodesError",
    "get_code_info",
    "get_dispute_info",
    "handle_edge_case",
    "simulate_mandate_registration",
    "simulate_transaction",
]
