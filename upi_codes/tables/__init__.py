"""Frozen UPI code tables."""

from upi_codes.tables.base import (
    ALTERNATE_SUCCESS_CODE,
    SUCCESS_CODE,
    build_table,
    failure_codes,
)
from upi_codes.tables.dispute import CHARGEBACK, DEFAULT_TAT, DISPUTE_REASON_CODES
from upi_codes.tables.general import UPI_ERROR_CODES
from upi_codes.tables.mandate import MANDATE_ERROR_CODES

__all__ = [
    "ALTERNATE_SUCCESS_CODE",
    "CHARGEBACK",
    "DEFAULT_TAT",
    "DISPUTE_REASON_CODES",
    "MANDATE_ERROR_CODES",
    "SUCCESS_CODE",
    "UPI_ERROR_CODES",
    "build_table",
    "failure_codes",
]
