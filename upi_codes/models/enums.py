"""Enumeration types for UPI outcome codes."""

from enum import Enum


class Status(str, Enum):
    SUCCESS = "Success"
    PENDING = "Pending"
    REJECTED = "Rejected"


class TransactionType(str, Enum):
    PAY = "Pay Request (Push)"
    COLLECT = "Collect Request (Pull)"
    INTENT = "UPI Intent-Based Payment"
    AUTOPAY = "UPI Autopay"
    LITE = "UPI Lite"
    ASBA = "UPI for ASBA"


class Category(str, Enum):
    """Fault attribution for a code.

    ``BUSINESS_TECHNICAL`` marks codes whose fault is ambiguous. Rules that
    classify codes match on substrings of the value, so a compound category
    satisfies both the business and the technical checks.
    """

    SUCCESS = "Success"
    BUSINESS = "Business"
    TECHNICAL = "Technical"
    BUSINESS_TECHNICAL = "Business/Technical"
