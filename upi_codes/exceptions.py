"""Custom exception hierarchy for upi-codes."""


class UpiCodesError(Exception):
    """Base exception for all upi-codes errors."""


class InvalidArgumentError(UpiCodesError, ValueError):
    """Raised when an argument falls outside its closed set of values."""


class CodeTableError(UpiCodesError):
    """Raised when a code table is malformed at construction."""


class ConfigurationError(UpiCodesError):
    """Raised when configuration is invalid or missing."""
