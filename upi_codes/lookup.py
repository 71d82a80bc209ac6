"""Case-insensitive resolution of UPI codes to their records.

Lookups never raise for codes missing from the tables: an unrecognized code
comes back as a default record so callers can treat it as data.
"""

from upi_codes.logging import get_logger
from upi_codes.models import Category, CodeRecord, DisputeRecord, EdgeCaseAdvice, Status
from upi_codes.tables import (
    CHARGEBACK,
    DEFAULT_TAT,
    DISPUTE_REASON_CODES,
    MANDATE_ERROR_CODES,
    UPI_ERROR_CODES,
)

logger = get_logger(__name__)

UNKNOWN_DESCRIPTION = "Unknown"
UNKNOWN_HANDLING = "Contact support"
UNKNOWN_DISPUTE_DESCRIPTION = "Unknown Dispute"
UNKNOWN_DISPUTE_FLAG = "Unknown"

PENDING_SUFFIX = "Monitor for resolution."
RETRY_SUFFIX = "Retry after a short delay."
USER_ACTION_SUFFIX = "User intervention required; do not retry automatically."


def normalize_code(code: str) -> str:
    """Canonical table key for ``code``."""
    return code.upper()


def get_code_info(code: str) -> CodeRecord:
    """Resolve a general or mandate response code.

    The general table is consulted before the mandate table.

    Parameters
    ----------
    code : str
        Response code in any case.

    Returns
    -------
    CodeRecord
        The matching record, or a rejected ``Unknown`` record carrying the
        normalized code.
    """
    key = normalize_code(code)
    record = UPI_ERROR_CODES.get(key) or MANDATE_ERROR_CODES.get(key)
    if record is not None:
        return record

    logger.debug("Unknown response code %r", key, extra={"extra": {"code": key, "table": "response"}})
    return CodeRecord(
        code=key,
        description=UNKNOWN_DESCRIPTION,
        category=Category.TECHNICAL,
        status=Status.REJECTED,
        handling=UNKNOWN_HANDLING,
    )


def get_dispute_info(code: str) -> DisputeRecord:
    """Resolve a chargeback reason code.

    Parameters
    ----------
    code : str
        Dispute reason code in any case.

    Returns
    -------
    DisputeRecord
        The matching record, or an ``Unknown Dispute`` chargeback with the
        default turnaround time.
    """
    key = normalize_code(code)
    record = DISPUTE_REASON_CODES.get(key)
    if record is not None:
        return record

    logger.debug("Unknown dispute reason code %r", key, extra={"extra": {"code": key, "table": "dispute"}})
    return DisputeRecord(
        code=key,
        description=UNKNOWN_DISPUTE_DESCRIPTION,
        dispute_type=CHARGEBACK,
        tat=DEFAULT_TAT,
        flag=UNKNOWN_DISPUTE_FLAG,
    )


def handle_edge_case(code: str) -> EdgeCaseAdvice:
    """Extend a code's handling text with a follow-up rule.

    Rules are checked in order and the first match wins:

    1. pending status: monitor for resolution
    2. technical category (including ``Business/Technical``) and rejected:
       retry after a short delay
    3. business category: user intervention, no automatic retry

    Category checks are substring matches on the label, so the compound
    ``Business/Technical`` category always lands on the retry rule.
    """
    info = get_code_info(code)
    category = info.category.value
    action = info.handling

    if info.status == Status.PENDING:
        action = f"{action} {PENDING_SUFFIX}"
    elif Category.TECHNICAL.value in category and info.status == Status.REJECTED:
        action = f"{action} {RETRY_SUFFIX}"
    elif Category.BUSINESS.value in category:
        action = f"{action} {USER_ACTION_SUFFIX}"

    return EdgeCaseAdvice(code=info.code, suggested_action=action)
