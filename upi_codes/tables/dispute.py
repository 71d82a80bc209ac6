"""UPI chargeback reason codes (``U##``)."""

from upi_codes.models import DisputeRecord
from upi_codes.tables.base import build_table

CHARGEBACK = "Chargeback"
DEFAULT_TAT = "T+5"


def _reason(code: str, description: str, tat: str = DEFAULT_TAT) -> DisputeRecord:
    return DisputeRecord(
        code=code,
        description=description,
        dispute_type=CHARGEBACK,
        tat=tat,
        flag=code,
    )


DISPUTE_REASON_CODES = build_table("dispute", [
    _reason("U2", "Credit not Processed"),
    _reason("U3", "Goods/Services not as described/defective"),
    _reason("U4", "Duplicate Processing"),
    _reason("U5", "Fraud"),
    _reason("U6", "Payment not received"),
    _reason("U7", "Incorrect Amount"),
    _reason("U8", "Transaction Debited Twice"),
    _reason("U9", "Paid by Alternate Means"),
    _reason("U10", "Goods/Services not received"),
    _reason("U11", "Other"),
])
