"""Record types returned by code lookups and simulations."""

from dataclasses import dataclass, fields

from upi_codes.models.enums import Category, Status, TransactionType

MANDATE_REGISTRATION = "Mandate Registration"


@dataclass(frozen=True)
class CodeRecord:
    """Outcome code with its meaning and recommended handling."""

    code: str  # canonical, uppercased
    description: str
    category: Category
    status: Status
    handling: str


@dataclass(frozen=True)
class DisputeRecord:
    """Chargeback reason code with its resolution turnaround time."""

    code: str
    description: str
    dispute_type: str
    tat: str  # T+<days> after dispute filing
    flag: str

    @property
    def tat_days(self) -> int | None:
        """Number of days in ``tat``, or None when it is not ``T+<n>``."""
        prefix, _, days = self.tat.partition("+")
        if prefix.strip().upper() != "T" or not days.strip().isdigit():
            return None
        return int(days)


@dataclass(frozen=True)
class SimulatedOutcome:
    """A resolved code record tagged with the flow that produced it.

    ``transaction_type`` is a :class:`TransactionType` for payment flows and
    ``"Mandate Registration"`` for mandate registrations.
    """

    transaction_type: TransactionType | str
    code: str
    description: str
    category: Category
    status: Status
    handling: str
    transaction_id: str = ""
    rrn: str = ""

    @classmethod
    def from_record(
        cls,
        transaction_type: TransactionType | str,
        record: CodeRecord,
        transaction_id: str = "",
        rrn: str = "",
    ) -> "SimulatedOutcome":
        return cls(
            transaction_type=transaction_type,
            transaction_id=transaction_id,
            rrn=rrn,
            **{f.name: getattr(record, f.name) for f in fields(CodeRecord)},
        )

    @property
    def record(self) -> CodeRecord:
        """The plain code record without simulation metadata."""
        return CodeRecord(
            code=self.code,
            description=self.description,
            category=self.category,
            status=self.status,
            handling=self.handling,
        )


@dataclass(frozen=True)
class EdgeCaseAdvice:
    """Handling guidance for a code, extended by status/category rules."""

    code: str
    suggested_action: str
