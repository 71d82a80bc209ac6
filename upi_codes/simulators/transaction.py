"""Outcome simulators for UPI payments and mandate registrations."""

from __future__ import annotations

import random
from typing import Iterator

from upi_codes.exceptions import InvalidArgumentError
from upi_codes.logging import get_logger, outcome_log_fields
from upi_codes.lookup import get_code_info
from upi_codes.models import MANDATE_REGISTRATION, SimulatedOutcome, TransactionType
from upi_codes.simulators.base import BaseSimulator
from upi_codes.tables import MANDATE_ERROR_CODES, SUCCESS_CODE, UPI_ERROR_CODES, failure_codes

logger = get_logger(__name__)

DEFAULT_SUCCESS_RATE = 0.8


def _coerce_transaction_type(transaction_type: TransactionType | str) -> TransactionType:
    try:
        return TransactionType(transaction_type)
    except ValueError:
        raise InvalidArgumentError(f"Invalid transaction type: {transaction_type!r}") from None


class TransactionSimulator(BaseSimulator):
    """Simulate payment outcomes drawn from the general code table.

    A draw below ``success_rate`` yields code ``00``; otherwise a code is
    picked uniformly from every non-success general code.
    """

    FAILURE_CODES = failure_codes(UPI_ERROR_CODES)

    def simulate(
        self,
        transaction_type: TransactionType | str = TransactionType.PAY,
        success_rate: float = DEFAULT_SUCCESS_RATE,
    ) -> SimulatedOutcome:
        """Simulate a single payment outcome.

        Parameters
        ----------
        transaction_type : TransactionType | str
            Payment flow label, a member or its value.
        success_rate : float
            Probability of success, expected in [0, 1].

        Returns
        -------
        SimulatedOutcome
            Resolved record tagged with the transaction type.

        Raises
        ------
        InvalidArgumentError
            If ``transaction_type`` is not a TransactionType.
        """
        tx_type = _coerce_transaction_type(transaction_type)

        if self.rng.random() < success_rate:
            code = SUCCESS_CODE
        else:
            code = self.rng.choice(self.FAILURE_CODES)

        outcome = SimulatedOutcome.from_record(
            tx_type,
            get_code_info(code),
            transaction_id=self._transaction_id(),
            rrn=self._rrn(),
        )
        logger.debug("Simulated %s outcome %s", tx_type.name, code, extra=outcome_log_fields(outcome))
        return outcome

    def simulate_batch(
        self,
        n: int,
        transaction_type: TransactionType | str = TransactionType.PAY,
        success_rate: float = DEFAULT_SUCCESS_RATE,
    ) -> Iterator[SimulatedOutcome]:
        """Generate ``n`` payment outcomes."""
        tx_type = _coerce_transaction_type(transaction_type)
        for _ in range(n):
            yield self.simulate(tx_type, success_rate)


class MandateSimulator(BaseSimulator):
    """Simulate mandate registration outcomes.

    Success resolves code ``00`` from the general table; failures are drawn
    uniformly from the mandate table.
    """

    FAILURE_CODES = failure_codes(MANDATE_ERROR_CODES)

    def simulate(self, success_rate: float = DEFAULT_SUCCESS_RATE) -> SimulatedOutcome:
        """Simulate a single mandate registration outcome."""
        if self.rng.random() < success_rate:
            code = SUCCESS_CODE
        else:
            code = self.rng.choice(self.FAILURE_CODES)

        outcome = SimulatedOutcome.from_record(
            MANDATE_REGISTRATION,
            get_code_info(code),
            transaction_id=self._transaction_id(),
            rrn=self._rrn(),
        )
        logger.debug("Simulated mandate registration outcome %s", code, extra=outcome_log_fields(outcome))
        return outcome

    def simulate_batch(
        self,
        n: int,
        success_rate: float = DEFAULT_SUCCESS_RATE,
    ) -> Iterator[SimulatedOutcome]:
        """Generate ``n`` mandate registration outcomes."""
        for _ in range(n):
            yield self.simulate(success_rate)


def simulate_transaction(
    transaction_type: TransactionType | str = TransactionType.PAY,
    success_rate: float = DEFAULT_SUCCESS_RATE,
    rng: random.Random | None = None,
) -> SimulatedOutcome:
    """Simulate one payment outcome.

    ``rng`` defaults to a fresh unseeded ``random.Random``.
    """
    return TransactionSimulator(rng=rng).simulate(transaction_type, success_rate)


def simulate_mandate_registration(
    success_rate: float = DEFAULT_SUCCESS_RATE,
    rng: random.Random | None = None,
) -> SimulatedOutcome:
    """Simulate one mandate registration outcome."""
    return MandateSimulator(rng=rng).simulate(success_rate)
