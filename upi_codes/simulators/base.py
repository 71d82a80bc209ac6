"""Base class for outcome simulators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseSimulator(ABC):
    """Base class for all outcome simulators.

    Owns the random source used to pick outcomes and a Faker instance for
    reference identifiers. Neither touches the global ``random`` state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Ignored when ``rng`` is given.
    locale : str
        Faker locale (default ``en_IN``).
    rng : random.Random | None
        Random source for outcome draws. Also seeds Faker, so equally
        seeded sources yield equal outcomes including reference ids.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.fake = Faker(locale)
        if rng is not None:
            self.fake.seed_instance(rng.getrandbits(64))
        elif seed is not None:
            self.fake.seed_instance(seed)

    def _transaction_id(self) -> str:
        return self.fake.uuid4()

    def _rrn(self) -> str:
        """12-digit retrieval reference number."""
        return self.fake.numerify("############")
