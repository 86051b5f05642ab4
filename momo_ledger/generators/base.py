"""Shared randomness for synthetic message generators."""

import random
import string
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Seeded Faker plus a private ``random.Random``.

    Two generators built with the same seed produce the same output, and
    neither touches the global ``random`` state.

    Parameters
    ----------
    seed : int | None
        Seed for both Faker and the private RNG.
    locale : str
        Faker locale used for people and business names.
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.rng = random.Random(seed)
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    def digits(self, count: int) -> str:
        """A string of ``count`` random decimal digits."""
        return "".join(self.rng.choices(string.digits, k=count))

    def person_name(self) -> str:
        """Upper-case full name, as operators print it in confirmations."""
        return f"{self.fake.first_name()} {self.fake.last_name()}".upper()

    def business_name(self) -> str:
        return self.fake.company().upper().replace(".", "")
