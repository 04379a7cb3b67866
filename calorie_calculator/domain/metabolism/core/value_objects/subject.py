"""Subject value object - biological sex and age."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....shared.errors import UnknownSexError

MAX_AGE_YEARS = 150


class BiologicalSex(str, Enum):
    """Biological sex as used by the Mifflin-St Jeor equation.

    The equation only defines constants for these two categories
    (+5 male, -161 female); no other category has a published constant.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_key(cls, key: BiologicalSex | str) -> BiologicalSex:
        """Parse biological sex from 'male' / 'female' (also 'M' / 'F').

        Raises:
            UnknownSexError: If key is not recognised
        """
        if isinstance(key, cls):
            return key
        normalized = str(key).strip().lower()
        aliases = {"m": cls.MALE, "f": cls.FEMALE}
        for sex in cls:
            if sex.value == normalized:
                return sex
        if normalized in aliases:
            return aliases[normalized]
        raise UnknownSexError(key, [s.value for s in cls])


@dataclass(frozen=True)
class Subject:
    """Person the estimate is made for.

    Attributes:
        biological_sex: Sex discriminator for the BMR constant
        age_years: Age in whole years (1-150 for a valid estimate)
    """

    biological_sex: BiologicalSex
    age_years: int

    @property
    def is_complete(self) -> bool:
        """Whether the subject has a usable age."""
        return 1 <= self.age_years <= MAX_AGE_YEARS
