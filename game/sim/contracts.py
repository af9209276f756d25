"""
Thin, stable data contracts for level generation.

These are intentionally small "struct-like" dataclasses so:
- generation code can pass chances around without depending on LevelRandom
- seed inputs are easy to log and compare between clients
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Optional

PROCENT = 100
PROMILLE = 1000


@dataclass(frozen=True, slots=True)
class Probability:
    """
    "numerator out of denominator" chance, e.g. Probability(5) is 5%.

    A numerator >= denominator always hits, a numerator <= 0 never does.
    """

    numerator: int
    denominator: int = PROCENT

    def __post_init__(self) -> None:
        if int(self.denominator) <= 0:
            raise ValueError(f"Probability denominator must be > 0 (got {self.denominator})")

    def get_value(self) -> int:
        return self.numerator

    def get_range(self) -> int:
        return self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


FIFTY_FIFTY = Probability(50)


@dataclass(frozen=True, slots=True)
class SeedInputs:
    """
    Everything that went into one level seed.

    Meant for debug logs: two clients that disagree on a level can diff these.
    """

    level: int
    enter_dir: int
    salt: Optional[int]
    session_id: int
    elapsed_time: int

    def to_dict(self, seed: Optional[int] = None) -> dict[str, Any]:
        d = asdict(self)
        if isinstance(self.enter_dir, Enum):
            d["enter_dir"] = self.enter_dir.name
        if seed is not None:
            d["seed"] = int(seed)
        return d
