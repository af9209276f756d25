"""
Per-level random source with a shared stream and an authoritative stream.

Every client generates the DeepWoods map itself, so map layout draws come from a stream
seeded identically everywhere (see determinism.derive_seed). Interactive content (monsters,
loot, terrain features) is only generated by the server, so it runs in "authoritative mode"
and draws from the host's global RNG instead. That way server-only draws never advance the
shared stream, and clients stay in sync with the server for every later map draw.
"""

from __future__ import annotations

import random
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import config
from game.sim.contracts import Probability, SeedInputs
from game.sim.determinism import derive_seed

# Debug logging (set to True, or DEBUG_RNG=1 in the environment, to see seed/mode logs)
DEBUG_RNG = config.DEBUG_RNG


def debug_log(msg: str) -> None:
    if not DEBUG_RNG:
        return
    print(f"[rng] {msg}")


class LevelRandom:
    """
    Random source for one generation pass of one level.

    Create one per level visit and throw it away afterwards. Not thread-safe.
    """

    def __init__(
        self,
        level: int,
        enter_dir: int,
        salt: Optional[int],
        *,
        session_id: int,
        elapsed_time: int,
        authoritative_rng: random.Random,
    ):
        if authoritative_rng is None:
            raise ValueError("authoritative_rng is required (pass the host's shared RNG)")
        self.inputs = SeedInputs(
            level=int(level),
            enter_dir=enter_dir,
            salt=salt,
            session_id=int(session_id),
            elapsed_time=int(elapsed_time),
        )
        self._seed = derive_seed(level, enter_dir, salt, session_id, elapsed_time)
        # Seed with the unsigned view: random.Random uses abs() on ints, so s and -s would collide.
        self._random = random.Random(self._seed & 0xFFFFFFFF)
        self._authoritative_rng = authoritative_rng
        self._authoritative_depth = 0
        debug_log(f"level {self.inputs.level} seeded: {self.inputs.to_dict(seed=self._seed)}")

    @property
    def seed(self) -> int:
        return self._seed

    def get_seed(self) -> int:
        return self._seed

    @property
    def authoritative_depth(self) -> int:
        return self._authoritative_depth

    @property
    def is_authoritative(self) -> bool:
        return self._authoritative_depth > 0

    # --- mode ---

    def enter_authoritative(self) -> None:
        """Route draws to the authoritative RNG until the matching leave. Nests."""
        self._authoritative_depth += 1
        debug_log(f"level {self.inputs.level} enter authoritative (depth={self._authoritative_depth})")

    def leave_authoritative(self) -> None:
        if self._authoritative_depth <= 0:
            raise RuntimeError("leave_authoritative() called without a matching enter_authoritative()")
        self._authoritative_depth -= 1
        debug_log(f"level {self.inputs.level} leave authoritative (depth={self._authoritative_depth})")

    @contextmanager
    def authoritative(self) -> Iterator["LevelRandom"]:
        """
        Run a block in authoritative mode:

            with level_rng.authoritative():
                spawn_monsters(level_rng)
        """
        self.enter_authoritative()
        try:
            yield self
        finally:
            self.leave_authoritative()

    def get_random(self) -> random.Random:
        """The generator currently backing draws (depends on mode)."""
        if self.is_authoritative:
            return self._authoritative_rng
        return self._random

    # --- draws ---

    def chance(self, probability: Probability) -> bool:
        if not isinstance(probability, Probability):
            raise TypeError(f"chance() expects a Probability, got {type(probability).__name__}")
        return self.range(0, probability.denominator) < probability.numerator

    def range(self, min_value: int, max_value: int) -> int:
        """Uniform int in [min_value, max_value)."""
        if min_value >= max_value:
            raise ValueError(f"empty range [{min_value}, {max_value})")
        return self.get_random().randrange(min_value, max_value)

    def choose(self, values: Sequence[int], first_value_bias: Optional[Probability] = None) -> int:
        """
        Pick one of `values`.

        With `first_value_bias`, values[0] is returned with that probability and otherwise
        one of the remaining values is picked uniformly. Without it, all values are equally likely.
        """
        if not values:
            raise ValueError("choose() needs at least one value")
        if first_value_bias is None:
            return values[self.range(0, len(values))]
        if not isinstance(first_value_bias, Probability):
            raise TypeError(f"first_value_bias must be a Probability, got {type(first_value_bias).__name__}")
        if len(values) < 2:
            raise ValueError("choose() with first_value_bias needs at least two values")
        if self.chance(first_value_bias):
            return values[0]
        return values[self.range(1, len(values))]

    def __repr__(self) -> str:
        return (
            f"LevelRandom(level={self.inputs.level}, seed={self._seed}, "
            f"authoritative_depth={self._authoritative_depth})"
        )
