"""
Host-side session state needed to seed DeepWoods levels.
"""

from __future__ import annotations

import random
from typing import Optional

from game.sim.determinism import get_rng
from game.sim.directions import EnterDirection
from game.sim.level_random import LevelRandom
from game.sim.timebase import GameClock


class WoodsSession:
    """
    Bundles the inputs that the game framework owns:
    - the session's unique id (same on every client)
    - the in-game clock
    - the authoritative RNG (defaults to the process-wide one from determinism.get_rng())
    """

    def __init__(
        self,
        session_id: int,
        clock: Optional[GameClock] = None,
        authoritative_rng: Optional[random.Random] = None,
    ):
        self.session_id = int(session_id)
        self.clock = clock if clock is not None else GameClock()
        self.authoritative_rng = authoritative_rng if authoritative_rng is not None else get_rng()

    def level_random(
        self,
        level: int,
        enter_dir: EnterDirection = EnterDirection.NONE,
        salt: Optional[int] = None,
    ) -> LevelRandom:
        """Start a generation pass for `level` using the current game hour."""
        return LevelRandom(
            level,
            enter_dir,
            salt,
            session_id=self.session_id,
            elapsed_time=self.clock.hours_since_start(),
            authoritative_rng=self.authoritative_rng,
        )
