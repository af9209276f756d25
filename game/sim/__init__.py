"""
Determinism primitives for DeepWoods level generation.

This package intentionally contains *small* pieces (seed derivation, the per-level random
source, sim time) so generation code never has to touch global `random` or wall-clock time.
"""
from .contracts import FIFTY_FIFTY, PROCENT, PROMILLE, Probability, SeedInputs
from .determinism import derive_seed, get_rng, set_sim_seed, uniform_any_int
from .directions import EnterDirection, ExitDirection
from .level_random import LevelRandom
from .session import WoodsSession
from .timebase import GameClock, hours_since_start
