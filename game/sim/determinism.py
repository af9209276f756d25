"""
Determinism helpers.

Goals:
- Derive one 32-bit seed per DeepWoods level visit that every client computes identically
  (no RPC, only shared inputs: session id, level, enter direction, game hour, salt)
- Provide the single process-wide RNG used for server-only (authoritative) generation

Non-goals:
- Cryptographic security
- Resuming a partially consumed stream after a restart (re-derive the seed instead)
"""

from __future__ import annotations

import random
from typing import Optional

from config import MAGIC_SALT, ROOT_LEVEL, SIM_SEED

_MASK32 = 0xFFFFFFFF
_MIX_MULTIPLIER = 0x45D9F3B

_BASE_SEED: int = SIM_SEED & _MASK32
_GLOBAL_RNG: random.Random = random.Random(_BASE_SEED)


def to_int32(x: int) -> int:
    """Reinterpret the low 32 bits of `x` as a signed 32-bit integer."""
    x &= _MASK32
    return x - 0x100000000 if x & 0x80000000 else x


def uniform_any_int(x: int) -> int:
    """
    Avalanche a 32-bit integer into a well-distributed 32-bit integer.

    Two rounds of xor-shift-multiply and a final xor-shift, all on the unsigned
    32-bit view (logical shifts, truncating multiplies). Returns a signed int32.
    """
    x &= _MASK32
    x = (((x >> 16) ^ x) * _MIX_MULTIPLIER) & _MASK32
    x = (((x >> 16) ^ x) * _MIX_MULTIPLIER) & _MASK32
    x = ((x >> 16) ^ x) & _MASK32
    return to_int32(x)


def fold_session_id(session_id: int) -> int:
    """Fold a 64-bit session id into 32 bits by xor-ing its high and low halves."""
    return to_int32((session_id >> 32) ^ session_id)


def session_hash(session_id: int) -> int:
    return uniform_any_int(fold_session_id(session_id))


def derive_seed(
    level: int,
    enter_dir: int,
    salt: Optional[int],
    session_id: int,
    elapsed_time: int,
) -> int:
    """
    Derive the shared seed for one DeepWoods level visit.

    The root level only depends on the session, so it stays the same for the whole game.
    Deeper levels also mix in level, enter direction and the game hour, so everyone entering
    the same level the same way during the same hour gets the same woods.
    `salt` is ignored for the root level and required for every other level.
    """
    if level == ROOT_LEVEL:
        return to_int32(session_hash(session_id) ^ MAGIC_SALT)
    if salt is None:
        raise ValueError(f"salt is required for level {level} (only the root level may omit it)")
    return to_int32(
        session_hash(session_id)
        ^ uniform_any_int(level)
        ^ uniform_any_int(int(enter_dir))
        ^ uniform_any_int(elapsed_time)
        ^ salt
    )


def set_sim_seed(seed: int) -> None:
    """Reseed the process-wide authoritative RNG."""
    global _BASE_SEED, _GLOBAL_RNG
    _BASE_SEED = int(seed) & _MASK32
    _GLOBAL_RNG = random.Random(_BASE_SEED)


def get_sim_seed() -> int:
    return _BASE_SEED


def get_rng() -> random.Random:
    """
    Get the process-wide authoritative RNG.

    Host code hands this to each LevelRandom; level code never reads it directly.
    Note that set_sim_seed() replaces the instance, so grab it after seeding.
    """
    return _GLOBAL_RNG
