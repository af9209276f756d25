from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Ensure the project root is on sys.path for `config`, `game` and `tools` imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from game.sim import determinism, level_random, timebase  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_sim_state():
    determinism.set_sim_seed(1)
    timebase.set_sim_now_ms(None)
    debug = level_random.DEBUG_RNG
    level_random.DEBUG_RNG = False
    yield
    level_random.DEBUG_RNG = debug
    timebase.set_sim_now_ms(None)
    determinism.set_sim_seed(1)
