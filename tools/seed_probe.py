"""
Seed probe (headless).

Prints the seed a client would derive for a DeepWoods level, plus the first few shared draws,
so two machines can be compared without running the game.

Examples:
  python tools/seed_probe.py --session-id 123456789 --level 2 --enter south --salt 42
  python tools/seed_probe.py --session-id 123456789 --level 1 --json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

# Headless pygame setup (safe for CI / no-window environments)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Ensure imports work when running as `python tools/seed_probe.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import DAY_START_TIME  # noqa: E402
from game.sim.determinism import get_rng, set_sim_seed  # noqa: E402
from game.sim.directions import EnterDirection  # noqa: E402
from game.sim.session import WoodsSession  # noqa: E402
from game.sim.timebase import GameClock  # noqa: E402


def _enter_direction(value: str) -> EnterDirection:
    try:
        return EnterDirection[value.strip().upper()]
    except KeyError:
        choices = ", ".join(d.name.lower() for d in EnterDirection)
        raise argparse.ArgumentTypeError(f"unknown enter direction '{value}' (choose from: {choices})")


def probe(
    *,
    session_id: int,
    level: int,
    enter_dir: EnterDirection,
    salt: int | None,
    time_of_day: int,
    days: int,
    draws: int,
    draw_max: int,
) -> dict:
    session = WoodsSession(session_id, clock=GameClock(time_of_day, days), authoritative_rng=get_rng())
    level_rng = session.level_random(level, enter_dir, salt)
    return {
        **level_rng.inputs.to_dict(seed=level_rng.seed),
        "draws": [level_rng.range(0, draw_max) for _ in range(max(0, draws))],
    }


def main() -> int:
    ap = argparse.ArgumentParser(description="Print the derived seed and first shared draws for a DeepWoods level")
    ap.add_argument("--session-id", type=int, required=True, help="unique multiplayer id of the session host")
    ap.add_argument("--level", type=int, default=1, help="DeepWoods level (1 = root)")
    ap.add_argument("--enter", type=_enter_direction, default=EnterDirection.NONE, help="edge the level was entered through")
    ap.add_argument("--salt", type=int, default=None, help="caller salt (required for level > 1)")
    ap.add_argument("--time-of-day", type=int, default=DAY_START_TIME, help="HHMM in-game time (default 600)")
    ap.add_argument("--days", type=int, default=0, help="days since the save started")
    ap.add_argument("--draws", type=int, default=8, help="number of shared draws to print")
    ap.add_argument("--draw-max", type=int, default=100, help="draws are in [0, draw-max)")
    ap.add_argument("--sim-seed", type=int, default=None, help="reseed the authoritative RNG first")
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args()

    if ns.sim_seed is not None:
        set_sim_seed(ns.sim_seed)

    try:
        result = probe(
            session_id=ns.session_id,
            level=ns.level,
            enter_dir=ns.enter,
            salt=ns.salt,
            time_of_day=ns.time_of_day,
            days=ns.days,
            draws=ns.draws,
            draw_max=ns.draw_max,
        )
    except ValueError as e:
        print(f"[seed_probe] ERROR: {e}")
        return 2

    if ns.json:
        print(json.dumps(result, indent=2))
    else:
        print(f"[seed_probe] level={result['level']} enter={result['enter_dir']} salt={result['salt']}")
        print(f"[seed_probe] session_id={result['session_id']} elapsed_time={result['elapsed_time']}")
        print(f"[seed_probe] seed={result['seed']}")
        print(f"[seed_probe] draws={result['draws']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
