from __future__ import annotations

import random

from game.sim.determinism import derive_seed, get_rng, set_sim_seed
from game.sim.directions import EnterDirection, ExitDirection
from game.sim.session import WoodsSession
from game.sim.timebase import GameClock

SESSION_ID = 123456789


def test_level_random_uses_current_game_hour():
    session = WoodsSession(SESSION_ID, clock=GameClock(1630, days_since_start=3))
    rng = session.level_random(4, EnterDirection.WEST, salt=9)
    assert rng.inputs.elapsed_time == 71
    assert rng.seed == derive_seed(4, EnterDirection.WEST, 9, SESSION_ID, 71)


def test_clients_in_the_same_hour_agree():
    host = WoodsSession(SESSION_ID, clock=GameClock(1300), authoritative_rng=random.Random(1))
    client = WoodsSession(SESSION_ID, clock=GameClock(1350), authoritative_rng=random.Random(2))
    a = host.level_random(3, EnterDirection.NORTH, salt=5)
    b = client.level_random(3, EnterDirection.NORTH, salt=5)
    assert a.seed == b.seed
    assert [a.range(0, 100) for _ in range(20)] == [b.range(0, 100) for _ in range(20)]


def test_next_hour_changes_deeper_levels_but_not_root():
    session = WoodsSession(SESSION_ID, clock=GameClock(1300))
    deep_before = session.level_random(3, EnterDirection.NORTH, salt=5).seed
    root_before = session.level_random(1).seed
    session.clock.tick(6)
    assert session.level_random(3, EnterDirection.NORTH, salt=5).seed != deep_before
    assert session.level_random(1).seed == root_before


def test_exit_direction_feeds_next_level():
    session = WoodsSession(SESSION_ID)
    enter = ExitDirection.EAST.to_enter_direction()
    rng = session.level_random(2, enter, salt=1)
    assert rng.inputs.enter_dir is EnterDirection.WEST


def test_defaults_to_process_wide_authoritative_rng():
    set_sim_seed(42)
    session = WoodsSession(SESSION_ID)
    assert session.authoritative_rng is get_rng()
    assert session.clock.hours_since_start() == 1
    rng = session.level_random(2, EnterDirection.SOUTH, salt=0)
    with rng.authoritative():
        assert rng.get_random() is get_rng()
