"""
Simulation time abstraction.

Two clocks live here:
- sim milliseconds (`now_ms()`), so code can avoid `pygame.time.get_ticks()` and run headless
- the in-game clock (`GameClock`), whose "hours since start" bucket feeds level seeds
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import DAY_END_TIME, DAY_START_TIME, HOURS_PER_DAY, MINUTES_PER_TICK, MS_PER_TICK

_SIM_NOW_MS: Optional[int] = None


def set_sim_now_ms(now_ms: Optional[int]) -> None:
    """
    Set the current simulation time in milliseconds.

    If set to None, `now_ms()` falls back to pygame's real-time ticks.
    """
    global _SIM_NOW_MS
    _SIM_NOW_MS = None if now_ms is None else int(now_ms)


def now_ms() -> int:
    """Return sim time (if provided), otherwise pygame's wall-clock-ish ticks."""
    if _SIM_NOW_MS is not None:
        return int(_SIM_NOW_MS)
    return int(pygame.time.get_ticks())


def hours_since_start(time_of_day: int, days_since_start: int) -> int:
    """
    Elapsed-time bucket for seed derivation.

    `time_of_day` is HHMM (600 = 6:00am, 2600 = 2:00am the next morning).
    The first hour of day 0 is 1, and every day adds HOURS_PER_DAY.
    """
    time_of_day = int(time_of_day)
    if time_of_day < DAY_START_TIME:
        raise ValueError(f"time_of_day {time_of_day} is before the day starts ({DAY_START_TIME})")
    hour_of_day = 1 + (time_of_day - DAY_START_TIME) // 100
    return hour_of_day + int(days_since_start) * HOURS_PER_DAY


class GameClock:
    """In-game clock: HHMM time of day plus whole days since the save started."""

    def __init__(self, time_of_day: int = DAY_START_TIME, days_since_start: int = 0):
        if int(time_of_day) < DAY_START_TIME or int(time_of_day) > DAY_END_TIME:
            raise ValueError(f"time_of_day must be within {DAY_START_TIME}..{DAY_END_TIME} (got {time_of_day})")
        if int(days_since_start) < 0:
            raise ValueError(f"days_since_start must be >= 0 (got {days_since_start})")
        self.time_of_day = int(time_of_day)
        self.days_since_start = int(days_since_start)
        self._synced_ms: Optional[int] = None

    def hours_since_start(self) -> int:
        return hours_since_start(self.time_of_day, self.days_since_start)

    def tick(self, ticks: int = 1) -> None:
        """Advance by `ticks` 10-minute steps, rolling over into the next day at DAY_END_TIME."""
        for _ in range(max(0, int(ticks))):
            hours, minutes = divmod(self.time_of_day, 100)
            minutes += MINUTES_PER_TICK
            if minutes >= 60:
                hours += 1
                minutes -= 60
            self.time_of_day = hours * 100 + minutes
            if self.time_of_day >= DAY_END_TIME:
                self.time_of_day = DAY_START_TIME
                self.days_since_start += 1

    def sync(self, at_ms: Optional[int] = None) -> int:
        """
        Advance by however many whole ticks passed since the last sync.

        The first call only records the starting point. Returns the number of ticks applied.
        """
        current = now_ms() if at_ms is None else int(at_ms)
        if self._synced_ms is None or current < self._synced_ms:
            self._synced_ms = current
            return 0
        ticks = (current - self._synced_ms) // MS_PER_TICK
        if ticks > 0:
            self.tick(ticks)
            self._synced_ms += ticks * MS_PER_TICK
        return int(ticks)

    def __repr__(self) -> str:
        return f"GameClock(time_of_day={self.time_of_day}, days_since_start={self.days_since_start})"
