import dataclasses
from datetime import date, datetime


@dataclasses.dataclass(frozen=True)
class Habit:
    id: str
    name: str
    color: str
    created: datetime
    completions: frozenset[date] = frozenset()


@dataclasses.dataclass(frozen=True)
class Stats:
    current_streak: int = 0
    longest_streak: int = 0
    total: int = 0


@dataclasses.dataclass(frozen=True)
class HabitState:
    """Immutable snapshot of the habit collection, in insertion order."""

    habits: tuple[Habit, ...] = ()
