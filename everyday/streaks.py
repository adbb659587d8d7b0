from collections.abc import Iterable
from datetime import date, datetime, timedelta

from fncli import cli

from .lib import ansi
from .lib.days import to_day
from .models import Habit, Stats

__all__ = ["compute_stats", "current_streak", "longest_streak"]


def current_streak(completions: Iterable[date], today: date | datetime) -> int:
    """Consecutive completed days counted back from today.

    Anchored at today: if today is not completed the streak is 0, regardless
    of how long the run ending yesterday was.
    """
    days = {to_day(d) for d in completions}
    check = to_day(today)
    streak = 0
    while check in days:
        streak += 1
        check -= timedelta(days=1)
    return streak


def longest_streak(completions: Iterable[date]) -> int:
    days = sorted({to_day(d) for d in completions})
    longest = 0
    run = 0
    prev: date | None = None
    for day in days:
        run = run + 1 if prev is not None and day - prev == timedelta(days=1) else 1
        longest = max(longest, run)
        prev = day
    return longest


def compute_stats(habit: Habit, today: date | datetime) -> Stats:
    return Stats(
        current_streak=current_streak(habit.completions, today),
        longest_streak=longest_streak(habit.completions),
        total=len(habit.completions),
    )


# ── cli ──────────────────────────────────────────────────────────────────────


@cli("everyday")
def stats() -> None:
    """Show current streak, longest streak and total per habit"""
    from .lib import clock
    from .render import render_stats
    from .session import current

    habits = current().list_habits()
    if not habits:
        print("no habits")
        return
    today = clock.today()
    print(render_stats([(h, compute_stats(h, today)) for h in habits]))
    print(ansi.dim(f"as of {today.isoformat()}"))
