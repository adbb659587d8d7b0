from collections.abc import Sequence
from datetime import date

from .lib import ansi
from .models import Habit, Stats

__all__ = ["render_grid", "render_stats"]

_NAME_WIDTH = 16
_CELL = 3


def _fit(name: str, width: int = _NAME_WIDTH) -> str:
    if len(name) > width - 1:
        name = name[: width - 2] + "…"
    return f"{name:<{width}}"


def _header(days: Sequence[date], today: date) -> list[str]:
    months, numbers, weekdays = [], [], []
    for i, day in enumerate(days):
        label = day.strftime("%b").lower() if i == 0 or day.day == 1 else ""
        months.append(f"{label:<{_CELL}}"[:_CELL])
        num = f"{day.day:>2} "
        weekdays.append(f"{day.strftime('%a').lower()[:2]:>2} ")
        numbers.append(ansi.bold(num) if day == today else num)
    pad = " " * _NAME_WIDTH
    return [
        ansi.muted(pad + "".join(months).rstrip()),
        pad + "".join(numbers).rstrip(),
        ansi.muted(pad + "".join(weekdays).rstrip()),
    ]


def _cell(habit: Habit, day: date, today: date) -> str:
    if day in habit.completions:
        return ansi.color(habit.color, " ■ ")
    if day == today:
        return ansi.bold(" □ ")
    return ansi.muted(" · ")


def render_grid(habits: Sequence[Habit], days: Sequence[date], today: date) -> str:
    if not habits:
        return "no habits. add one with `add <name>`"

    first, last = days[0], days[-1]
    lines = [ansi.bold(f"{first.strftime('%-d %b').lower()} – {last.strftime('%-d %b %Y').lower()}")]
    lines.extend(_header(days, today))
    for habit in habits:
        cells = "".join(_cell(habit, day, today) for day in days)
        lines.append(f"{ansi.color(habit.color, '■')} {_fit(habit.name, _NAME_WIDTH - 2)}{cells}")
    return "\n".join(lines)


def render_stats(rows: Sequence[tuple[Habit, Stats]]) -> str:
    lines = [ansi.muted(f"{'':<{_NAME_WIDTH}}{'current':>8}{'longest':>9}{'total':>7}")]
    for habit, stats in rows:
        name = _fit(habit.name, _NAME_WIDTH - 2)
        lines.append(
            f"{ansi.color(habit.color, '■')} {name}"
            f"{stats.current_streak:>8}{stats.longest_streak:>9}{stats.total:>7}"
        )
    return "\n".join(lines)
