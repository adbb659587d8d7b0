import dataclasses
import uuid
from datetime import date, datetime

from fncli import cli

from .core.errors import NotFoundError, ValidationError
from .lib import ansi, clock
from .lib.days import to_day
from .lib.fuzzy import find_in_pool
from .models import Habit, HabitState
from .palette import PALETTE, ColorPicker, default_picker

__all__ = [
    "add_habit",
    "check_habit",
    "find_habit",
    "get_habit",
    "is_completed",
    "list_habits",
    "remove_habit",
    "rename_habit",
    "toggle",
    "toggle_completion",
    "uncheck_habit",
]


# ── domain ───────────────────────────────────────────────────────────────────


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("habit name cannot be empty")
    return cleaned


def _replace(state: HabitState, habit: Habit) -> HabitState:
    return HabitState(habits=tuple(habit if h.id == habit.id else h for h in state.habits))


def _require(state: HabitState, habit_id: str) -> Habit:
    habit = get_habit(state, habit_id)
    if habit is None:
        raise NotFoundError(f"no habit with id '{habit_id}'")
    return habit


def list_habits(state: HabitState) -> list[Habit]:
    return list(state.habits)


def get_habit(state: HabitState, habit_id: str) -> Habit | None:
    return next((h for h in state.habits if h.id == habit_id), None)


def find_habit(state: HabitState, ref: str) -> Habit | None:
    return find_in_pool(ref, state.habits)


def add_habit(
    state: HabitState, name: str, pick_color: ColorPicker | None = None
) -> tuple[HabitState, Habit]:
    cleaned = _clean_name(name)
    pick = pick_color or default_picker
    habit = Habit(
        id=str(uuid.uuid4()),
        name=cleaned,
        color=pick(PALETTE),
        created=clock.now(),
    )
    return HabitState(habits=(*state.habits, habit)), habit


def rename_habit(state: HabitState, habit_id: str, name: str) -> tuple[HabitState, Habit]:
    cleaned = _clean_name(name)
    habit = dataclasses.replace(_require(state, habit_id), name=cleaned)
    return _replace(state, habit), habit


def remove_habit(state: HabitState, habit_id: str) -> HabitState:
    _require(state, habit_id)
    return HabitState(habits=tuple(h for h in state.habits if h.id != habit_id))


def is_completed(habit: Habit, day: date | datetime) -> bool:
    return to_day(day) in habit.completions


def toggle(completions: frozenset[date], day: date | datetime) -> frozenset[date]:
    """Symmetric difference with a single calendar day."""
    return completions ^ {to_day(day)}


def toggle_completion(
    state: HabitState, habit_id: str, day: date | datetime
) -> tuple[HabitState, Habit]:
    habit = _require(state, habit_id)
    updated = dataclasses.replace(habit, completions=toggle(habit.completions, day))
    return _replace(state, updated), updated


def check_habit(
    state: HabitState, habit_id: str, day: date | datetime
) -> tuple[HabitState, Habit]:
    habit = _require(state, habit_id)
    updated = dataclasses.replace(habit, completions=habit.completions | {to_day(day)})
    return _replace(state, updated), updated


def uncheck_habit(
    state: HabitState, habit_id: str, day: date | datetime
) -> tuple[HabitState, Habit]:
    habit = _require(state, habit_id)
    updated = dataclasses.replace(habit, completions=habit.completions - {to_day(day)})
    return _replace(state, updated), updated


# ── cli ──────────────────────────────────────────────────────────────────────


@cli("everyday", flags={"name": []})
def add(name: list[str]) -> None:
    """Add a habit: `add read 20 pages`"""
    from .session import current

    habit = current().add_habit(" ".join(name))
    print(f"+ {ansi.color(habit.color, '■')} {habit.name}  {ansi.dim('[' + habit.id[:8] + ']')}")


@cli("everyday", flags={"name": []})
def rename(ref: str, name: list[str]) -> None:
    """Rename a habit by name or id prefix"""
    from .session import current

    session = current()
    habit = session.resolve(ref)
    updated = session.rename_habit(habit.id, " ".join(name))
    print(f"{habit.name} → {updated.name}")


@cli("everyday")
def rm(ref: str) -> None:
    """Remove a habit and its whole history"""
    from .session import current

    session = current()
    habit = session.resolve(ref)
    session.remove_habit(habit.id)
    print(f"✗ {habit.name}")


@cli("everyday", name="toggle", flags={"day": ["-d", "--day"]})
def toggle_cmd(ref: str, day: str | None = None) -> None:
    """Toggle a habit for a day (default today)"""
    from .lib.days import parse_day
    from .session import current

    session = current()
    habit = session.resolve(ref)
    when = parse_day(day)
    updated = session.toggle(habit.id, when)
    mark = ansi.color(updated.color, "✓") if is_completed(updated, when) else "□"
    print(f"{mark} {updated.name}  {when.strftime('%a %-d %b').lower()}")


@cli("everyday", name="ls")
def list_cmd() -> None:
    """List habits"""
    from .session import current

    habits = current().list_habits()
    if not habits:
        print("no habits")
        return
    for h in habits:
        print(f"{ansi.color(h.color, '■')} {h.name}  {ansi.dim('[' + h.id[:8] + ']')}")
