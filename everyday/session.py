from datetime import date, datetime, timedelta

from fncli import cli

from . import config, habits
from .core.errors import NotFoundError
from .lib import clock
from .lib.days import to_day, window
from .models import Habit, HabitState
from .palette import ColorPicker, default_picker, seeded_picker

__all__ = ["Session", "current", "demo_state", "reset"]

_DEMO = {
    "Exercise": [date(2025, 5, 1), date(2025, 5, 3), date(2025, 5, 5), date(2025, 5, 7)],
    "Read": [date(2025, 5, 2), date(2025, 5, 3), date(2025, 5, 4), date(2025, 5, 6)],
    "Meditate": [date(2025, 5, 1), date(2025, 5, 2), date(2025, 5, 4), date(2025, 5, 8)],
}


def demo_state(pick_color: ColorPicker | None = None) -> HabitState:
    state = HabitState()
    for name, days in _DEMO.items():
        state, habit = habits.add_habit(state, name, pick_color)
        for day in days:
            state, habit = habits.check_habit(state, habit.id, day)
    return state


class Session:
    """Owns the in-memory habit state and the visible calendar window.

    Every mutation swaps in a new HabitState snapshot; nothing is persisted.
    """

    def __init__(
        self,
        state: HabitState | None = None,
        pick_color: ColorPicker | None = None,
        start: date | None = None,
    ):
        self.state = state or HabitState()
        self.pick_color = pick_color or default_picker
        self.start = start or clock.today()

    @classmethod
    def from_config(cls) -> "Session":
        seed = config.get_seed()
        pick = seeded_picker(seed) if seed is not None else default_picker
        state = demo_state(pick) if config.get_demo() else None
        return cls(state=state, pick_color=pick)

    def list_habits(self) -> list[Habit]:
        return habits.list_habits(self.state)

    def resolve(self, ref: str) -> Habit:
        habit = habits.get_habit(self.state, ref) or habits.find_habit(self.state, ref)
        if habit is None:
            raise NotFoundError(f"no habit found: '{ref}'")
        return habit

    def add_habit(self, name: str) -> Habit:
        self.state, habit = habits.add_habit(self.state, name, self.pick_color)
        return habit

    def rename_habit(self, habit_id: str, name: str) -> Habit:
        self.state, habit = habits.rename_habit(self.state, habit_id, name)
        return habit

    def remove_habit(self, habit_id: str) -> None:
        self.state = habits.remove_habit(self.state, habit_id)

    def toggle(self, habit_id: str, day: date | datetime) -> Habit:
        self.state, habit = habits.toggle_completion(self.state, habit_id, day)
        return habit

    def load_demo(self) -> None:
        self.state = demo_state(self.pick_color)

    def days(self) -> list[date]:
        return window(self.start, config.get_window_days())

    def shift(self, days: int) -> None:
        self.start = self.start + timedelta(days=days)

    def go_today(self) -> None:
        self.start = to_day(clock.today())


_current: Session | None = None


def current() -> Session:
    global _current
    if _current is None:
        _current = Session.from_config()
    return _current


def reset(session: Session | None = None) -> Session:
    """Replace the active session; a fresh one is built from config if omitted."""
    global _current
    _current = session or Session.from_config()
    return _current


# ── cli ──────────────────────────────────────────────────────────────────────


def _print_grid() -> None:
    from .render import render_grid

    session = current()
    print(render_grid(session.list_habits(), session.days(), clock.today()))


@cli("everyday")
def grid() -> None:
    """Show the habit grid for the current window"""
    _print_grid()


@cli("everyday")
def prev() -> None:
    """Move the window back"""
    session = current()
    session.shift(-config.get_step_days())
    _print_grid()


@cli("everyday", name="next")
def next_window() -> None:
    """Move the window forward"""
    session = current()
    session.shift(config.get_step_days())
    _print_grid()


@cli("everyday")
def today() -> None:
    """Move the window back to start at today"""
    current().go_today()
    _print_grid()


@cli("everyday")
def demo() -> None:
    """Replace all habits with the sample set"""
    session = current()
    session.load_demo()
    print(f"loaded {len(session.list_habits())} sample habits")
