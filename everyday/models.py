from .core.models import Habit, HabitState, Stats

__all__ = ["Habit", "HabitState", "Stats"]
