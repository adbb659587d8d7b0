from collections.abc import Sequence
from difflib import get_close_matches

from everyday.core.errors import AmbiguousError
from everyday.models import Habit

__all__ = ["find_in_pool"]

FUZZY_MATCH_CUTOFF = 0.8


def _match_exact_name(ref: str, pool: Sequence[Habit]) -> Habit | None:
    ref_lower = ref.lower()
    return next((habit for habit in pool if habit.name.lower() == ref_lower), None)


def _match_id_prefix(ref: str, pool: Sequence[Habit]) -> Habit | None:
    ref_lower = ref.lower()
    matches = [habit for habit in pool if habit.id.startswith(ref_lower)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        exact = next((habit for habit in matches if habit.id == ref), None)
        if exact:
            return exact

        sample = [habit.id[:8] for habit in matches[:3]]
        raise AmbiguousError(ref, count=len(matches), sample=sample)
    return None


def _match_substring(ref: str, pool: Sequence[Habit]) -> Habit | None:
    ref_lower = ref.lower()
    matches = [habit for habit in pool if ref_lower in habit.name.lower()]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        sample = [habit.name for habit in matches[:3]]
        raise AmbiguousError(ref, count=len(matches), sample=sample)
    return None


def _match_fuzzy(ref: str, pool: Sequence[Habit]) -> Habit | None:
    names = [habit.name.lower() for habit in pool]
    matches = get_close_matches(ref.lower(), names, n=1, cutoff=FUZZY_MATCH_CUTOFF)
    if matches:
        return pool[names.index(matches[0])]
    return None


def find_in_pool(ref: str, pool: Sequence[Habit]) -> Habit | None:
    """Resolve a ref: exact name, then id prefix, then substring, then close match."""
    if not pool or not ref.strip():
        return None
    return (
        _match_exact_name(ref, pool)
        or _match_id_prefix(ref, pool)
        or _match_substring(ref, pool)
        or _match_fuzzy(ref, pool)
    )
