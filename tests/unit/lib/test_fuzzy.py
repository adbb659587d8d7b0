from datetime import datetime

import pytest

from everyday.core.errors import AmbiguousError
from everyday.lib.fuzzy import find_in_pool
from everyday.models import Habit


def _habit(habit_id: str, name: str) -> Habit:
    return Habit(id=habit_id, name=name, color="green", created=datetime(2025, 5, 1))


POOL = [
    _habit("1a2b3c4d-0000", "Exercise"),
    _habit("9f8e7d6c-0000", "Read"),
    _habit("9f001122-0000", "Read news"),
]


def test_matches_id_prefix():
    assert find_in_pool("1a2b", POOL).name == "Exercise"


def test_ambiguous_id_prefix():
    with pytest.raises(AmbiguousError):
        find_in_pool("9f", POOL)


def test_exact_name_wins_over_substring():
    assert find_in_pool("read", POOL).name == "Read"


def test_unique_substring():
    assert find_in_pool("news", POOL).name == "Read news"


def test_fuzzy_match():
    assert find_in_pool("exercize", POOL).name == "Exercise"


def test_empty_pool_or_ref():
    assert find_in_pool("read", []) is None
    assert find_in_pool("  ", POOL) is None


def test_exact_name_wins_over_hex_id_prefix():
    pool = [_habit("bed01234-0000", "Run"), _habit("77777777-0000", "bed")]
    assert find_in_pool("bed", pool).name == "bed"


def test_id_prefix_still_resolves_when_no_name_matches():
    pool = [_habit("bed01234-0000", "Run"), _habit("cafe5678-0000", "Swim")]
    assert find_in_pool("cafe", pool).name == "Swim"
