import itertools
import random
from collections.abc import Callable, Sequence

__all__ = ["PALETTE", "ColorPicker", "cycle_picker", "default_picker", "seeded_picker"]

PALETTE: tuple[str, ...] = ("green", "blue", "red", "yellow", "purple", "pink")

ColorPicker = Callable[[Sequence[str]], str]


def default_picker(colors: Sequence[str]) -> str:
    return random.choice(colors)


def seeded_picker(seed: int) -> ColorPicker:
    """Deterministic picker: same seed, same color sequence."""
    rng = random.Random(seed)
    return rng.choice


def cycle_picker(start: int = 0) -> ColorPicker:
    """Hand out palette colors in order, wrapping around."""
    counter = itertools.count(start)

    def _pick(colors: Sequence[str]) -> str:
        return colors[next(counter) % len(colors)]

    return _pick
