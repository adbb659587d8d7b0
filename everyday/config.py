import os
from pathlib import Path

import yaml

DEFAULT_WINDOW_DAYS = 21
DEFAULT_STEP_DAYS = 7
MAX_WINDOW_DAYS = 366
MAX_STEP_DAYS = 366


def everyday_dir() -> Path:
    override = os.environ.get("EVERYDAY_DIR")
    return Path(override) if override else Path.home() / ".everyday"


def config_path() -> Path:
    return everyday_dir() / "config.yaml"


class Config:
    """Single-instance config manager. Load once, cache in memory."""

    _instance: "Config | None" = None
    _data: dict[str, object]

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next access re-reads disk."""
        cls._instance = None

    def _load(self) -> None:
        """Load config from disk."""
        path = config_path()
        if not path.exists():
            self._data = {}
            return
        try:
            with path.open() as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            self._data = {}
            return
        self._data = loaded if isinstance(loaded, dict) else {}

    def get(self, key: str, default: object = None) -> object:
        """Get config value."""
        return self._data.get(key, default)


def _bounded_int(key: str, default: int, maximum: int) -> int:
    val = Config().get(key)
    if isinstance(val, bool) or not isinstance(val, int) or val < 1:
        return default
    return min(val, maximum)


def get_window_days() -> int:
    """Number of calendar days shown in the grid."""
    return _bounded_int("window_days", DEFAULT_WINDOW_DAYS, MAX_WINDOW_DAYS)


def get_step_days() -> int:
    """Days the window moves on prev/next."""
    return _bounded_int("step_days", DEFAULT_STEP_DAYS, MAX_STEP_DAYS)


def get_seed() -> int | None:
    """Seed for the color picker. None = unseeded random."""
    val = Config().get("seed")
    if isinstance(val, bool) or not isinstance(val, int):
        return None
    return val


def get_demo() -> bool:
    """Start sessions with the sample habits loaded."""
    return Config().get("demo") is True
