import os
import dataclasses
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

################################################################################
# Settings
################################################################################

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    # Verify that spans handed to Spet.from_sorted_spans are ordered by start.
    check_sorted: bool = False

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(check_sorted=_env_flag("SPET_CHECK_SORTED"))


_active: Settings = Settings.from_env()


def settings() -> Settings:
    """Returns the settings currently in effect."""
    return _active


@contextmanager
def override(**changes) -> Iterator[Settings]:
    """
    Temporarily replaces fields of the active settings.

        with override(check_sorted=True):
            Spet.from_sorted_spans(spans)
    """
    global _active
    previous = _active
    _active = dataclasses.replace(previous, **changes)
    try:
        yield _active
    finally:
        _active = previous
