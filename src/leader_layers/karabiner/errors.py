from __future__ import annotations

from typing import Sequence

from .models.key_code import KeyCode


def _format_path(path: Sequence[KeyCode]) -> str:
    return " > ".join(KeyCode(key).value for key in path) or "<leader>"


class ConfigurationError(ValueError):
    """The layer tree cannot be compiled into a correct rule set."""


class DuplicateFlagName(ConfigurationError):
    """Two sublayers derive the same state variable."""

    def __init__(self, flag: str, first: Sequence[KeyCode], second: Sequence[KeyCode]) -> None:
        self.flag = flag
        self.first = tuple(first)
        self.second = tuple(second)
        super().__init__(
            f"sublayers {_format_path(self.first)!r} and {_format_path(self.second)!r} "
            f"both use variable {flag!r}"
        )


class AmbiguousTrigger(ConfigurationError):
    """A sublayer entry reuses the sublayer's own key or the escape key."""

    def __init__(self, sublayer: Sequence[KeyCode], key: KeyCode) -> None:
        self.sublayer = tuple(sublayer)
        self.key = KeyCode(key)
        super().__init__(
            f"sublayer {_format_path(self.sublayer)!r}: entry {self.key.value!r} "
            "collides with a reserved trigger"
        )
