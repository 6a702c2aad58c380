from __future__ import annotations

from typing import Protocol, Sequence

from .models.key_code import KeyCode


class FlagNamingStrategy(Protocol):
    """Derive the Karabiner variable that tracks whether a sublayer is active."""

    def name_for(self, path: Sequence[KeyCode]) -> str: ...


class PrefixNaming:
    """Default naming: a constant prefix plus the sublayer's key path.

    ``("s",)`` -> ``sublayer_s``; nested ``("s", "w")`` -> ``sublayer_s_w``.
    """

    def __init__(self, prefix: str = "sublayer_") -> None:
        self._prefix = prefix

    def name_for(self, path: Sequence[KeyCode]) -> str:
        if not path:
            raise ValueError("sublayer path is empty")
        return self._prefix + "_".join(KeyCode(key).value for key in path)


def flag_name(key: KeyCode | str) -> str:
    """Flag name of a top-level sublayer under the default strategy."""

    return PrefixNaming().name_for([KeyCode(key)])
