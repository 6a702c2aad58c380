from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, Tuple

from leader_layers.karabiner.models.key_code import KeyCode
from leader_layers.karabiner.models.modifiers import Modifier

from .commands import app, bg_open, consumer, emit, open_, shell
from .ir import Command


_MODIFIER_TOKENS = {m.value for m in Modifier if m is not Modifier.ANY}
_KEY_TOKENS = {k.value for k in KeyCode}

_COMMAND_PREFIXES: Dict[str, Callable[[str], Command]] = {
    "open": open_,
    "bg-open": bg_open,
    "app": app,
    "shell": shell,
    "consumer": consumer,
}


def _normalize_aliases(aliases: Mapping[str, str] | None) -> dict[str, str]:
    if not aliases:
        return {}
    return {str(k).strip().lower(): str(v).strip().lower() for k, v in aliases.items()}


def _apply_alias(token: str, *, alias_key: Mapping[str, str], alias_mod: Mapping[str, str]) -> str:
    token = token.strip().lower()
    if token in alias_mod:
        token = alias_mod[token]
    if token in alias_key:
        token = alias_key[token]
    return token


def _split_mods_and_keys(tokens: Iterable[str]) -> tuple[list[str], list[Modifier]]:
    keys: list[str] = []
    modifiers: list[Modifier] = []
    for token in tokens:
        if token in _MODIFIER_TOKENS:
            mod = Modifier(token)
            if mod not in modifiers:
                modifiers.append(mod)
        else:
            keys.append(token)
    return keys, modifiers


def parse_key(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
) -> KeyCode:
    """Parse a single key name (after aliasing) into a KeyCode."""

    token = _apply_alias(str(expr), alias_key=_normalize_aliases(alias_key), alias_mod={})
    if token not in _KEY_TOKENS:
        raise ValueError(f"unknown key code: {expr!r}")
    return KeyCode(token)


def parse_chord(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
    alias_mod: Mapping[str, str] | None = None,
    chord_sep: str = "+",
) -> Tuple[KeyCode, List[Modifier]]:
    """Parse `mod+mod+key` into (key, modifiers), modifiers in written order."""

    alias_key = _normalize_aliases(alias_key)
    alias_mod = _normalize_aliases(alias_mod)

    tokens = [t for t in (t.strip() for t in expr.split(chord_sep)) if t]
    if not tokens:
        raise ValueError("chord expression is empty")
    normalized = [_apply_alias(t, alias_key=alias_key, alias_mod=alias_mod) for t in tokens]
    keys, modifiers = _split_mods_and_keys(normalized)

    # `fn`, `caps_lock` are both modifiers and keys; written last they are the key
    if not keys and normalized[-1] in _KEY_TOKENS:
        keys = [normalized[-1]]
        modifiers = [m for m in modifiers if m.value != keys[0]]

    if len(keys) != 1:
        raise ValueError(f"chord must have exactly one key: {expr!r}")
    if keys[0] not in _KEY_TOKENS:
        raise ValueError(f"unknown key code: {keys[0]!r} (from {expr!r})")
    return KeyCode(keys[0]), modifiers


def parse_command(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
    alias_mod: Mapping[str, str] | None = None,
) -> Command:
    """Parse one `prefix:argument` command expression.

    Prefixes: ``open``, ``bg-open``, ``app``, ``shell``, ``consumer`` and
    ``key`` (a chord, e.g. ``key:left_command+left_option+8``).
    """

    prefix, sep, arg = expr.partition(":")
    prefix = prefix.strip().lower()
    arg = arg.strip()
    if not sep or not arg:
        raise ValueError(f"invalid command expression (expected prefix:argument): {expr!r}")

    if prefix == "key":
        key, modifiers = parse_chord(arg, alias_key=alias_key, alias_mod=alias_mod)
        return emit(key, *modifiers)

    factory = _COMMAND_PREFIXES.get(prefix)
    if factory is None:
        raise ValueError(f"unknown command prefix: {prefix!r} (from {expr!r})")
    return factory(arg)


def parse_commands(
    exprs: Iterable[str],
    *,
    alias_key: Mapping[str, str] | None = None,
    alias_mod: Mapping[str, str] | None = None,
) -> Command:
    """Merge several command expressions into one command, effects in order."""

    parsed = [parse_command(e, alias_key=alias_key, alias_mod=alias_mod) for e in exprs]
    if not parsed:
        raise ValueError("command list is empty")
    if len(parsed) == 1:
        return parsed[0]

    descriptions = [c.description for c in parsed if c.description]
    return Command(
        effects=[effect for c in parsed for effect in c.effects],
        description="; ".join(descriptions) or None,
    )
