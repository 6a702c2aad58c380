from __future__ import annotations

from typing import Mapping

from leader_layers.karabiner.models.key_code import KeyCode
from leader_layers.karabiner.models.modifiers import Modifier

from .ir import Command, EmitConsumerKey, EmitKey, Entry, RunShell, Sublayer


def shell(what: str, description: str | None = None) -> Command:
    """Run a shell command."""

    return Command(
        effects=[RunShell(command=what)],
        description=description or f"Run shell command: {what}",
    )


def open_(what: str) -> Command:
    """Shortcut for the `open` shell command (URL, file or `-a` app)."""

    return shell(f"open {what}", f"Open {what}")


def bg_open(what: str) -> Command:
    """`open` without bringing the target to the front."""

    return shell(f"open -g {what}", f"Open {what} in background")


def app(name: str) -> Command:
    return open_(f"-a '{name}.app'")


def emit(key: KeyCode | str, *modifiers: Modifier | str, description: str | None = None) -> Command:
    return Command(
        effects=[EmitKey(key=key, modifiers=list(modifiers))],
        description=description,
    )


def consumer(key: str, description: str | None = None) -> Command:
    return Command(effects=[EmitConsumerKey(key=key)], description=description)


def layer(
    name: KeyCode | str,
    entries: Mapping[KeyCode | str, Entry],
    description: str | None = None,
) -> Sublayer:
    return Sublayer(name=name, entries=dict(entries), description=description)
