from __future__ import annotations

from .commands import app, bg_open, consumer, emit, layer, open_, shell
from .dsl import parse_chord, parse_command, parse_commands, parse_key
from .frontend import LayerFrontend
from .ir import Command, Effect, EmitConsumerKey, EmitKey, Entry, Layers, RunShell, SetFlag, Sublayer

__all__ = [
    "Command",
    "Effect",
    "EmitConsumerKey",
    "EmitKey",
    "Entry",
    "LayerFrontend",
    "Layers",
    "RunShell",
    "SetFlag",
    "Sublayer",
    "app",
    "bg_open",
    "consumer",
    "emit",
    "layer",
    "open_",
    "parse_chord",
    "parse_command",
    "parse_commands",
    "parse_key",
    "shell",
]
