from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field

from leader_layers.karabiner.models.key_code import KeyCode
from leader_layers.karabiner.models.modifiers import Modifier


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class EmitKey(_Frozen):
    """Send a key (+ optional modifiers)."""

    kind: Literal["key"] = "key"
    key: KeyCode
    modifiers: List[Modifier] = Field(default_factory=list)


class EmitConsumerKey(_Frozen):
    """Send a consumer (media) key, e.g. `dictation`."""

    kind: Literal["consumer_key"] = "consumer_key"
    key: str


class RunShell(_Frozen):
    kind: Literal["shell"] = "shell"
    command: str


class SetFlag(_Frozen):
    kind: Literal["set_variable"] = "set_variable"
    name: str
    value: str | int


Effect: TypeAlias = Annotated[
    Union[EmitKey, EmitConsumerKey, RunShell, SetFlag], Field(discriminator="kind")
]


class Command(_Frozen):
    """Leaf of a layer tree: the effects one key press fires, in order."""

    kind: Literal["command"] = "command"
    effects: List[Effect] = Field(min_length=1)
    description: Optional[str] = None


class Sublayer(_Frozen):
    """A named modal layer: while it is active, `entries` are the live bindings."""

    kind: Literal["sublayer"] = "sublayer"
    name: KeyCode
    entries: Dict[KeyCode, Entry] = Field(default_factory=dict)
    description: Optional[str] = None


Entry: TypeAlias = Annotated[Union[Command, Sublayer], Field(discriminator="kind")]

Layers: TypeAlias = Dict[KeyCode, Entry]

Sublayer.model_rebuild()
