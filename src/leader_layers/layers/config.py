from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class AliasConfig(BaseModel):
    key: Dict[str, str] = Field(default_factory=dict)
    mod: Dict[str, str] = Field(default_factory=dict)


class LeaderConfig(BaseModel):
    variable: str = "leader"
    escape: str = "escape"
    # e.g. "left_shift+left_control+left_option+spacebar"; no trigger rule when unset
    activate: str | None = None
    deactivate: List[str] = Field(default_factory=lambda: ["caps_lock", "escape"])


class RemapConfig(BaseModel):
    description: str
    # "right_command+j" = "left_arrow"
    keys: Dict[str, str] = Field(default_factory=dict)


class Config(BaseModel):
    profile: str = "Default"
    show_in_menu_bar: bool = False
    alias: AliasConfig = Field(default_factory=AliasConfig)
    leader: LeaderConfig = Field(default_factory=LeaderConfig)
    remap: List[RemapConfig] = Field(default_factory=list)
    # key -> command expression(s) or nested table (sublayer)
    layers: Dict[str, Any] = Field(default_factory=dict)
