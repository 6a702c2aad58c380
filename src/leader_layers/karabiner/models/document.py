from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .rule import Rule


class GlobalSettings(BaseModel):
    show_in_menu_bar: bool = False


class ComplexModifications(BaseModel):
    rules: List[Rule] = Field(default_factory=list)


class Profile(BaseModel):
    name: str = "Default"
    complex_modifications: ComplexModifications = Field(default_factory=ComplexModifications)


class KarabinerDocument(BaseModel):
    """
    Whole `karabiner.json` document.

    https://karabiner-elements.pqrs.org/docs/json/root-data-structure/
    """

    model_config = ConfigDict(populate_by_name=True)

    global_: GlobalSettings = Field(default_factory=GlobalSettings, alias="global")
    profiles: List[Profile] = Field(default_factory=list)
