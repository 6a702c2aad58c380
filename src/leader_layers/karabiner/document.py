from __future__ import annotations

from typing import Iterable

from .models.document import ComplexModifications, GlobalSettings, KarabinerDocument, Profile
from .models.rule import Rule


def build_document(
    rules: Iterable[Rule],
    *,
    profile: str = "Default",
    show_in_menu_bar: bool = False,
) -> KarabinerDocument:
    """Wrap compiled rules into a complete `karabiner.json` with a single profile."""

    return KarabinerDocument(
        global_=GlobalSettings(show_in_menu_bar=show_in_menu_bar),
        profiles=[
            Profile(
                name=profile,
                complex_modifications=ComplexModifications(rules=list(rules)),
            )
        ],
    )


def dump_json(model: KarabinerDocument | Rule, *, indent: int | None = 2) -> str:
    return model.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
