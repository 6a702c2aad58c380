from __future__ import annotations

from typing import Iterable, List, Tuple

from .models.from_event import FromEvent
from .models.key_code import KeyCode
from .models.manipulator import Manipulator
from .models.modifiers import FromModifiers, Modifier
from .models.rule import Rule
from .models.to_event import ToEvent

Chord = Tuple[KeyCode, List[Modifier]]


def remap_rule(description: str, mappings: Iterable[Tuple[Chord, Chord]]) -> Rule:
    """Unconditional chord -> chord remaps, e.g. right_command+j -> left_arrow.

    The source modifiers are mandatory, any other modifier is passed through.
    """

    manipulators: List[Manipulator] = []
    for (from_key, from_mods), (to_key, to_mods) in mappings:
        manipulators.append(
            Manipulator(
                from_=FromEvent(key_code=from_key, modifiers=FromModifiers.accept_any(from_mods)),
                to=[ToEvent(key_code=to_key, modifiers=list(to_mods) or None)],
            )
        )
    if not manipulators:
        raise ValueError(f"remap {description!r} has no mappings")
    return Rule(description=description, manipulators=manipulators)
