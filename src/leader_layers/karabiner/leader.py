from __future__ import annotations

from typing import Iterable, List

from .backend import LEADER_VARIABLE
from .models.condition import VarCondition
from .models.from_event import FromEvent
from .models.key_code import KeyCode
from .models.manipulator import Manipulator
from .models.modifiers import FromModifiers, Modifier
from .models.rule import Rule
from .models.to_event import ToEvent


def activate_leader_rule(
    key: KeyCode | str,
    modifiers: Iterable[Modifier | str] = (),
    *,
    variable: str = LEADER_VARIABLE,
) -> Rule:
    """The chord that turns leader mode on (only while it is off)."""

    key = KeyCode(key)
    mandatory = [Modifier(mod) for mod in modifiers]
    chord = "+".join([*(mod.value for mod in mandatory), key.value])
    return Rule(
        description="Activate Leader Key",
        manipulators=[
            Manipulator(
                description=f"{chord} -> Activate Leader Key",
                from_=FromEvent(
                    key_code=key,
                    modifiers=FromModifiers(mandatory=mandatory) if mandatory else None,
                ),
                to=[ToEvent.set_var(variable, 1)],
                conditions=[VarCondition(name=variable, value=0)],
            )
        ],
    )


def deactivate_leader_rule(
    keys: Iterable[KeyCode | str] = (KeyCode.CAPS_LOCK, KeyCode.ESCAPE),
    *,
    variable: str = LEADER_VARIABLE,
) -> Rule:
    """Keys that leave leader mode without picking a sublayer."""

    manipulators: List[Manipulator] = []
    for key in keys:
        key = KeyCode(key)
        manipulators.append(
            Manipulator(
                description=f"{key.value} -> Deactivate Leader Key",
                from_=FromEvent(key_code=key, modifiers=FromModifiers.accept_any()),
                to=[ToEvent.set_var(variable, 0)],
                conditions=[VarCondition(name=variable, value=1)],
            )
        )
    if not manipulators:
        raise ValueError("at least one deactivation key is required")
    return Rule(description="Deactivate Leader Key", manipulators=manipulators)
