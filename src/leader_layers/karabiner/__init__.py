from __future__ import annotations

from .backend import LEADER_VARIABLE, SublayerBackend
from .errors import AmbiguousTrigger, ConfigurationError, DuplicateFlagName
from .models.condition import ConditionType, VarCondition
from .models.from_event import FromEvent
from .models.key_code import KeyCode
from .models.manipulator import Manipulator
from .models.modifiers import FromModifiers, Modifier
from .models.rule import Rule
from .models.to_event import ToEvent, Variable
from .naming import FlagNamingStrategy, PrefixNaming, flag_name
from .remap import remap_rule

__all__ = [
    "AmbiguousTrigger",
    "ConditionType",
    "ConfigurationError",
    "DuplicateFlagName",
    "FlagNamingStrategy",
    "FromEvent",
    "FromModifiers",
    "KeyCode",
    "LEADER_VARIABLE",
    "Manipulator",
    "Modifier",
    "PrefixNaming",
    "Rule",
    "SublayerBackend",
    "ToEvent",
    "Variable",
    "VarCondition",
    "flag_name",
    "remap_rule",
]
