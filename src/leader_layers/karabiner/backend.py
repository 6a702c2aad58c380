from __future__ import annotations

import logging
from typing import Collection, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from pydantic import TypeAdapter

from leader_layers.layers.ir import (
    Command,
    Effect,
    EmitConsumerKey,
    EmitKey,
    Layers,
    RunShell,
    SetFlag,
    Sublayer,
)

from .errors import AmbiguousTrigger, ConfigurationError, DuplicateFlagName
from .models.condition import VarCondition
from .models.from_event import FromEvent
from .models.key_code import KeyCode
from .models.manipulator import Manipulator
from .models.modifiers import FromModifiers
from .models.rule import Rule
from .models.to_event import ToEvent
from .naming import FlagNamingStrategy, PrefixNaming

logger = logging.getLogger(__name__)

LEADER_VARIABLE = "leader"

_LAYERS = TypeAdapter(Layers)

KeyPath = Tuple[KeyCode, ...]


class SublayerBackend:
    """Compile a leader layer tree into Karabiner rules.

    Every sublayer gets its own variable. A sublayer can only be entered
    while the leader (or its parent sublayer) is active and every other
    sublayer variable is 0, so at most one sublayer is live at a time.
    """

    def __init__(
        self,
        *,
        naming: FlagNamingStrategy | None = None,
        leader_variable: str = LEADER_VARIABLE,
        escape_key: KeyCode | str = KeyCode.ESCAPE,
    ) -> None:
        self._naming = naming or PrefixNaming()
        self._leader = leader_variable
        self._escape = KeyCode(escape_key)

    def compile(self, layers: Mapping[KeyCode | str, Command | Sublayer]) -> List[Rule]:
        tree: Layers = _LAYERS.validate_python(dict(layers))
        for key, entry in tree.items():
            if isinstance(entry, Sublayer) and entry.name != key:
                raise ConfigurationError(
                    f"sublayer {entry.name.value!r} is registered under key {key.value!r}"
                )
            if isinstance(entry, Sublayer) and key == self._escape:
                raise AmbiguousTrigger((), key)

        # All variables have to be known up front: each activation rule
        # guards on every other sublayer being off.
        flags = self.collect_flag_names(tree)
        all_flag_names = set(flags)
        self._check_reserved_variables(tree, {*all_flag_names, self._leader})

        rules: List[Rule] = []
        for key, entry in tree.items():
            if isinstance(entry, Command):
                rules.append(
                    Rule(
                        description=f"Leader Key + {key.value}",
                        manipulators=[self._lower_leader_command(key, entry)],
                    )
                )
                continue

            for path, node, parent_flag in _walk(entry, (), self._leader, self._naming):
                rules.append(
                    Rule(
                        description=f'Leader Key sublayer "{_describe(path)}"',
                        manipulators=self.compile_sublayer(
                            node, all_flag_names, path=path, parent_flag=parent_flag
                        ),
                    )
                )

        logger.debug("compiled %d rule groups (%d sublayers)", len(rules), len(flags))
        return rules

    def collect_flag_names(self, tree: Layers) -> Dict[str, KeyPath]:
        """Map every sublayer variable to the key path it belongs to."""

        flags: Dict[str, KeyPath] = {}
        for entry in tree.values():
            if not isinstance(entry, Sublayer):
                continue
            for path, _node, _parent in _walk(entry, (), self._leader, self._naming):
                flag = self._naming.name_for(path)
                if flag == self._leader:
                    raise DuplicateFlagName(flag, (), path)
                if flag in flags:
                    raise DuplicateFlagName(flag, flags[flag], path)
                flags[flag] = path
        return flags

    def _check_reserved_variables(self, tree: Layers, reserved: Collection[str]) -> None:
        """Commands may not write the leader or any sublayer variable."""

        for path, command in _walk_commands(tree, ()):
            for effect in command.effects:
                if isinstance(effect, SetFlag) and effect.name in reserved:
                    raise ConfigurationError(
                        f"command {_describe(path)!r} sets reserved variable {effect.name!r}"
                    )

    def compile_sublayer(
        self,
        node: Sublayer,
        all_flag_names: Collection[str],
        *,
        path: Optional[Sequence[KeyCode]] = None,
        parent_flag: Optional[str] = None,
    ) -> List[Manipulator]:
        """Activation, escape and one rule per command entry of `node`.

        Nested sublayers among the entries are not lowered here; `compile`
        emits them as their own rule groups.
        """

        path = tuple(path) if path is not None else (node.name,)
        parent_flag = parent_flag or self._leader
        flag = self._naming.name_for(path)

        for key in node.entries:
            if key == node.name or key == self._escape:
                raise AmbiguousTrigger(path, key)
        if not node.entries:
            logger.warning("sublayer %r has no entries", _describe(path))

        activate_to = [ToEvent.set_var(flag, 1), ToEvent.set_var(parent_flag, 0)]
        if parent_flag != self._leader:
            activate_to.append(ToEvent.set_var(self._leader, 0))

        manipulators = [
            Manipulator(
                description=f"Enable Leader sublayer {_describe(path)}",
                from_=_from_key(node.name),
                to=activate_to,
                conditions=[
                    *(
                        _var_if(other, 0)
                        for other in sorted(all_flag_names)
                        if other not in (flag, parent_flag)
                    ),
                    _var_if(parent_flag, 1),
                ],
            ),
            Manipulator(
                description=f"Disable Leader sublayer {_describe(path)}",
                from_=_from_key(self._escape),
                to=[ToEvent.set_var(flag, 0)],
                conditions=[_var_if(flag, 1)],
            ),
        ]

        for key, entry in node.entries.items():
            if not isinstance(entry, Command):
                continue
            manipulators.append(
                Manipulator(
                    description=entry.description,
                    from_=_from_key(key),
                    to=[
                        *_lower_effects(entry.effects),
                        ToEvent.set_var(flag, 0),
                        ToEvent.set_var(self._leader, 0),
                    ],
                    conditions=[_var_if(flag, 1)],
                )
            )

        logger.debug("sublayer %r -> %d manipulators", _describe(path), len(manipulators))
        return manipulators

    def _lower_leader_command(self, key: KeyCode, command: Command) -> Manipulator:
        return Manipulator(
            description=command.description,
            from_=_from_key(key),
            to=[*_lower_effects(command.effects), ToEvent.set_var(self._leader, 0)],
            conditions=[_var_if(self._leader, 1)],
        )


def _walk(
    node: Sublayer,
    parent_path: KeyPath,
    parent_flag: str,
    naming: FlagNamingStrategy,
) -> Iterator[Tuple[KeyPath, Sublayer, str]]:
    """Depth-first (path, sublayer, parent variable), parents before children."""

    path = (*parent_path, node.name)
    yield path, node, parent_flag
    for entry in node.entries.values():
        if isinstance(entry, Sublayer):
            yield from _walk(entry, path, naming.name_for(path), naming)


def _walk_commands(entries: Layers, parent_path: KeyPath) -> Iterator[Tuple[KeyPath, Command]]:
    for key, entry in entries.items():
        path = (*parent_path, key)
        if isinstance(entry, Command):
            yield path, entry
        else:
            yield from _walk_commands(entry.entries, path)


def _lower_effects(effects: Sequence[Effect]) -> List[ToEvent]:
    events: List[ToEvent] = []
    for effect in effects:
        if isinstance(effect, EmitKey):
            events.append(ToEvent(key_code=effect.key, modifiers=list(effect.modifiers) or None))
        elif isinstance(effect, EmitConsumerKey):
            events.append(ToEvent(consumer_key_code=effect.key))
        elif isinstance(effect, RunShell):
            events.append(ToEvent(shell_command=effect.command))
        elif isinstance(effect, SetFlag):
            events.append(ToEvent.set_var(effect.name, effect.value))
        else:
            raise ValueError(f"unsupported effect: {effect!r}")
    return events


def _from_key(key: KeyCode) -> FromEvent:
    return FromEvent(key_code=key, modifiers=FromModifiers.accept_any())


def _var_if(name: str, value: int) -> VarCondition:
    return VarCondition(name=name, value=value)


def _describe(path: Sequence[KeyCode]) -> str:
    return " > ".join(KeyCode(key).value for key in path)
