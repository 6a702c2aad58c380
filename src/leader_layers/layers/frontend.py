from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping
import tomllib

from leader_layers.karabiner.models.key_code import KeyCode

from .config import Config
from .dsl import parse_command, parse_commands, parse_key
from .ir import Entry, Layers, Sublayer


class LayerFrontend:
    """Parse config (TOML) into a leader layer tree."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML config file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Mapping[str, Any]) -> Config:
        return Config.model_validate(config)

    def parse_layers(self, config: Config) -> Layers:
        """Turn the `[layers]` table into the tree: tables are sublayers, strings commands."""

        return self._parse_table(config.layers, config=config, path=())

    def _parse_table(
        self, table: Mapping[str, Any], *, config: Config, path: tuple[KeyCode, ...]
    ) -> Dict[KeyCode, Entry]:
        entries: Dict[KeyCode, Entry] = {}
        for raw_key, value in table.items():
            key = parse_key(raw_key, alias_key=config.alias.key)
            if key in entries:
                raise ValueError(f"duplicate key {key.value!r} (from {raw_key!r})")
            entries[key] = self._parse_entry(key, value, config=config, path=(*path, key))
        return entries

    def _parse_entry(
        self, key: KeyCode, value: Any, *, config: Config, path: tuple[KeyCode, ...]
    ) -> Entry:
        aliases = dict(alias_key=config.alias.key, alias_mod=config.alias.mod)
        if isinstance(value, dict):
            return Sublayer(
                name=key,
                entries=self._parse_table(value, config=config, path=path),
            )
        if isinstance(value, str):
            return parse_command(value, **aliases)
        if isinstance(value, list):
            if not all(isinstance(item, str) for item in value):
                raise TypeError(f"{'>'.join(k.value for k in path)}: command lists must hold strings")
            return parse_commands(value, **aliases)
        raise TypeError(
            f"{'>'.join(k.value for k in path)}: expected a table, string or list of strings, "
            f"got {type(value).__name__}"
        )
