from __future__ import annotations

from pathlib import Path
import argparse
import logging
import os
import tempfile

from leader_layers.layers.config import Config
from leader_layers.layers.dsl import parse_chord, parse_key
from leader_layers.layers.frontend import LayerFrontend

from .backend import SublayerBackend
from .document import build_document, dump_json
from .errors import AmbiguousTrigger
from .leader import activate_leader_rule, deactivate_leader_rule
from .models.document import KarabinerDocument
from .models.rule import Rule
from .remap import remap_rule

logger = logging.getLogger(__name__)


def compile_config(config: Config) -> KarabinerDocument:
    """Config -> complete karabiner.json document (in memory)."""

    frontend = LayerFrontend()
    layers = frontend.parse_layers(config)
    leader = config.leader
    aliases = dict(alias_key=config.alias.key, alias_mod=config.alias.mod)

    rules: list[Rule] = []
    for remap in config.remap:
        mappings = [
            (parse_chord(src, **aliases), parse_chord(dst, **aliases))
            for src, dst in remap.keys.items()
        ]
        rules.append(remap_rule(remap.description, mappings))

    if leader.activate:
        key, modifiers = parse_chord(leader.activate, **aliases)
        rules.append(activate_leader_rule(key, modifiers, variable=leader.variable))
    if leader.deactivate:
        keys = [parse_key(k, alias_key=config.alias.key) for k in leader.deactivate]
        # the deactivate rule comes first and would swallow these keys
        for key in layers:
            if key in keys:
                raise AmbiguousTrigger((), key)
        rules.append(deactivate_leader_rule(keys, variable=leader.variable))

    backend = SublayerBackend(
        leader_variable=leader.variable,
        escape_key=parse_key(leader.escape, alias_key=config.alias.key),
    )
    rules.extend(backend.compile(layers))

    return build_document(rules, profile=config.profile, show_in_menu_bar=config.show_in_menu_bar)


def compile_toml_config(in_path: str | Path, out_path: str | Path, *, indent: int | None = 2) -> None:
    """End-to-end compilation: TOML file -> karabiner.json.

    The output file is only touched once compilation succeeded.
    """

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = LayerFrontend()
    config = frontend.parse_config(frontend.load_toml(in_path))
    document = compile_config(config)

    _write_atomic(out_path, dump_json(document, indent=indent) + "\n")
    rule_count = sum(len(p.complex_modifications.rules) for p in document.profiles)
    logger.info("wrote %d rules to %s", rule_count, out_path)


def _write_atomic(path: Path, text: str) -> None:
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate karabiner.json from a leader layer config toml."
    )
    parser.add_argument("config", help="Layer config toml path (e.g. layers.toml)")
    parser.add_argument("out", help="Output karabiner.json path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each compiled sublayer")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    compile_toml_config(args.config, args.out, indent=args.indent)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
