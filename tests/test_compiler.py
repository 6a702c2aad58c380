from __future__ import annotations

import json
from pathlib import Path

import pytest

from leader_layers.karabiner.compiler import compile_toml_config, main
from leader_layers.karabiner.errors import AmbiguousTrigger

FIXTURE = Path(__file__).with_name("test_layers.toml")


def _rules(path: Path) -> list[dict]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return data["profiles"][0]["complex_modifications"]["rules"]


def test_compile_toml_config_writes_karabiner_document(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    compile_toml_config(FIXTURE, out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["global"] == {"show_in_menu_bar": False}
    assert data["profiles"][0]["name"] == "Default"

    rules = _rules(out)
    assert [r["description"] for r in rules] == [
        "Activate Leader Key",
        "Deactivate Leader Key",
        "Leader Key + spacebar",
        'Leader Key sublayer "s"',
        'Leader Key sublayer "u"',
        'Leader Key sublayer "w"',
        'Leader Key sublayer "w > q"',
    ]

    (activate,) = rules[0]["manipulators"]
    assert activate["from"] == {
        "key_code": "spacebar",
        "modifiers": {"mandatory": ["left_shift", "left_control", "left_option"]},
    }
    assert activate["to"] == [{"set_variable": {"name": "leader", "value": 1}}]
    assert activate["conditions"] == [{"type": "variable_if", "name": "leader", "value": 0}]


def test_compiled_manipulator_json_shape(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    compile_toml_config(FIXTURE, out)

    search = _rules(out)[3]["manipulators"]
    enable = search[0]
    assert enable == {
        "description": "Enable Leader sublayer s",
        "type": "basic",
        "from": {"key_code": "s", "modifiers": {"optional": ["any"]}},
        "to": [
            {"set_variable": {"name": "sublayer_s", "value": 1}},
            {"set_variable": {"name": "leader", "value": 0}},
        ],
        "conditions": [
            {"type": "variable_if", "name": "sublayer_u", "value": 0},
            {"type": "variable_if", "name": "sublayer_w", "value": 0},
            {"type": "variable_if", "name": "sublayer_w_q", "value": 0},
            {"type": "variable_if", "name": "leader", "value": 1},
        ],
    }

    one_password = search[2]
    assert one_password["from"]["key_code"] == "1"
    assert one_password["to"][0] == {
        "shell_command": "open raycast://extensions/khasbilegt/1password/item-list"
    }

    zoom = _rules(out)[4]["manipulators"][2]
    assert zoom["to"][0] == {"key_code": "8", "modifiers": ["left_command", "left_option"]}
    assert "description" not in zoom


def test_compile_is_byte_identical(tmp_path: Path) -> None:
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"

    compile_toml_config(FIXTURE, first)
    compile_toml_config(FIXTURE, second)

    assert first.read_bytes() == second.read_bytes()


def test_failed_compile_writes_nothing(tmp_path: Path) -> None:
    config = tmp_path / "bad.toml"
    config.write_text('[layers.s]\ns = "open:x"\n', encoding="utf-8")
    out = tmp_path / "karabiner.json"

    with pytest.raises(AmbiguousTrigger):
        compile_toml_config(config, out)

    assert not out.exists()


def test_leader_section_overrides(tmp_path: Path) -> None:
    config = tmp_path / "layers.toml"
    config.write_text(
        "\n".join(
            [
                'profile = "Work"',
                "[leader]",
                'variable = "hyper_leader"',
                'escape = "caps_lock"',
                "deactivate = []",
                "[layers.s]",
                'escape = "open:x"',
            ]
        ),
        encoding="utf-8",
    )
    out = tmp_path / "karabiner.json"

    compile_toml_config(config, out, indent=None)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["profiles"][0]["name"] == "Work"
    (search,) = data["profiles"][0]["complex_modifications"]["rules"]
    enable, disable, leaf = search["manipulators"]
    assert enable["conditions"] == [{"type": "variable_if", "name": "hyper_leader", "value": 1}]
    assert disable["from"]["key_code"] == "caps_lock"
    assert leaf["from"]["key_code"] == "escape"


def test_main(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"

    assert main([str(FIXTURE), str(out), "--indent", "4", "-v"]) == 0
    assert out.read_text(encoding="utf-8").startswith("{\n    ")


@pytest.mark.parametrize(
    "layers",
    ['caps_lock = "shell:hello"', '[layers.escape]\na = "open:x"'],
)
def test_top_level_key_on_deactivate_key_is_ambiguous(tmp_path: Path, layers: str) -> None:
    config = tmp_path / "layers.toml"
    if layers.startswith("["):
        config.write_text(layers + "\n", encoding="utf-8")
    else:
        config.write_text("[layers]\n" + layers + "\n", encoding="utf-8")

    with pytest.raises(AmbiguousTrigger):
        compile_toml_config(config, tmp_path / "karabiner.json")


def test_deactivate_keys_free_when_overridden(tmp_path: Path) -> None:
    config = tmp_path / "layers.toml"
    config.write_text(
        '[leader]\ndeactivate = ["escape"]\n[layers]\ncaps_lock = "shell:hello"\n',
        encoding="utf-8",
    )
    out = tmp_path / "karabiner.json"

    compile_toml_config(config, out)

    assert [r["description"] for r in _rules(out)] == [
        "Deactivate Leader Key",
        "Leader Key + caps_lock",
    ]


def test_remap_rules_come_first(tmp_path: Path) -> None:
    config = tmp_path / "layers.toml"
    config.write_text(
        "\n".join(
            [
                "[alias.mod]",
                'rcmd = "right_command"',
                "",
                "[[remap]]",
                'description = "Change right_command+jkli to arrow keys"',
                "keys = { \"rcmd+j\" = \"left_arrow\", \"rcmd+k\" = \"down_arrow\" }",
                "",
                "[[remap]]",
                'description = "Change Caps Lock to Meh when held"',
                'keys = { caps_lock = "left_control+left_option+left_shift" }',
                "",
                "[leader]",
                'activate = "left_shift+left_control+left_option+spacebar"',
                'deactivate = ["escape"]',
                "",
                "[layers.s]",
                'a = "open:x"',
            ]
        ),
        encoding="utf-8",
    )
    out = tmp_path / "karabiner.json"

    compile_toml_config(config, out)

    rules = _rules(out)
    assert [r["description"] for r in rules] == [
        "Change right_command+jkli to arrow keys",
        "Change Caps Lock to Meh when held",
        "Activate Leader Key",
        "Deactivate Leader Key",
        'Leader Key sublayer "s"',
    ]

    left, down = rules[0]["manipulators"]
    assert left == {
        "type": "basic",
        "from": {
            "key_code": "j",
            "modifiers": {"mandatory": ["right_command"], "optional": ["any"]},
        },
        "to": [{"key_code": "left_arrow"}],
        "conditions": [],
    }
    assert down["from"]["key_code"] == "k"

    (meh,) = rules[1]["manipulators"]
    assert meh["from"] == {"key_code": "caps_lock", "modifiers": {"optional": ["any"]}}
    assert meh["to"] == [{"key_code": "left_shift", "modifiers": ["left_control", "left_option"]}]


def test_empty_remap_rejected(tmp_path: Path) -> None:
    config = tmp_path / "layers.toml"
    config.write_text('[[remap]]\ndescription = "nothing"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="no mappings"):
        compile_toml_config(config, tmp_path / "karabiner.json")


def test_failed_write_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    out = tmp_path / "karabiner.json"
    out.write_text("previous\n", encoding="utf-8")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("leader_layers.karabiner.compiler.os.replace", _fail)

    with pytest.raises(OSError, match="disk full"):
        compile_toml_config(FIXTURE, out)

    assert out.read_text(encoding="utf-8") == "previous\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["karabiner.json"]


def test_successful_write_leaves_no_temp_files(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    out.write_text("previous\n", encoding="utf-8")

    compile_toml_config(FIXTURE, out)

    assert json.loads(out.read_text(encoding="utf-8"))["profiles"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["karabiner.json"]
