import logging
import textwrap
from pathlib import Path

import pytest
import yaml

from textadventure.cli import main
from textadventure.errors import PreconditionViolation

SCENARIO = textwrap.dedent(
    """
    players:
      - kind: explorer
        name: Ada
        position: [2, 3]
        items:
          - {type: gold_coin, denom: 1}
          - {type: food, name: apple, energy: 5}
      - kind: gnome
        name: Grub
        position: [2, 3]
        items:
          - {type: fake_coin, denom: 1}
      - kind: leprechaun
        name: Lucky
        position: [1, 1]
    """
)


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "scenario.yaml"
    path.write_text(SCENARIO, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_gnome_encounter_writes_result(scenario_file: Path, tmp_path: Path, capsys):
    out = tmp_path / "result.yaml"

    code = main(["encounter", str(scenario_file), "--active", "1", "--choice", "G", "--output", str(out)])

    assert code == 0
    result = yaml.safe_load(out.read_text(encoding="utf-8"))
    names = [p["name"] for p in result["players"]]
    assert names == ["Ada", "Grub", "Lucky"]
    assert result["players"][0]["items"] == [{"type": "food", "name": "apple", "energy": 5}]
    assert result["players"][1]["items"] == [
        {"type": "fake_coin", "denom": 1},
        {"type": "gold_coin", "denom": 1},
    ]
    printed = capsys.readouterr().out
    assert "Grub (gnome) has:" in printed


def test_running_out_of_scripted_choices(scenario_file: Path):
    assert main(["encounter", str(scenario_file), "--active", "0", "--choice", "x"]) == 3


def test_bad_active_index(scenario_file: Path):
    assert main(["encounter", str(scenario_file), "--active", "5", "--choice", "G"]) == 2


def test_invalid_scenario(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("players:\n  - kind: troll\n", encoding="utf-8")
    assert main(["encounter", str(bad), "--active", "0"]) == 2


def test_precondition_violation_is_fatal(scenario_file: Path, monkeypatch):
    def broken(*args, **kwargs):
        raise PreconditionViolation("gold coin vanished")

    monkeypatch.setattr("textadventure.cli.resolve_encounter", broken)
    with pytest.raises(PreconditionViolation):
        main(["encounter", str(scenario_file), "--active", "1", "--choice", "G"])
