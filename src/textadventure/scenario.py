"""Scenario files: the players on the board before an encounter.

A scenario is YAML with a ``players`` list, for example::

    players:
      - kind: explorer
        name: Ada
        position: [2, 3]
        energy: 10
        items:
          - {type: gold_coin, denom: 1}
          - {type: food, name: apple, energy: 5}
      - kind: gnome
        name: Grub
        position: [2, 3]
        items:
          - {type: fake_coin, denom: 1}
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import Draft202012Validator

from .board import Direction, Position
from .errors import ScenarioError
from .inventory import (
    FakeCoin,
    FakeWord,
    Food,
    GoldCoin,
    Inventory,
    Item,
    MagicWord,
    Teleporter,
    Torch,
)
from .players import Explorer, Gnome, Leprechaun, Player, Players, make_players

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_scenario_schema() -> Dict[str, Any]:
    text = resources.files("textadventure.data").joinpath("scenario.schema.json").read_text(encoding="utf-8")
    logger.debug("Loaded scenario schema resource")
    return json.loads(text)


def validate_scenario(data: Any) -> None:
    """Validate raw scenario data against the scenario JSON schema.

    Raises:
        ScenarioError: Wrapping the first schema violation.
    """
    validator = Draft202012Validator(_load_scenario_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("Scenario validation error at %s: %s", list(err.path), err.message)
        first = errors[0]
        raise ScenarioError(f"Invalid scenario at {list(first.path)}: {first.message}") from first


def _position(raw: List[int]) -> Position:
    return Position(int(raw[0]), int(raw[1]))


def item_from_dict(data: Dict[str, Any]) -> Item:
    kind = data["type"]
    if kind == "food":
        return Food(name=str(data["name"]), energy=int(data["energy"]))
    if kind == "gold_coin":
        return GoldCoin(denom=int(data["denom"]))
    if kind == "fake_coin":
        return FakeCoin(denom=int(data["denom"]))
    if kind == "teleporter":
        return Teleporter()
    if kind == "torch":
        return Torch()
    if kind == "magic_word":
        return MagicWord(word=str(data["word"]), room=_position(data["room"]), wall=Direction(data["wall"]))
    if kind == "fake_word":
        return FakeWord(word=str(data["word"]))
    raise ScenarioError(f"Unknown item type: {kind}")


def item_to_dict(item: Item) -> Dict[str, Any]:
    if isinstance(item, Food):
        return {"type": "food", "name": item.name, "energy": item.energy}
    if isinstance(item, GoldCoin):
        return {"type": "gold_coin", "denom": item.denom}
    if isinstance(item, FakeCoin):
        return {"type": "fake_coin", "denom": item.denom}
    if isinstance(item, Teleporter):
        return {"type": "teleporter"}
    if isinstance(item, Torch):
        return {"type": "torch"}
    if isinstance(item, MagicWord):
        return {
            "type": "magic_word",
            "word": item.word,
            "room": [item.room.x, item.room.y],
            "wall": item.wall.value,
        }
    if isinstance(item, FakeWord):
        return {"type": "fake_word", "word": item.word}
    raise TypeError(f"Not an item: {item!r}")


def player_from_dict(data: Dict[str, Any]) -> Player:
    inventory = Inventory(item_from_dict(raw) for raw in data.get("items", []))
    position = _position(data["position"])
    name = str(data["name"])
    kind = data["kind"]
    if kind == "explorer":
        return Explorer(name=name, position=position, inventory=inventory, energy=int(data.get("energy", 0)))
    if kind == "gnome":
        return Gnome(name=name, position=position, inventory=inventory)
    if kind == "leprechaun":
        return Leprechaun(name=name, position=position, inventory=inventory)
    raise ScenarioError(f"Unknown player kind: {kind}")


def player_to_dict(player: Player) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "kind": player.kind.name.lower(),
        "name": player.name,
        "position": [player.position.x, player.position.y],
    }
    if isinstance(player, Explorer):
        data["energy"] = player.energy
    data["items"] = [item_to_dict(item) for item in player.inventory]
    return data


def parse_scenario(data: Any) -> Players:
    validate_scenario(data)
    players = make_players(*(player_from_dict(raw) for raw in data["players"]))
    logger.info("Scenario holds %d player(s)", len(players))
    return players


def load_scenario(path: Path) -> Players:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ScenarioError(f"Cannot read scenario {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ScenarioError(f"Scenario {path} is not valid YAML: {exc}") from exc
    logger.debug("Loaded scenario from %s", path)
    return parse_scenario(data)


def dump_players(players: Players) -> Dict[str, Any]:
    return {"players": [player_to_dict(p) for p in players]}


def save_scenario(players: Players, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(dump_players(players), f, sort_keys=False)
    logger.info("Saved scenario to %s", path)


__all__ = [
    "validate_scenario",
    "item_from_dict",
    "item_to_dict",
    "player_from_dict",
    "player_to_dict",
    "parse_scenario",
    "load_scenario",
    "dump_players",
    "save_scenario",
]
