"""
Text adventure encounter engine.

Headless domain logic for players meeting on a board tile:
- Item and inventory models
- Explorer, gnome and leprechaun players
- Encounter dispatcher rotating through the other players
- Interaction rules (shake down, trick or treat)

Input and presentation are injected through EncounterContext; the CLI wires
them to the console.
"""
from .board import Direction, Position
from .context import EncounterContext
from .encounters import resolve_encounter
from .errors import (
    ChoiceExhausted,
    InvalidChoice,
    PreconditionViolation,
    QueueConsistencyError,
    ScenarioError,
    TextAdventureError,
)
from .inventory import (
    FakeCoin,
    FakeWord,
    Food,
    GoldCoin,
    Inventory,
    MagicWord,
    Teleporter,
    Torch,
    is_fake_coin,
    is_food,
    is_gold_coin,
)
from .players import Explorer, Gnome, Leprechaun, PlayerKind, make_players

__all__ = [
    "Direction",
    "Position",
    "EncounterContext",
    "resolve_encounter",
    "TextAdventureError",
    "PreconditionViolation",
    "QueueConsistencyError",
    "InvalidChoice",
    "ChoiceExhausted",
    "ScenarioError",
    "Food",
    "GoldCoin",
    "FakeCoin",
    "Teleporter",
    "Torch",
    "MagicWord",
    "FakeWord",
    "Inventory",
    "is_food",
    "is_fake_coin",
    "is_gold_coin",
    "Explorer",
    "Gnome",
    "Leprechaun",
    "PlayerKind",
    "make_players",
]
