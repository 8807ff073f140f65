from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, Union

from .board import Position
from .inventory import Inventory

logger = logging.getLogger(__name__)


class PlayerKind(Enum):
    EXPLORER = auto()
    GNOME = auto()
    LEPRECHAUN = auto()


@dataclass
class Explorer:
    """The human-controlled player. Energy is replenished by eating food."""

    name: str
    position: Position
    inventory: Inventory = field(default_factory=Inventory)
    energy: int = 0

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.EXPLORER


@dataclass
class Gnome:
    name: str
    position: Position
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.GNOME


@dataclass
class Leprechaun:
    name: str
    position: Position
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def kind(self) -> PlayerKind:
        return PlayerKind.LEPRECHAUN


Player = Union[Explorer, Gnome, Leprechaun]
Players = Deque[Player]


def make_players(*players: Player) -> Players:
    return deque(players)


def is_occupant(player: Player, position: Position) -> bool:
    return player.position == position


def take_active(players: Players, index: int) -> Player:
    """Remove the player at ``index`` so it can act while the rest wait.

    Raises:
        IndexError: If ``index`` does not address a player.
    """
    if not 0 <= index < len(players):
        raise IndexError(f"No player at index {index} (have {len(players)})")
    player = players[index]
    del players[index]
    logger.debug("Took active player %s from slot %d", player.name, index)
    return player


def return_active(players: Players, player: Player, index: int) -> None:
    """Hand the active player back to the slot it was taken from."""
    players.insert(index, player)
    logger.debug("Returned active player %s to slot %d", player.name, index)


__all__ = [
    "PlayerKind",
    "Explorer",
    "Gnome",
    "Leprechaun",
    "Player",
    "Players",
    "make_players",
    "is_occupant",
    "take_active",
    "return_active",
]
