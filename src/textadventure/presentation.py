from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

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

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Observational sink for rule context. Never feeds data back to the engine."""

    def show_inventory(self, owner: str, inventory: Inventory) -> None:  # pragma: no cover - protocol
        ...

    def show_message(self, text: str) -> None:  # pragma: no cover - protocol
        ...


def describe_item(item: Item) -> str:
    if isinstance(item, Food):
        return f"food: {item.name} (+{item.energy} energy)"
    if isinstance(item, GoldCoin):
        return f"gold coin ({item.denom})"
    if isinstance(item, FakeCoin):
        return f"fake coin ({item.denom})"
    if isinstance(item, Teleporter):
        return "teleporter"
    if isinstance(item, Torch):
        return "torch"
    if isinstance(item, MagicWord):
        return f"magic word '{item.word}' (room {item.room}, {item.wall.value} wall)"
    if isinstance(item, FakeWord):
        return f"word '{item.word}'"
    return repr(item)


def format_inventory(owner: str, inventory: Inventory) -> str:
    lines = [f"{owner} has:"]
    if inventory.is_empty():
        lines.append("nothing")
    else:
        lines.extend(describe_item(item) for item in inventory)
    return "\n".join(lines)


class ConsolePresenter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def show_inventory(self, owner: str, inventory: Inventory) -> None:
        self.stream.write(format_inventory(owner, inventory) + "\n\n")

    def show_message(self, text: str) -> None:
        self.stream.write(text + "\n")


class LoggingPresenter:
    def show_inventory(self, owner: str, inventory: Inventory) -> None:
        logger.info("%s", format_inventory(owner, inventory).replace("\n", " | "))

    def show_message(self, text: str) -> None:
        logger.info("%s", text)


class NullPresenter:
    def show_inventory(self, owner: str, inventory: Inventory) -> None:
        pass

    def show_message(self, text: str) -> None:
        pass


__all__ = [
    "Presenter",
    "describe_item",
    "format_inventory",
    "ConsolePresenter",
    "LoggingPresenter",
    "NullPresenter",
]
