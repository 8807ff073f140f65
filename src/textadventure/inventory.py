from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Union

from .board import Direction, Position
from .errors import PreconditionViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    name: str
    energy: int


@dataclass(frozen=True)
class GoldCoin:
    denom: int


@dataclass(frozen=True)
class FakeCoin:
    denom: int


@dataclass(frozen=True)
class Teleporter:
    pass


@dataclass(frozen=True)
class Torch:
    pass


@dataclass(frozen=True)
class MagicWord:
    """A word that opens the given wall of the given room."""

    word: str
    room: Position
    wall: Direction


@dataclass(frozen=True)
class FakeWord:
    word: str


Item = Union[Food, GoldCoin, FakeCoin, Teleporter, Torch, MagicWord, FakeWord]
ItemPredicate = Callable[[Item], bool]


def is_food(item: Item) -> bool:
    return isinstance(item, Food)


def is_fake_coin(item: Item) -> bool:
    return isinstance(item, FakeCoin)


def is_gold_coin(item: Item) -> bool:
    return isinstance(item, GoldCoin)


def is_torch(item: Item) -> bool:
    return isinstance(item, Torch)


class Inventory:
    """Ordered list of items owned by exactly one player.

    Items are immutable values, so two inventories holding equal items in the
    same order compare equal. There is no capacity and no stacking.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: List[Item] = list(items) if items else []

    def add(self, item: Item) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[Item]) -> None:
        for item in items:
            self.add(item)

    def has_any(self, predicate: ItemPredicate) -> bool:
        return any(predicate(item) for item in self._items)

    def has_torch(self) -> bool:
        return self.has_any(is_torch)

    def remove_first_matching(self, predicate: ItemPredicate) -> Item:
        """Remove and return the first item satisfying ``predicate``.

        Callers must check :meth:`has_any` first.

        Raises:
            PreconditionViolation: If no item matches.
        """
        for index, item in enumerate(self._items):
            if predicate(item):
                return self._items.pop(index)
        name = getattr(predicate, "__name__", repr(predicate))
        logger.error("No item matching %s in inventory %s", name, self._items)
        raise PreconditionViolation(f"No item matching '{name}' in inventory")

    def take_all(self) -> List[Item]:
        """Empty the inventory and return its former contents in order."""
        taken, self._items = self._items, []
        return taken

    @property
    def items(self) -> List[Item]:
        return list(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Inventory({self._items!r})"


__all__ = [
    "Food",
    "GoldCoin",
    "FakeCoin",
    "Teleporter",
    "Torch",
    "MagicWord",
    "FakeWord",
    "Item",
    "ItemPredicate",
    "is_food",
    "is_fake_coin",
    "is_gold_coin",
    "is_torch",
    "Inventory",
]
