import pytest

from textadventure.board import Direction, Position
from textadventure.errors import PreconditionViolation
from textadventure.inventory import (
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

ALL_ITEMS = [
    Food(name="apple", energy=5),
    GoldCoin(denom=1),
    FakeCoin(denom=1),
    Teleporter(),
    Torch(),
    MagicWord(word="xyzzy", room=Position(1, 1), wall=Direction.NORTH),
    FakeWord(word="plugh"),
]


def test_predicates_match_on_tag_only():
    assert [is_food(i) for i in ALL_ITEMS] == [True, False, False, False, False, False, False]
    assert [is_gold_coin(i) for i in ALL_ITEMS] == [False, True, False, False, False, False, False]
    assert [is_fake_coin(i) for i in ALL_ITEMS] == [False, False, True, False, False, False, False]


def test_items_compare_by_value():
    assert Food(name="apple", energy=5) == Food(name="apple", energy=5)
    assert GoldCoin(denom=1) != FakeCoin(denom=1)
    assert Teleporter() == Teleporter()


def test_remove_first_matching_returns_the_coin_and_keeps_the_rest_in_order():
    inv = Inventory([Food("apple", 5), Torch(), GoldCoin(2), FakeCoin(1), Food("pear", 3)])

    removed = inv.remove_first_matching(is_gold_coin)

    assert removed == GoldCoin(2)
    assert inv.items == [Food("apple", 5), Torch(), FakeCoin(1), Food("pear", 3)]


def test_remove_first_matching_takes_the_earliest_match():
    inv = Inventory([GoldCoin(1), GoldCoin(5)])
    assert inv.remove_first_matching(is_gold_coin) == GoldCoin(1)
    assert inv.items == [GoldCoin(5)]


def test_remove_without_match_is_a_precondition_violation():
    inv = Inventory([Food("apple", 5), FakeCoin(1)])

    with pytest.raises(PreconditionViolation):
        inv.remove_first_matching(is_gold_coin)

    # Nothing was lost on the failed attempt
    assert inv.items == [Food("apple", 5), FakeCoin(1)]


def test_take_all_empties_and_preserves_order():
    inv = Inventory([Torch(), GoldCoin(1), Teleporter()])

    taken = inv.take_all()

    assert taken == [Torch(), GoldCoin(1), Teleporter()]
    assert len(inv) == 0
    assert inv.is_empty()


def test_has_any_and_has_torch():
    inv = Inventory([Food("apple", 5)])
    assert inv.has_any(is_food)
    assert not inv.has_any(is_gold_coin)
    assert not inv.has_torch()

    inv.add(Torch())
    assert inv.has_torch()


def test_items_property_is_a_copy():
    inv = Inventory([GoldCoin(1)])
    snapshot = inv.items
    snapshot.clear()
    assert inv.items == [GoldCoin(1)]
