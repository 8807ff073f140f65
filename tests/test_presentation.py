import io
import logging

from textadventure.board import Direction, Position
from textadventure.inventory import FakeWord, Food, GoldCoin, Inventory, MagicWord
from textadventure.presentation import ConsolePresenter, LoggingPresenter, format_inventory


def test_empty_inventory_says_nothing():
    assert format_inventory("explorer", Inventory()) == "explorer has:\nnothing"


def test_items_listed_one_per_line():
    inv = Inventory(
        [
            Food("apple", 5),
            GoldCoin(2),
            MagicWord("xyzzy", Position(1, 2), Direction.WEST),
            FakeWord("plugh"),
        ]
    )
    assert format_inventory("Ada", inv).splitlines() == [
        "Ada has:",
        "food: apple (+5 energy)",
        "gold coin (2)",
        "magic word 'xyzzy' (room (1, 2), west wall)",
        "word 'plugh'",
    ]


def test_console_presenter_writes_to_stream():
    stream = io.StringIO()
    presenter = ConsolePresenter(stream)
    presenter.show_message("Grub shakes down Ada!")
    presenter.show_inventory("Ada", Inventory([GoldCoin(1)]))
    assert stream.getvalue() == "Grub shakes down Ada!\nAda has:\ngold coin (1)\n\n"


def test_logging_presenter_logs_at_info(caplog):
    with caplog.at_level(logging.INFO, logger="textadventure.presentation"):
        LoggingPresenter().show_inventory("Ada", Inventory())
    assert "Ada has: | nothing" in caplog.text
