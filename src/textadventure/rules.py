"""Pairwise interaction rules.

Every rule takes both participants in canonical order, mutates their
inventories in place and hands both back. The dispatcher decides which rule
applies and in which order to pass the players.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from .choices import ShakeDownChoice
from .context import EncounterContext
from .inventory import Item, is_fake_coin, is_gold_coin
from .players import Explorer, Gnome, Leprechaun

logger = logging.getLogger(__name__)


def should_rob(gnome: Gnome, explorer: Explorer) -> bool:
    """A gnome robs when it holds a fake coin or the explorer has no gold."""
    # The no-gold disjunct alone is enough to trigger a shake down.
    return gnome.inventory.has_any(is_fake_coin) or not explorer.inventory.has_any(is_gold_coin)


def shake_down_options(explorer: Explorer) -> List[ShakeDownChoice]:
    options = [ShakeDownChoice.EVERYTHING]
    if explorer.inventory.has_any(is_gold_coin):
        options.append(ShakeDownChoice.GOLD)
    if explorer.inventory.has_any(is_fake_coin):
        options.append(ShakeDownChoice.FAKE)
    return options


def hand_over(explorer: Explorer, choice: ShakeDownChoice) -> List[Item]:
    """Remove what ``choice`` demands from the explorer and return it.

    Raises:
        PreconditionViolation: If the explorer lacks the demanded coin.
    """
    if choice is ShakeDownChoice.EVERYTHING:
        return explorer.inventory.take_all()
    if choice is ShakeDownChoice.GOLD:
        return [explorer.inventory.remove_first_matching(is_gold_coin)]
    if choice is ShakeDownChoice.FAKE:
        return [explorer.inventory.remove_first_matching(is_fake_coin)]
    raise ValueError(f"Unknown shake down choice: {choice!r}")


def shake_down(gnome: Gnome, explorer: Explorer, context: EncounterContext) -> Tuple[Gnome, Explorer]:
    """Gnome robs explorer of everything, a gold coin, or a fake coin.

    The explorer picks what to give through ``context.chooser``; only choices
    the explorer can actually pay are offered.
    """
    if not should_rob(gnome, explorer):
        logger.debug("%s lets %s pass", gnome.name, explorer.name)
        return gnome, explorer

    context.presenter.show_message(f"{gnome.name} shakes down {explorer.name}!")
    context.presenter.show_inventory(explorer.name, explorer.inventory)

    if explorer.inventory.is_empty():
        logger.info("%s has nothing for %s to take", explorer.name, gnome.name)
        context.presenter.show_message(f"{explorer.name} has nothing to give.")
    else:
        choice = context.chooser.choose(shake_down_options(explorer))
        loot = hand_over(explorer, choice)
        gnome.inventory.extend(loot)
        logger.info(
            "%s gave %s to %s (%d item(s))", explorer.name, choice.value, gnome.name, len(loot)
        )

    pick_up_while_shaking_down(gnome, explorer, context)
    return gnome, explorer


def pick_up_while_shaking_down(gnome: Gnome, explorer: Explorer, context: EncounterContext) -> None:
    """Let the explorer grab room contents during a shake down.

    No-op until the board exposes room contents to the engine.
    """


def trick_or_treat(leprechaun: Leprechaun, explorer: Explorer, context: EncounterContext) -> Tuple[Leprechaun, Explorer]:
    """Leprechaun meets explorer. No rule content yet; both pass unchanged."""
    logger.debug("%s meets %s: trick or treat (no effect)", leprechaun.name, explorer.name)
    return leprechaun, explorer


__all__ = [
    "should_rob",
    "shake_down_options",
    "hand_over",
    "shake_down",
    "pick_up_while_shaking_down",
    "trick_or_treat",
]
