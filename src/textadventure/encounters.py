from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .context import EncounterContext
from .errors import QueueConsistencyError
from .players import Player, PlayerKind, Players, is_occupant
from .rules import shake_down, trick_or_treat

logger = logging.getLogger(__name__)

Rule = Callable[[Player, Player, EncounterContext], Tuple[Player, Player]]


@dataclass(frozen=True)
class PairRule:
    """A canonical rule plus the argument order for one (active, occupant) pair.

    ``active_first`` tells whether the active player is the rule's first
    argument. Shake down always takes (gnome, explorer), whoever is active.
    """

    rule: Rule
    active_first: bool

    def apply(self, active: Player, occupant: Player, context: EncounterContext) -> Tuple[Player, Player]:
        if self.active_first:
            active, occupant = self.rule(active, occupant, context)
        else:
            occupant, active = self.rule(occupant, active, context)
        return active, occupant


# (active kind, occupant kind) -> rule. Missing pairs meet without effect.
PAIR_RULES: Dict[Tuple[PlayerKind, PlayerKind], PairRule] = {
    (PlayerKind.GNOME, PlayerKind.EXPLORER): PairRule(shake_down, active_first=True),
    (PlayerKind.EXPLORER, PlayerKind.GNOME): PairRule(shake_down, active_first=False),
    (PlayerKind.LEPRECHAUN, PlayerKind.EXPLORER): PairRule(trick_or_treat, active_first=True),
    (PlayerKind.EXPLORER, PlayerKind.LEPRECHAUN): PairRule(trick_or_treat, active_first=False),
}


def rule_for(active: Player, occupant: Player) -> Optional[PairRule]:
    return PAIR_RULES.get((active.kind, occupant.kind))


def meet(active: Player, occupant: Player, context: EncounterContext) -> Tuple[Player, Player]:
    """Run the interaction between two players sharing a tile."""
    pair = rule_for(active, occupant)
    if pair is None:
        logger.debug("No rule for %s meeting %s", active.kind.name, occupant.kind.name)
        return active, occupant
    logger.debug(
        "%s (%s) meets %s (%s) via %s",
        active.name,
        active.kind.name,
        occupant.name,
        occupant.kind.name,
        pair.rule.__name__,
    )
    return pair.apply(active, occupant, context)


def resolve_encounter(
    active: Player,
    others: Players,
    context: Optional[EncounterContext] = None,
) -> Player:
    """Let ``active`` interact with every player on its tile.

    ``others`` is rotated exactly once: each member is popped from the front
    and pushed to the back, so it is visited once and the final order equals
    the original order. Occupants are pushed back as transformed by their
    rule; everyone else is pushed back untouched.

    If a rule raises, the in-flight member and the unvisited remainder are
    restored to their original order before the error propagates.

    Returns:
        The (possibly changed) active player.

    Raises:
        QueueConsistencyError: If ``others`` runs dry mid-rotation.
    """
    context = context or EncounterContext()
    position = active.position
    rotation = len(others)
    logger.debug(
        "Resolving encounter for %s at %s against %d other player(s)", active.name, position, rotation
    )

    occupants = 0
    for index in range(rotation):
        try:
            member = others.popleft()
        except IndexError as exc:
            raise QueueConsistencyError(
                f"Players queue empty after {index} of {rotation} rotations"
            ) from exc

        if not is_occupant(member, position):
            others.append(member)
            continue

        occupants += 1
        try:
            active, member = meet(active, member, context)
        except BaseException:
            others.append(member)
            # Restore original order: move the unvisited tail behind the visited head.
            others.rotate(-(rotation - index - 1))
            logger.error("Encounter rule failed while %s met %s", active.name, member.name)
            raise
        others.append(member)

    logger.debug("Encounter for %s done: %d occupant(s) met", active.name, occupants)
    return active


__all__ = [
    "Rule",
    "PairRule",
    "PAIR_RULES",
    "rule_for",
    "meet",
    "resolve_encounter",
]
