from __future__ import annotations

from dataclasses import dataclass, field

from .choices import ChoiceProvider, ConsoleChoiceProvider
from .presentation import LoggingPresenter, Presenter


@dataclass
class EncounterContext:
    """External collaborators handed to interaction rules.

    Rules read choices from ``chooser`` and report to ``presenter``; neither
    owns any game state.
    """

    chooser: ChoiceProvider = field(default_factory=ConsoleChoiceProvider)
    presenter: Presenter = field(default_factory=LoggingPresenter)
