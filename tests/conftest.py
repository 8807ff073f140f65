import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from textadventure.choices import ScriptedChoiceProvider  # noqa: E402
from textadventure.context import EncounterContext  # noqa: E402
from textadventure.presentation import NullPresenter  # noqa: E402


@pytest.fixture
def scripted():
    """Build an EncounterContext that answers prompts from a list of letters."""

    def _make(*responses: str) -> EncounterContext:
        return EncounterContext(chooser=ScriptedChoiceProvider(responses), presenter=NullPresenter())

    return _make
