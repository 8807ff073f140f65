from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional, Protocol, Sequence, Tuple

from .errors import ChoiceExhausted, InvalidChoice

logger = logging.getLogger(__name__)


class ShakeDownChoice(Enum):
    """What an explorer hands over when a gnome shakes them down."""

    EVERYTHING = "everything"
    GOLD = "gold"
    FAKE = "fake"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ShakeDownChoice.EVERYTHING: "Everything",
    ShakeDownChoice.GOLD: "Gold coin",
    ShakeDownChoice.FAKE: "Fake coin",
}


def _default_bindings() -> Dict[ShakeDownChoice, Tuple[str, ...]]:
    return {
        ShakeDownChoice.EVERYTHING: ("E",),
        ShakeDownChoice.GOLD: ("G",),
        ShakeDownChoice.FAKE: ("F",),
    }


def _normalize_letter(name: str) -> str:
    name = name.strip()
    if len(name) != 1:
        raise ValueError(f"Command keys must be single letters, got {name!r}")
    return name.upper()


@dataclass(frozen=True)
class ChoiceKeys:
    """Command letters accepted for each choice."""

    bindings: Dict[ShakeDownChoice, Tuple[str, ...]] = field(default_factory=_default_bindings)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "ChoiceKeys":
        """Build from a ``{"everything": ["E"], ...}`` style mapping.

        Choices missing from ``mapping`` keep their default letters.

        Raises:
            ValueError: On unknown choice names, bad letters or a letter bound twice.
        """
        bindings = _default_bindings()
        for name, letters in mapping.items():
            try:
                choice = ShakeDownChoice(str(name).lower())
            except ValueError as e:
                raise ValueError(f"Unknown choice name: {name}") from e
            bindings[choice] = tuple(_normalize_letter(letter) for letter in letters)

        seen: Dict[str, ShakeDownChoice] = {}
        for choice, letters in bindings.items():
            if not letters:
                raise ValueError(f"No command letter bound to {choice.value}")
            for letter in letters:
                if letter in seen and seen[letter] is not choice:
                    raise ValueError(
                        f"Letter {letter!r} bound to both {seen[letter].value} and {choice.value}"
                    )
                seen[letter] = choice
        return cls(bindings=bindings)

    def letters_for(self, choice: ShakeDownChoice) -> Tuple[str, ...]:
        return self.bindings[choice]

    def describe(self, choice: ShakeDownChoice) -> str:
        """Render a choice for a prompt, e.g. ``[G]old coin``."""
        letter = self.letters_for(choice)[0]
        label = choice.label
        if label[0].upper() == letter:
            return f"[{label[0]}]{label[1:]}"
        return f"{label} [{letter}]"


def parse_choice(
    text: str,
    offered: Sequence[ShakeDownChoice],
    keys: Optional[ChoiceKeys] = None,
) -> ShakeDownChoice:
    """Parse the first non-blank character of ``text`` into an offered choice.

    Raises:
        InvalidChoice: If the text is blank, unknown, or names a choice that
            was not offered.
    """
    keys = keys or ChoiceKeys()
    stripped = text.strip()
    if not stripped:
        raise InvalidChoice("Empty command")
    letter = stripped[0].upper()
    for choice in offered:
        if letter in keys.letters_for(choice):
            return choice
    raise InvalidChoice(f"Invalid command: {letter!r}")


def render_prompt(header: str, offered: Sequence[ShakeDownChoice], keys: Optional[ChoiceKeys] = None) -> str:
    keys = keys or ChoiceKeys()
    parts = [keys.describe(choice) for choice in offered]
    if len(parts) > 1:
        listing = ", ".join(parts[:-1]) + " or " + parts[-1]
    else:
        listing = parts[0] if parts else ""
    return f"{header} {listing}".strip()


class ChoiceProvider(Protocol):
    """Supplies one discrete choice out of the offered set."""

    def choose(self, offered: Sequence[ShakeDownChoice]) -> ShakeDownChoice:  # pragma: no cover - protocol
        ...


class PromptingChoiceProvider(ABC):
    """Prompt loop shared by the console and scripted providers.

    Invalid input never escapes: the loop logs it, tells the player, and asks
    again with no retry limit.
    """

    DEFAULT_HEADER = "Enter letter command: Give gnome"
    DEFAULT_INVALID = "Invalid command"

    def __init__(
        self,
        keys: Optional[ChoiceKeys] = None,
        *,
        header: str = DEFAULT_HEADER,
        invalid_message: str = DEFAULT_INVALID,
        output: Callable[[str], None] = print,
    ) -> None:
        self.keys = keys or ChoiceKeys()
        self.header = header
        self.invalid_message = invalid_message
        self._output = output
        self.rejected: int = 0

    def choose(self, offered: Sequence[ShakeDownChoice]) -> ShakeDownChoice:
        if not offered:
            raise ValueError("At least one choice must be offered")
        prompt = render_prompt(self.header, offered, self.keys)
        while True:
            raw = self._read(prompt)
            try:
                choice = parse_choice(raw, offered, self.keys)
            except InvalidChoice as exc:
                self.rejected += 1
                logger.warning("Rejected command %r: %s", raw, exc)
                self._output(self.invalid_message)
                continue
            logger.debug("Accepted command %r -> %s", raw, choice)
            return choice

    @abstractmethod
    def _read(self, prompt: str) -> str:
        raise NotImplementedError


class ConsoleChoiceProvider(PromptingChoiceProvider):
    """Reads commands from a line-based input callable (``input`` by default)."""

    def __init__(self, keys: Optional[ChoiceKeys] = None, *, input_fn: Callable[[str], str] = input, **kwargs) -> None:
        super().__init__(keys, **kwargs)
        self._input_fn = input_fn

    def _read(self, prompt: str) -> str:
        # EOFError propagates: a closed stream is not an invalid command
        return self._input_fn(prompt + "\n")


class ScriptedChoiceProvider(PromptingChoiceProvider):
    """Replays recorded responses through the same prompt loop."""

    def __init__(self, responses: Iterable[str], keys: Optional[ChoiceKeys] = None, **kwargs) -> None:
        kwargs.setdefault("output", lambda _msg: None)
        super().__init__(keys, **kwargs)
        self._responses: Iterator[str] = iter(responses)
        self.prompts: list = []

    def _read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._responses)
        except StopIteration:
            raise ChoiceExhausted(f"No scripted response left for prompt: {prompt}") from None


__all__ = [
    "ShakeDownChoice",
    "ChoiceKeys",
    "parse_choice",
    "render_prompt",
    "ChoiceProvider",
    "PromptingChoiceProvider",
    "ConsoleChoiceProvider",
    "ScriptedChoiceProvider",
]
