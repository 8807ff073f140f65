class TextAdventureError(Exception):
    """Base error for text adventure domain exceptions."""


class PreconditionViolation(TextAdventureError):
    """Raised when a caller breaks a documented precondition.

    These are programming errors (e.g. removing a gold coin from an inventory
    that holds none). The engine never catches them.
    """


class QueueConsistencyError(PreconditionViolation):
    """Raised when the players queue runs dry in the middle of a rotation."""


class InvalidChoice(TextAdventureError):
    """Raised when a command letter cannot be parsed into an offered choice."""


class ChoiceExhausted(TextAdventureError):
    """Raised when a scripted choice provider has no responses left."""


class ScenarioError(TextAdventureError):
    """Raised when a scenario file cannot be loaded or fails validation."""
