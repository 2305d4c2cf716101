"""Exception hierarchy.

Only ``ActionError`` subclasses that escape to the orchestrator fail a run.
Backend and transport failures never surface as exceptions; the best-effort
helper turns them into warnings.
"""


class ActionError(Exception):
    """Base class for errors that fail the action."""


class InputRequiredError(ActionError):
    """A required action input was missing or empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")
