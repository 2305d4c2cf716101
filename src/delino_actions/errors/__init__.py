"""Exceptions raised by the prepare and postprocess actions."""

from .exceptions import ActionError, InputRequiredError

__all__ = ["ActionError", "InputRequiredError"]
