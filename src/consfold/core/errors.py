"""Error types raised by consfold operations."""

from typing import Any

__all__ = ["NotASequence"]


class NotASequence(TypeError):
    """Raised when an argument expected to be a Sequence is not.

    Attributes:
        argument: Name of the offending parameter (e.g. ``"first"`` or
            ``"sequences[2]"``).
        value: The object that failed the check.
    """

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be a Sequence, got {type(value).__name__}"
        )
