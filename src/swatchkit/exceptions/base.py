"""Root of the swatchkit exception hierarchy.

Every error carries two texts: ``user_message`` for the terminal or the
TUI notification, and ``technical_message`` for the log file. An optional
``recovery_hint`` tells the user what to change (usually the config file
or the color they typed).
"""

from typing import Optional


class SwatchKitError(Exception):
    """
    Base class for errors raised around the color core.

    Attributes:
        user_message: Short text shown to the user
        technical_message: Text written to the log (defaults to user_message)
        recoverable: False when the picker cannot continue
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the hint, as shown in notifications."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
