"""Color-input exceptions raised by strict front-ends."""

from .base import SwatchKitError


class InvalidColorError(SwatchKitError):
    """A color string matches none of the supported formats.

    Only raised by callers that opt into strict validation (the CLI's
    ``--strict`` flag). The picker itself maps such strings to black.
    """

    def __init__(self, value: str):
        super().__init__(
            user_message=f"'{value}' is not a recognised color",
            technical_message=f"Color string {value!r} matched no hex/rgb/hsl pattern",
            recoverable=True,
            recovery_hint=(
                "Use one of: #RGB, #RRGGBB, #RRGGBBAA, rgb(r, g, b), "
                "rgba(r, g, b, a), hsl(h, s%, l%), hsla(h, s%, l%, a)"
            ),
        )
        self.value = value
