"""Errors reading or validating the picker config file (``~/.swatchkit/config.json``)."""

from typing import Any

from .base import SwatchKitError

# Extra hint lines for fields whose valid values are not obvious
_FIELD_HINTS = {
    "presets": "Presets are hex swatches like '#ff5500', '#f50' or '#ff550080'",
    "trigger_mode": "trigger_mode is one of: text, icon, both",
    "initial_value": "initial_value takes '#rrggbb', 'rgb(r, g, b)' or 'hsl(h, s%, l%)'",
}


class ConfigurationError(SwatchKitError):
    """The picker configuration cannot be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty, unreadable or not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()
        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            hint = f"Delete the comma before the closing brace or bracket in {file_path}"
        elif "empty" in lowered:
            user_msg = "Configuration file is empty"
            hint = f"Run 'swatchkit config reset' to write the defaults to {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            hint = (
                f"Fix the JSON in {file_path}, or run 'swatchkit config reset' "
                "to start over (the old file is kept as .bak)"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config field holds a value ``PickerConfig`` rejects."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        hint_lines = [f"Change '{field}' with 'swatchkit config set' or edit the file"]
        if file_path:
            hint_lines.append(f"Config file: {file_path}")
        top_level = field.split(".", 1)[0]
        if top_level in _FIELD_HINTS:
            hint_lines.append(_FIELD_HINTS[top_level])

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
