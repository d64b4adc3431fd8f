"""Picker configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from swatchkit.colors.presets import DEFAULT_PRESETS
from swatchkit.persistence import PydanticPersistence

from .enums import TriggerMode

DEFAULT_CONFIG_PATH = Path.home() / ".swatchkit" / "config.json"


class PickerConfig(BaseModel):
    """Options a caller passes to a picker, persisted for the CLI/TUI."""

    show_alpha: bool = Field(default=True, description="Show the opacity slider")
    show_presets: bool = Field(default=True, description="Show the preset swatches")
    presets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PRESETS),
        description="Preset swatches as hex strings",
    )
    trigger_mode: TriggerMode = Field(
        default=TriggerMode.BOTH, description="Trigger content: text, icon or both"
    )
    initial_value: str = Field(
        default="#000000", description="Color shown when the picker starts without a value"
    )

    @field_validator("presets")
    @classmethod
    def validate_presets(cls, presets: list[str]) -> list[str]:
        """Ensure every preset is a hex color string."""
        from swatchkit.colors.parsing import is_hex_color

        invalid = [p for p in presets if not is_hex_color(p)]
        if invalid:
            raise ValueError(f"Presets must be hex colors, got: {', '.join(invalid)}")
        return presets

    @field_validator("initial_value")
    @classmethod
    def validate_initial_value(cls, value: str) -> str:
        """Ensure the initial value is a hex, rgb() or hsl() color."""
        from swatchkit.colors.parsing import looks_like_color

        if not looks_like_color(value):
            raise ValueError(f"Not a color: {value!r}")
        return value.strip()

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.swatchkit/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (atomic write with .bak backup)."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
