"""
Custom exception hierarchy for swatchkit.

## Exception Hierarchy

```
SwatchKitError (base)
├── InvalidColorError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

The color engine never raises: unparseable colors resolve to black and
out-of-range field edits are clamped. These exceptions cover the layers
around it (configuration files and strict CLI input).

`swatchkit.exceptions.handlers` maps them to log records and user-facing text.
"""

from .base import SwatchKitError
from .color import InvalidColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorCollector",
    # Color
    "InvalidColorError",
    # Base
    "SwatchKitError",
    "collect_errors",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
]
