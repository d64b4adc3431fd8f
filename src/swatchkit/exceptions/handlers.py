"""
Helpers that turn exceptions into something a user can act on.

The color core never raises, so these are only used at the edges:

| Where | Helper |
|-------|--------|
| TUI actions (`tui.decorators.handle_action_errors`) | `handle_errors(..., re_raise=False)` |
| Loading `PickerConfig` (`persistence`, `config set`) | `wrap_pydantic_error` |
| `swatchkit convert A B C` | `collect_errors` / `ErrorCollector` |
| Fatal errors in `run_picker` | `format_error_for_display` |
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .base import SwatchKitError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorate a function so its failures are logged and optionally shown.

    SwatchKitError subclasses are logged with their technical message and
    shown with their recovery hint; anything else is logged with a
    traceback.

    Args:
        operation_name: What the function does, e.g. "save default color"
        user_notification: Receives the text to show (e.g. App.notify)
        fallback_value: Returned instead of raising when re_raise is False
        re_raise: Propagate the exception after logging
        log_level: Level used for the log record
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, SwatchKitError):
                    logger.log(log_level, f"Could not {operation_name}: {e.technical_message}")
                    shown = e.get_full_message()
                else:
                    logger.log(log_level, f"Could not {operation_name}: {e}", exc_info=True)
                    shown = f"Error: {e}"
                if user_notification:
                    user_notification(shown)
                if re_raise:
                    raise
                return fallback_value
        return wrapper
    return decorator


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get('loc', ('unknown',)))


def wrap_pydantic_error(error: Exception, file_path: str) -> SwatchKitError:
    """
    Map a pydantic error raised while reading a picker config file.

    Broken JSON becomes ConfigFileInvalidError; bad values become
    ConfigValidationError naming the offending field (or listing all of
    them when several fail at once).
    """
    from pydantic import ValidationError

    text = str(error)
    if "json_invalid" in text or "Invalid JSON" in text:
        detail = text
        if "Invalid JSON:" in text:
            detail = text.split("Invalid JSON:", 1)[1].split("[type=", 1)[0].strip()
        return ConfigFileInvalidError(file_path, detail)

    problems = error.errors() if isinstance(error, ValidationError) else []
    if len(problems) == 1:
        problem = problems[0]
        return ConfigValidationError(
            field=_field_name(problem),
            value=problem.get('input'),
            error_msg=problem.get('msg', 'invalid value'),
            file_path=file_path
        )
    if problems:
        listing = "\n".join(
            f"  - {_field_name(p)}: {p.get('msg', 'invalid value')}" for p in problems
        )
        return ConfigValidationError(
            field="multiple fields",
            value=None,
            error_msg=f"{len(problems)} validation errors:\n{listing}",
            file_path=file_path
        )
    return ConfigValidationError(field="unknown", value=None, error_msg=text, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, hint) for printing; hint is None for foreign exceptions."""
    if isinstance(error, SwatchKitError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Start collecting failures for a batch of colors.

    Example:
        ```python
        collector = collect_errors("convert colors")
        for value in values:
            with collector.try_operation(value):
                click.echo(convert_color(value, "rgb", strict=True))
        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Keeps going through a batch and remembers which items failed.

    ``try_operation`` suppresses the exception of a failing item, so the
    remaining items are still processed.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, sub_operation: str) -> "_Attempt":
        """Context manager for one item, labelled ``sub_operation`` in the summary."""
        return _Attempt(self, sub_operation)

    def get_summary(self) -> str:
        if not self.errors:
            return f"All operations completed successfully ({self.success_count} total)"
        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        for label, error in self.errors:
            message = error.user_message if isinstance(error, SwatchKitError) else str(error)
            lines.append(f"  - {label}: {message}")
        return "\n".join(lines)


class _Attempt:
    def __init__(self, collector: ErrorCollector, label: str):
        self.collector = collector
        self.label = label

    def __enter__(self) -> "_Attempt":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.collector.success_count += 1
            return False
        logger.debug(f"{self.collector.operation}: {self.label} failed: {exc_val}")
        self.collector.errors.append((self.label, exc_val))
        return True
