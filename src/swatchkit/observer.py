"""Generic observer pattern manager.

A small reusable list of observers with idempotent registration and
error-isolated notification. Picker instances each own one manager, so
no state is shared between pickers.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Generic observer list.

    Type Parameters:
        T: The observer protocol type (e.g., PickerObserver)

    Example:
        ```python
        class Picker:
            def __init__(self):
                self._observers = ObserverManager[PickerObserver](observer_type_name="picker")

            def _changed(self, value):
                self._observers.notify("on_picker_event", PickerEvent.COLOR_CHANGED, value)
        ```

    The manager is single-threaded: it is driven from one UI event loop.
    Notification iterates over a snapshot, so observers may register or
    unregister from inside a callback.
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the observer type for logging (e.g., "picker")
        """
        self._observers: list[T] = []
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Register an observer (idempotent - won't add duplicates)."""
        if observer in self._observers:
            logger.debug(f"{self._observer_type_name} observer already registered: {observer}")
            return
        self._observers.append(observer)
        logger.debug(f"Registered {self._observer_type_name} observer: {observer}")

    def unregister(self, observer: T) -> None:
        """Unregister an observer; unknown observers are logged and ignored."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
        else:
            logger.warning(
                f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
            )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call ``callback_name`` on every registered observer.

        Exceptions in observer callbacks are logged and don't affect other observers.
        """
        self._dispatch(list(self._observers), callback_name, args, kwargs)

    def notify_with_filter(
        self, callback_name: str, filter_fn: Callable[[T], bool], *args: Any, **kwargs: Any
    ) -> None:
        """Notify only observers that match the filter predicate."""
        self._dispatch(
            [obs for obs in self._observers if filter_fn(obs)], callback_name, args, kwargs
        )

    def _dispatch(
        self, observers: list[T], callback_name: str, args: tuple, kwargs: dict
    ) -> None:
        for observer in observers:
            try:
                callback = getattr(observer, callback_name)
                callback(*args, **kwargs)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'",
                    exc_info=True,
                )
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        count = len(self._observers)
        self._observers.clear()
        if count > 0:
            logger.debug(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        return observer in self._observers

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._observers))

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return len(self._observers) > 0
