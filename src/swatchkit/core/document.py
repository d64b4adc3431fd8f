"""Document-level event registry and a minimal containment tree.

A picker closes when the user presses outside of it or hits Escape, which
requires listening to input that is not addressed to the picker. The
``Document`` is where a front-end reports that input; pickers subscribe to
it only while they are open.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterator
from typing import Any

from swatchkit.protocols import DocumentEvent

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class Subscription:
    """
    Handle for one registered listener.

    ``cancel()`` removes the listener and may be called any number of
    times. Subscriptions are also context managers, so they can be pushed
    onto a ``contextlib.ExitStack``.
    """

    def __init__(self, document: "Document", event: DocumentEvent, listener: Listener):
        self._document = document
        self._event = event
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Remove the listener (no-op if already removed)."""
        if not self._active:
            return
        self._active = False
        self._document._remove(self._event, self._listener)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


class Document:
    """
    Page-level listener registry.

    Listeners are called in registration order. Dispatch iterates over a
    snapshot, so a listener may cancel itself (or others) while running.
    """

    def __init__(self) -> None:
        self._listeners: dict[DocumentEvent, list[Listener]] = defaultdict(list)

    def subscribe(self, event: DocumentEvent, listener: Listener) -> Subscription:
        """
        Register ``listener`` for ``event``.

        Args:
            event: Document event to listen to
            listener: Called with the event payload (a target for
                POINTER_DOWN, a ``KeyEvent`` for KEY_DOWN)

        Returns:
            Subscription whose ``cancel()`` removes the listener
        """
        self._listeners[event].append(listener)
        logger.debug(f"Listener added for {event.value} ({self.listener_count(event)} live)")
        return Subscription(self, event, listener)

    def _remove(self, event: DocumentEvent, listener: Listener) -> None:
        listeners = self._listeners[event]
        if listener in listeners:
            listeners.remove(listener)
            logger.debug(f"Listener removed for {event.value} ({len(listeners)} live)")

    def dispatch(self, event: DocumentEvent, payload: Any = None) -> None:
        """Deliver ``payload`` to every listener of ``event``."""
        for listener in list(self._listeners[event]):
            listener(payload)

    def pointer_down(self, target: Any) -> None:
        """Report a pointer press on ``target``."""
        self.dispatch(DocumentEvent.POINTER_DOWN, target)

    def key_down(self, key_event: Any) -> None:
        """Report a key press."""
        self.dispatch(DocumentEvent.KEY_DOWN, key_event)

    def listener_count(self, event: DocumentEvent | None = None) -> int:
        """Number of live listeners for ``event`` (all events when None)."""
        if event is None:
            return sum(len(listeners) for listeners in self._listeners.values())
        return len(self._listeners[event])


class Element:
    """
    Node of a rendered tree, used for outside-click detection.

    Front-ends without their own tree (tests, headless use) describe the
    trigger and the popover with these.

    Example:
        >>> root = Element("page")
        >>> popover = root.append(Element("popover"))
        >>> button = popover.append(Element("button"))
        >>> popover.contains(button)
        True
        >>> popover.contains(root)
        False
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.parent: Element | None = None
        self.children: list[Element] = []

    def append(self, child: "Element") -> "Element":
        """Attach ``child`` under this node and return it."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def ancestors_with_self(self) -> Iterator["Element"]:
        node: Element | None = self
        while node is not None:
            yield node
            node = node.parent

    def contains(self, target: Any) -> bool:
        """True if ``target`` is this node or one of its descendants."""
        if not isinstance(target, Element):
            return False
        return any(node is self for node in target.ancestors_with_self())

    def __repr__(self) -> str:
        return f"Element({self.name!r})"
