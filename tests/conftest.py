"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from swatchkit.controls import Bounds
from swatchkit.core import Document, Element, PickerController
from swatchkit.protocols import PickerObserver, PointerCaptureTarget


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a picker config file inside the temp directory."""
    return temp_dir / "config.json"


@pytest.fixture
def on_change():
    """Mock change callback."""
    return Mock()


@pytest.fixture
def observer():
    """Mock picker observer."""
    return Mock(spec=PickerObserver)


@pytest.fixture
def capture_target():
    """Mock pointer capture target."""
    return Mock(spec=PointerCaptureTarget)


@pytest.fixture
def square_bounds():
    """100x100 control at the origin."""
    return Bounds(left=0, top=0, width=100, height=100)


@pytest.fixture
def page():
    """
    Minimal rendered tree: a page holding a trigger and a popover.

    Returns:
        Tuple of (document, page, trigger, popover)
    """
    root = Element("page")
    trigger = root.append(Element("trigger"))
    popover = root.append(Element("popover"))
    popover.append(Element("surface"))
    return Document(), root, trigger, popover


@pytest.fixture
def make_picker(page, on_change):
    """Factory creating a picker wired to the page fixture."""
    document, _, trigger, popover = page

    def _make(value="#ff5500", **kwargs):
        return PickerController(
            value,
            on_change,
            document=document,
            trigger=trigger,
            popover=popover,
            **kwargs,
        )

    return _make
