"""Pytest fixtures for regionbox tests."""

import io
import locale
import logging

import pytest

from regionbox_geometry import Parallelepiped3D, Rectangle2D
from regionbox_cli.reader import NumberReader


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("regionbox."):
            logging.getLogger(name).handlers.clear()


@pytest.fixture(autouse=True)
def restore_numeric_locale():
    """The CLI switches LC_NUMERIC process-wide."""
    saved = locale.setlocale(locale.LC_NUMERIC)
    yield
    locale.setlocale(locale.LC_NUMERIC, saved)


@pytest.fixture
def rectangle() -> Rectangle2D:
    """0 <= x1 <= 10, 0 <= x2 <= 5."""
    return Rectangle2D.from_bounds(0, 10, 0, 5)


@pytest.fixture
def parallelepiped() -> Parallelepiped3D:
    """0 <= x1 <= 10, 0 <= x2 <= 5, 0 <= x3 <= 2."""
    return Parallelepiped3D.from_bounds(0, 10, 0, 5, 0, 2)


@pytest.fixture
def make_reader():
    """Build a NumberReader over a string, returning (reader, output)."""
    def _make(text: str, fallback=None):
        out = io.StringIO()
        kwargs = {} if fallback is None else {"fallback": fallback}
        return NumberReader(io.StringIO(text), out, **kwargs), out
    return _make
