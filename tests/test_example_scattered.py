import importlib
import logging
import sys
from pathlib import Path

import pytest
from rich.logging import RichHandler

from flagyard import get_registry

SCATTERED = Path(__file__).resolve().parent.parent / "examples" / "scattered"


def _forget_example_modules():
    for name in list(sys.modules):
        if name == "main" or name == "kitchen" or name.startswith("kitchen."):
            del sys.modules[name]


@pytest.fixture
def scattered(monkeypatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    registry = get_registry()
    registry.clear()
    _forget_example_modules()
    monkeypatch.syspath_prepend(str(SCATTERED))
    yield importlib.import_module("main")
    registry.clear()
    _forget_example_modules()
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def console_level():
    (handler,) = [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler, RichHandler)
    ]
    return handler.level


def test_verbose_lowers_console_level(scattered, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "--verbose", "--color", "never"])
    scattered.main()
    assert console_level() == logging.DEBUG
    assert "color=never" in capsys.readouterr().out


def test_quiet_by_default(scattered, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "-l", "spanish", "extra"])
    scattered.main()
    assert console_level() == logging.WARNING
    out = capsys.readouterr().out
    assert "soup (spanish)" in out
    assert "  extra" in out
