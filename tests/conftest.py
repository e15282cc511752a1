# tests/conftest.py
import io
import os
import sys
from contextlib import contextmanager

# Ensure project root is importable (so termsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import blessed
import pytest
from blessed.keyboard import Keystroke


class ScriptedRandom:
    """Stand-in RNG: randrange() hands out scripted values and records each call."""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = []

    def push(self, *values):
        self.values.extend(values)

    def randrange(self, start, stop=None, step=1):
        if not self.values:
            raise AssertionError("ScriptedRandom ran out of values")
        value = self.values.pop(0)
        assert start <= value < stop and (value - start) % step == 0, \
            f"{value} outside range({start}, {stop}, {step})"
        self.calls.append((start, stop, step, value))
        return value


class FakeTerminal:
    """
    Wraps a real blessed Terminal for sequences, but scripts keyboard input
    and records entering/leaving the fullscreen, cbreak and hidden-cursor modes.
    """

    def __init__(self, term, keys=(), width=80, height=40, tty=True):
        self._term = term
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.is_a_tty = tty
        self.events = []
        self.inkey_calls = 0

    def __getattr__(self, name):
        return getattr(self._term, name)

    def _mode(self, name):
        @contextmanager
        def cm():
            self.events.append(f"enter {name}")
            try:
                yield
            finally:
                self.events.append(f"exit {name}")
        return cm()

    def fullscreen(self):
        return self._mode("fullscreen")

    def cbreak(self):
        return self._mode("cbreak")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")

    @property
    def active_modes(self):
        active = set()
        for event in self.events:
            verb, name = event.split(" ", 1)
            if verb == "enter":
                active.add(name)
            else:
                active.discard(name)
        return active

    def inkey(self, timeout=None):
        self.inkey_calls += 1
        if not self.keys:
            return Keystroke("")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


@pytest.fixture(scope="session")
def term():
    return blessed.Terminal(kind="xterm-256color", stream=io.StringIO(), force_styling=True)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def key(term):
    """Build a Keystroke the way blessed reports it."""
    def make(name_or_char):
        if name_or_char.startswith("KEY_"):
            code = getattr(term, name_or_char)
            return Keystroke(ucs="\x1b[?", code=code, name=name_or_char)
        return Keystroke(ucs=name_or_char)
    return make


@pytest.fixture
def fake_term(term):
    def make(keys=(), **kwargs):
        return FakeTerminal(term, keys=keys, **kwargs)
    return make
