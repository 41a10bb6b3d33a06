"""Root conftest for all tests - shared fixtures and configuration."""
import os
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# pygame is imported by the console module; keep it quiet and windowless
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FakeConsole:
    """Records every draw call instead of rendering it."""

    def __init__(self, frame_time_ms=0.0, key=None):
        self.frame_time_ms = frame_time_ms
        self.key = key
        self.cells = {}
        self.texts = []
        self.clears = []
        self.quit_requested = False

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (glyph, fg, bg)

    def cls(self):
        self.clears.append(None)
        self.cells.clear()
        self.texts.clear()

    def cls_bg(self, color):
        self.clears.append(color)
        self.cells.clear()
        self.texts.clear()

    def print(self, x, y, text):
        self.texts.append((x, y, text))

    def print_centered(self, y, text):
        self.texts.append((None, y, text))

    def quit(self):
        self.quit_requested = True

    def frame(self, frame_time_ms=0.0, key=None):
        """Prepares the input for the next tick."""
        self.frame_time_ms = frame_time_ms
        self.key = key
        return self


@pytest.fixture
def console():
    """A recording console with no elapsed time and no key."""
    return FakeConsole()


@pytest.fixture
def rng():
    """Deterministic randomness source for obstacle gaps."""
    return random.Random(1234)
