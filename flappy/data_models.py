"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .constants import (
    PLAYER_ABS_X, SCREEN_HEIGHT, GAP_Y_MIN, GAP_Y_MAX,
    PLAYER_GLYPH, WALL_GLYPH, YELLOW, BLUE, DARK_GREEN, BLACK
)
from .physics_core import apply_gravity_and_movement, fly_velocity, gap_size, gap_bounds

if TYPE_CHECKING:
    from .console import Console


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Key(Enum):
    """The single key event a console can report per tick."""
    START = "start"
    QUIT = "quit"
    IMPULSE = "impulse"


@dataclass
class Player:
    """The player sprite. `y_real` is authoritative, `y` is the rendered row."""
    x: int
    y: int
    y_real: float = field(init=False)
    velocity: float = 0.0

    def __post_init__(self):
        self.y_real = float(self.y)

    def update(self):
        """Gravity integration and horizontal auto-advance for one fixed step."""
        self.y_real, self.velocity = apply_gravity_and_movement(self.y_real, self.velocity)
        self.y = int(self.y_real)
        self.x += 1

    def fly(self):
        # Overrides the current falling speed rather than adding to it
        self.velocity = fly_velocity()

    def render(self, console: "Console"):
        console.set(PLAYER_ABS_X, self.y, YELLOW, BLUE, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A vertical wall with one gap, positioned in absolute columns."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def spawn(cls, x: int, score: int, rng: random.Random) -> "Obstacle":
        """Places a new wall at `x` with a random gap that narrows as score grows."""
        return cls(x=x, gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX), size=gap_size(score))

    def render(self, console: "Console", player_x: int):
        screen_x = self.x - player_x
        gap_top, gap_bottom = gap_bounds(self.gap_y, self.size)

        for y in range(0, gap_top):
            console.set(screen_x, y, DARK_GREEN, BLACK, WALL_GLYPH)
        for y in range(gap_bottom, SCREEN_HEIGHT):
            console.set(screen_x, y, DARK_GREEN, BLACK, WALL_GLYPH)

    def hit_check(self, player: Player) -> bool:
        """
        Checks for a collision with the player.

        Only tested on the tick where the player's absolute column equals the
        wall's, so there is no swept test between ticks.
        """
        gap_top, gap_bottom = gap_bounds(self.gap_y, self.size)

        x_match = player.x + PLAYER_ABS_X == self.x
        above_gap = player.y < gap_top
        below_gap = player.y > gap_bottom
        return x_match and (above_gap or below_gap)
