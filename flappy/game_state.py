"""
game_state.py: The game mode machine (menu -> playing -> game over).
"""

import random
from typing import Optional

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_ABS_X, PLAYER_START_X, PLAYER_START_Y,
    FRAME_DURATION, WINDOW_TITLE, NAVY
)
from .console import Console
from .data_models import GameMode, Key, Player, Obstacle


class GameState:
    """
    Owns the player, the single current obstacle, the score and the mode.
    The console calls `tick` once per rendered frame.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        # Obstacle gaps are drawn from this source; pass a seeded one to replay a run
        self.rng = rng if rng is not None else random.Random()

        self.mode = GameMode.MENU
        self.frame_time = 0.0
        self.score = 0
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.obstacle = Obstacle.spawn(SCREEN_WIDTH, 0, self.rng)

    def tick(self, console: Console):
        if self.mode is GameMode.MENU:
            self.main_menu(console)
        elif self.mode is GameMode.PLAYING:
            self.play(console)
        elif self.mode is GameMode.END:
            self.game_over(console)

    def main_menu(self, console: Console):
        console.cls()
        console.print_centered(5, WINDOW_TITLE)
        console.print_centered(7, "Press (P) start new game")
        console.print_centered(8, "Press (Q) exit game")
        self._handle_menu_key(console)

    def restart(self):
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.score = 0
        self.obstacle = Obstacle.spawn(SCREEN_WIDTH, self.score, self.rng)
        self.mode = GameMode.PLAYING

    def quit(self, console: Console):
        self.mode = GameMode.END
        console.quit()

    def play(self, console: Console):
        console.cls_bg(NAVY)

        # Physics only advances once enough real time has accumulated
        self.frame_time += console.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            # Reset, not decremented by FRAME_DURATION: the remainder is dropped
            self.frame_time = 0.0
            self._step()

        # Input is sampled every frame, independent of the physics step
        if console.key is Key.IMPULSE:
            self.player.fly()

        self.player.render(console)
        self.obstacle.render(console, self.player.x)
        console.print(0, 1, f"Score: {self.score}")

    def game_over(self, console: Console):
        console.cls()
        console.print_centered(5, "~GAME OVER~")
        console.print_centered(6, f"Your Score: {self.score}")
        console.print_centered(7, "Press (P) start new game")
        console.print_centered(8, "Press (Q) exit game")
        self._handle_menu_key(console)

    def _step(self):
        """One fixed physics update: move, check for death, score and respawn the wall."""
        self.player.update()

        if self.player.y > SCREEN_HEIGHT or self.obstacle.hit_check(self.player):
            self.mode = GameMode.END
            return

        if self.player.x + PLAYER_ABS_X == self.obstacle.x:
            self.score += 1
        if self.obstacle.x < self.player.x:
            self.obstacle = Obstacle.spawn(self.player.x + SCREEN_WIDTH, self.score, self.rng)

    def _handle_menu_key(self, console: Console):
        if console.key is Key.START:
            self.restart()
        elif console.key is Key.QUIT:
            self.quit(console)
