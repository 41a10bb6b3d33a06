"""
console.py: The render/input collaborator.

Exposes a character grid of SCREEN_WIDTH x SCREEN_HEIGHT cells, the elapsed
time since the previous frame and at most one key event per frame.
"""

from typing import Dict, List, Optional, Protocol, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, RENDER_FPS, WINDOW_TITLE, BLACK, WHITE
)
from .data_models import Key

Color = Tuple[int, int, int]
Cell = Tuple[str, Color, Color]  # (glyph, foreground, background)

KEY_BINDINGS = {
    pygame.K_p: Key.START,
    pygame.K_q: Key.QUIT,
    pygame.K_SPACE: Key.IMPULSE,
}


class ConsoleError(Exception):
    """Raised when the drawing surface cannot be created."""


class Console(Protocol):
    frame_time_ms: float
    key: Optional[Key]

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None: ...

    def cls(self) -> None: ...

    def cls_bg(self, color: Color) -> None: ...

    def print(self, x: int, y: int, text: str) -> None: ...

    def print_centered(self, y: int, text: str) -> None: ...

    def quit(self) -> None: ...


class PygameConsole:
    """Character-grid console drawn into a pygame window."""

    def __init__(self, cell_size: int = CELL_SIZE, title: str = WINDOW_TITLE):
        self.cell_size = cell_size
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT

        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.width * cell_size, self.height * cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, cell_size + cell_size // 2)
        except pygame.error as e:
            pygame.quit()
            raise ConsoleError(f"Could not create window: {e}") from e

        self.clock = pygame.time.Clock()
        self.frame_time_ms = 0.0
        self.key: Optional[Key] = None
        self.quit_requested = False

        self._cells: List[List[Optional[Cell]]] = []
        self._background: Color = BLACK
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}
        self.cls()

    # ----------------- Input -----------------

    def begin_frame(self):
        """Advances the clock and samples input for the coming tick."""
        self.frame_time_ms = float(self.clock.tick(RENDER_FPS))
        self.key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN and self.key is None:
                self.key = KEY_BINDINGS.get(event.key)

    # ----------------- Drawing -----------------

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        # Off-grid coordinates are ignored
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (glyph, fg, bg)

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        self._background = color
        self._cells = [[None] * self.width for _ in range(self.height)]

    def print(self, x: int, y: int, text: str):
        for i, ch in enumerate(text):
            self.set(x + i, y, WHITE, self._background, ch)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def present(self):
        """Draws the cell buffer and flips the display."""
        size = self.cell_size
        self.screen.fill(self._background)

        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                glyph, fg, bg = cell
                rect = pygame.Rect(x * size, y * size, size, size)
                self.screen.fill(bg, rect)
                if glyph != " ":
                    surf = self._glyph(glyph, fg)
                    self.screen.blit(surf, surf.get_rect(center=rect.center))

        pygame.display.flip()

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surf = self._glyph_cache.get((glyph, fg))
        if surf is None:
            surf = self.font.render(glyph, True, fg)
            self._glyph_cache[(glyph, fg)] = surf
        return surf

    # ----------------- Lifecycle -----------------

    def quit(self):
        self.quit_requested = True

    def close(self):
        pygame.quit()
