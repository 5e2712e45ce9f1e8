"""Tile-sheet previewer implementing the engine contract.

Stands in for the real simulation engine during development: it slices the
palette into square tiles and shows one page of them per "level". Arrow keys
move a cursor; PageUp/PageDown (or [ and ]) change level. The last page can
hold fewer rows, so changing level also changes the reported world size.
"""

from __future__ import annotations

import math
from typing import List

import pygame

from config import PALETTE_BACKGROUND, TILE_SIZE, PREVIEW_COLUMNS, PREVIEW_ROWS
from core.events import KeyEvent
from textures.palette import PixelBuffer

_MOVES = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
}
_PREV_LEVEL = (pygame.K_PAGEUP, pygame.K_LEFTBRACKET)
_NEXT_LEVEL = (pygame.K_PAGEDOWN, pygame.K_RIGHTBRACKET)
CURSOR_COLOR = (255, 255, 255)


class PreviewEngine:
    def __init__(
        self,
        palette: PixelBuffer,
        level: int = 0,
        *,
        tile_size: int = TILE_SIZE,
        columns: int = PREVIEW_COLUMNS,
        rows: int = PREVIEW_ROWS,
    ) -> None:
        self.tile_size = tile_size
        self.columns = columns
        self.rows = rows
        self._sheet = palette.to_surface()
        self.tiles = self._slice(self._sheet, tile_size)
        self.page_size = columns * rows
        self.level_count = max(1, math.ceil(len(self.tiles) / self.page_size))
        self.level = level % self.level_count
        self.cursor = 0

    @staticmethod
    def _slice(sheet: pygame.Surface, tile_size: int) -> List[pygame.Surface]:
        across = sheet.get_width() // tile_size
        down = sheet.get_height() // tile_size
        return [
            sheet.subsurface((x * tile_size, y * tile_size, tile_size, tile_size))
            for y in range(down)
            for x in range(across)
        ]

    # ------------------------------------------------------------------
    def _page(self) -> List[pygame.Surface]:
        start = self.level * self.page_size
        return self.tiles[start : start + self.page_size]

    def _page_rows(self) -> int:
        return max(1, math.ceil(len(self._page()) / self.columns))

    def _set_level(self, level: int) -> None:
        self.level = level % self.level_count
        self.cursor = min(self.cursor, max(0, len(self._page()) - 1))

    def _move_cursor(self, dx: int, dy: int) -> None:
        count = len(self._page())
        if not count:
            return
        col = self.cursor % self.columns + dx
        row = self.cursor // self.columns + dy
        if 0 <= col < self.columns and row >= 0:
            target = row * self.columns + col
            if target < count:
                self.cursor = target

    # ------------------------------------------------------------------
    # engine contract
    # ------------------------------------------------------------------
    def width(self) -> int:
        return self.columns * self.tile_size

    def height(self) -> int:
        return self._page_rows() * self.tile_size

    def current_level(self) -> int:
        return self.level

    def selected_tile(self) -> int:
        return self.level * self.page_size + self.cursor

    def get_inventory(self) -> str:
        return f"level: {self.level + 1:02} tile: {self.selected_tile():03}"

    def draw(self, context: pygame.Surface) -> None:
        context.fill(PALETTE_BACKGROUND)
        size = self.tile_size
        for i, tile in enumerate(self._page()):
            context.blit(tile, ((i % self.columns) * size, (i // self.columns) * size))
        if self._page():
            x = (self.cursor % self.columns) * size
            y = (self.cursor // self.columns) * size
            pygame.draw.rect(context, CURSOR_COLOR, (x, y, size, size), 2)

    def on_keyboard_event(self, event: KeyEvent, is_keydown: bool) -> bool:
        key = event.key
        if key in _MOVES:
            if is_keydown:
                self._move_cursor(*_MOVES[key])
            return True
        if key in _PREV_LEVEL:
            if is_keydown:
                self._set_level(self.level - 1)
            return True
        if key in _NEXT_LEVEL:
            if is_keydown:
                self._set_level(self.level + 1)
            return True
        return False


__all__ = ["PreviewEngine"]
