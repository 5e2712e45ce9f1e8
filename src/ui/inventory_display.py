"""Inventory text shown under the game area.

Like the HUD text labels, the rendered text surface is cached and only
re-rendered when the text actually changes; the engine refreshes it every
frame but it rarely differs.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from config import TITLE, FONT_SIZE, STATUS_BAR_COLOR, STATUS_TEXT_COLOR


class InventoryDisplay:
    def __init__(
        self,
        surface,
        *,
        font: Optional[pygame.font.Font] = None,
        size: int = FONT_SIZE,
        color: Tuple[int, int, int] = STATUS_TEXT_COLOR,
        background: Tuple[int, int, int] = STATUS_BAR_COLOR,
        caption: Optional[str] = TITLE,
    ) -> None:
        self.surface = surface
        self.font = font or pygame.font.Font(None, size)
        self.color = color
        self.background = background
        self.caption = caption
        self.text = ""
        self._rendered: Optional[pygame.Surface] = None
        self.render_count = 0

    def set_text(self, text: str) -> None:
        if text != self.text or self._rendered is None:
            self.text = text
            self._rendered = self.font.render(text, True, self.color)
            self.render_count += 1
            if self.caption and pygame.display.get_init():
                pygame.display.set_caption(f"{self.caption} - {text}" if text else self.caption)
        self.draw()

    def draw(self) -> None:
        # Fetched every time: the strip is replaced whenever the window resizes
        target = self.surface.status_context
        if target is None or self._rendered is None:
            return
        target.fill(self.background)
        y = (target.get_height() - self._rendered.get_height()) // 2
        target.blit(self._rendered, (4, y))


__all__ = ["InventoryDisplay"]
