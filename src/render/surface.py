"""Output window for the engine.

The game area always matches the size the engine reports; an optional
status strip for the inventory text sits underneath it. Every
`pygame.display.set_mode` call replaces the window surface, so the drawing
context handed out before a resize must not be used after it.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from config import STATUS_BAR_HEIGHT, VSYNC


class OutputSurface:
    def __init__(
        self,
        *,
        status_height: int = STATUS_BAR_HEIGHT,
        flags: int = 0,
        vsync: bool = VSYNC,
    ) -> None:
        self.status_height = max(0, int(status_height))
        self.flags = flags
        self.vsync = vsync
        # Whether the last set_mode call actually got vsync
        self.vsync_active = False
        self.width = 0
        self.height = 0
        self._window: Optional[pygame.Surface] = None
        self._context: Optional[pygame.Surface] = None
        self._status: Optional[pygame.Surface] = None

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_open(self) -> bool:
        return self._window is not None

    @property
    def context(self) -> Optional[pygame.Surface]:
        """Drawing surface for the game area; None until opened."""
        return self._context

    @property
    def status_context(self) -> Optional[pygame.Surface]:
        return self._status

    def resize(self, width: int, height: int) -> None:
        # Engine-reported sizes are used as-is
        self._window = self._set_mode((width, height + self.status_height))
        self.width = width
        self.height = height
        self._context = self._window.subsurface((0, 0, width, height))
        if self.status_height:
            self._status = self._window.subsurface(
                (0, height, width, self.status_height)
            )
        else:
            self._status = None

    def _set_mode(self, size: Tuple[int, int]) -> pygame.Surface:
        self.vsync_active = False
        if self.vsync:
            # Software windows only get vsync through the SCALED renderer
            try:
                window = pygame.display.set_mode(
                    size, self.flags | pygame.SCALED, vsync=1
                )
                self.vsync_active = True
                return window
            except (TypeError, pygame.error) as e:
                # Older pygame builds reject the vsync kwarg, or the driver
                # can't provide it; fall back to an unsynchronised window.
                print(f"[Surface] Vsync unavailable, falling back: {e}")
        return pygame.display.set_mode(size, self.flags)

    def present(self) -> None:  # pragma: no cover - visual
        if self._window is not None:
            pygame.display.flip()


__all__ = ["OutputSurface"]
