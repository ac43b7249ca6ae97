"""Window, keyboard and frame presentation for a running machine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

import pygame

from chipvm.display import Display
from chipvm.machine import VirtualMachine

WINDOW_TITLE = "Chip8 Framebuffer"
ON_COLOR = (0xB9, 0xC9, 0xBD)
OFF_COLOR = (0x18, 0x16, 0x1C)
FRAME_DELAY_MS = 8

KEY_MAP: dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "q": 0x4, "w": 0x5, "e": 0x6, "r": 0xD,
    "a": 0x7, "s": 0x8, "d": 0x9, "f": 0xE,
    "z": 0xA, "x": 0x0, "c": 0xB, "v": 0xF,
}


def key_for(key_name: str) -> Optional[int]:
    """Return the keypad key bound to a keyboard key name, or None."""
    return KEY_MAP.get(key_name.lower())


def frame_colors(display: Display) -> list[tuple[int, int, int]]:
    """Return the RGB colour of every pixel, row by row from the top left."""
    return [
        ON_COLOR if display.at(x, y) else OFF_COLOR
        for y in range(Display.HEIGHT)
        for x in range(Display.WIDTH)
    ]


class GraphicEngine(ABC):
    """Front end that feeds input to a machine and shows its screen."""

    def __init__(self, vm: VirtualMachine, scale: int) -> None:
        self.vm = vm
        self.scale = scale
        self._running = True

    @property
    def is_running(self) -> bool:
        """False once the user has asked to quit."""
        return self._running

    def _quit(self) -> None:
        self._running = False

    @abstractmethod
    def handle_events(self) -> None:
        """Process pending window and keyboard events."""

    @abstractmethod
    def render(self) -> None:
        """Draw the machine's screen."""

    @abstractmethod
    def sync(self) -> None:
        """Pause between frames."""

    @abstractmethod
    def close(self) -> None:
        """Release the window and any other resources."""

    def __enter__(self) -> "GraphicEngine":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class PygameEngine(GraphicEngine):
    """A pygame window scaled up from the 64x32 screen."""

    def __init__(self, vm: VirtualMachine, scale: int) -> None:
        super().__init__(vm, scale)
        pygame.init()
        self._size = (Display.WIDTH * scale, Display.HEIGHT * scale)
        self._window = pygame.display.set_mode(self._size)
        pygame.display.set_caption(WINDOW_TITLE)

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit()
                    continue
                key = key_for(pygame.key.name(event.key))
                if key is not None:
                    self.vm.press_key(key)
            elif event.type == pygame.KEYUP:
                key = key_for(pygame.key.name(event.key))
                if key is not None:
                    self.vm.release_key(key)

    def render(self) -> None:
        data = bytes(
            channel for color in frame_colors(self.vm.display) for channel in color
        )
        frame = pygame.image.frombuffer(data, (Display.WIDTH, Display.HEIGHT), "RGB")
        self._window.blit(pygame.transform.scale(frame, self._size), (0, 0))
        pygame.display.flip()

    def sync(self) -> None:
        pygame.time.delay(FRAME_DELAY_MS)

    def close(self) -> None:
        pygame.quit()