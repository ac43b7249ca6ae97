"""The monochrome frame buffer."""

from __future__ import annotations


class Display:
    """A 64x32 grid of pixels, each either on (1) or off (0)."""

    WIDTH = 64
    HEIGHT = 32

    def __init__(self) -> None:
        self._pixels = [bytearray(self.HEIGHT) for _ in range(self.WIDTH)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.WIDTH and 0 <= y < self.HEIGHT):
            raise IndexError(f"pixel ({x}, {y}) is off the screen")

    def clear(self) -> None:
        """Turn every pixel off."""
        for column in self._pixels:
            column[:] = bytes(self.HEIGHT)

    def at(self, x: int, y: int) -> int:
        """Return 1 if the pixel is on, 0 otherwise."""
        self._check(x, y)
        return self._pixels[x][y]

    def set_pixel(self, x: int, y: int) -> None:
        self._check(x, y)
        self._pixels[x][y] = 1

    def reset_pixel(self, x: int, y: int) -> None:
        self._check(x, y)
        self._pixels[x][y] = 0

    def toggle_pixel(self, x: int, y: int) -> bool:
        """Flip a pixel and return True if it was on (a collision)."""
        self._check(x, y)
        was_on = bool(self._pixels[x][y])
        self._pixels[x][y] = 0 if was_on else 1
        return was_on