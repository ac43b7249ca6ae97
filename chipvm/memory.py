"""The 4 KiB address space holding the font and the loaded program."""

from __future__ import annotations

import os
from typing import Union

FONT_SPRITES = bytes(
    [
        0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
        0x20, 0x60, 0x20, 0x20, 0x70,  # 1
        0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
        0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
        0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
        0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
        0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
        0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
        0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
        0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
        0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
        0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
        0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
        0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
        0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
        0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
    ]
)


class RomError(Exception):
    """Raised when a program image cannot be loaded."""


class Memory:
    """Byte-addressed memory with the font at 0 and the program at 0x200."""

    SIZE = 4096
    ROM_START = 0x200
    MAX_ROM_SIZE = SIZE - ROM_START

    def __init__(self, rom: bytes = b"") -> None:
        if len(rom) > self.MAX_ROM_SIZE:
            raise RomError("ROM file is too large")
        self._mem = bytearray(self.SIZE)
        self._mem[self.ROM_START:self.ROM_START + len(rom)] = rom
        self._mem[:len(FONT_SPRITES)] = FONT_SPRITES
        self.rom_size = len(rom)

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "Memory":
        """Load a program image from a file."""
        try:
            with open(path, "rb") as rom_file:
                rom = rom_file.read()
        except OSError as exc:
            raise RomError("Failed to open ROM file") from exc
        return cls(rom)

    @property
    def instruction_count(self) -> int:
        return self.rom_size // 2

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self.SIZE:
            raise IndexError(f"memory address {pos:#x} out of range")

    def read(self, pos: int) -> int:
        """Return the byte at ``pos``; raise IndexError if out of range."""
        self._check(pos)
        return self._mem[pos]

    def write(self, pos: int, value: int) -> None:
        """Store the low 8 bits of ``value`` at ``pos``."""
        self._check(pos)
        self._mem[pos] = value & 0xFF

    def fetch_instruction(self, address: int) -> int:
        """Return the big-endian 16-bit word starting at ``address``."""
        if not 0 <= address < self.SIZE - 1:
            raise IndexError("Memory access out of bounds")
        return (self._mem[address] << 8) | self._mem[address + 1]

    def at(self, address: int) -> int:
        """Return the byte at ``address``."""
        self._check(address)
        return self._mem[address]