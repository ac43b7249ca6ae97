"""A decoded 16-bit instruction word and its nibble fields."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OpCode:
    """A 16-bit opcode split into its standard fields.

    ``c`` is the top nibble, ``x`` and ``y`` the two register nibbles,
    ``n`` the low nibble, ``nn`` the low byte and ``nnn`` the low 12 bits.
    """

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= 0xFFFF:
            raise ValueError(f"opcode out of range: {self.code:#x}")

    @property
    def c(self) -> int:
        return self.code >> 12

    @property
    def x(self) -> int:
        return (self.code & 0x0F00) >> 8

    @property
    def y(self) -> int:
        return (self.code & 0x00F0) >> 4

    @property
    def n(self) -> int:
        return self.code & 0x000F

    @property
    def nn(self) -> int:
        return self.code & 0x00FF

    @property
    def nnn(self) -> int:
        return self.code & 0x0FFF

    def __str__(self) -> str:
        return f"{self.code:04x}"