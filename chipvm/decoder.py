"""Maps raw opcodes to the instruction classes that execute them."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, NamedTuple, Optional, Union

from chipvm.alu import AddN, AddR, AndR, LdN, LdR, OrR, Rnd, ShlR, ShrR, SubnR, SubR, XorR
from chipvm.flow import Call, Cls, Jmp, JmpV0, Ret, SeN, SeR, Skp, Skpn, SneN, SneR
from chipvm.instruction import Instruction
from chipvm.opcode import OpCode
from chipvm.system import (
    AddI,
    Drw,
    LdB,
    LdDtR,
    LdI,
    LdIR,
    LdIRs,
    LdK,
    LdRDt,
    LdRSt,
    LdRsI,
)

InstructionFactory = Callable[[OpCode], Instruction]


class _Entry(NamedTuple):
    mask: int
    pattern: int
    factory: InstructionFactory


class Decoder:
    """Matches opcodes against (mask, pattern) rules.

    Rules whose mask has more bits set are tried first, so a fully
    specified opcode wins over a family pattern that also covers it.
    Among rules of equal specificity, the first registered wins.
    """

    def __init__(self) -> None:
        self._entries: list[list[_Entry]] = [[] for _ in range(16)]

    def register(self, mask: int, pattern: int, factory: InstructionFactory) -> None:
        """Add a rule: opcodes with ``code & mask == pattern & mask`` build ``factory``."""
        if not 0 < mask <= 0xFFFF:
            raise ValueError(f"mask must be a non-zero 16-bit value, got {mask:#x}")
        specificity = bin(mask).count("1") - 1
        self._entries[specificity].append(_Entry(mask, pattern & mask, factory))

    def decode(self, opcode: Union[OpCode, int]) -> Optional[Instruction]:
        """Return the instruction for ``opcode``, or None if no rule matches."""
        if not isinstance(opcode, OpCode):
            opcode = OpCode(opcode)
        for bucket in reversed(self._entries):
            for entry in bucket:
                if opcode.code & entry.mask == entry.pattern:
                    return entry.factory(opcode)
        return None


_STANDARD_RULES: tuple[tuple[int, int, InstructionFactory], ...] = (
    (0xFFFF, 0x00E0, Cls),
    (0xFFFF, 0x00EE, Ret),
    (0xF000, 0x1000, Jmp),
    (0xF000, 0x2000, Call),
    (0xF000, 0x3000, SeN),
    (0xF000, 0x4000, SneN),
    (0xF000, 0x5000, SeR),
    (0xF000, 0x6000, LdN),
    (0xF000, 0x7000, AddN),
    (0xF00F, 0x8000, LdR),
    (0xF00F, 0x8001, OrR),
    (0xF00F, 0x8002, AndR),
    (0xF00F, 0x8003, XorR),
    (0xF00F, 0x8004, AddR),
    (0xF00F, 0x8005, SubR),
    (0xF00F, 0x8006, ShrR),
    (0xF00F, 0x8007, SubnR),
    (0xF00F, 0x800E, ShlR),
    (0xF00F, 0x9000, SneR),
    (0xF000, 0xA000, LdI),
    (0xF000, 0xB000, JmpV0),
    (0xF000, 0xC000, Rnd),
    (0xF000, 0xD000, Drw),
    (0xF0FF, 0xE09E, Skp),
    (0xF0FF, 0xE0A1, Skpn),
    (0xF0FF, 0xF007, LdDtR),
    (0xF0FF, 0xF00A, LdK),
    (0xF0FF, 0xF015, LdRDt),
    (0xF0FF, 0xF018, LdRSt),
    (0xF0FF, 0xF01E, AddI),
    (0xF0FF, 0xF029, LdIR),
    (0xF0FF, 0xF033, LdB),
    (0xF0FF, 0xF055, LdIRs),
    (0xF0FF, 0xF065, LdRsI),
)


@lru_cache(maxsize=None)
def default_decoder() -> Decoder:
    """Return the shared decoder holding the standard instruction set."""
    decoder = Decoder()
    for mask, pattern, factory in _STANDARD_RULES:
        decoder.register(mask, pattern, factory)
    return decoder