"""Register loads and arithmetic/logic instructions."""

from __future__ import annotations

import random
from typing import Any

from chipvm.instruction import Instruction

_FLAG = 0xF


class LdN(Instruction):
    """6XNN: Vx = NN."""

    name = "LD_N"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] = self.opcode.nn


class AddN(Instruction):
    """7XNN: Vx += NN, wrapping, flag untouched."""

    name = "ADD_N"

    def _execute(self, vm: Any) -> None:
        x = self.opcode.x
        vm.registers[x] = (vm.registers[x] + self.opcode.nn) & 0xFF


class LdR(Instruction):
    """8XY0: Vx = Vy."""

    name = "LD_R"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] = vm.registers[self.opcode.y]


class OrR(Instruction):
    """8XY1: Vx |= Vy."""

    name = "OR_R"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] |= vm.registers[self.opcode.y]


class AndR(Instruction):
    """8XY2: Vx &= Vy."""

    name = "AND_R"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] &= vm.registers[self.opcode.y]


class XorR(Instruction):
    """8XY3: Vx ^= Vy."""

    name = "XOR_R"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] ^= vm.registers[self.opcode.y]


class AddR(Instruction):
    """8XY4: Vx += Vy; VF = 1 on carry, else 0."""

    name = "ADD_R"

    def _execute(self, vm: Any) -> None:
        x, y = self.opcode.x, self.opcode.y
        total = vm.registers[x] + vm.registers[y]
        vm.registers[x] = total & 0xFF
        vm.registers[_FLAG] = 1 if total > 0xFF else 0


class SubR(Instruction):
    """8XY5: Vx -= Vy; VF = 1 when no borrow, else 0."""

    name = "SUB_R"

    def _execute(self, vm: Any) -> None:
        x, y = self.opcode.x, self.opcode.y
        vx, vy = vm.registers[x], vm.registers[y]
        vm.registers[x] = (vx - vy) & 0xFF
        vm.registers[_FLAG] = 1 if vx >= vy else 0


class ShrR(Instruction):
    """8XY6: Vx = Vy >> 1; VF = the bit shifted out."""

    name = "SHR_R"

    def _execute(self, vm: Any) -> None:
        source = vm.registers[self.opcode.y]
        vm.registers[self.opcode.x] = source >> 1
        vm.registers[_FLAG] = source & 0x1


class SubnR(Instruction):
    """8XY7: Vx = Vy - Vx; VF = 1 when no borrow, else 0."""

    name = "SUBN_R"

    def _execute(self, vm: Any) -> None:
        x, y = self.opcode.x, self.opcode.y
        vx, vy = vm.registers[x], vm.registers[y]
        vm.registers[x] = (vy - vx) & 0xFF
        vm.registers[_FLAG] = 1 if vy >= vx else 0


class ShlR(Instruction):
    """8XYE: Vx = Vy << 1; VF = the bit shifted out."""

    name = "SHL_R"

    def _execute(self, vm: Any) -> None:
        source = vm.registers[self.opcode.y]
        vm.registers[self.opcode.x] = (source << 1) & 0xFF
        vm.registers[_FLAG] = (source & 0x80) >> 7


class Rnd(Instruction):
    """CXNN: Vx = random byte AND NN."""

    name = "RND"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] = random.randrange(256) & self.opcode.nn