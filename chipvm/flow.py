"""Control-flow instructions: jumps, calls, skips and screen clearing."""

from __future__ import annotations

from typing import Any

from chipvm.instruction import Instruction

STACK_DEPTH = 16


class Cls(Instruction):
    """00E0: clear the screen."""

    name = "CLS"

    def _execute(self, vm: Any) -> None:
        vm.display.clear()


class Ret(Instruction):
    """00EE: return from a subroutine."""

    name = "RET"

    def _execute(self, vm: Any) -> None:
        if not vm.stack:
            raise IndexError("return with an empty call stack")
        vm.program_counter.address = vm.stack.pop()


class Jmp(Instruction):
    """1NNN: jump to NNN."""

    name = "JMP"

    def _execute(self, vm: Any) -> None:
        vm.program_counter.address = self.opcode.nnn


class Call(Instruction):
    """2NNN: push the return address and jump to NNN."""

    name = "CALL"

    def _execute(self, vm: Any) -> None:
        if len(vm.stack) >= STACK_DEPTH:
            raise OverflowError("call stack overflow")
        vm.stack.append(vm.program_counter.address)
        vm.program_counter.address = self.opcode.nnn


class SeN(Instruction):
    """3XNN: skip the next instruction if Vx == NN."""

    name = "SE_N"

    def _execute(self, vm: Any) -> None:
        if vm.registers[self.opcode.x] == self.opcode.nn:
            vm.program_counter.increment()


class SneN(Instruction):
    """4XNN: skip the next instruction if Vx != NN."""

    name = "SNE_N"

    def _execute(self, vm: Any) -> None:
        if vm.registers[self.opcode.x] != self.opcode.nn:
            vm.program_counter.increment()


class SeR(Instruction):
    """5XY0: skip the next instruction if Vx == Vy."""

    name = "SE_R"

    def _execute(self, vm: Any) -> None:
        if vm.registers[self.opcode.x] == vm.registers[self.opcode.y]:
            vm.program_counter.increment()


class SneR(Instruction):
    """9XY0: skip the next instruction if Vx != Vy."""

    name = "SNE_R"

    def _execute(self, vm: Any) -> None:
        if vm.registers[self.opcode.x] != vm.registers[self.opcode.y]:
            vm.program_counter.increment()


class JmpV0(Instruction):
    """BNNN: jump to NNN + V0."""

    name = "JMP_V0"

    def _execute(self, vm: Any) -> None:
        vm.program_counter.address = self.opcode.nnn + vm.registers[0]


class Skp(Instruction):
    """EX9E: skip the next instruction if the key in Vx is pressed."""

    name = "SKP"

    def _execute(self, vm: Any) -> None:
        if vm.keys[vm.registers[self.opcode.x]]:
            vm.program_counter.increment()


class Skpn(Instruction):
    """EXA1: skip the next instruction if the key in Vx is not pressed."""

    name = "SKPN"

    def _execute(self, vm: Any) -> None:
        if not vm.keys[vm.registers[self.opcode.x]]:
            vm.program_counter.increment()