"""Index, timer, keyboard, drawing and memory-transfer instructions."""

from __future__ import annotations

from typing import Any

from chipvm.display import Display
from chipvm.instruction import Instruction

_FLAG = 0xF
_SPRITE_LIMIT = 0xFFF
_FONT_GLYPH_SIZE = 5


class LdI(Instruction):
    """ANNN: I = NNN."""

    name = "LD_I"

    def _execute(self, vm: Any) -> None:
        vm.index = self.opcode.nnn


class Drw(Instruction):
    """DXYN: XOR an N-row sprite from memory at I onto the screen at (Vx, Vy).

    VF is set to 1 if any lit pixel was turned off, otherwise 0.
    Coordinates wrap around the screen edges.
    """

    name = "DRW"

    def _execute(self, vm: Any) -> None:
        x_origin = vm.registers[self.opcode.x] % Display.WIDTH
        y_origin = vm.registers[self.opcode.y] % Display.HEIGHT
        vm.registers[_FLAG] = 0

        for row in range(self.opcode.n):
            address = vm.index + row
            if address >= _SPRITE_LIMIT:
                break
            bits = vm.memory.at(address)
            y = (y_origin + row) % Display.HEIGHT
            for col in range(8):
                if bits & (0x80 >> col):
                    x = (x_origin + col) % Display.WIDTH
                    if vm.display.toggle_pixel(x, y):
                        vm.registers[_FLAG] = 1


class LdDtR(Instruction):
    """FX07: Vx = delay timer."""

    name = "LD_DT_R"

    def _execute(self, vm: Any) -> None:
        vm.registers[self.opcode.x] = vm.delay_timer.value


class LdK(Instruction):
    """FX0A: halt until a key is pressed, then store it in Vx."""

    name = "LD_K"

    def _execute(self, vm: Any) -> None:
        x = self.opcode.x
        registers = vm.registers

        def store(key: int) -> None:
            registers[x] = key

        vm.wait_for_input(store)


class LdRDt(Instruction):
    """FX15: delay timer = Vx."""

    name = "LD_R_DT"

    def _execute(self, vm: Any) -> None:
        vm.delay_timer.value = vm.registers[self.opcode.x]


class LdRSt(Instruction):
    """FX18: sound timer = Vx."""

    name = "LD_R_ST"

    def _execute(self, vm: Any) -> None:
        vm.sound_timer.value = vm.registers[self.opcode.x]


class AddI(Instruction):
    """FX1E: I += Vx, wrapping at 16 bits."""

    name = "ADD_I"

    def _execute(self, vm: Any) -> None:
        vm.index = (vm.index + vm.registers[self.opcode.x]) & 0xFFFF


class LdIR(Instruction):
    """FX29: point I at the font glyph numbered by the X nibble."""

    name = "LD_I_R"

    def _execute(self, vm: Any) -> None:
        vm.index = self.opcode.x * _FONT_GLYPH_SIZE


class LdB(Instruction):
    """FX33: store the decimal digits of Vx at I, I+1 and I+2."""

    name = "LD_B"

    def _execute(self, vm: Any) -> None:
        hundreds, rest = divmod(vm.registers[self.opcode.x], 100)
        tens, ones = divmod(rest, 10)
        for offset, digit in enumerate((hundreds, tens, ones)):
            vm.memory.write(vm.index + offset, digit)


class LdIRs(Instruction):
    """FX55: store V0..Vx in memory from I onwards, then advance I."""

    name = "LD_I_Rs"

    def _execute(self, vm: Any) -> None:
        count = self.opcode.x + 1
        for offset, value in enumerate(vm.registers[:count]):
            vm.memory.write(vm.index + offset, value)
        vm.index = (vm.index + count) & 0xFFFF


class LdRsI(Instruction):
    """FX65: load V0..Vx from memory starting at I, then advance I."""

    name = "LD_Rs_I"

    def _execute(self, vm: Any) -> None:
        count = self.opcode.x + 1
        for offset in range(count):
            vm.registers[offset] = vm.memory.read(vm.index + offset)
        vm.index = (vm.index + count) & 0xFFFF