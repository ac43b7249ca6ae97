from dataclasses import dataclass, field

import pytest

from chipvm.display import Display
from chipvm.memory import FONT_SPRITES, Memory
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
    LdRsI,
    LdRSt,
)
from chipvm.timer import Timer


def _frozen_clock():
    return 0


@dataclass
class FakeMachine:
    registers: list = field(default_factory=lambda: [0] * 16)
    index: int = 0
    memory: Memory = field(default_factory=Memory)
    display: Display = field(default_factory=Display)
    delay_timer: Timer = field(default_factory=lambda: Timer(_frozen_clock))
    sound_timer: Timer = field(default_factory=lambda: Timer(_frozen_clock))
    pending: object = None

    def wait_for_input(self, callback):
        self.pending = callback


@pytest.fixture
def vm():
    return FakeMachine()


def test_ld_i_sets_index(vm):
    opcode = OpCode(0xA123)
    LdI(opcode).execute(vm)
    assert vm.index == opcode.nnn


def test_ld_dt_r_reads_delay_timer(vm):
    vm.delay_timer.value = 7
    LdDtR(OpCode(0xF407)).execute(vm)
    assert vm.registers[4] == 7


def test_ld_r_dt_sets_delay_timer(vm):
    vm.registers[2] = 33
    LdRDt(OpCode(0xF215)).execute(vm)
    assert vm.delay_timer.value == 33
    assert vm.sound_timer.value == 0


def test_ld_r_st_sets_sound_timer(vm):
    vm.registers[2] = 33
    LdRSt(OpCode(0xF218)).execute(vm)
    assert vm.sound_timer.value == 33
    assert vm.delay_timer.value == 0


def test_add_i_adds_register(vm):
    vm.index = 0x100
    vm.registers[2] = 0x10
    AddI(OpCode(0xF21E)).execute(vm)
    assert vm.index - 0x100 == vm.registers[2]


def test_add_i_wraps_at_sixteen_bits(vm):
    vm.index = 0xFFFF
    vm.registers[2] = 1
    AddI(OpCode(0xF21E)).execute(vm)
    assert vm.index == 0


def test_ld_i_r_points_at_font_zero(vm):
    vm.index = 0x300
    LdIR(OpCode(0xF029)).execute(vm)
    assert vm.index == 0


@pytest.mark.parametrize("code, glyph", [(0xF129, FONT_SPRITES[5:10]), (0xFF29, FONT_SPRITES[-5:])])
def test_ld_i_r_points_at_glyph(vm, code, glyph):
    LdIR(OpCode(code)).execute(vm)
    assert bytes(vm.memory.read(vm.index + k) for k in range(5)) == glyph


def test_ld_b_stores_decimal_digits(vm):
    vm.registers[6] = 234
    vm.index = 0x300
    LdB(OpCode(0xF633)).execute(vm)
    assert [vm.memory.read(0x300 + k) for k in range(3)] == [2, 3, 4]


def test_ld_b_digits_recompose_every_byte(vm):
    vm.index = 0x300
    for value in range(256):
        vm.registers[1] = value
        LdB(OpCode(0xF133)).execute(vm)
        h, t, o = (vm.memory.read(0x300 + k) for k in range(3))
        assert all(d < 10 for d in (h, t, o))
        assert h * 100 + t * 10 + o == value


def test_ld_b_out_of_memory_raises(vm):
    vm.index = Memory.SIZE - 1
    vm.registers[0] = 123
    with pytest.raises(IndexError):
        LdB(OpCode(0xF033)).execute(vm)


def test_store_and_load_registers_round_trip(vm):
    values = [0x11, 0x22, 0x33, 0x44, 0x55]
    vm.registers[:5] = values
    vm.registers[5] = 0x99
    vm.index = 0x300
    LdIRs(OpCode(0xF455)).execute(vm)
    assert vm.index == 0x300 + 5
    assert [vm.memory.read(0x300 + k) for k in range(6)] == values + [0]

    vm.registers = [0] * 16
    vm.index = 0x300
    LdRsI(OpCode(0xF465)).execute(vm)
    assert vm.registers[:5] == values
    assert vm.registers[5] == 0
    assert vm.index == 0x300 + 5


def test_load_registers_past_memory_raises(vm):
    vm.index = Memory.SIZE - 1
    with pytest.raises(IndexError):
        LdRsI(OpCode(0xF165)).execute(vm)


def test_ld_k_waits_then_stores_key(vm):
    LdK(OpCode(0xF70A)).execute(vm)
    assert vm.registers[7] == 0
    vm.pending(0xB)
    assert vm.registers[7] == 0xB


def test_drw_font_zero_at_origin(vm):
    vm.index = 0
    Drw(OpCode(0xD015)).execute(vm)
    assert [vm.display.at(x, 0) for x in range(5)] == [1, 1, 1, 1, 0]
    assert [vm.display.at(x, 1) for x in range(4)] == [1, 0, 0, 1]
    assert vm.registers[0xF] == 0


def test_drw_twice_erases_and_reports_collision(vm):
    vm.index = 0
    Drw(OpCode(0xD015)).execute(vm)
    Drw(OpCode(0xD015)).execute(vm)
    assert all(vm.display.at(x, y) == 0 for x in range(8) for y in range(5))
    assert vm.registers[0xF] == 1


def test_drw_clears_flag_without_collision(vm):
    vm.registers[0xF] = 1
    vm.index = 0
    Drw(OpCode(0xD015)).execute(vm)
    assert vm.registers[0xF] == 0


def test_drw_wraps_around_edges(vm):
    vm.memory.write(0x300, 0xFF)
    vm.index = 0x300
    vm.registers[1] = Display.WIDTH - 2
    vm.registers[2] = Display.HEIGHT - 1
    Drw(OpCode(0xD121)).execute(vm)
    row = Display.HEIGHT - 1
    lit = [x for x in range(Display.WIDTH) if vm.display.at(x, row)]
    assert len(lit) == 8
    assert {Display.WIDTH - 2, Display.WIDTH - 1, 0} <= set(lit)


def test_drw_start_coordinates_wrap(vm):
    vm.memory.write(0x300, 0x80)
    vm.index = 0x300
    vm.registers[1] = Display.WIDTH + 3
    vm.registers[2] = Display.HEIGHT + 4
    Drw(OpCode(0xD121)).execute(vm)
    assert vm.display.at(3, 4) == 1


def test_drw_stops_at_sprite_limit(vm):
    vm.memory.write(0xFFE, 0x80)
    vm.memory.write(0xFFF, 0x80)
    vm.index = 0xFFE
    Drw(OpCode(0xD003)).execute(vm)
    assert vm.display.at(0, 0) == 1
    assert vm.display.at(0, 1) == 0
    assert vm.display.at(0, 2) == 0