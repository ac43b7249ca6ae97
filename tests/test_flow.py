from dataclasses import dataclass, field

import pytest

from chipvm.display import Display
from chipvm.flow import (
    STACK_DEPTH,
    Call,
    Cls,
    Jmp,
    JmpV0,
    Ret,
    SeN,
    SeR,
    Skp,
    Skpn,
    SneN,
    SneR,
)
from chipvm.opcode import OpCode

START = 0x200
INSTRUCTION_SIZE = 2


@dataclass
class FakeCounter:
    address: int = START

    def increment(self):
        self.address += INSTRUCTION_SIZE


@dataclass
class FakeMachine:
    registers: list = field(default_factory=lambda: [0] * 16)
    program_counter: FakeCounter = field(default_factory=FakeCounter)
    stack: list = field(default_factory=list)
    display: Display = field(default_factory=Display)
    keys: list = field(default_factory=lambda: [False] * 16)


@pytest.fixture
def vm():
    return FakeMachine()


def skipped(vm):
    return vm.program_counter.address == START + INSTRUCTION_SIZE


def not_moved(vm):
    return vm.program_counter.address == START


def test_cls_clears_the_screen(vm):
    vm.display.set_pixel(3, 4)
    vm.display.set_pixel(63, 31)
    Cls(OpCode(0x00E0)).execute(vm)
    assert vm.display.at(3, 4) == 0
    assert vm.display.at(63, 31) == 0


def test_jmp_sets_address(vm):
    opcode = OpCode(0x1ABC)
    Jmp(opcode).execute(vm)
    assert vm.program_counter.address == opcode.nnn


def test_call_then_ret_round_trip(vm):
    opcode = OpCode(0x2345)
    Call(opcode).execute(vm)
    assert vm.program_counter.address == opcode.nnn
    assert vm.stack == [START]
    Ret(OpCode(0x00EE)).execute(vm)
    assert vm.program_counter.address == START
    assert vm.stack == []


def test_nested_calls_return_in_reverse_order(vm):
    Call(OpCode(0x2400)).execute(vm)
    Call(OpCode(0x2600)).execute(vm)
    Ret(OpCode(0x00EE)).execute(vm)
    assert vm.program_counter.address == 0x400
    Ret(OpCode(0x00EE)).execute(vm)
    assert vm.program_counter.address == START


def test_ret_on_empty_stack_raises(vm):
    with pytest.raises(IndexError):
        Ret(OpCode(0x00EE)).execute(vm)


def test_call_overflow_raises(vm):
    for _ in range(STACK_DEPTH):
        Call(OpCode(0x2300)).execute(vm)
    assert len(vm.stack) == STACK_DEPTH
    with pytest.raises(OverflowError):
        Call(OpCode(0x2300)).execute(vm)


@pytest.mark.parametrize("value, skip", [(0x42, True), (0x41, False)])
def test_se_n(vm, value, skip):
    vm.registers[3] = value
    SeN(OpCode(0x3342)).execute(vm)
    assert skipped(vm) is skip
    assert not_moved(vm) is not skip


@pytest.mark.parametrize("value, skip", [(0x42, False), (0x41, True)])
def test_sne_n(vm, value, skip):
    vm.registers[3] = value
    SneN(OpCode(0x4342)).execute(vm)
    assert skipped(vm) is skip


@pytest.mark.parametrize("vy, skip", [(9, True), (8, False)])
def test_se_r(vm, vy, skip):
    vm.registers[1] = 9
    vm.registers[2] = vy
    SeR(OpCode(0x5120)).execute(vm)
    assert skipped(vm) is skip


@pytest.mark.parametrize("vy, skip", [(9, False), (8, True)])
def test_sne_r(vm, vy, skip):
    vm.registers[1] = 9
    vm.registers[2] = vy
    SneR(OpCode(0x9120)).execute(vm)
    assert skipped(vm) is skip


def test_jmp_v0_adds_register_zero(vm):
    vm.registers[0] = 4
    opcode = OpCode(0xB300)
    JmpV0(opcode).execute(vm)
    assert vm.program_counter.address - opcode.nnn == vm.registers[0]


@pytest.mark.parametrize("pressed, skip", [(True, True), (False, False)])
def test_skp(vm, pressed, skip):
    vm.registers[5] = 0xA
    vm.keys[0xA] = pressed
    Skp(OpCode(0xE59E)).execute(vm)
    assert skipped(vm) is skip


@pytest.mark.parametrize("pressed, skip", [(True, False), (False, True)])
def test_skpn(vm, pressed, skip):
    vm.registers[5] = 0xA
    vm.keys[0xA] = pressed
    Skpn(OpCode(0xE5A1)).execute(vm)
    assert skipped(vm) is skip


def test_skp_looks_at_key_named_by_register(vm):
    vm.registers[5] = 0x3
    vm.keys[0x5] = True
    instruction = Skp(OpCode(0xE59E))
    instruction.execute(vm)
    assert vm.program_counter.address == START
    vm.keys[0x3] = True
    instruction.execute(vm)
    assert vm.program_counter.address == START + INSTRUCTION_SIZE