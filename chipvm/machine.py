"""The virtual machine: registers, stack, memory, screen, keys and timers."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from chipvm.decoder import Decoder, default_decoder
from chipvm.display import Display
from chipvm.memory import Memory
from chipvm.opcode import OpCode
from chipvm.timer import Timer

logger = logging.getLogger(__name__)

KEY_COUNT = 16
REGISTER_COUNT = 16
STACK_SIZE = 16

InputCallback = Callable[[int], None]


@dataclass
class ProgramCounter:
    """The address of the next instruction to fetch."""

    address: int = Memory.ROM_START

    def increment(self) -> None:
        """Step past one two-byte instruction."""
        self.address = (self.address + 2) & 0xFFFF


class VirtualMachine:
    """Complete machine state plus the fetch/decode/execute cycle."""

    def __init__(
        self,
        memory: Optional[Memory] = None,
        decoder: Optional[Decoder] = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.registers = bytearray(REGISTER_COUNT)
        self.index = 0
        self.program_counter = ProgramCounter()
        self.stack: list[int] = []
        self.keys = [False] * KEY_COUNT
        self.display = Display()
        self.memory = memory if memory is not None else Memory()
        self.decoder = decoder if decoder is not None else default_decoder()
        self.delay_timer = Timer(clock)
        self.sound_timer = Timer(clock)
        self._input_callback: Optional[InputCallback] = None
        self._waiting_for_input = False

    @classmethod
    def from_rom_file(cls, path: Union[str, "os.PathLike[str]"]) -> "VirtualMachine":
        """Build a machine with the program at ``path`` loaded."""
        return cls(Memory.from_file(path))

    @property
    def waiting_for_input(self) -> bool:
        """True while execution is halted until a key is pressed."""
        return self._waiting_for_input

    def execute_next_instruction(self) -> None:
        """Fetch the word at the program counter, advance it, and execute."""
        if self._waiting_for_input:
            return
        code = self.memory.fetch_instruction(self.program_counter.address)
        self.program_counter.increment()
        self.execute(OpCode(code))

    def execute(self, opcode: Union[OpCode, int]) -> None:
        """Decode and run one opcode; unknown opcodes are reported and skipped."""
        if self._waiting_for_input:
            return
        if not isinstance(opcode, OpCode):
            opcode = OpCode(opcode)
        instruction = self.decoder.decode(opcode)
        if instruction is None:
            logger.error(
                "Unknown opcode: (%04x at address %x)",
                opcode.code,
                self.program_counter.address,
            )
            return
        instruction.execute(self)

    @staticmethod
    def _check_key(key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise IndexError("Key out of range")

    def press_key(self, key: int) -> None:
        """Mark ``key`` as held and resume a pending key wait."""
        self._check_key(key)
        logger.debug("Key pressed: %d", key)
        self.keys[key] = True
        if self._waiting_for_input:
            self._input_received(key)

    def release_key(self, key: int) -> None:
        """Mark ``key`` as released."""
        self._check_key(key)
        logger.debug("Key released: %d", key)
        self.keys[key] = False

    def wait_for_input(self, callback: Optional[InputCallback]) -> None:
        """Halt execution until a key is pressed, then call ``callback`` with it."""
        self._waiting_for_input = True
        self._input_callback = callback

    def _input_received(self, key: int) -> None:
        self._waiting_for_input = False
        callback, self._input_callback = self._input_callback, None
        if callback is not None:
            callback(key)

    def __str__(self) -> str:
        registers = "".join(f"{value:x} " for value in self.registers)
        slots = self.stack + [0] * (STACK_SIZE - len(self.stack))
        stack = "".join(f"{value:x} " for value in slots)
        return (
            "Virtual Machine State:\n"
            f"PC: {self.program_counter.address:x}\n"
            f"I: {self.index:x}\n"
            f"Registers: {registers}\n"
            f"Stack: {stack}SP: {len(self.stack):x}\n"
        )