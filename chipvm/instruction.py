"""The base class shared by every executable instruction."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from chipvm.opcode import OpCode

logger = logging.getLogger(__name__)


class Instruction(ABC):
    """One decoded instruction bound to the opcode it came from.

    A subclass is its own factory: calling it with an ``OpCode`` builds
    the instruction. Subclasses implement ``_execute`` and set ``name``.

    The machine handed to ``execute`` exposes ``registers`` (sixteen
    8-bit values), ``index``, ``program_counter``, ``stack``,
    ``memory``, ``display``, ``keys``, ``delay_timer`` and
    ``sound_timer``.
    """

    name = "Unnamed"

    def __init__(self, opcode: OpCode) -> None:
        self.opcode = opcode

    @abstractmethod
    def _execute(self, vm: Any) -> None:
        """Apply the instruction's effect to ``vm``."""

    def execute(self, vm: Any) -> None:
        """Run the instruction against ``vm`` and log it at debug level."""
        self._execute(vm)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Executed %s (%s at address %04x)",
                self.name,
                self.opcode,
                vm.program_counter.address,
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.opcode.code:#06x})"