"""Command-line entry point that loads a program and runs it in a window."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from chipvm.engine import GraphicEngine, PygameEngine
from chipvm.machine import VirtualMachine
from chipvm.memory import RomError

DEFAULT_SCALE = 13
DEFAULT_CLOCK = 500
FRAMES_PER_SECOND = 60


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line; exit with status 1 on bad arguments."""
    parser = _Parser(prog="Chip8")
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument("rom_path", metavar="ROM_PATH", help="Chip8 ROM file location")
    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=DEFAULT_SCALE,
        help="Amount of times the screen will be multiplied by",
    )
    parser.add_argument(
        "-c",
        "--clock",
        type=int,
        default=DEFAULT_CLOCK,
        help="Amount of instructions the program will run each second",
    )
    return parser.parse_args(argv)


def run(vm: VirtualMachine, engine: GraphicEngine, clock: int) -> None:
    """Drive ``vm`` frame by frame until ``engine`` stops running."""
    steps_per_frame = clock // FRAMES_PER_SECOND
    while engine.is_running:
        engine.handle_events()
        for _ in range(steps_per_frame):
            if not vm.waiting_for_input:
                vm.execute_next_instruction()
        vm.delay_timer.update()
        vm.sound_timer.update()
        engine.render()
        engine.sync()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        vm = VirtualMachine.from_rom_file(args.rom_path)
    except RomError as exc:
        print(exc, file=sys.stderr)
        return 1
    with PygameEngine(vm, args.scale) as engine:
        run(vm, engine, args.clock)
    return 0


if __name__ == "__main__":
    sys.exit(main())