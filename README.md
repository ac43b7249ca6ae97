# chipvm

chipvm is a CHIP-8 virtual machine. It loads a ROM image, runs its
instructions at a chosen clock rate, and shows the 64×32 screen in a pygame
window.

## Installation

```
pip install .
```

pygame is the only runtime dependency. To run the test suite, install the
`test` extra:

```
pip install ".[test]"
pytest
```

## Running a ROM

```
chipvm path/to/game.ch8
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `-s`, `--scale` | 13 | How many times each screen pixel is enlarged |
| `-c`, `--clock` | 500 | Instructions executed per second |
| `--version` | | Print the version and exit |

Each frame runs `clock // 60` instructions (none while the machine is waiting
for a key), then updates the delay and sound timers, draws the screen and
pauses for 8 ms. The timers count down at 60 Hz of wall-clock time.

Bad arguments print the usage and exit with status 1. A ROM that cannot be
opened, or that is larger than 3584 bytes, prints an error and exits with
status 1. Opcodes the machine does not recognise are logged as errors and
skipped.

## Keyboard

The sixteen CHIP-8 keys are mapped onto the left side of a QWERTY keyboard:

```
1 2 3 4        1 2 3 C
Q W E R   ->   4 5 6 D
A S D F        7 8 9 E
Z X C V        A 0 B F
```

Press Escape or close the window to quit.

## Using the library

The machine can also be driven without a window:

```python
from chipvm.machine import VirtualMachine

vm = VirtualMachine.from_rom_file("game.ch8")
for _ in range(100):
    vm.execute_next_instruction()
print(vm.display.at(0, 0))
```

Parts of the package:

- `chipvm.opcode.OpCode` holds a 16-bit instruction word and exposes its
  fields as `c`, `x`, `y`, `n`, `nn` and `nnn`.
- `chipvm.memory.Memory` is the 4 KiB address space with the font sprites at
  address 0 and the ROM at `0x200`. Build it from bytes with `Memory(rom)` or
  from a file with `Memory.from_file(path)`; both raise `RomError` when the
  ROM cannot be loaded. `read`, `write`, `at` and `fetch_instruction` raise
  `IndexError` for addresses outside memory.
- `chipvm.display.Display` is the monochrome framebuffer, with `clear`, `at`,
  `set_pixel`, `reset_pixel` and `toggle_pixel` (which returns whether the
  pixel was on).
- `chipvm.timer.Timer` is a 60 Hz countdown timer; its `clock` argument
  returns the time in nanoseconds, so it can be driven by a fake clock.
- `chipvm.decoder.default_decoder()` returns a shared `Decoder` with every
  standard instruction registered. `Decoder.decode` returns an instruction, or
  `None` when no rule matches; `Decoder.register(mask, pattern, factory)` adds
  a rule.
- `chipvm.machine.VirtualMachine` holds `registers`, `index`,
  `program_counter`, `stack`, `keys`, `display`, `memory`, `delay_timer` and
  `sound_timer`. `execute` runs a single opcode (an `OpCode` or an `int`);
  `press_key` and `release_key` take a key from 0 to 15 and raise `IndexError`
  otherwise. The call stack holds at most 16 return addresses.
- The instruction classes live in `chipvm.alu`, `chipvm.flow` and
  `chipvm.system`; each is built from an `OpCode` and run with
  `execute(vm)`.
- `chipvm.engine.PygameEngine` draws the display and passes keyboard input on
  to the machine. `frame_colors(display)` and `key_for(key_name)` are the
  colour and key mappings it uses.
- `chipvm.cli.run(vm, engine, clock)` is the main loop that `chipvm` uses.

## What it does not do

The sound timer counts down, but no sound is played. There is no debugger,
save-state or configurable key mapping.