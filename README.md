# procmux

`procmux` holds the building blocks of an emulator that multiplexes
processes over CPU cores. It uses only the standard library.

## What is in it

| Module                  | Contents                                                                 |
|-------------------------|--------------------------------------------------------------------------|
| `procmux.clock`         | `GlobalClock`, a shared ticking clock that threads can wait on           |
| `procmux.boolvector`    | `GrowingBooleanVector`, an OR-combined set of per-core activity series   |
| `procmux.datasection`   | `DataSection`, the 16-bit variables of a process                         |
| `procmux.frame`         | `Frame`, one frame of physical memory addressed by hex strings           |
| `procmux.heap`          | `Heap`, a handle-based first-fit heap, and `HeapError`                   |
| `procmux.instruction`   | `Instruction`, `AddInstruction`, `InstructionType`, `ParameterCombination`, `InstructionError` |
| `procmux.parsing`       | Tokenising helpers for the instruction language, and `ParseError`        |
| `procmux.interpret`     | `interpret_add` and `interpret_instructions`                             |
| `procmux.config`        | `Configuration`, `tokenize`, `parse_config`, `read_config`, `format_config`, `ConfigError` |

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The instruction language

A program is a list of instructions separated by semicolons. Each
instruction is a name followed by its arguments in parentheses:

```
DECLARE(x, 5); ADD(y, x, 1); PRINT("y is ", y)
```

Semicolons inside parentheses or square brackets do not split
instructions, and commas inside square brackets do not split arguments.
Blanks, then one pair of surrounding quotes, then one pair of square
brackets are removed from each argument.

```python
from procmux.parsing import tokenize_instructions

tokenize_instructions("DECLARE(x, 5); ADD(y, x, 1)")
# [['DECLARE', 'x', '5'], ['ADD', 'y', 'x', '1']]
```

An instruction with an opening parenthesis but no closing one raises
`ParseError`. `procmux.parsing` also provides `split`, `is_all_digits`,
`is_hex_string`, `is_valid_identifier`, `trim_and_unquote`,
`split_top_level` and `center_string`.

`interpret_add` builds an `AddInstruction` from a token list, or returns
`None` if the tokens do not form a valid ADD. Operands are decimal
literals (kept to 16 bits) or variable names; a literal followed by a
variable is swapped so that the variable comes first.

```python
from procmux.interpret import interpret_add, interpret_instructions

add = interpret_add(["ADD", "total", "x", "4"])
add.combination       # ParameterCombination.MIXED
add.variable_first    # 'x'
add.literal_second    # 4

interpret_instructions("ADD(total, 2, 3); PRINT(\"hi\")")
# [AddInstruction('total', 2, 3)]
```

Reading an operand property that the instruction was not built with
raises `InstructionError`.

## Configuration

Scheduler settings are read from a plain text file with one
`key value` pair per line, for example:

```
num-cores 4
scheduling-alogrithm RR
quantum-cycles 5
batch-process-frequency 1
minimum-instructions 100
maximum-instructions 100
delay-per-execution 0
maximum-overall-memory 16384
memory-per-frame 16
minimum-memory-per-process 64
maximum-memory-per-process 4096
```

```python
from procmux.config import read_config, format_config

config = read_config("config.txt")
print(format_config(config))
```

Unknown keys are ignored, and a line with more than one value resets its
setting to its default. Numeric values are clamped to their allowed range
(`num-cores` to 1–128). Memory sizes must be powers of two and are stored
as base-two exponents (16384 becomes 14); any other value raises
`ConfigError`, as do empty lines and missing or non-numeric values. If the
file cannot be opened, `read_config` prints a message to standard error and
returns the default `Configuration`.

## Clock and activity tracking

```python
from procmux.clock import GlobalClock

with GlobalClock(interval=0.01) as clock:
    clock.wait_for_tick(3)
    print(clock.ticks)
```

`GlobalClock.instance()` returns one shared clock. `wait_for_tick` raises
`RuntimeError` if the clock is not running.

```python
from procmux.boolvector import GrowingBooleanVector

activity = GrowingBooleanVector()
activity.add_vector([])
activity.append_element(0, True)
activity.query()   # (1, 1): true positions, overall length
```

## Memory helpers

```python
from procmux.datasection import DataSection
from procmux.frame import Frame
from procmux.heap import Heap

data = DataSection()
data.add_uninitialized("x")
data.update("x", 70000)
data.get("x")         # 4464, values are 16 bits

frame = Frame(0, 16)
frame.write("00003", "AB")
frame.read("00003")   # 'AB'

heap = Heap(64)
handle = heap.allocate_array(4, 2)
heap.set(handle, 0, 7)
heap.get(handle, 0)   # 7
heap.free(handle)
```

Invalid handles, out-of-range indices and an exhausted heap raise
`HeapError`.

## What it does not do

`procmux` provides parts, not a running emulator. It has no command-line
program, no cores or schedulers that execute processes, no process
control blocks, and no memory manager that pages frames in and out.
Only the ADD instruction is built into an object; `interpret_instructions`
tokenises every instruction but skips all other kinds.