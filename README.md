# solidsnake

`solidsnake` has two parts:

- the instruction set of the Solid Snake register virtual machine, as an
  integer enum;
- a small command that times native Fibonacci functions and then prints a
  banner describing the host system.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## The opcode table

`solidsnake.opcodes.OpCode` is an `IntEnum`. Each member is one instruction.
Its name is the mnemonic, such as `AddI64`, and its value is the
instruction's 16-bit numeric code.

```python
from solidsnake.opcodes import OpCode, opcode_from_name, opcode_from_value

OpCode.AddI64.value            # 177
opcode_from_name("Halt")       # OpCode.Halt
opcode_from_value(600)         # OpCode.CallFunction
```

The lookup helpers behave as follows:

- `opcode_from_name(name)` needs the exact mnemonic. It raises `ValueError`
  for any name that is not an instruction.
- `opcode_from_value(value)` raises `TypeError` when given something that is
  not an integer (`bool` counts as not an integer).
- `opcode_from_value(value)` raises `ValueError` when the value is outside
  0–65535, or when no instruction has that code.

The instruction families are:

- jumps: `Jump`, `JumpIf`, `JumpIfFalse`
- typed loads and stores:
  - `LoadIndirect…`
  - `LoadIndirectWithOffset…`
  - `LoadImmediate…`
  - `LoadFromImmediate…`
  - `StoreIndirectWithOffset…`
  - `StoreFromImmediateWithOffset…`
- logical operations: `LogicalAnd`, `LogicalOr`, `LogicalNot`, `LogicalXor`
- typed arithmetic: `Add`, `Subtract`, `Multiply`, `Divide`, `Modulo`
- typed comparisons: `Equal`, `NotEqual`, `LessThan`, `LessThanOrEqual`,
  `GreaterThan`, `GreaterThanOrEqual`
- typed `Move`, `Increment` and `Decrement`
- integer-only operations: `BitwiseAnd`, `BitwiseOr`, `BitwiseXor`,
  `BitwiseNot`, `ShiftLeft`, `ShiftRight`
- control and memory: `CallFunction`, `Return`, `Allocate`, `Deallocate`,
  `Memcpy`, `MemSet`, `Halt`
- output: `Print`, `StoreConstantArray`, typed `DebugPrint…`, `DebugPrintRaw`

The typed families have one member per type suffix. Most of them cover all
ten suffixes: `U8`, `U16`, `U32`, `U64`, `I8`, `I16`, `I32`, `I64`, `F32` and
`F64`. The bitwise and shift families cover only the eight integer suffixes.

`DebugPrintI8` has the code 20004, which is not in the 2000 range used by the
other `DebugPrint` instructions.

## Command line

```
solidsnake
```

The command runs these steps in order:

1. It prints a start-up line.
2. It times the iterative Fibonacci function for `--fib-n` over
   `--iterations` runs.
3. For each `n` from 0 up to, but not including, `--recursive-max`, it prints
   `n` and then times the recursive Fibonacci function over
   `--recursive-iterations` runs.
4. It prints a banner. The banner shows the operating system, the kernel
   release, the Python version and the resident memory of the process.
5. It waits for one character on standard input, unless `--no-wait` is given.

| Option | Default |
| --- | --- |
| `--fib-n` | 80 |
| `--iterations` | 1000 |
| `--recursive-max` | 20 |
| `--recursive-iterations` | 200 |
| `--no-wait` | off |

If an iteration count is below 1, the command prints an error to standard
error and exits with status 2.

## Library use of the benchmark helpers

```python
from solidsnake.cli import (
    fibonacci,
    fibonacci_recursive,
    bench_native_fib,
    bench_native_fib_recursive,
    system_banner,
)

fibonacci(10)             # 55
fibonacci_recursive(10)   # 55
avg_ns, result = bench_native_fib(80, 1000)
```

- `bench_native_fib` and `bench_native_fib_recursive` print one result line
  and return `(average nanoseconds, result)`. Both raise `ValueError` when the
  iteration count is below 1.
- `system_banner(version)` returns the banner text without printing it.

## What this package does not do

The package defines the opcodes, but nothing here acts on them:

- it does not assemble or parse bytecode text;
- it has no executor that runs instructions;
- it has no interactive prompt.

The benchmarks time only native Python functions. The banner's "Repl" title
is text and nothing more.