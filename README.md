# gatesim

gatesim is an event-driven simulator for digital logic circuits. You give it
three text files:

- a **cell library** that lists each gate type, how many inputs it takes, its
  Boolean logic and its propagation delay;
- a **circuit** that lists the primary inputs and the gates wired between them;
- a **stimulus** file that lists timed changes to the primary inputs.

It works through the events in time order, re-evaluates every gate that an
event reaches, and reports each change of a signal together with the time at
which it happens.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## File formats

Fields may be separated by commas and whitespace; commas inside a field are
dropped.

### Cell library

Each entry has a gate name, the number of inputs, a logic expression and a
delay:

```
AND2, 2, i1&i2, 50
OR2, 2, i1|i2, 40
NOT, 1, ~i1, 20
```

Logic expressions refer to the gate's inputs by a single digit, written as
`i1`, `i2`, … up to `i9`, and use `&` (and), `|` (or) and `~` (not).
Parentheses group sub-expressions. `~` binds tightest, then `&`, then `|`.
Characters other than digits, operators and parentheses are ignored. An
expression that is malformed or refers to a missing input evaluates to false.

### Circuit

The first line is a header and is skipped. The primary inputs follow, then a
`COMPONENTS:` marker, then one entry per gate: instance name, gate type,
output signal, then the input signals.

```
INPUTS:
A
B
C
COMPONENTS:
G0, AND2, w1, A, B
G1, OR2, Y, w1, C
G2, NOT, Z, Y
```

The number of inputs read for a gate is taken from the last character of its
type name when that is a digit (`AND2` reads two), and is one otherwise.

Two things are reported as circuit errors: a gate type that is not in the
library, and a gate whose output is one of the primary inputs.

Every gate starts with all inputs at 0. A gate whose output is 1 in that state
produces a change to 1 at a time equal to its delay.

### Stimuli

Each entry gives a time, an input name and the new value:

```
0, A, 1
100, B, 1
500, A, 0
```

A value of `0` sets the input low; any other value sets it high.

## Command line

```
gatesim cells.lib circuit.cir stimuli.stim output.sim
```

The command loads the three files, runs the simulation, prints the result and
writes it to the output file as `time, signal, value` lines in time order,
with the value as `0` or `1`. The result holds the stimuli themselves as well
as every change of a gate output. If the circuit has errors, the error
messages are printed and written instead.

`-v` / `--verbose` also prints the parsed library, circuit, queued stimuli and
gates before the simulation runs.

The exit status is 1 when a file cannot be read or written, or when a number
in the library or stimuli cannot be parsed, and 0 otherwise.

## Library use

```python
from gatesim.simulator import Simulator

sim = Simulator()
sim.read_library("cells.lib")
sim.read_circuit("circuit.cir")
sim.read_stimuli("stimuli.stim")
sim.run()

for line in sim.report_lines():
    print(line)

sim.write_output("output.sim")
```

If the files are already in memory, `Simulator.load_library`,
`Simulator.load_circuit` and `Simulator.load_stimuli` take the text itself.
After loading, `Simulator.errors` holds any circuit errors and
`Simulator.has_errors` tells whether there are any.

The data types live in `gatesim.models`: `CellDefinition` and `CellLibrary`,
`CircuitComponent` and `Circuit`, `LogicGate`, `Event`, and `EventQueue`, a
queue that yields events earliest first and keeps insertion order for equal
times.

You can evaluate a single logic expression directly:

```python
from gatesim.expression import evaluate_expression

evaluate_expression("(i1&~i2)|~(i3&~i4)", [True, True, True, False])
```

`infix_to_postfix` and `evaluate_postfix` in the same module expose the two
steps separately.

## What it does not do

gatesim produces text only: it draws no waveforms or schematics. Gates have a
single fixed delay and no more than nine inputs, and there is no notion of
unknown or high-impedance values; every signal is 0 or 1.