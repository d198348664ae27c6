"""Event-driven simulation of gate-level circuits read from text descriptions.

Three inputs drive a simulation:

* a cell library, one cell per line: ``NAME, INPUT_COUNT, LOGIC, DELAY``;
* a circuit: a header line, the primary inputs, the marker ``COMPONENTS:``
  and then one component per line: ``NAME TYPE, OUTPUT, INPUT, ...``;
* stimuli, one per line: ``TIME, SIGNAL, VALUE``.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from .models import (
    CellDefinition,
    CellLibrary,
    Circuit,
    CircuitComponent,
    Event,
    EventQueue,
    LogicGate,
)

_INT_MAX = 2**31 - 1
_WORD = re.compile(r"\s*(\S*)")
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_DIGITS = "0123456789"


class _Scanner:
    """Reads whitespace-separated words and delimited fields from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> str:
        """Return the next word, or an empty string at the end of the text."""
        match = _WORD.match(self._text, self._pos)
        self._pos = match.end()
        return match.group(1)

    def until(self, delimiter: str) -> str:
        """Return the text up to ``delimiter``, consuming the delimiter too."""
        if self._pos >= len(self._text):
            return ""
        end = self._text.find(delimiter, self._pos)
        if end == -1:
            part = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            part = self._text[self._pos:end]
            self._pos = end + 1
        return part

    def line(self) -> str:
        """Return the rest of the current line."""
        return self.until("\n").rstrip("\r")


def _strip_commas(token: str) -> str:
    return token.replace(",", "")


def _to_int(token: str) -> int:
    match = _INTEGER.match(token)
    if match is None:
        raise ValueError(f"expected an integer, got {token!r}")
    return int(match.group(1))


class Simulator:
    """Holds a library, a circuit and stimuli, and propagates signal changes."""

    def __init__(self) -> None:
        self.library = CellLibrary()
        self.circuit = Circuit()
        self.gates: list[LogicGate] = []
        self.stimuli = EventQueue()
        self.final_events = EventQueue()
        self.errors: list[str] = []

    @property
    def has_errors(self) -> bool:
        """Whether any circuit error was found."""
        return bool(self.errors)

    def load_library(self, text: str) -> None:
        """Parse cell definitions and add them to the library."""
        scanner = _Scanner(text)
        while True:
            name = scanner.word()
            if not name:
                break
            count = scanner.word()
            if not count:
                break
            logic = scanner.until(",")
            if not logic:
                break
            delay = scanner.word()
            if not delay:
                break
            self.library.add(
                CellDefinition(
                    name=_strip_commas(name),
                    input_count=_to_int(_strip_commas(count)),
                    logic=_strip_commas(logic),
                    delay=_to_int(_strip_commas(delay)),
                )
            )

    def load_circuit(self, text: str) -> None:
        """Parse primary inputs and components, creating a gate for each component."""
        scanner = _Scanner(text)
        token = scanner.line()
        inputs: list[str] = []
        while token != "COMPONENTS:":
            token = scanner.word()
            if not token:
                break
            inputs.append(token)
        if inputs:
            inputs.pop()
        for name in inputs:
            self.circuit.add_input(name)

        while True:
            raw_name = scanner.word()
            if not raw_name:
                break
            raw_type = scanner.word()
            if not raw_type:
                break
            name = _strip_commas(raw_name)
            cell_type = _strip_commas(raw_type)
            input_count = int(cell_type[-1]) if cell_type and cell_type[-1] in _DIGITS else 1

            cell = self.library.find(cell_type)
            if cell is None:
                self.errors.append(
                    f"There was an error because the gate {cell_type} "
                    "doesnt exist in the lib file"
                )

            raw_output = scanner.word()
            if not raw_output:
                break
            output = _strip_commas(raw_output)

            input_names: list[str] = []
            exhausted = False
            while len(input_names) < input_count:
                raw_input = scanner.word()
                if not raw_input:
                    exhausted = True
                    break
                input_names.append(_strip_commas(raw_input))

            self.circuit.add_component(
                CircuitComponent(
                    name=name,
                    type=cell_type,
                    output=output,
                    inputs=list(input_names),
                    logic=cell.logic if cell else None,
                )
            )
            gate = LogicGate(
                name=name,
                type=cell_type,
                logic=cell.logic if cell else "",
                input_names=input_names,
                inputs=[False] * len(input_names),
                output_name=output,
                delay=cell.delay if cell else -1,
            )
            gate.evaluate()
            self.gates.append(gate)

            clash = (
                f"There was an error in gate {name} where one of circuit inputs "
                "is its output which should be impossible "
            )
            self.errors.extend([clash] * self.circuit.inputs.count(output))

            if gate.result:
                event = Event(gate.delay, output, True, True)
                self.final_events.push(event)
            else:
                event = Event(0, output, False, False)
            self.stimuli.push(event)

            if exhausted:
                break

    def load_stimuli(self, text: str) -> None:
        """Parse timed input changes and queue them."""
        scanner = _Scanner(text)
        while True:
            raw_time = scanner.word()
            if not raw_time:
                break
            time_stamp = _to_int(_strip_commas(raw_time))
            name = _strip_commas(scanner.word())
            raw_value = _strip_commas(scanner.word())
            value = raw_value != "0"
            if raw_value not in ("0", "1"):
                self.stimuli.push(
                    Event(
                        _INT_MAX,
                        f"There was an error with the input {name} where its truth "
                        "value wasnt 0 or 1. It was considered to be 1",
                        False,
                        False,
                    )
                )
            event = Event(time_stamp, name, value, value)
            self.stimuli.push(event)
            if name != "0":
                self.final_events.push(event)

    def read_library(self, path: str | os.PathLike[str]) -> None:
        """Load a library file."""
        self.load_library(Path(path).read_text())

    def read_circuit(self, path: str | os.PathLike[str]) -> None:
        """Load a circuit file."""
        self.load_circuit(Path(path).read_text())

    def read_stimuli(self, path: str | os.PathLike[str]) -> None:
        """Load a stimuli file."""
        self.load_stimuli(Path(path).read_text())

    def run(self) -> None:
        """Process queued events until none remain, recording every output change."""
        while self.stimuli:
            event = self.stimuli.pop()
            for gate in self.gates:
                for position, input_name in enumerate(gate.input_names):
                    if input_name != event.name:
                        continue
                    gate.inputs[position] = event.value
                    previous = gate.result
                    if gate.evaluate() != previous:
                        change = Event(
                            event.time_stamp + gate.delay,
                            gate.output_name,
                            gate.result,
                            True,
                        )
                        self.final_events.push(change)
                        self.stimuli.push(change)

    def describe_gates(self) -> str:
        """Return a summary of every gate, separated by blank lines."""
        return "\n\n".join(gate.describe() for gate in self.gates)

    def report_lines(self) -> list[str]:
        """Return the recorded changes in time order, or the errors if any were found."""
        if self.errors:
            return list(self.errors)
        return [
            f"{event.time_stamp}, {event.name}, {int(event.value)}"
            for event in self.final_events.ordered()
        ]

    def write_output(self, path: str | os.PathLike[str]) -> None:
        """Write the report to a file, one line per entry."""
        Path(path).write_text("".join(f"{line}\n" for line in self.report_lines()))