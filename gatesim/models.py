"""Data types for cells, circuits, gates and timed events."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

from .expression import evaluate_expression


@dataclass
class Event:
    """A value change of a named signal at a point in time."""

    time_stamp: int
    name: str
    value: bool
    changed: bool = False


@dataclass
class LogicGate:
    """A gate instance in a circuit, with its current input and output state."""

    name: str
    type: str
    logic: str = ""
    input_names: list[str] = field(default_factory=list)
    inputs: list[bool] = field(default_factory=list)
    output_name: str = ""
    result: bool = False
    time_stamp: int = -1
    delay: int = -1

    def evaluate(self) -> bool:
        """Recompute the output from the current inputs and return it."""
        self.result = evaluate_expression(self.logic, self.inputs)
        return self.result

    def describe(self) -> str:
        """Return a one-line summary of the gate."""
        names = "".join(f"{name}  " for name in self.input_names)
        return (
            f"{self.name}  {self.type}  {self.logic}  {self.output_name}  {names}"
            f"Output : {int(self.result)}  Gate Delay : {self.delay}"
            f"  Time Stamp : {self.time_stamp}"
        )


@dataclass(frozen=True)
class CellDefinition:
    """A cell type from a library: its input count, logic and delay."""

    name: str
    input_count: int
    logic: str
    delay: int


@dataclass
class CellLibrary:
    """An ordered collection of cell definitions."""

    cells: list[CellDefinition] = field(default_factory=list)

    def add(self, cell: CellDefinition) -> None:
        """Append a cell definition."""
        self.cells.append(cell)

    def find(self, name: str) -> CellDefinition | None:
        """Return the first cell with the given name, or ``None``."""
        return next((cell for cell in self.cells if cell.name == name), None)

    def describe(self) -> str:
        """Return a listing of the library followed by a count line."""
        lines = [
            f"{cell.name}  Input variables = {cell.input_count}"
            f"   Logic = {cell.logic}   Delay = {cell.delay}"
            for cell in self.cells
        ]
        count = len(self.cells)
        lines.append(f"{count}  {count}  {count}  {count}")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[CellDefinition]:
        return iter(self.cells)


@dataclass
class CircuitComponent:
    """A component line from a circuit description."""

    name: str
    type: str
    output: str
    inputs: list[str] = field(default_factory=list)
    logic: str | None = None


@dataclass
class Circuit:
    """Primary inputs and components of a circuit."""

    inputs: list[str] = field(default_factory=list)
    components: list[CircuitComponent] = field(default_factory=list)

    def add_input(self, name: str) -> None:
        """Record a primary input."""
        self.inputs.append(name)

    def add_component(self, component: CircuitComponent) -> None:
        """Record a component."""
        self.components.append(component)

    def describe(self) -> str:
        """Return a listing of the components followed by a count line."""
        lines = [
            f"{c.name}  {c.type}   {c.output}   " + "".join(f"{i}  " for i in c.inputs)
            for c in self.components
        ]
        n = len(self.components)
        lines.append(f"{n}  {n}  {n}  {len(self.inputs)}  {n}")
        return "\n".join(lines)


class EventQueue:
    """Events ordered by time stamp, earliest first; ties keep insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Event]] = []
        self._counter = itertools.count()

    def push(self, event: Event) -> None:
        """Add an event."""
        heapq.heappush(self._heap, (event.time_stamp, next(self._counter), event))

    def pop(self) -> Event:
        """Remove and return the earliest event; raise IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty event queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Event:
        """Return the earliest event without removing it; raise IndexError when empty."""
        if not self._heap:
            raise IndexError("peek at an empty event queue")
        return self._heap[0][2]

    def ordered(self) -> list[Event]:
        """Return all events in the order they would be popped, leaving the queue intact."""
        return [entry[2] for entry in sorted(self._heap)]

    def describe(self) -> str:
        """Return one line per event, in pop order."""
        return "\n".join(
            f"{e.time_stamp}, {e.name}, {int(e.value)}"
            + ("    Change happened here" if e.changed else "    No change happened")
            for e in self.ordered()
        )

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.ordered())