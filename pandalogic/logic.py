"""Simulation-layer logic elements and the wiring between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class InputPair:
    """The predecessor element and output port that feed one input."""

    logic: Optional["LogicElement"] = None
    port: int = 0


def _checked(values: list, index: int, what: str) -> int:
    if not 0 <= index < len(values):
        raise IndexError(f"{what} index {index} out of range (size {len(values)})")
    return index


class LogicElement(ABC):
    """A node of the simulation graph with boolean inputs and outputs."""

    def __init__(self, input_size: int, output_size: int) -> None:
        self._input_values: list[bool] = [False] * input_size
        self._input_pairs: list[InputPair] = [InputPair() for _ in range(input_size)]
        self._output_values: list[bool] = [False] * output_size
        self._successors: list[LogicElement] = []
        self._being_visited = False
        self._is_valid = True
        self._priority = -1

    @property
    def is_valid(self) -> bool:
        """Whether every input of this element (and its predecessors) is connected."""
        return self._is_valid

    @property
    def priority(self) -> int:
        """The computed evaluation priority, or -1 if not yet calculated."""
        return self._priority

    def input_value(self, index: int = 0) -> bool:
        """Return the value currently driven onto input ``index`` by its predecessor."""
        pair = self._input_pairs[_checked(self._input_pairs, index, "input")]
        if pair.logic is None:
            raise ValueError(f"input {index} is not connected")
        return pair.logic.output_value(pair.port)

    def output_value(self, index: int = 0) -> bool:
        """Return the value of output ``index``."""
        return self._output_values[_checked(self._output_values, index, "output")]

    def set_output_value(self, value: bool, index: int = 0) -> None:
        """Set output ``index`` to ``value``."""
        self._output_values[_checked(self._output_values, index, "output")] = bool(value)

    def connect_predecessor(self, index: int, logic: "LogicElement", port: int) -> None:
        """Feed input ``index`` from output ``port`` of ``logic``."""
        self._input_pairs[_checked(self._input_pairs, index, "input")] = InputPair(logic, port)
        if self not in logic._successors:
            logic._successors.append(self)

    def clear_successors(self) -> None:
        """Disconnect this element from every element it feeds."""
        for successor in self._successors:
            for pair in successor._input_pairs:
                if pair.logic is self:
                    pair.logic = None
                    pair.port = 0
        self._successors.clear()

    def validate(self) -> None:
        """Mark the element valid only if all inputs are connected; invalidity spreads to successors."""
        self._is_valid = all(pair.logic is not None for pair in self._input_pairs)
        if not self._is_valid:
            for successor in self._successors:
                successor._is_valid = False

    def update_inputs(self) -> bool:
        """Latch the predecessors' outputs into the inputs; False if the element is invalid."""
        if not self._is_valid:
            return False
        self._input_values = [self.input_value(index) for index in range(len(self._input_pairs))]
        return True

    @abstractmethod
    def update_logic(self) -> None:
        """Recompute the outputs from the inputs."""

    def calculate_priority(self) -> int:
        """Return one more than the highest priority among successors, breaking cycles."""
        if self._being_visited:
            return 0
        if self._priority != -1:
            return self._priority
        self._being_visited = True
        highest = max((s.calculate_priority() for s in self._successors), default=0)
        self._priority = highest + 1
        self._being_visited = False
        return self._priority

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogicElement):
            return NotImplemented
        return self._priority > other._priority


class LogicNone(LogicElement):
    """An element with no inputs, no outputs and no behaviour."""

    def __init__(self) -> None:
        super().__init__(0, 0)

    def update_logic(self) -> None:
        """Do nothing."""