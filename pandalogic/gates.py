"""Combinational logic elements: gates, inputs, outputs and selectors."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Iterable

from .logic import LogicElement


def _parity(values: Iterable[bool]) -> bool:
    return reduce(operator.xor, values, False)


class LogicAnd(LogicElement):
    """N-input AND gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(all(self._input_values))


class LogicOr(LogicElement):
    """N-input OR gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(any(self._input_values))


class LogicNand(LogicElement):
    """N-input NAND gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(not all(self._input_values))


class LogicNor(LogicElement):
    """N-input NOR gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(not any(self._input_values))


class LogicXor(LogicElement):
    """N-input XOR (odd parity) gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(_parity(self._input_values))


class LogicXnor(LogicElement):
    """N-input XNOR (even parity) gate."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(not _parity(self._input_values))


class LogicNot(LogicElement):
    """Inverter."""

    def __init__(self) -> None:
        super().__init__(1, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(not self._input_values[0])


class LogicNode(LogicElement):
    """Pass-through junction."""

    def __init__(self) -> None:
        super().__init__(1, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            self.set_output_value(self._input_values[0])


class LogicInput(LogicElement):
    """A source whose outputs are set from outside the simulation."""

    def __init__(self, default_value: bool = False, n_outputs: int = 1) -> None:
        super().__init__(0, n_outputs)
        self.set_output_value(default_value, 0)
        for port in range(1, n_outputs):
            self.set_output_value(False, port)

    def update_logic(self) -> None:
        """Inputs keep whatever value was set on them."""


class LogicOutput(LogicElement):
    """A sink that mirrors each input onto the matching output."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, input_size)

    def update_logic(self) -> None:
        if self.update_inputs():
            for index, value in enumerate(self._input_values):
                self.set_output_value(value, index)


class LogicMux(LogicElement):
    """2-to-1 multiplexer: inputs are data0, data1 and select."""

    def __init__(self) -> None:
        super().__init__(3, 1)

    def update_logic(self) -> None:
        if self.update_inputs():
            data0, data1, choice = self._input_values
            self.set_output_value(data1 if choice else data0)


class LogicDemux(LogicElement):
    """1-to-2 demultiplexer: inputs are data and select."""

    def __init__(self) -> None:
        super().__init__(2, 2)

    def update_logic(self) -> None:
        if self.update_inputs():
            data, choice = self._input_values
            self.set_output_value(data and not choice, 0)
            self.set_output_value(data and choice, 1)


class LogicTruthTable(LogicElement):
    """Outputs looked up in a bit table; output ``i`` uses bits ``256*i`` onwards.

    The first input is the most significant bit of the row index.
    """

    def __init__(self, input_size: int, output_size: int, key: Iterable[bool]) -> None:
        super().__init__(input_size, output_size)
        self._proposition = tuple(bool(bit) for bit in key)
        self._n_outputs = output_size

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        row = reduce(lambda acc, bit: acc * 2 + int(bit), self._input_values, 0)
        for output in range(self._n_outputs):
            self.set_output_value(self._proposition[256 * output + row], output)