"""Input and output ports of an element and their placement on the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

ELEMENT_SIZE = 64
_CENTER = ELEMENT_SIZE // 2


def _qround(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


@dataclass(eq=False)
class Port:
    """One connection point of an element; compared by identity."""

    name: str = ""
    ptr: int = 0
    index: int = 0
    is_output: bool = False


def port_offsets(count: int, grid_size: int) -> list[int]:
    """Vertical positions of ``count`` ports, centred on the element and half a grid apart twice."""
    step = grid_size // 2
    start = _CENTER - count * step + step
    return [start + i * step * 2 for i in range(count)]


def snap_to_grid(x: float, y: float, grid_size: int) -> tuple[int, int]:
    """Round a position to the nearest multiple of half the grid size."""
    half = grid_size // 2
    return _qround(x / half) * half, _qround(y / half) * half


@dataclass
class ElementPorts:
    """The ports of an element, kept within its minimum and maximum counts."""

    min_inputs: int
    max_inputs: int
    min_outputs: int
    max_outputs: int
    inputs: list[Port] = field(default_factory=list, init=False)
    outputs: list[Port] = field(default_factory=list, init=False)

    def __init__(self, min_inputs: int, max_inputs: int, min_outputs: int, max_outputs: int) -> None:
        self.min_inputs = min_inputs
        self.max_inputs = max_inputs
        self.min_outputs = min_outputs
        self.max_outputs = max_outputs
        self.inputs = []
        self.outputs = []
        self.set_input_size(min_inputs)
        self.set_output_size(min_outputs)

    def add_port(self, name: str = "", is_output: bool = False, ptr: int = 0) -> Port | None:
        """Append a port unless the maximum is reached; return the new port or None."""
        ports, limit = (self.outputs, self.max_outputs) if is_output else (self.inputs, self.max_inputs)
        if len(ports) >= limit:
            return None
        port = Port(name=name, ptr=ptr, index=len(ports), is_output=is_output)
        ports.append(port)
        return port

    @staticmethod
    def _resize(ports: list[Port], size: int, low: int, high: int, add) -> None:
        if not low <= size <= high:
            return
        while len(ports) < size:
            add()
        del ports[size:]

    def set_input_size(self, size: int) -> None:
        """Grow or shrink the inputs to ``size``; sizes outside the limits are ignored."""
        self._resize(self.inputs, size, self.min_inputs, self.max_inputs, lambda: self.add_port("", False))

    def set_output_size(self, size: int) -> None:
        """Grow or shrink the outputs to ``size``; sizes outside the limits are ignored."""
        self._resize(self.outputs, size, self.min_outputs, self.max_outputs, lambda: self.add_port("", True))

    @staticmethod
    def _remove_surplus(ports: list[Port], count: int, minimum: int, port_map: dict[int, Port]) -> None:
        while len(ports) > count and count >= minimum:
            removed = ports.pop()
            for key in [k for k, v in port_map.items() if v is removed]:
                del port_map[key]

    def remove_surplus_inputs(self, count: int, port_map: dict[int, Port]) -> None:
        """Drop trailing inputs beyond ``count`` (if it meets the minimum) and forget them in ``port_map``."""
        self._remove_surplus(self.inputs, count, self.min_inputs, port_map)

    def remove_surplus_outputs(self, count: int, port_map: dict[int, Port]) -> None:
        """Drop trailing outputs beyond ``count`` (if it meets the minimum) and forget them in ``port_map``."""
        self._remove_surplus(self.outputs, count, self.min_outputs, port_map)

    def positions(self, grid_size: int) -> tuple[list[tuple[int, int]], list[tuple[int, int]]]:
        """Positions of the inputs on the left edge and the outputs on the right edge."""
        inputs = [(0, y) for y in port_offsets(len(self.inputs), grid_size)]
        outputs = [(ELEMENT_SIZE, y) for y in port_offsets(len(self.outputs), grid_size)]
        return inputs, outputs