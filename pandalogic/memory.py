"""Sequential logic elements: latches and edge-triggered flip-flops.

Every element here has two outputs, Q and not-Q, starting at (False, True).
Preset and clear inputs are active low and override the clocked behaviour.
"""

from __future__ import annotations

from .logic import LogicElement


def _preset_clear(q: bool, q_bar: bool, preset: bool, clear: bool) -> tuple[bool, bool]:
    """Apply the active-low asynchronous preset and clear inputs."""
    if not preset or not clear:
        return not preset, not clear
    return q, q_bar


class _Sequential(LogicElement):
    """Two-output storage element with Q initially low and not-Q high."""

    def __init__(self, input_size: int) -> None:
        super().__init__(input_size, 2)
        self.set_output_value(False, 0)
        self.set_output_value(True, 1)

    def _state(self) -> tuple[bool, bool]:
        return self.output_value(0), self.output_value(1)

    def _store(self, q: bool, q_bar: bool) -> None:
        self.set_output_value(q, 0)
        self.set_output_value(q_bar, 1)


class LogicDLatch(_Sequential):
    """Level-sensitive D latch: inputs are D and enable."""

    def __init__(self) -> None:
        super().__init__(2)

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        q, q_bar = self._state()
        data, enable = self._input_values
        if enable:
            q, q_bar = data, not data
        self._store(q, q_bar)


class LogicDFlipFlop(_Sequential):
    """Rising-edge D flip-flop: inputs are D, clock, preset and clear.

    On a rising edge the D value seen at the previous update is captured.
    """

    def __init__(self) -> None:
        super().__init__(4)
        self._last_clk = False
        self._last_value = True

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        q, q_bar = self._state()
        data, clk, preset, clear = self._input_values
        if clk and not self._last_clk:
            q, q_bar = self._last_value, not self._last_value
        q, q_bar = _preset_clear(q, q_bar, preset, clear)
        self._last_clk = clk
        self._last_value = data
        self._store(q, q_bar)


class LogicJKFlipFlop(_Sequential):
    """Rising-edge JK flip-flop: inputs are J, clock, K, preset and clear.

    On a rising edge the J and K values seen at the previous update decide.
    """

    def __init__(self) -> None:
        super().__init__(5)
        self._last_clk = False
        self._last_j = True
        self._last_k = True

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        q, q_bar = self._state()
        j, clk, k, preset, clear = self._input_values
        if clk and not self._last_clk:
            if self._last_j and self._last_k:
                q, q_bar = q_bar, q
            elif self._last_j:
                q, q_bar = True, False
            elif self._last_k:
                q, q_bar = False, True
        q, q_bar = _preset_clear(q, q_bar, preset, clear)
        self._last_clk = clk
        self._last_j = j
        self._last_k = k
        self._store(q, q_bar)


class LogicSRFlipFlop(_Sequential):
    """Rising-edge SR flip-flop: inputs are S, clock, R, preset and clear.

    With both S and R high on an edge, both outputs go high.
    """

    def __init__(self) -> None:
        super().__init__(5)
        self._last_clk = False

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        q, q_bar = self._state()
        s, clk, r, preset, clear = self._input_values
        if clk and not self._last_clk:
            if s and r:
                q, q_bar = True, True
            elif s != r:
                q, q_bar = s, r
        q, q_bar = _preset_clear(q, q_bar, preset, clear)
        self._last_clk = clk
        self._store(q, q_bar)


class LogicTFlipFlop(_Sequential):
    """Rising-edge T flip-flop: inputs are T, clock, preset and clear.

    On a rising edge the state toggles if T was high at the previous update.
    """

    def __init__(self) -> None:
        super().__init__(4)
        self._last_clk = False
        self._last_value = True

    def update_logic(self) -> None:
        if not self.update_inputs():
            return
        q, q_bar = self._state()
        toggle, clk, preset, clear = self._input_values
        if clk and not self._last_clk and self._last_value:
            q = not q
            q_bar = not q
        q, q_bar = _preset_clear(q, q_bar, preset, clear)
        self._last_clk = clk
        self._last_value = toggle
        self._store(q, q_bar)