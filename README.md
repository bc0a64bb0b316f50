# pandalogic

Building blocks for simulating digital logic circuits. Logic elements form a
small graph: each input is fed by one output of a predecessor element, and
updating an element latches its predecessors' outputs and recomputes its own.
Alongside the elements there are helpers for port layout, property cycling,
view zoom state and the rules for reading element data saved by older file
versions.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pandalogic.logic`: `LogicElement`, the base of every simulated element.
  `connect_predecessor(index, logic, port)` wires an input to another
  element's output; `validate()` marks an element valid only when every
  input is connected and marks its successors invalid otherwise;
  `update_inputs()` latches predecessor outputs (returning `False` for an
  invalid element); `clear_successors()` disconnects the element from
  everything it feeds; `calculate_priority()` gives the evaluation order.
  `input_value`, `output_value` and `set_output_value` read and write ports,
  raising `IndexError` for an index out of range. The read-only properties
  `is_valid` and `priority` expose the element's state. `InputPair` holds
  the predecessor and port of one input. `LogicNone` has no ports.
- `pandalogic.gates`: `LogicAnd`, `LogicOr`, `LogicNand`, `LogicNor`,
  `LogicXor` and `LogicXnor` (N inputs), `LogicNot`, `LogicNode`
  (pass-through), `LogicInput` (outputs set from outside), `LogicOutput`
  (mirrors each input onto the matching output), `LogicMux` (inputs data0,
  data1, select), `LogicDemux` (inputs data, select) and `LogicTruthTable`,
  which looks outputs up in a bit table where output `i` uses the bits from
  `256 * i` onwards and the first input is the most significant bit of the
  row.
- `pandalogic.memory`: `LogicDLatch` (D, enable), `LogicDFlipFlop`
  (D, clock, preset, clear), `LogicJKFlipFlop` (J, clock, K, preset, clear),
  `LogicSRFlipFlop` (S, clock, R, preset, clear) and `LogicTFlipFlop`
  (T, clock, preset, clear). All have outputs Q and not-Q starting at
  `(False, True)`. Preset and clear are active low and override the clock.
  The flip-flops act on a rising clock edge, using the data inputs seen at
  the previous update.
- `pandalogic.properties`: cycling through LED colours (`COLORS`, with
  `next_color` and `previous_color`) and buzzer notes (`AUDIO_NOTES`, with
  `next_audio` and `previous_audio`); unknown values fall back to `"White"`
  and `"C6"`. `label_text(label, trigger, has_trigger)` builds the text shown
  under an element, and `normalize_angle` reduces an angle modulo 360.
- `pandalogic.view`: `GraphicsView`, the zoom state of a canvas: `zoom_level`
  between -9 and 3, `scale`, `zoom_in()`, `zoom_out()`, `reset_zoom()` and
  `wheel(delta)`. Callables in `zoom_changed_listeners` are called on every
  zoom change; with `redirect_zoom` set, `wheel` calls `scale_in_listeners`
  or `scale_out_listeners` instead of zooming.
- `pandalogic.layout`: `port_offsets(count, grid_size)` and
  `snap_to_grid(x, y, grid_size)` place ports and elements on the grid.
  `ElementPorts` keeps an element's input and output `Port` lists within
  their minimum and maximum counts (`add_port`, `set_input_size`,
  `set_output_size`, `remove_surplus_inputs`, `remove_surplus_outputs`,
  `positions`).
- `pandalogic.legacy`: rules for element data from older file versions:
  `parse_version`, `adjust_rotation`, `reconcile_sizes`, `check_count`
  (raises `CorruptedStreamError` above 256), `legacy_fields` and
  `merge_skins`, with the `ElementGroup` and `ElementType` enums.

## Example

```python
from pandalogic.gates import LogicAnd, LogicInput

a = LogicInput(True, 1)
b = LogicInput(False, 1)
gate = LogicAnd(2)
gate.connect_predecessor(0, a, 0)
gate.connect_predecessor(1, b, 0)
gate.validate()

gate.update_logic()
print(gate.output_value(0))  # False

b.set_output_value(True, 0)
gate.update_logic()
print(gate.output_value(0))  # True
```

An element's priority is one more than the highest priority among its
successors (cycles are cut off), so sources get the highest priority;
updating elements in descending priority order evaluates each one after
the elements that feed it.

## What it does not do

The package has no simulation loop or clock of its own: the caller decides
when to call `update_logic()` on each element. It does not read or write
circuit files (the `legacy` module only describes the rules for older
data), draws nothing on screen, and has no command-line program.