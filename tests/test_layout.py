import pytest

from pandalogic.layout import ElementPorts, port_offsets, snap_to_grid


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
def test_port_offsets_symmetric_about_centre(count):
    offsets = port_offsets(count, 16)
    assert len(offsets) == count
    for a, b in zip(offsets, reversed(offsets)):
        assert a + b == 64


def test_port_offsets_spacing_equals_grid():
    offsets = port_offsets(4, 16)
    assert [b - a for a, b in zip(offsets, offsets[1:])] == [16, 16, 16]


def test_single_port_is_centred():
    assert port_offsets(1, 16) == [32]


def test_port_offsets_empty():
    assert port_offsets(0, 16) == []


@pytest.mark.parametrize("x,y", [(0.0, 0.0), (13.2, 27.9), (-5.1, 44.0), (100.4, -3.3)])
def test_snap_to_grid_is_multiple_and_idempotent(x, y):
    sx, sy = snap_to_grid(x, y, 16)
    assert sx % 8 == 0 and sy % 8 == 0
    assert abs(sx - x) <= 4 and abs(sy - y) <= 4
    assert snap_to_grid(sx, sy, 16) == (sx, sy)


def test_constructor_uses_minimum_sizes():
    ports = ElementPorts(2, 8, 1, 1)
    assert len(ports.inputs) == 2
    assert len(ports.outputs) == 1
    assert [p.index for p in ports.inputs] == [0, 1]


def test_add_port_respects_maximum():
    ports = ElementPorts(1, 2, 1, 1)
    added = ports.add_port("B", False, 7)
    assert added.name == "B" and added.ptr == 7 and added.index == 1
    assert ports.add_port("C", False, 0) is None
    assert ports.add_port("Q", True, 0) is None
    assert len(ports.inputs) == 2


def test_set_input_size_within_and_outside_limits():
    ports = ElementPorts(2, 8, 1, 1)
    ports.set_input_size(5)
    assert len(ports.inputs) == 5
    ports.set_input_size(3)
    assert len(ports.inputs) == 3
    ports.set_input_size(9)
    ports.set_input_size(1)
    assert len(ports.inputs) == 3


def test_set_output_size():
    ports = ElementPorts(0, 0, 1, 4)
    ports.set_output_size(4)
    assert [p.is_output for p in ports.outputs] == [True] * 4


def test_remove_surplus_inputs_updates_map():
    ports = ElementPorts(1, 4, 1, 1)
    ports.set_input_size(4)
    port_map = {10 + i: p for i, p in enumerate(ports.inputs)}
    kept = ports.inputs[:2]
    ports.remove_surplus_inputs(2, port_map)
    assert ports.inputs == kept
    assert set(port_map) == {10, 11}


def test_remove_surplus_below_minimum_does_nothing():
    ports = ElementPorts(3, 6, 2, 4)
    ports.set_output_size(4)
    port_map = {i: p for i, p in enumerate(ports.outputs)}
    ports.remove_surplus_outputs(1, port_map)
    assert len(ports.outputs) == 4
    assert len(port_map) == 4


def test_remove_surplus_outputs():
    ports = ElementPorts(0, 0, 1, 4)
    ports.set_output_size(3)
    port_map = {i: p for i, p in enumerate(ports.outputs)}
    ports.remove_surplus_outputs(1, port_map)
    assert len(ports.outputs) == 1
    assert list(port_map) == [0]


def test_positions_edges():
    ports = ElementPorts(3, 3, 2, 2)
    inputs, outputs = ports.positions(16)
    assert [x for x, _ in inputs] == [0, 0, 0]
    assert [x for x, _ in outputs] == [64, 64]
    assert [y for _, y in inputs] == port_offsets(3, 16)
    assert [y for _, y in outputs] == port_offsets(2, 16)