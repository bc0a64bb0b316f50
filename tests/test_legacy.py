import pytest

from pandalogic.legacy import (
    CorruptedStreamError,
    ElementGroup,
    ElementType,
    adjust_rotation,
    check_count,
    legacy_fields,
    merge_skins,
    parse_version,
    reconcile_sizes,
)


def test_parse_version_leading_zero_segment_is_equal():
    assert parse_version("4.01") == parse_version("4.1")


@pytest.mark.parametrize("low,high", [("1.2", "1.3"), ("1.9", "2.7"), ("2.7", "4.1"), ("4.0", "4.1")])
def test_parse_version_ordering(low, high):
    assert parse_version(low) < parse_version(high)


def test_parse_version_rejects_garbage():
    with pytest.raises(ValueError):
        parse_version("abc")


@pytest.mark.parametrize("group", [ElementGroup.INPUT, ElementGroup.STATIC_INPUT])
def test_old_inputs_turn_forward(group):
    assert adjust_rotation(30.0, group, ElementType.UNKNOWN, "4.0") - 30.0 == 90


@pytest.mark.parametrize("group", [ElementGroup.OUTPUT, ElementGroup.IC, ElementGroup.GATE])
def test_old_outputs_turn_back(group):
    assert 30.0 - adjust_rotation(30.0, group, ElementType.UNKNOWN, "3.0") == 90


@pytest.mark.parametrize("kind", [ElementType.DISPLAY7, ElementType.DISPLAY14, ElementType.NODE])
def test_displays_and_nodes_keep_angle(kind):
    assert adjust_rotation(45.0, ElementGroup.OUTPUT, kind, "2.0") == 45.0


def test_new_versions_keep_angle():
    assert adjust_rotation(45.0, ElementGroup.INPUT, ElementType.UNKNOWN, "4.1") == 45.0
    assert adjust_rotation(45.0, ElementGroup.UNKNOWN, ElementType.UNKNOWN, (1, 0)) == 45.0


def test_reconcile_variable_element_takes_loaded():
    assert reconcile_sizes(2, 8, 3, 5) == (3, 5)


def test_reconcile_fixed_element_keeps_larger_fixed_count():
    assert reconcile_sizes(4, 4, 1, 2) == (4, 4)


def test_reconcile_fixed_element_within_loaded_max():
    assert reconcile_sizes(2, 2, 3, 3) == (3, 3)


def test_check_count_limit():
    assert check_count(256) == 256
    assert check_count(0) == 0
    with pytest.raises(CorruptedStreamError):
        check_count(257)


def test_legacy_fields_by_version():
    old = legacy_fields("1.0")
    assert old == ("pos", "rotation", "inputs", "outputs")
    assert "label" in legacy_fields("1.2")
    assert "maxOutputSize" not in legacy_fields("1.2")
    assert "maxOutputSize" in legacy_fields("1.3")
    assert "trigger" in legacy_fields("1.9")
    assert "skins" not in legacy_fields("2.6")
    assert legacy_fields("2.7")[-1] == "skins"
    assert "priority" not in legacy_fields("4.0")
    assert "priority" in legacy_fields("4.01")


def test_merge_skins_ignores_resource_names():
    defaults = [":/a.svg", ":/b.svg"]
    skins, using_default = merge_skins(defaults, defaults, [":/x.svg", "/home/me/b.png"])
    assert skins == [":/a.svg", "/home/me/b.png"]
    assert using_default is False


def test_merge_skins_all_resources_stays_default():
    defaults = [":/a.svg", ":/b.svg"]
    skins, using_default = merge_skins(defaults, list(defaults), [":/a.svg", ":/b.svg"])
    assert skins == defaults
    assert using_default is True


def test_merge_skins_does_not_mutate_and_skips_extra():
    defaults = [":/a.svg"]
    current = [":/a.svg"]
    skins, _ = merge_skins(defaults, current, ["one.png", "two.png"])
    assert skins == ["one.png"]
    assert current == [":/a.svg"]