"""Rules for reading elements saved by older versions of the file format."""

from __future__ import annotations

import re
from enum import Enum
from typing import Sequence, Union

MAXIMUM_VALID_COUNT = 256
NEW_FORMAT_VERSION = (4, 1)

Version = tuple[int, ...]
VersionLike = Union[str, Sequence[int]]

_LEADING_SEGMENTS = re.compile(r"\d+(?:\.\d+)*")


class ElementGroup(Enum):
    """The family an element belongs to, as far as loading rules care."""

    UNKNOWN = "Unknown"
    INPUT = "Input"
    STATIC_INPUT = "StaticInput"
    OUTPUT = "Output"
    IC = "IC"
    GATE = "Gate"


class ElementType(Enum):
    """Element kinds that loading rules single out."""

    UNKNOWN = "Unknown"
    DISPLAY7 = "Display7"
    DISPLAY14 = "Display14"
    NODE = "Node"
    IC = "IC"
    CLOCK = "Clock"


class CorruptedStreamError(ValueError):
    """Raised when a saved element holds an impossible number of entries."""


def parse_version(text: str) -> Version:
    """Parse the leading dotted numeric segments of ``text``; "4.01" equals "4.1"."""
    match = _LEADING_SEGMENTS.match(text.strip())
    if match is None:
        raise ValueError(f"not a version number: {text!r}")
    return tuple(int(part) for part in match.group(0).split("."))


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else tuple(version)


def adjust_rotation(angle: float, group: ElementGroup, element_type: ElementType, version: VersionLike) -> float:
    """Convert a stored rotation to the current convention.

    Files older than 4.1 stored inputs turned by -90 degrees and outputs,
    ICs and gates turned by +90, except for displays and nodes.
    """
    if _as_version(version) >= NEW_FORMAT_VERSION:
        return angle
    if group in (ElementGroup.INPUT, ElementGroup.STATIC_INPUT):
        return angle + 90
    if group in (ElementGroup.OUTPUT, ElementGroup.IC, ElementGroup.GATE):
        if element_type in (ElementType.DISPLAY7, ElementType.DISPLAY14, ElementType.NODE):
            return angle
        return angle - 90
    return angle


def reconcile_sizes(current_min: int, current_max: int, loaded_min: int, loaded_max: int) -> tuple[int, int]:
    """Choose the port limits after loading.

    The stored limits win unless the element has a fixed port count larger
    than the stored maximum.
    """
    if current_min != current_max or current_min <= loaded_max:
        return loaded_min, loaded_max
    return current_min, current_max


def check_count(count: int) -> int:
    """Return ``count`` if it is a plausible number of ports or skins."""
    if count > MAXIMUM_VALID_COUNT:
        raise CorruptedStreamError("Corrupted DataStream!")
    return count


def legacy_fields(version: VersionLike) -> tuple[str, ...]:
    """The fields stored for an element in the given file version, in stream order."""
    version = _as_version(version)
    fields = ["pos", "rotation"]
    if version >= (1, 2):
        fields.append("label")
    if version >= (1, 3):
        fields += ["minInputSize", "maxInputSize", "minOutputSize", "maxOutputSize"]
    if version >= (1, 9):
        fields.append("trigger")
    if version >= (4, 1):
        fields.append("priority")
    fields += ["inputs", "outputs"]
    if version >= (2, 7):
        fields.append("skins")
    return tuple(fields)


def merge_skins(
    default_skins: Sequence[str], alternative_skins: Sequence[str], loaded: Sequence[str]
) -> tuple[list[str], bool]:
    """Apply stored skin names over the current ones.

    Names inside the built-in resources (starting with ":/") are ignored, as
    are names beyond the element's number of skins. Returns the new skin list
    and whether it equals the default skins.
    """
    skins = list(alternative_skins)
    for index, name in enumerate(loaded):
        if index >= len(skins):
            break
        if not name.startswith(":/"):
            skins[index] = name
    return skins, skins == list(default_skins)