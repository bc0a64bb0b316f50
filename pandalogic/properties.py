"""Cycling of element colours and notes, label text and rotation angles."""

from __future__ import annotations

import math
from typing import Optional

COLORS: tuple[str, ...] = ("White", "Red", "Green", "Blue", "Purple")
AUDIO_NOTES: tuple[str, ...] = ("C6", "D6", "E6", "F6", "G6", "A7", "B7", "C7")

_DEFAULT_COLOR = "White"
_DEFAULT_AUDIO = "C6"


def _step(sequence: tuple[str, ...], value: str, offset: int, default: str) -> str:
    if value not in sequence:
        return default
    return sequence[(sequence.index(value) + offset) % len(sequence)]


def next_color(color: str) -> str:
    """The colour after ``color`` in the cycle; unknown colours give White."""
    return _step(COLORS, color, 1, _DEFAULT_COLOR)


def previous_color(color: str) -> str:
    """The colour before ``color`` in the cycle; unknown colours give White."""
    return _step(COLORS, color, -1, _DEFAULT_COLOR)


def next_audio(audio: str) -> str:
    """The note after ``audio`` in the cycle; unknown notes give C6."""
    return _step(AUDIO_NOTES, audio, 1, _DEFAULT_AUDIO)


def previous_audio(audio: str) -> str:
    """The note before ``audio`` in the cycle; unknown notes give C6."""
    return _step(AUDIO_NOTES, audio, -1, _DEFAULT_AUDIO)


def label_text(label: str, trigger: Optional[str], has_trigger: bool) -> str:
    """The text shown under an element: its label, plus its shortcut in parentheses."""
    if not has_trigger or not trigger:
        return label
    prefix = f"{label} " if label else ""
    return f"{prefix}({trigger})"


def normalize_angle(angle: float) -> float:
    """Reduce ``angle`` modulo 360, keeping the sign of the input."""
    return math.fmod(angle, 360)