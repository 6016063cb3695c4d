"""Opt-in format checks for SSML attribute values.

None of these are called by the builders; nodes render whatever they
are given.  Use them to pre-check user input before constructing nodes.
"""

from __future__ import annotations

import re

from .tags import (
    BREAK_STRENGTHS,
    EMPHASIS_LEVELS,
    NAMED_PITCHES,
    NAMED_RATES,
    NAMED_VOLUMES,
    PHONEME_ALPHABETS,
    SAY_AS_INTERPRET_AS,
    SILENCE_TYPES,
)

_DURATION_RE = re.compile(r"^\d+(\.\d+)?(ms|s)$")
_VOLUME_DB_RE = re.compile(r"^[+-]?\d+(\.\d+)?dB$")
_VOLUME_NUMBER_RE = re.compile(r"^\d+(\.\d+)?%?$")
_RATE_RE = re.compile(r"^[+-]?\d+(\.\d+)?%?$")
_PITCH_RE = re.compile(r"^[+-]?\d+(\.\d+)?(Hz|%)$")
_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$")

STYLE_DEGREE_MIN = 0.01
STYLE_DEGREE_MAX = 2.0


def is_valid_break_strength(value: str) -> bool:
    return value in BREAK_STRENGTHS


def is_valid_silence_type(value: str) -> bool:
    return value in SILENCE_TYPES


def is_valid_emphasis_level(value: str) -> bool:
    return value in EMPHASIS_LEVELS


def is_valid_phoneme_alphabet(value: str) -> bool:
    return value in PHONEME_ALPHABETS


def is_valid_interpret_as(value: str) -> bool:
    return value in SAY_AS_INTERPRET_AS


def is_valid_duration(value: str) -> bool:
    """Check a time value such as ``"500ms"`` or ``"1.5s"``."""
    return bool(_DURATION_RE.match(value))


def is_valid_volume(value: str) -> bool:
    """Check a volume: relative dB (``"+6dB"``), a number or percentage, or a named level."""
    return (
        bool(_VOLUME_DB_RE.match(value))
        or bool(_VOLUME_NUMBER_RE.match(value))
        or value in NAMED_VOLUMES
    )


def is_valid_rate(value: str) -> bool:
    """Check a speaking rate: a (signed) number or percentage, or a named rate."""
    return bool(_RATE_RE.match(value)) or value in NAMED_RATES


def is_valid_pitch(value: str) -> bool:
    """Check a pitch: signed Hz or percentage (``"+10%"``, ``"200Hz"``), or a named pitch."""
    return bool(_PITCH_RE.match(value)) or value in NAMED_PITCHES


def is_valid_style_degree(value: str) -> bool:
    """Check an express-as ``styledegree`` between 0.01 and 2 inclusive."""
    if not _NUMBER_RE.match(value):
        return False
    return STYLE_DEGREE_MIN <= float(value) <= STYLE_DEGREE_MAX
