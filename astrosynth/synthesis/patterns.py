"""Digit-level analysis of numeric patterns such as ``"111"`` or ``"1234"``."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Tuple

from ..tables.planetary import (
    AGRIPPA_ANGEL_NUMBER_CONNECTIONS,
    AGRIPPA_MAGIC_SQUARES,
    DIGIT_PLANETARY_META,
    PLANET_META,
    ZERO_META,
)

__all__ = [
    "PatternPlanetaryMeta",
    "get_dominant_digit",
    "get_unique_digits",
    "agrippa_note_for",
    "describe_energy",
    "get_pattern_planetary_meta",
]

DEFAULT_PLANET = "sun"
DEFAULT_SYMBOL = "☉"
DEFAULT_ELEMENT = "fire"

_LEADING_NUMBER = re.compile(r"\s*\+?([0-9]+)")
_MAX_NUMBER_DIGITS = 18


@dataclass(frozen=True)
class PatternPlanetaryMeta:
    primary_planet: str
    primary_symbol: str
    primary_element: str
    geometry: Optional[str]
    planets: Tuple[str, ...]
    elements: Tuple[str, ...]
    agrippa_note: Optional[str]
    energy_description: str


def _digits(pattern: str) -> list[int]:
    return [int(ch) for ch in pattern if ch in "0123456789"]


def get_dominant_digit(pattern: str) -> int:
    """Most frequent non-zero digit; ties go to the earliest occurrence, ``0`` if none."""

    digits = [d for d in _digits(pattern) if d != 0]
    if not digits:
        return 0
    counts = Counter(digits)
    best = max(counts.values())
    for digit in digits:
        if counts[digit] == best:
            return digit
    return 0


def get_unique_digits(pattern: str) -> list[int]:
    return sorted(set(_digits(pattern)))


def _leading_number(pattern: str) -> Optional[int]:
    match = _LEADING_NUMBER.match(pattern)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    # stays under sys.get_int_max_str_digits()
    if len(digits) > _MAX_NUMBER_DIGITS:
        return None
    return int(digits)


def agrippa_note_for(pattern: str) -> Optional[str]:
    """Return the Agrippa magic-square note for ``pattern`` if it has one.

    Fixed notes match the pattern text exactly. Square constants and totals
    match its leading integer value, so ``"015"`` resolves like ``"15"``.
    """

    fixed = AGRIPPA_ANGEL_NUMBER_CONNECTIONS.get(pattern)
    if fixed is not None:
        return fixed.note
    value = _leading_number(pattern)
    if value is None:
        return None
    for planet, square in AGRIPPA_MAGIC_SQUARES.items():
        name = PLANET_META[planet].name
        dims = f"{square.size}×{square.size}"
        if value == square.magic_constant:
            return f"{pattern} is the magic constant of {name}'s {dims} magic square."
        if value == square.total_sum:
            return f"{pattern} is the total sum of {name}'s {dims} magic square."
    return None


def describe_energy(pattern: str, primary_planet: str, planets: Tuple[str, ...]) -> str:
    meta = PLANET_META.get(primary_planet) or PLANET_META[DEFAULT_PLANET]
    archetype = meta.archetype.lower()
    non_zero = {d for d in _digits(pattern) if d != 0}

    if len(non_zero) == 1 and len(pattern) > 1:
        if len(pattern) >= 4:
            intensity = "profoundly"
        elif len(pattern) >= 3:
            intensity = "strongly"
        else:
            intensity = "doubly"
        text = f"This pattern {intensity} amplifies {meta.name} energy, {archetype}."
    elif len(planets) <= 1:
        text = f"Carries the pure essence of {meta.name}, {archetype}."
    else:
        others = [PLANET_META[p].name for p in planets if p != primary_planet]
        text = f"{meta.name} leads, with influences from {', '.join(others)}."

    if "0" in pattern:
        text += " The presence of zero adds infinite potential."
    return text


def get_pattern_planetary_meta(pattern: str) -> PatternPlanetaryMeta:
    """Collect planetary, elemental and geometric metadata for ``pattern``.

    Never raises; characters other than digits are ignored.
    """

    dominant = DIGIT_PLANETARY_META.get(get_dominant_digit(pattern))
    planets: list[str] = []
    elements: list[str] = []
    for digit in get_unique_digits(pattern):
        if digit == 0:
            element = ZERO_META.element
        else:
            row = DIGIT_PLANETARY_META[digit]
            if row.planet not in planets:
                planets.append(row.planet)
            element = row.element
        if element not in elements:
            elements.append(element)

    primary_planet = dominant.planet if dominant else DEFAULT_PLANET
    return PatternPlanetaryMeta(
        primary_planet=primary_planet,
        primary_symbol=dominant.symbol if dominant else DEFAULT_SYMBOL,
        primary_element=dominant.element if dominant else DEFAULT_ELEMENT,
        geometry=dominant.geometry if dominant else None,
        planets=tuple(planets),
        elements=tuple(elements),
        agrippa_note=agrippa_note_for(pattern),
        energy_description=describe_energy(pattern, primary_planet, tuple(planets)),
    )
