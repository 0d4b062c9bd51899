from __future__ import annotations

import pytest

from astrosynth.synthesis.patterns import (
    agrippa_note_for,
    describe_energy,
    get_pattern_planetary_meta,
    get_unique_digits,
)


def test_unique_digits_sorted_with_zero() -> None:
    assert get_unique_digits("3013") == [0, 1, 3]
    assert get_unique_digits("abc") == []


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("15", "15 is the magic constant of Saturn's 3×3 magic square."),
        ("136", "136 is the total sum of Jupiter's 4×4 magic square."),
        ("65", "65 is the magic constant of Mars's 5×5 magic square."),
        ("3321", "3321 is the total sum of Moon's 9×9 magic square."),
    ],
)
def test_generic_agrippa_notes(pattern: str, expected: str) -> None:
    assert agrippa_note_for(pattern) == expected


def test_fixed_agrippa_notes_take_precedence() -> None:
    assert agrippa_note_for("45").startswith("45 is the total sum of Saturn's 3×3 magic square (Lo Shu).")
    assert "solar number" in agrippa_note_for("666")


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("015", "015 is the magic constant of Saturn's 3×3 magic square."),
        ("0045", "0045 is the total sum of Saturn's 3×3 magic square."),
        ("0111", "0111 is the magic constant of Sun's 6×6 magic square."),
        ("15abc", "15abc is the magic constant of Saturn's 3×3 magic square."),
    ],
)
def test_agrippa_squares_match_leading_value(pattern: str, expected: str) -> None:
    assert agrippa_note_for(pattern) == expected


@pytest.mark.parametrize("pattern", ["1111", "abc", "", "-15", "0" * 40 + "9" * 40])
def test_patterns_without_agrippa_notes(pattern: str) -> None:
    assert agrippa_note_for(pattern) is None


@pytest.mark.parametrize(
    "pattern,intensity",
    [("22", "doubly"), ("222", "strongly"), ("2222", "profoundly"), ("22222", "profoundly")],
)
def test_repeating_intensity(pattern: str, intensity: str) -> None:
    text = describe_energy(pattern, "moon", ("moon",))
    assert text == f"This pattern {intensity} amplifies Moon energy, the mother/intuitive."


def test_single_digit_is_pure_essence() -> None:
    assert describe_energy("8", "saturn", ("saturn",)) == (
        "Carries the pure essence of Saturn, the elder/teacher."
    )


def test_zero_suffix() -> None:
    assert describe_energy("10", "sun", ("sun",)).endswith(
        " The presence of zero adds infinite potential."
    )


def test_pattern_meta_for_seven() -> None:
    meta = get_pattern_planetary_meta("77")
    assert meta.primary_planet == "neptune"
    assert meta.primary_symbol == "♆"
    assert meta.geometry is None
    assert meta.elements == ("water",)


def test_all_zero_pattern_falls_back_to_pure_sun() -> None:
    assert describe_energy("000", "sun", ()) == (
        "Carries the pure essence of Sun, the king/leader."
        " The presence of zero adds infinite potential."
    )
