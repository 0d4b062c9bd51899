"""Static correspondence tables consumed by the synthesis graph."""

from __future__ import annotations

from .archetypes import (
    MAJOR_ARCANA,
    Archetype,
    archetype_display_name,
    archetypes_for_planet,
    get_all_archetypes,
    get_archetype,
)
from .planetary import (
    AGRIPPA_ANGEL_NUMBER_CONNECTIONS,
    AGRIPPA_MAGIC_SQUARES,
    DIGIT_PLANETARY_META,
    ELEMENT_META,
    ELEMENTS,
    GEOMETRY_META,
    PLANET_META,
    PLANETS,
    PLATONIC_SOLIDS,
    ZERO_META,
    DigitPlanetaryMeta,
    get_digit_planetary_meta,
    get_planet_element,
    get_planet_meta,
    get_planet_symbol,
)
from .zodiac import (
    DETRIMENTS,
    EXALTATIONS,
    FALLS,
    HOUSE_META,
    MODALITIES,
    MODALITY_META,
    RULERSHIPS,
    ZODIAC_META,
    ZODIAC_SIGNS,
    get_sign_meta,
    natural_house_for_sign,
    ordinal_suffix,
)

__all__ = [
    "AGRIPPA_ANGEL_NUMBER_CONNECTIONS",
    "AGRIPPA_MAGIC_SQUARES",
    "Archetype",
    "DETRIMENTS",
    "DIGIT_PLANETARY_META",
    "DigitPlanetaryMeta",
    "ELEMENT_META",
    "ELEMENTS",
    "EXALTATIONS",
    "FALLS",
    "GEOMETRY_META",
    "HOUSE_META",
    "MAJOR_ARCANA",
    "MODALITIES",
    "MODALITY_META",
    "PLANET_META",
    "PLANETS",
    "PLATONIC_SOLIDS",
    "RULERSHIPS",
    "ZERO_META",
    "ZODIAC_META",
    "ZODIAC_SIGNS",
    "archetype_display_name",
    "archetypes_for_planet",
    "get_all_archetypes",
    "get_archetype",
    "get_digit_planetary_meta",
    "get_planet_element",
    "get_planet_meta",
    "get_planet_symbol",
    "get_sign_meta",
    "natural_house_for_sign",
    "ordinal_suffix",
]
