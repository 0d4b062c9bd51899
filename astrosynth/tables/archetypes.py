"""Major Arcana archetype catalog with Golden Dawn attributions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

__all__ = [
    "AttributionType",
    "Archetype",
    "MAJOR_ARCANA",
    "get_all_archetypes",
    "get_archetype",
    "archetypes_for_planet",
    "archetype_display_name",
]

AttributionType = Literal["element", "planet", "zodiac"]


@dataclass(frozen=True)
class Archetype:
    """A Major Arcana card read as a psychological archetype.

    Exactly one of ``element``, ``planet`` or ``zodiac`` is set, matching
    ``attribution_type``.  The three mother letters (Aleph, Mem, Shin) carry
    the elemental cards, the seven double letters the planets and the twelve
    simple letters the signs.
    """

    slug: str
    number: int
    name: str
    hebrew_letter: str
    hebrew_letter_meaning: str
    primary_attribution: str
    attribution_type: str
    confidence: str
    keywords: Tuple[str, ...]
    jungian_archetype: str
    element: str | None = None
    planet: str | None = None
    zodiac: str | None = None

    def to_payload(self) -> dict[str, object]:
        return {
            "slug": self.slug,
            "number": self.number,
            "name": self.name,
            "hebrew_letter": self.hebrew_letter,
            "hebrew_letter_meaning": self.hebrew_letter_meaning,
            "primary_attribution": self.primary_attribution,
            "attribution_type": self.attribution_type,
            "confidence": self.confidence,
            "keywords": list(self.keywords),
            "jungian_archetype": self.jungian_archetype,
            "element": self.element,
            "planet": self.planet,
            "zodiac": self.zodiac,
        }


def _element_card(number, slug, name, letter, meaning, element, keywords, jungian):
    return Archetype(
        slug=slug,
        number=number,
        name=name,
        hebrew_letter=letter,
        hebrew_letter_meaning=meaning,
        primary_attribution=element.title(),
        attribution_type="element",
        confidence="high",
        keywords=keywords,
        jungian_archetype=jungian,
        element=element,
    )


def _planet_card(number, slug, name, letter, meaning, planet, keywords, jungian):
    return Archetype(
        slug=slug,
        number=number,
        name=name,
        hebrew_letter=letter,
        hebrew_letter_meaning=meaning,
        primary_attribution=planet.title(),
        attribution_type="planet",
        confidence="very-high",
        keywords=keywords,
        jungian_archetype=jungian,
        planet=planet,
    )


def _zodiac_card(number, slug, name, letter, meaning, sign, keywords, jungian):
    return Archetype(
        slug=slug,
        number=number,
        name=name,
        hebrew_letter=letter,
        hebrew_letter_meaning=meaning,
        primary_attribution=sign.title(),
        attribution_type="zodiac",
        confidence="very-high",
        keywords=keywords,
        jungian_archetype=jungian,
        zodiac=sign,
    )


MAJOR_ARCANA: Tuple[Archetype, ...] = (
    _element_card(0, "the-fool", "The Fool", "Aleph", "Ox", "air",
                  ("innocence", "leap of faith", "open horizon"), "The Innocent"),
    _planet_card(1, "the-magician", "The Magician", "Beth", "House", "mercury",
                 ("focused intent", "skill", "communication"), "The Magician"),
    _planet_card(2, "the-high-priestess", "The High Priestess", "Gimel", "Camel", "moon",
                 ("mystery", "intuition", "hidden knowledge"), "The Anima"),
    _planet_card(3, "the-empress", "The Empress", "Daleth", "Door", "venus",
                 ("fertility", "nurture", "creativity"), "The Great Mother"),
    _zodiac_card(4, "the-emperor", "The Emperor", "Heh", "Window", "aries",
                 ("structure", "authority", "sovereignty"), "The Father"),
    _zodiac_card(5, "the-hierophant", "The Hierophant", "Vav", "Nail", "taurus",
                 ("ritual", "tradition", "teaching"), "The Wise Old Man"),
    _zodiac_card(6, "the-lovers", "The Lovers", "Zayin", "Sword", "gemini",
                 ("choice", "union", "alignment"), "The Syzygy"),
    _zodiac_card(7, "the-chariot", "The Chariot", "Cheth", "Fence", "cancer",
                 ("victory", "guardianship", "directed will"), "The Hero"),
    _zodiac_card(8, "strength", "Strength", "Teth", "Serpent", "leo",
                 ("courage", "heart", "integration"), "The Tamer"),
    _zodiac_card(9, "the-hermit", "The Hermit", "Yod", "Hand", "virgo",
                 ("inner guidance", "solitude", "analysis"), "The Sage"),
    _planet_card(10, "wheel-of-fortune", "Wheel of Fortune", "Kaph", "Palm", "jupiter",
                 ("cycles", "destiny", "turning point"), "The Self in Motion"),
    _zodiac_card(11, "justice", "Justice", "Lamed", "Ox Goad", "libra",
                 ("balance", "law", "cause and effect"), "The Judge"),
    _element_card(12, "the-hanged-man", "The Hanged Man", "Mem", "Water", "water",
                  ("suspension", "sacrifice", "reversal"), "The Sacrificed God"),
    _zodiac_card(13, "death", "Death", "Nun", "Fish", "scorpio",
                 ("transformation", "ending", "rebirth"), "The Transformer"),
    _zodiac_card(14, "temperance", "Temperance", "Samekh", "Prop", "sagittarius",
                 ("moderation", "alchemy", "guidance"), "The Alchemist"),
    _zodiac_card(15, "the-devil", "The Devil", "Ayin", "Eye", "capricorn",
                 ("material mastery", "temptation", "bondage"), "The Shadow"),
    _planet_card(16, "the-tower", "The Tower", "Pe", "Mouth", "mars",
                 ("liberation", "upheaval", "awakening"), "The Destroyer"),
    _zodiac_card(17, "the-star", "The Star", "Tzaddi", "Fish Hook", "aquarius",
                 ("hope", "vision", "inspiration"), "The Healer"),
    _zodiac_card(18, "the-moon", "The Moon", "Qoph", "Back of Head", "pisces",
                 ("dreams", "cycles", "intuition"), "The Unconscious"),
    _planet_card(19, "the-sun", "The Sun", "Resh", "Head", "sun",
                 ("vitality", "clarity", "joy"), "The Divine Child"),
    _element_card(20, "judgement", "Judgement", "Shin", "Tooth", "fire",
                  ("awakening", "calling", "resolution"), "The Awakener"),
    _planet_card(21, "the-world", "The World", "Tav", "Cross", "saturn",
                 ("completion", "integration", "cosmos"), "The Self"),
)

_BY_SLUG = {archetype.slug: archetype for archetype in MAJOR_ARCANA}


def get_all_archetypes() -> Tuple[Archetype, ...]:
    return MAJOR_ARCANA


def get_archetype(slug: str) -> Archetype | None:
    return _BY_SLUG.get(slug)


def archetypes_for_planet(planet: str) -> tuple[str, ...]:
    """Return slugs of the cards attributed to ``planet`` in card order."""

    return tuple(card.slug for card in MAJOR_ARCANA if card.planet == planet)


def archetype_display_name(slug: str) -> str:
    """Render a slug for prose: ``"wheel-of-fortune"`` -> ``"Wheel Of Fortune"``."""

    return " ".join(part.capitalize() for part in slug.split("-"))
