"""Zodiac sign, house and modality tables plus planetary dignity lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

__all__ = [
    "ZodiacSign",
    "Modality",
    "ZODIAC_SIGNS",
    "MODALITIES",
    "SignMeta",
    "HouseMeta",
    "ModalityMeta",
    "ZODIAC_META",
    "HOUSE_META",
    "MODALITY_META",
    "RULERSHIPS",
    "EXALTATIONS",
    "DETRIMENTS",
    "FALLS",
    "get_sign_meta",
    "natural_house_for_sign",
    "ordinal_suffix",
]

ZodiacSign = Literal[
    "aries",
    "taurus",
    "gemini",
    "cancer",
    "leo",
    "virgo",
    "libra",
    "scorpio",
    "sagittarius",
    "capricorn",
    "aquarius",
    "pisces",
]
Modality = Literal["cardinal", "fixed", "mutable"]

# Natural zodiac order; position + 1 is the sign's natural house.
ZODIAC_SIGNS: tuple[str, ...] = (
    "aries",
    "taurus",
    "gemini",
    "cancer",
    "leo",
    "virgo",
    "libra",
    "scorpio",
    "sagittarius",
    "capricorn",
    "aquarius",
    "pisces",
)
MODALITIES: tuple[str, ...] = ("cardinal", "fixed", "mutable")


@dataclass(frozen=True)
class SignMeta:
    name: str
    symbol: str
    element: str
    modality: str
    ruler: str

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "element": self.element,
            "modality": self.modality,
            "ruler": self.ruler,
        }


@dataclass(frozen=True)
class HouseMeta:
    number: int
    life_area: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ModalityMeta:
    quality: str
    keywords: tuple[str, ...]


ZODIAC_META: Mapping[str, SignMeta] = {
    "aries": SignMeta("Aries", "♈", "fire", "cardinal", "mars"),
    "taurus": SignMeta("Taurus", "♉", "earth", "fixed", "venus"),
    "gemini": SignMeta("Gemini", "♊", "air", "mutable", "mercury"),
    "cancer": SignMeta("Cancer", "♋", "water", "cardinal", "moon"),
    "leo": SignMeta("Leo", "♌", "fire", "fixed", "sun"),
    "virgo": SignMeta("Virgo", "♍", "earth", "mutable", "mercury"),
    "libra": SignMeta("Libra", "♎", "air", "cardinal", "venus"),
    "scorpio": SignMeta("Scorpio", "♏", "water", "fixed", "pluto"),
    "sagittarius": SignMeta("Sagittarius", "♐", "fire", "mutable", "jupiter"),
    "capricorn": SignMeta("Capricorn", "♑", "earth", "cardinal", "saturn"),
    "aquarius": SignMeta("Aquarius", "♒", "air", "fixed", "uranus"),
    "pisces": SignMeta("Pisces", "♓", "water", "mutable", "neptune"),
}

HOUSE_META: tuple[HouseMeta, ...] = (
    HouseMeta(1, "Self", ("identity", "appearance", "first impressions")),
    HouseMeta(2, "Resources", ("money", "possessions", "values")),
    HouseMeta(3, "Communication", ("siblings", "learning", "writing")),
    HouseMeta(4, "Home", ("family", "roots", "emotional security")),
    HouseMeta(5, "Creativity", ("romance", "children", "self-expression")),
    HouseMeta(6, "Service", ("health", "daily work", "routines")),
    HouseMeta(7, "Partnership", ("marriage", "contracts", "one-on-one")),
    HouseMeta(8, "Transformation", ("death/rebirth", "intimacy", "occult")),
    HouseMeta(9, "Philosophy", ("higher education", "travel", "religion")),
    HouseMeta(10, "Career", ("public image", "achievement", "authority")),
    HouseMeta(11, "Community", ("friends", "groups", "humanitarian ideals")),
    HouseMeta(12, "Transcendence", ("unconscious", "solitude", "dreams")),
)

MODALITY_META: Mapping[str, ModalityMeta] = {
    "cardinal": ModalityMeta(
        quality="Initiating",
        keywords=("leadership", "action", "beginnings", "drive", "ambition"),
    ),
    "fixed": ModalityMeta(
        quality="Stabilizing",
        keywords=("persistence", "determination", "loyalty", "resistance", "depth"),
    ),
    "mutable": ModalityMeta(
        quality="Adapting",
        keywords=("flexibility", "change", "communication", "versatility", "transition"),
    ),
}

# Modern rulership scheme. Pluto is listed even though it has no planet node.
RULERSHIPS: Mapping[str, tuple[str, ...]] = {
    "sun": ("leo",),
    "moon": ("cancer",),
    "mercury": ("gemini", "virgo"),
    "venus": ("taurus", "libra"),
    "mars": ("aries",),
    "jupiter": ("sagittarius",),
    "saturn": ("capricorn",),
    "uranus": ("aquarius",),
    "neptune": ("pisces",),
    "pluto": ("scorpio",),
}

EXALTATIONS: Mapping[str, str] = {
    "sun": "aries",
    "moon": "taurus",
    "mercury": "virgo",
    "venus": "pisces",
    "mars": "capricorn",
    "jupiter": "cancer",
    "saturn": "libra",
}

DETRIMENTS: Mapping[str, tuple[str, ...]] = {
    "sun": ("aquarius",),
    "moon": ("capricorn",),
    "mercury": ("sagittarius", "pisces"),
    "venus": ("aries", "scorpio"),
    "mars": ("taurus", "libra"),
    "jupiter": ("gemini", "virgo"),
    "saturn": ("cancer", "leo"),
}

FALLS: Mapping[str, str] = {
    "sun": "libra",
    "moon": "scorpio",
    "mercury": "pisces",
    "venus": "virgo",
    "mars": "cancer",
    "jupiter": "capricorn",
    "saturn": "aries",
}


def get_sign_meta(sign: str) -> SignMeta | None:
    return ZODIAC_META.get(sign)


def natural_house_for_sign(sign: str) -> int | None:
    """Return the natural house number (Aries = 1 ... Pisces = 12)."""

    try:
        return ZODIAC_SIGNS.index(sign) + 1
    except ValueError:
        return None


def ordinal_suffix(number: int) -> str:
    """Return the English ordinal suffix for ``number`` ("st", "nd", ...)."""

    if 10 <= number % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
