"""Curated hero image hints for landmarks whose plain name search returns crowd shots."""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set, Tuple

from src.core.schemas import DestinationIdentity


def slugify(value: str) -> str:
    """Return a lowercase, dash separated ASCII slug for ``value``."""

    if not isinstance(value, str):
        return ""
    text = unicodedata.normalize("NFKD", value)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = re.sub(r"[^a-zA-Z0-9\s-]", "", text).strip()
    return re.sub(r"\s+", "-", text).lower()


@dataclass(frozen=True)
class HeroHint:
    """Hand-authored search hints for one famous landmark."""

    matches: Tuple[str, ...]
    query_variants: Tuple[str, ...] = ()
    preferred_keywords: Tuple[str, ...] = ()
    banned_keywords: Tuple[str, ...] = ()
    extra_tokens: Tuple[str, ...] = ()


@dataclass
class HeroHints:
    """Hints merged from every entry that matched a destination."""

    query_variants: List[str] = field(default_factory=list)
    preferred_keywords: List[str] = field(default_factory=list)
    banned_keywords: List[str] = field(default_factory=list)
    extra_tokens: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(
            self.query_variants or self.preferred_keywords or self.banned_keywords or self.extra_tokens
        )


HERO_HINTS: Tuple[HeroHint, ...] = (
    HeroHint(
        matches=("tirupati", "tirumala", "sri-venkateswara-temple", "tirupati-andhra-pradesh"),
        query_variants=(
            "Sri Venkateswara Temple Tirumala Tirupati Andhra Pradesh",
            "Tirumala Tirupati Balaji Temple India",
            "Tirupati Venkateswara Gopuram Andhra Pradesh",
        ),
        preferred_keywords=("venkateswara", "tirumala", "gopuram", "temple", "balaji", "pilgrimage"),
        banned_keywords=("city skyline", "generic city", "people portrait", "construction"),
        extra_tokens=("sri", "venkateswara", "tirumala", "tirupati"),
    ),
    HeroHint(
        matches=("vaishno-devi", "mata-vaishno-devi", "katra"),
        query_variants=(
            "Vaishno Devi Bhawan Trikuta Hills Jammu",
            "Mata Vaishno Devi Temple Katra Night",
        ),
        preferred_keywords=("pilgrimage", "temple", "shrine", "trikuta"),
        banned_keywords=("beach", "resort", "city skyline"),
        extra_tokens=("vaishno", "devi", "katra", "bhawan"),
    ),
    HeroHint(
        matches=("kedarnath", "kedarnath-temple", "badrinath"),
        query_variants=(
            "Kedarnath Temple Himalayas Uttarakhand",
            "Kedarnath Dham Mandir with mountains",
        ),
        preferred_keywords=("himalaya", "snow", "temple", "pilgrimage"),
        banned_keywords=("city", "crowd", "illustration"),
        extra_tokens=("kedarnath", "himalaya", "mandir"),
    ),
    HeroHint(
        matches=("golden-temple", "harmandir-sahib", "amritsar"),
        query_variants=(
            "Golden Temple Harmandir Sahib Amritsar Punjab",
            "Harmandir Sahib night reflection Amritsar",
        ),
        preferred_keywords=("gurdwara", "reflection", "sikh", "temple"),
        banned_keywords=("city traffic", "market", "people portrait"),
        extra_tokens=("harmandir", "sahib", "amritsar", "punjab"),
    ),
)


def build_key_set(identity: DestinationIdentity) -> Set[str]:
    """Collect the slugs of every identity field a hint may match against."""

    keys: Set[str] = set()

    def push(value: object) -> None:
        if not isinstance(value, str):
            return
        slug = slugify(value)
        if slug:
            keys.add(slug)

    location = identity.location
    for value in (
        identity.slug,
        identity.name,
        identity.query,
        identity.category,
        location.name,
        location.city,
        location.state,
        location.country,
        location.formatted,
    ):
        push(value)
    for value in (*identity.aliases, *identity.tags):
        push(value)

    push(" ".join(part for part in (location.city, location.state, location.country) if part))
    return keys


def _merge_unique(target: List[str], values: Iterable[str]) -> None:
    for value in values:
        trimmed = value.strip()
        if trimmed and trimmed not in target:
            target.append(trimmed)


def get_hero_image_hints(
    identity: DestinationIdentity,
    table: Sequence[HeroHint] = HERO_HINTS,
) -> HeroHints:
    """Merge every curated hint whose ``matches`` intersect the identity keys."""

    keys = build_key_set(identity)
    merged = HeroHints()
    for hint in table:
        if not any(slugify(candidate) in keys for candidate in hint.matches):
            continue
        _merge_unique(merged.query_variants, hint.query_variants)
        _merge_unique(merged.preferred_keywords, hint.preferred_keywords)
        _merge_unique(merged.banned_keywords, hint.banned_keywords)
        _merge_unique(merged.extra_tokens, hint.extra_tokens)
    return merged
