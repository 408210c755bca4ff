"""Keyword lists used to reject and rank hero image candidates."""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional

from src.core.hints import HeroHints
from src.core.schemas import DestinationIdentity, KeywordSet, SemanticBucket
from src.core.variants import context_phrases

DEFAULT_NEGATIVE_KEYWORDS: List[str] = [
    # people and portraits
    "portrait",
    "people",
    "person",
    "man",
    "woman",
    "boy",
    "girl",
    "child",
    "children",
    "kid",
    "kids",
    "face",
    "selfie",
    "model",
    "fashion",
    "wedding",
    "couple",
    "bride",
    "groom",
    "crowd",
    "protest",
    "closeup",
    "close-up",
    # roads and traffic
    "road",
    "highway",
    "street",
    "traffic",
    "vehicle",
    "truck",
    "car",
    "cars",
    "bus",
    "motorcycle",
    "tarmac",
    "expressway",
    "freeway",
    "roadway",
    "bridge",
    "overpass",
    "intersection",
    "lane",
    "parking",
    "runway",
    "railway",
    "subway",
    "metro",
    "traffic light",
    "signage",
    "billboard",
    # weather and animals
    "lightning",
    "storm",
    "thunder",
    "animal",
    "tiger",
    "lion",
    "panther",
    "wildlife",
    "zoo",
    "safari",
    "dog",
    "cat",
    "insect",
    "bird",
]

DEFAULT_POSITIVE_KEYWORDS: List[str] = [
    "landmark",
    "iconic",
    "heritage",
    "historic",
    "scenic",
    "panoramic",
    "sunset",
    "sunrise",
    "blue hour",
    "aerial",
    "skyline",
    "landscape",
    "travel",
    "tourism",
    "architecture",
    "temple",
    "palace",
    "fort",
    "mountain",
    "valley",
    "waterfall",
    "river",
    "coastal",
    "beach",
    "island",
    "vibrant",
    "night lights",
    "dramatic lighting",
]

# City heroes should show the city, not the forest on its outskirts.
CITY_EXTRA_NEGATIVE_KEYWORDS: List[str] = ["wildlife", "animal", "forest", "waterfall"]


def identity_tokens(identity: DestinationIdentity) -> List[str]:
    """Words from the identity itself that make a caption more relevant."""

    location = identity.location
    values = [
        location.name or identity.name,
        location.city,
        location.state,
        location.country,
        identity.category,
        *identity.tags,
    ]
    return [value for value in values if isinstance(value, str) and value.strip()]


def build_keyword_set(
    identity: DestinationIdentity,
    buckets: FrozenSet[SemanticBucket],
    hints: HeroHints,
    *,
    banned: Optional[Iterable[str]] = None,
    preferred: Optional[Iterable[str]] = None,
) -> KeywordSet:
    """Assemble the keyword lists for one destination.

    Negatives come from the global defaults, the caller and the curated hints.
    Preferred keywords come from the hints, the caller and the bucket context
    phrases. ``KeywordSet`` itself removes any overlap with the negatives.
    """

    negatives = [*DEFAULT_NEGATIVE_KEYWORDS, *(banned or ()), *hints.banned_keywords]
    if SemanticBucket.CITY in buckets:
        negatives.extend(CITY_EXTRA_NEGATIVE_KEYWORDS)

    return KeywordSet(
        negative_keywords=negatives,
        preferred_keywords=[*hints.preferred_keywords, *(preferred or ()), *context_phrases(buckets)],
        extra_tokens=[*identity_tokens(identity), *hints.extra_tokens],
        positive_keywords=list(DEFAULT_POSITIVE_KEYWORDS),
    )
