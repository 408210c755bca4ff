"""Query variant expansion for destination hero image searches.

Stock photo search engines answer a bare place name with street scenes and
people. The expander turns a destination identity into an ordered list of
search strings that lean towards iconic, landmark style photography: curated
landmark searches first, then the plain name, then bucket specific phrasing,
then broad fallbacks.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from src.core.hints import HeroHints, get_hero_image_hints
from src.core.schemas import DestinationIdentity, SemanticBucket

BUCKET_TAGS: Dict[SemanticBucket, FrozenSet[str]] = {
    SemanticBucket.CITY: frozenset({"city", "urban", "metropolitan", "metro"}),
    SemanticBucket.HERITAGE: frozenset(
        {"heritage", "fort", "temple", "palace", "monument", "historical", "museum"}
    ),
    SemanticBucket.NATURE: frozenset(
        {
            "hill",
            "hills",
            "hill station",
            "mountain",
            "mountains",
            "forest",
            "valley",
            "waterfall",
            "wildlife",
            "national park",
        }
    ),
    SemanticBucket.BEACH: frozenset({"beach", "coast", "coastal", "island", "seaside"}),
    SemanticBucket.WATERFRONT: frozenset({"river", "riverfront", "lake", "backwater", "waterfront"}),
}

# Names that mark a bucket even when category and tags say nothing.
KNOWN_CITY_NAMES = frozenset(
    {
        "bangalore",
        "bengaluru",
        "mumbai",
        "delhi",
        "chennai",
        "hyderabad",
        "pune",
        "kolkata",
        "kochi",
        "mysore",
        "mysuru",
        "hubli",
        "hubballi",
        "belgaum",
        "ballari",
        "sagar",
        "sirsi",
    }
)
KNOWN_SCENIC_NAMES = frozenset(
    {"coorg", "ooty", "chikmagalur", "wayanad", "kodagu", "munnar", "manali", "darjeeling"}
)

BASE_CONTEXT_PHRASES: Tuple[str, ...] = ("cinematic view", "dramatic lighting", "iconic landmark")

# The first phrase of every bucket is the "lead" phrase, combined with the state name.
BUCKET_PHRASES: Dict[SemanticBucket, Tuple[str, ...]] = {
    SemanticBucket.CITY: (
        "city skyline India",
        "city skyline",
        "cityscape",
        "urban aerial",
        "night lights",
        "panoramic view",
    ),
    SemanticBucket.HERITAGE: (
        "historic monument India",
        "heritage architecture",
        "historic fort",
        "temple complex",
        "palace",
        "iconic monument",
    ),
    SemanticBucket.NATURE: (
        "scenic landscape India",
        "scenic landscape",
        "mountain range",
        "valley vista",
        "sunrise view",
        "misty hills",
    ),
    SemanticBucket.BEACH: (
        "sunset beach India",
        "sunset beach",
        "coastal aerial",
        "tropical shore",
        "blue hour",
    ),
    SemanticBucket.WATERFRONT: (
        "riverfront skyline India",
        "waterfront reflection",
        "riverfront skyline",
        "lakeside view",
    ),
}

BROAD_SUFFIXES: Tuple[str, ...] = ("landmark", "tourism", "scenic")


def _join(*parts: Optional[str]) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def classify_buckets(identity: DestinationIdentity) -> FrozenSet[SemanticBucket]:
    """Tag a destination with every semantic bucket its category or tags match.

    Tags are compared by set membership, the category label by substring. A
    destination can land in several buckets at once.
    """

    category = (identity.category or "").strip().lower()
    tags = {tag.strip().lower() for tag in identity.tags if tag.strip()}
    name = identity.display_query.lower()

    buckets = set()
    for bucket in SemanticBucket:
        vocabulary = BUCKET_TAGS[bucket]
        if tags & vocabulary or any(word in category for word in vocabulary):
            buckets.add(bucket)

    if name in KNOWN_CITY_NAMES:
        buckets.add(SemanticBucket.CITY)
    if name in KNOWN_SCENIC_NAMES:
        buckets.add(SemanticBucket.NATURE)
    return frozenset(buckets)


def _ordered(buckets: Iterable[SemanticBucket]) -> List[SemanticBucket]:
    chosen = set(buckets)
    return [bucket for bucket in SemanticBucket if bucket in chosen]


def context_phrases(buckets: Iterable[SemanticBucket]) -> List[str]:
    """Phrases describing the kind of photo wanted, used as preferred keywords."""

    phrases: List[str] = list(BASE_CONTEXT_PHRASES)
    for bucket in _ordered(buckets):
        for phrase in BUCKET_PHRASES[bucket][1:]:
            if phrase not in phrases:
                phrases.append(phrase)
    return phrases


def _dedupe(values: Iterable[str]) -> List[str]:
    result: List[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        trimmed = value.strip()
        if trimmed and trimmed not in result:
            result.append(trimmed)
    return result


def expand_variants(
    identity: DestinationIdentity,
    explicit_variants: Optional[Sequence[str]] = None,
    *,
    hints: Optional[HeroHints] = None,
    buckets: Optional[FrozenSet[SemanticBucket]] = None,
) -> List[str]:
    """Return the ordered, de-duplicated search strings for ``identity``.

    Args:
        identity: Destination to search for. Must carry a name or query.
        explicit_variants: Caller supplied search strings, tried first.
        hints: Pre-computed curated hints; looked up when omitted.
        buckets: Pre-computed semantic buckets; classified when omitted.

    Raises:
        ValueError: if the identity has neither a name nor a query.
    """

    name = identity.display_query
    if not name:
        raise ValueError("Destination identity needs a name or query to expand variants")

    if hints is None:
        hints = get_hero_image_hints(identity)
    if buckets is None:
        buckets = classify_buckets(identity)

    location = identity.location
    place = location.name or name
    state = location.state

    variants: List[str] = []
    variants.extend(explicit_variants or ())
    variants.extend(hints.query_variants)
    variants.append(name)
    if location.formatted:
        variants.append(location.formatted)

    for bucket in _ordered(buckets):
        lead, *rest = BUCKET_PHRASES[bucket]
        variants.append(_join(place, state, lead))
        variants.extend(_join(place, phrase) for phrase in rest)

    variants.extend(_join(name, suffix) for suffix in BROAD_SUFFIXES)
    return _dedupe(variants)
