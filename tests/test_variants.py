"""Tests for curated hints, bucket classification and query variant expansion."""
from __future__ import annotations

import pytest

from src.core.hints import build_key_set, get_hero_image_hints, slugify
from src.core.schemas import DestinationIdentity, DestinationLocation, SemanticBucket
from src.core.variants import classify_buckets, context_phrases, expand_variants


def test_slugify_strips_accents_and_punctuation():
    assert slugify("Sri Venkateswara Temple!") == "sri-venkateswara-temple"
    assert slugify("  Café  Déjà Vu ") == "cafe-deja-vu"
    assert slugify(None) == ""


def test_build_key_set_includes_location_combo():
    identity = DestinationIdentity(
        name="Tirumala",
        tags=["Pilgrimage"],
        location=DestinationLocation(city="Tirupati", state="Andhra Pradesh", country="India"),
    )
    keys = build_key_set(identity)
    assert "tirumala" in keys
    assert "pilgrimage" in keys
    assert "tirupati-andhra-pradesh-india" in keys


def test_hints_match_through_alias():
    identity = DestinationIdentity(name="Harmandir Sahib Gurdwara", aliases=["Golden Temple"])
    hints = get_hero_image_hints(identity)
    assert hints.query_variants[0] == "Golden Temple Harmandir Sahib Amritsar Punjab"
    assert "gurdwara" in hints.preferred_keywords
    assert "market" in hints.banned_keywords


def test_hints_empty_for_unknown_destination():
    hints = get_hero_image_hints(DestinationIdentity(name="Random Village"))
    assert not hints
    assert hints.query_variants == []


def test_classify_heritage_from_category_and_tags():
    identity = DestinationIdentity(name="Mysuru Palace", category="Royal Heritage", tags=["palace", "heritage"])
    assert classify_buckets(identity) == frozenset({SemanticBucket.HERITAGE})


def test_classify_multiple_buckets():
    identity = DestinationIdentity(name="Gokarna", tags=["Beach", "temple", "lake"])
    assert classify_buckets(identity) == frozenset(
        {SemanticBucket.BEACH, SemanticBucket.HERITAGE, SemanticBucket.WATERFRONT}
    )


def test_classify_known_names():
    assert SemanticBucket.CITY in classify_buckets(DestinationIdentity(name="Bengaluru"))
    assert SemanticBucket.NATURE in classify_buckets(DestinationIdentity(name="Munnar"))
    assert classify_buckets(DestinationIdentity(name="Random Village")) == frozenset()


def test_classify_national_park_category():
    identity = DestinationIdentity(name="Bandipur", category="National Park")
    assert SemanticBucket.NATURE in classify_buckets(identity)


def test_context_phrases_follow_buckets():
    phrases = context_phrases({SemanticBucket.NATURE})
    assert phrases[:3] == ["cinematic view", "dramatic lighting", "iconic landmark"]
    assert "misty hills" in phrases
    assert "cityscape" not in phrases


def test_expand_name_only_is_never_empty():
    variants = expand_variants(DestinationIdentity(name="Random Village"))
    assert variants == [
        "Random Village",
        "Random Village landmark",
        "Random Village tourism",
        "Random Village scenic",
    ]


def test_expand_requires_a_name():
    with pytest.raises(ValueError):
        expand_variants(DestinationIdentity(name="   "))


def test_expand_orders_explicit_then_name_then_location_then_buckets():
    identity = DestinationIdentity(
        name="Mysuru Palace",
        category="Royal Heritage",
        tags=["palace", "heritage"],
        location=DestinationLocation(state="Karnataka", formatted="Sayyaji Rao Rd, Mysuru, Karnataka"),
    )
    variants = expand_variants(identity, ["Amba Vilas Palace"])

    assert variants[0] == "Amba Vilas Palace"
    assert variants[1] == "Mysuru Palace"
    assert variants[2] == "Sayyaji Rao Rd, Mysuru, Karnataka"
    assert variants[3] == "Mysuru Palace Karnataka historic monument India"
    assert "Mysuru Palace heritage architecture" in variants
    assert variants[-1] == "Mysuru Palace scenic"
    assert "Mysuru Palace cityscape" not in variants


def test_expand_deduplicates_preserving_first_seen():
    identity = DestinationIdentity(name="Hampi")
    variants = expand_variants(identity, ["Hampi", "Hampi landmark", "Hampi"])
    assert variants.count("Hampi") == 1
    assert variants.count("Hampi landmark") == 1
    assert variants[:2] == ["Hampi", "Hampi landmark"]


def test_expand_is_deterministic():
    identity = DestinationIdentity(
        name="Coorg",
        tags=["hills", "waterfall", "river"],
        location=DestinationLocation(state="Karnataka"),
    )
    assert expand_variants(identity) == expand_variants(identity)
    assert expand_variants(identity.model_copy()) == expand_variants(identity)


def test_curated_hint_variants_precede_generated_ones():
    identity = DestinationIdentity(name="Tirupati", category="Pilgrimage", tags=["temple"])
    variants = expand_variants(identity)

    hinted = [
        "Sri Venkateswara Temple Tirumala Tirupati Andhra Pradesh",
        "Tirumala Tirupati Balaji Temple India",
        "Tirupati Venkateswara Gopuram Andhra Pradesh",
    ]
    assert variants[:3] == hinted
    assert variants.index("Tirupati") > 2


def test_explicit_variants_still_lead_over_hints():
    identity = DestinationIdentity(name="Kedarnath")
    variants = expand_variants(identity, ["Kedarnath aerial"])
    assert variants[0] == "Kedarnath aerial"
    assert variants[1] == "Kedarnath Temple Himalayas Uttarakhand"
