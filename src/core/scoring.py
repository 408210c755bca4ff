"""Rejection rules, scoring and selection of hero image candidates."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Set
from urllib.parse import urlsplit, urlunsplit

from src.core.schemas import ImageCandidate, KeywordSet

logger = logging.getLogger(__name__)

PREFERRED_WEIGHT = 10
EXTRA_TOKEN_WEIGHT = 5
POSITIVE_WEIGHT = 2
# (threshold, bonus) pairs; every threshold exceeded adds its bonus.
POPULARITY_TIERS = ((100, 3), (50, 1))

REJECT_DUPLICATE = "duplicate"
REJECT_PORTRAIT = "portrait"
REJECT_NEGATIVE_KEYWORD = "negative-keyword"


def normalize_image_url(url: object) -> Optional[str]:
    """Strip query string and fragment and lowercase, or ``None`` for junk input."""

    if not isinstance(url, str) or not url.strip():
        return None
    value = url.strip()
    try:
        parts = urlsplit(value)
    except ValueError:
        value = value.split("#", 1)[0].split("?", 1)[0]
        return value.lower()
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")).lower()


class ExclusionSet:
    """Normalised image URLs that must not be handed out again.

    Callers resolving heroes for a list of destinations share one instance so
    the same photo is not used twice.
    """

    def __init__(self, urls: Optional[Iterable[str]] = None) -> None:
        self._urls: Set[str] = set()
        if urls:
            self.update(urls)

    def add(self, url: str) -> None:
        normalized = normalize_image_url(url)
        if normalized:
            self._urls.add(normalized)

    def update(self, urls: Iterable[str]) -> None:
        for url in urls:
            self.add(url)

    def __contains__(self, url: object) -> bool:
        normalized = normalize_image_url(url)
        return normalized is not None and normalized in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._urls))

    def __repr__(self) -> str:
        return f"ExclusionSet({len(self._urls)} urls)"


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate that survived the rejection pass, with its score."""

    candidate: ImageCandidate
    score: int
    position: int


def rejection_reason(
    candidate: ImageCandidate,
    keywords: KeywordSet,
    exclusion: ExclusionSet,
) -> Optional[str]:
    """Return why ``candidate`` is unusable, or ``None`` if it may be scored."""

    if candidate.url in exclusion:
        return REJECT_DUPLICATE
    if candidate.is_portrait:
        return REJECT_PORTRAIT
    # Plain substring match: banning "road" bans "roadway" too.
    text = candidate.descriptive_text.lower()
    if any(keyword in text for keyword in keywords.negative_keywords):
        return REJECT_NEGATIVE_KEYWORD
    return None


def score_candidate(candidate: ImageCandidate, keywords: KeywordSet) -> int:
    """Weighted keyword and popularity score of a surviving candidate."""

    text = candidate.descriptive_text.lower()
    score = 0
    score += PREFERRED_WEIGHT * sum(1 for kw in keywords.preferred_keywords if kw in text)
    score += EXTRA_TOKEN_WEIGHT * sum(1 for kw in keywords.extra_tokens if kw in text)
    score += POSITIVE_WEIGHT * sum(1 for kw in keywords.positive_keywords if kw in text)
    for threshold, bonus in POPULARITY_TIERS:
        if candidate.popularity > threshold:
            score += bonus
    return score


def select_best(
    candidates: Sequence[ImageCandidate],
    keywords: KeywordSet,
    exclusion: ExclusionSet,
) -> Optional[ScoredCandidate]:
    """Pick the highest scoring candidate that passes every rejection rule.

    Ties go to the candidate that appears first, which is the one fetched for
    the more specific query variant.
    """

    best: Optional[ScoredCandidate] = None
    for position, candidate in enumerate(candidates):
        reason = rejection_reason(candidate, keywords, exclusion)
        if reason:
            logger.debug("Rejected %s candidate %s (%s)", candidate.provider.value, candidate.url, reason)
            continue
        score = score_candidate(candidate, keywords)
        if best is None or score > best.score:
            best = ScoredCandidate(candidate=candidate, score=score, position=position)

    if best is not None:
        logger.debug("Best candidate %s scored %d", best.candidate.url, best.score)
    return best
