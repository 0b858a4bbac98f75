"""
Tag matching helpers: disliked-tag blocking and preferred-tag overlap.

Strict matching (candidate pool, content scoring): exact after trim/lowercase,
or substring containment where the contained tag has at least min_length chars.
Loose matching (relaxed pool, tag branch): lowercase containment either way.
"""

from typing import Iterable, List


def _clean(tags: Iterable[str]) -> List[str]:
    """Drop blank tags; a blank disliked tag would otherwise match everything."""
    return [tag for tag in tags if tag and tag.strip()]


def matches_tag_strict(tag: str, disliked: str, min_length: int = 3) -> bool:
    tag_lower = tag.lower().strip()
    disliked_lower = disliked.lower().strip()
    if tag_lower == disliked_lower:
        return True
    if disliked_lower in tag_lower and len(disliked_lower) >= min_length:
        return True
    if tag_lower in disliked_lower and len(tag_lower) >= min_length:
        return True
    return False


def matches_tag_loose(tag: str, other: str) -> bool:
    tag_lower = tag.lower()
    other_lower = other.lower()
    return other_lower in tag_lower or tag_lower in other_lower


def has_disliked_tag(
    tags: Iterable[str],
    disliked_tags: Iterable[str],
    strict: bool = True,
    min_length: int = 3,
) -> bool:
    """True if any tag matches any disliked tag under the chosen matching mode."""
    disliked = _clean(disliked_tags)
    if not disliked:
        return False
    for tag in _clean(tags):
        for d in disliked:
            if strict and matches_tag_strict(tag, d, min_length):
                return True
            if not strict and matches_tag_loose(tag, d):
                return True
    return False


def matching_preferred_tags(tags: Iterable[str], preferred_tags: Iterable[str]) -> List[str]:
    """Candidate tags that overlap (mutual substring, case-insensitive) any preferred tag."""
    preferred = _clean(preferred_tags)
    return [tag for tag in _clean(tags) if any(matches_tag_loose(tag, p) for p in preferred)]
