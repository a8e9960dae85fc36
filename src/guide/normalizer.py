"""
Record Normalizer

Trims and validates scraped text fragments and turns raw scraped dicts
into SourceRecord instances. Invalid input is dropped, never raised.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from ..common.constants import DEFAULT_EXCLUSION_PHRASES, MIN_FRAGMENT_LENGTH
from ..common.text_utils import collapse_whitespace
from ..models import SourceRecord


def normalize_fragment(
    text: Any,
    min_length: int = MIN_FRAGMENT_LENGTH,
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES,
) -> Optional[str]:
    """
    Normalize a raw text fragment.

    Args:
        text: Raw fragment (anything that is not a string is rejected)
        min_length: Minimum length after trimming
        exclusions: Case-sensitive phrases that disqualify the fragment

    Returns:
        Trimmed fragment, or None if empty, too short or excluded

    Example:
        >>> normalize_fragment("  Hatha Yoga  ")
        'Hatha Yoga'
        >>> normalize_fragment("References") is None
        True
    """
    if not isinstance(text, str):
        return None

    cleaned = collapse_whitespace(text)
    if len(cleaned) < min_length:
        return None

    if any(phrase in cleaned for phrase in exclusions):
        return None

    return cleaned


def normalize_fragments(items: Any, min_length: int = MIN_FRAGMENT_LENGTH) -> List[str]:
    """Normalize a list of fragments, dropping invalid ones (no exclusion phrases)."""
    if not isinstance(items, (list, tuple)):
        return []

    result = []
    for item in items:
        cleaned = normalize_fragment(item, min_length, exclusions=())
        if cleaned is not None:
            result.append(cleaned)
    return result


def normalize_record(
    raw: Any,
    source: str,
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES,
    min_length: int = MIN_FRAGMENT_LENGTH,
) -> Optional[SourceRecord]:
    """
    Build a SourceRecord from one raw scraped dict.

    Records without a usable name are dropped. The description is only
    whitespace-collapsed: an empty description is valid (e.g. pose cards
    that carry just a title).

    Args:
        raw: Raw record as loaded from JSON
        source: Name of the source the record came from
        exclusions: Phrases that disqualify the name
        min_length: Minimum length of the name and of each list fragment

    Returns:
        SourceRecord or None
    """
    if not isinstance(raw, dict):
        return None

    name = normalize_fragment(raw.get('name'), min_length, exclusions)
    if name is None:
        return None

    description = raw.get('description')
    description = collapse_whitespace(description) if isinstance(description, str) else ""

    def _text(key: str) -> str:
        value = raw.get(key)
        return value.strip() if isinstance(value, str) else ""

    return SourceRecord(
        name=name,
        description=description,
        benefits=tuple(normalize_fragments(raw.get('benefits'), min_length)),
        suitable_for=tuple(normalize_fragments(raw.get('suitable_for'), min_length)),
        source=source or "",
        image_url=_text('image_url'),
        difficulty=_text('difficulty'),
        category=_text('category'),
    )


def normalize_records(
    items: Iterable[Any],
    source: str,
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES,
    min_length: int = MIN_FRAGMENT_LENGTH,
) -> List[SourceRecord]:
    """Normalize every raw record from one source, keeping input order."""
    records = []
    for raw in items or []:
        record = normalize_record(raw, source, exclusions, min_length)
        if record is not None:
            records.append(record)
    return records
