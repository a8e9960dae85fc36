"""
Deduplication Merger

Merges records that refer to the same entity (same case-insensitive name)
across sources:

1. description - longest wins, first writer keeps ties
2. benefits / suitable_for - union without duplicates
3. sources - attribution list, first-seen order, no repeats
4. image_url - first non-empty value
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from ..common.constants import (
    DEFAULT_EXCLUSION_PHRASES,
    DEFAULT_POSE_CATEGORY,
    MIN_FRAGMENT_LENGTH,
)
from ..models import MergedRecord, SourceRecord
from .categorizer import categorize
from .normalizer import normalize_records

logger = logging.getLogger(__name__)


def _union(existing: Sequence[str], incoming: Iterable[str]) -> List[str]:
    """Union two string sequences without duplicates."""
    return list(dict.fromkeys([*existing, *incoming]))


def merge(existing: Optional[MergedRecord], incoming: SourceRecord) -> MergedRecord:
    """
    Merge one source record into an existing merged record.

    Args:
        existing: Current merged record for the name key, or None
        incoming: Record to fold in

    Returns:
        New MergedRecord; `existing` is not modified
    """
    if existing is None:
        return MergedRecord(
            name=incoming.name,
            description=incoming.description,
            benefits=_union([], incoming.benefits),
            suitable_for=_union([], incoming.suitable_for),
            sources=[incoming.source] if incoming.source else [],
            image_url=incoming.image_url,
            difficulty=incoming.difficulty,
            category=incoming.category,
        )

    description = existing.description
    if len(incoming.description) > len(description):
        description = incoming.description

    sources = list(existing.sources)
    if incoming.source and incoming.source not in sources:
        sources.append(incoming.source)

    return replace(
        existing,
        description=description,
        benefits=_union(existing.benefits, incoming.benefits),
        suitable_for=_union(existing.suitable_for, incoming.suitable_for),
        sources=sources,
        image_url=existing.image_url or incoming.image_url,
        difficulty=existing.difficulty or incoming.difficulty,
    )


class RecordMerger:
    """
    Accumulates merged records keyed by lowercase name.

    Iteration yields records in the order their key was first seen.

    Usage:
        merger = RecordMerger()
        merger.add_all(records)
        for record in merger:
            ...
    """

    def __init__(self):
        self._records: Dict[str, MergedRecord] = {}

    def add(self, record: SourceRecord) -> MergedRecord:
        """Merge a record in and return the updated aggregate."""
        merged = merge(self._records.get(record.key), record)
        self._records[record.key] = merged
        return merged

    def add_all(self, records: Iterable[SourceRecord]) -> None:
        for record in records:
            self.add(record)

    def get(self, name: str) -> Optional[MergedRecord]:
        """Look up a merged record by name (case-insensitive)."""
        return self._records.get(name.lower())

    def records(self) -> List[MergedRecord]:
        return list(self._records.values())

    def __iter__(self) -> Iterator[MergedRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._records


def merge_types(
    sources: Iterable[dict],
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES,
    min_length: int = MIN_FRAGMENT_LENGTH,
) -> RecordMerger:
    """
    Merge yoga style records from every source.

    Args:
        sources: Scraped section entries shaped {'source': str, 'data': list}
        exclusions: Phrases that disqualify a record name
        min_length: Minimum fragment length kept by the normalizer

    Returns:
        RecordMerger holding one record per distinct style name
    """
    merger = RecordMerger()
    for entry in sources:
        data = entry.get('data')
        if not isinstance(data, list):
            continue
        merger.add_all(normalize_records(data, entry.get('source', ''), exclusions, min_length))

    logger.debug("Merged %d yoga styles", len(merger))
    return merger


def merge_poses(
    sources: Iterable[dict],
    categories: Sequence[str],
    exclusions: Sequence[str] = DEFAULT_EXCLUSION_PHRASES,
    min_length: int = MIN_FRAGMENT_LENGTH,
) -> Dict[str, RecordMerger]:
    """
    Merge pose records into one merger per tracked category.

    Records without a category are classified from their name and
    description. Records that land outside `categories` are dropped.

    Args:
        sources: Scraped section entries shaped {'source': str, 'data': list}
        categories: Tracked pose categories, in display order
        exclusions: Phrases that disqualify a record name
        min_length: Minimum fragment length kept by the normalizer

    Returns:
        Dictionary mapping category to its RecordMerger
    """
    by_category = {category: RecordMerger() for category in categories}
    dropped = 0

    for entry in sources:
        data = entry.get('data')
        if not isinstance(data, list):
            continue
        for record in normalize_records(data, entry.get('source', ''), exclusions, min_length):
            category = categorize(record)
            if category not in by_category:
                dropped += 1
                continue
            by_category[category].add(record)

    if dropped:
        logger.debug("Dropped %d poses outside tracked categories (e.g. '%s')",
                     dropped, DEFAULT_POSE_CATEGORY)
    return by_category
