"""
Categorizer

Assigns records to fixed taxonomy buckets using ordered keyword rules.
The first matching rule wins; a text that matches several rules lands in
whichever comes first in the list, so rule order must not change.

Benefits and tips arrive already partitioned by source key; for those the
categorizer only relabels keys (general -> lifestyle, practice -> mindful).
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Sequence

from ..common.constants import DEFAULT_POSE_CATEGORY
from ..models import MergedRecord, SourceRecord


@dataclass(frozen=True)
class PatternRule:
    """
    A category rule matched against a record's name and/or description.

    The rule matches when either pattern finds a hit in its field.
    """
    category: str
    name_pattern: Optional[Pattern] = None
    text_pattern: Optional[Pattern] = None

    def matches(self, name: str = "", text: str = "") -> bool:
        if self.name_pattern is not None and self.name_pattern.search(name or ""):
            return True
        if self.text_pattern is not None and self.text_pattern.search(text or ""):
            return True
        return False


def _rx(pattern: str) -> Pattern:
    return re.compile(pattern, re.IGNORECASE)


POSE_RULES = (
    PatternRule(
        'standing',
        _rx(r'mountain|warrior|triangle|chair|tree|eagle|goddess|extended|standing'),
        _rx(r'standing pose|standing position|stand on|standing with'),
    ),
    PatternRule(
        'seated',
        _rx(r'seated|sitting|lotus|sukhasana|butterfly|hero|cobbler|staff|dandasana'),
        _rx(r'seated pose|sitting pose|seat on|sit with'),
    ),
    PatternRule(
        'backbends',
        _rx(r'backbend|cobra|up-dog|upward dog|upward-facing|camel|bridge|wheel|bow|locust'),
        _rx(r'backbend|bend backward|arch your back|bend back'),
    ),
    PatternRule(
        'inversions',
        _rx(r'inversion|headstand|handstand|shoulder stand|forearm stand|plow|dolphin'
            r'|downward dog|downward-facing'),
        _rx(r'inversion|upside down|feet above|head below'),
    ),
)

# Scraped benefit text: mental is tested before physical
BENEFIT_RULES = (
    PatternRule('mental', text_pattern=_rx(r'mind|stress|anxiety|depress|mood|focus|relax|calm|mental')),
    PatternRule('physical', text_pattern=_rx(
        r'body|muscle|strength|flexib|heart|blood|pressure|pain|posture|balance|bone')),
)

# Paragraph sentences only count as benefits when they use one of these words
BENEFIT_SENTENCE_PATTERN = _rx(r'benefit|improve|increase|enhance|reduce|lower|help')

TIP_RULES = (
    PatternRule('beginners', text_pattern=_rx(r'beginner|start|new to yoga|first time|basic')),
    PatternRule('props', text_pattern=_rx(r'prop|block|strap|blanket|bolster|chair|wall')),
    PatternRule('practice', text_pattern=_rx(
        r'practice|breathe|alignment|pose|asana|technique|form|body|position')),
)


def classify(
    rules: Sequence[PatternRule],
    name: str = "",
    text: str = "",
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Return the category of the first rule that matches.

    Args:
        rules: Ordered rules
        name: Title-like field
        text: Description-like field
        default: Returned when nothing matches

    Returns:
        Category name or `default`
    """
    for rule in rules:
        if rule.matches(name, text):
            return rule.category
    return default


def categorize_pose(name: str, description: str = "") -> str:
    """
    Classify a pose by title and description.

    Example:
        >>> categorize_pose("Warrior II")
        'standing'
        >>> categorize_pose("Corpse Pose", "Lie flat on your back.")
        'other'
    """
    return classify(POSE_RULES, name, description, default=DEFAULT_POSE_CATEGORY)


def categorize(record) -> str:
    """Classify a SourceRecord or MergedRecord into a pose bucket."""
    if isinstance(record, (SourceRecord, MergedRecord)) and record.category:
        return record.category
    return categorize_pose(record.name, record.description)


def classify_benefit(text: str) -> str:
    """Bucket a benefit sentence into mental, physical or general."""
    return classify(BENEFIT_RULES, text=text, default='general')


def classify_tip(text: str) -> Optional[str]:
    """Bucket a tip into beginners, props or practice; None when unrelated."""
    return classify(TIP_RULES, text=text)


def relabel_partitions(
    sources: Iterable[dict],
    relabel_map: Mapping[str, str],
) -> Dict[str, List[str]]:
    """
    Combine pre-partitioned string lists from every source under UI labels.

    Args:
        sources: Scraped section entries shaped {'source': str, 'data': {key: [str]}}
        relabel_map: Data key -> UI label (e.g. {'general': 'lifestyle'})

    Returns:
        Dictionary mapping each label (in relabel_map order) to its
        duplicate-free items in first-seen order. Unknown data keys are ignored.
    """
    buckets: Dict[str, Dict[str, None]] = {label: {} for label in relabel_map.values()}

    for entry in sources:
        data = entry.get('data')
        if not isinstance(data, dict):
            continue
        for key, label in relabel_map.items():
            items = data.get(key)
            if not isinstance(items, list):
                continue
            for item in items:
                if isinstance(item, str) and item:
                    buckets[label].setdefault(item)

    return {label: list(items) for label, items in buckets.items()}
