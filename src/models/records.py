"""
Guide content data models.

Pure data classes for scraped records, merged records and rendered output.
No business logic beyond attribute helpers.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class SourceRecord:
    """One scraped entity (yoga style or pose) attributed to one source."""
    name: str
    description: str = ""
    benefits: Tuple[str, ...] = ()
    suitable_for: Tuple[str, ...] = ()
    source: str = ""

    # Pose-only fields
    image_url: str = ""
    difficulty: str = ""
    category: str = ""

    @property
    def key(self) -> str:
        """Case-insensitive merge key."""
        return self.name.lower()


@dataclass
class MergedRecord:
    """
    Deduplicated aggregate of every SourceRecord sharing a name key.

    Field rules:
    - description: longest wins, first writer keeps ties
    - benefits / suitable_for: duplicate-free
    - sources: attribution list in first-seen order, no repeats
      (`source` is the comma-joined display form)
    - image_url: first non-empty value
    """
    name: str
    description: str = ""
    benefits: List[str] = field(default_factory=list)
    suitable_for: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    image_url: str = ""
    difficulty: str = ""
    category: str = ""

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def source(self) -> str:
        """Attribution string, e.g. "Yoga Journal, Yoga Alliance"."""
        return ", ".join(self.sources)


@dataclass(frozen=True)
class DisplayItem:
    """A single rendered card: title plus body text (unescaped)."""
    title: str
    body: str
    placeholder: bool = False


@dataclass
class RenderedSection:
    """Ordered display items for one category of one guide section."""
    category: str
    items: List[DisplayItem] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for item in self.items if item.placeholder)

    def triples(self) -> List[Tuple[str, str, str]]:
        """Return the (category, title, body) sequence for this section."""
        return [(self.category, item.title, item.body) for item in self.items]
