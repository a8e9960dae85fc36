"""
Content Renderer

Projects merged, categorized records into Nunjucks include markup:
- selects up to the minimum display count per category (insertion order)
- pads short categories with placeholders from a static table
- derives card titles from the body text
- escapes every text value exactly once
- closes each generated file with a source attribution comment
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..common.config_loader import (
    load_exclusion_phrases,
    load_guide_settings,
    load_min_counts,
    load_min_fragment_length,
    load_placeholders,
    load_relabel_map,
)
from ..common.text_utils import capitalize_first, escape_html
from ..models import DisplayItem, MergedRecord, RenderedSection, SourceRecord
from .categorizer import relabel_partitions
from .merger import merge_poses, merge_types

logger = logging.getLogger(__name__)


class UnknownCategoryError(ValueError):
    """Raised when a category outside the configured set is rendered."""

    def __init__(self, category: str, known: Iterable[str] = ()):
        self.category = category
        self.known = list(known)
        super().__init__(
            f"Unknown category: {category}. Known: {', '.join(self.known) or '(none)'}"
        )


BENEFIT_TITLE_PATTERN = re.compile(
    r'improves? ([\w\s]+)|increases? ([\w\s]+)|enhances? ([\w\s]+)|reduces? ([\w\s]+)|better ([\w\s]+)',
    re.IGNORECASE,
)
TIP_TITLE_PATTERN = re.compile(r'^([\w\s]+?)\s(your|the|for|when|to|by|and)', re.IGNORECASE)


def fallback_title(text: str) -> str:
    """First three words, trailing period removed, first letter capitalized."""
    words = ' '.join(text.split(' ')[:3])
    return capitalize_first(re.sub(r'\.$', '', words))


def extract_benefit_title(text: str) -> str:
    """
    Derive a card title from a benefit sentence.

    Example:
        >>> extract_benefit_title("Yoga improves flexibility over time.")
        'Flexibility over time'
    """
    match = BENEFIT_TITLE_PATTERN.search(text)
    if match:
        phrase = next((group for group in match.groups() if group), None)
        if phrase and phrase.strip():
            return re.sub(r'\.$', '', capitalize_first(phrase.strip()))

    return fallback_title(text)


def extract_tip_title(text: str) -> str:
    """
    Derive a card title from the leading words of a tip.

    Example:
        >>> extract_tip_title("Focus on your breath throughout your practice.")
        'Focus on'
    """
    match = TIP_TITLE_PATTERN.match(text)
    if match and match.group(1).strip():
        return capitalize_first(match.group(1).strip())

    return fallback_title(text)


def _to_item(entry: Any, title_for: Callable[[str], str], placeholder: bool = False) -> DisplayItem:
    """Convert a record, placeholder dict or plain string into a DisplayItem."""
    if isinstance(entry, (MergedRecord, SourceRecord)):
        return DisplayItem(entry.name, entry.description, placeholder)
    if isinstance(entry, dict):
        return DisplayItem(entry.get('name', ''), entry.get('description', ''), placeholder)
    return DisplayItem(title_for(entry), entry, placeholder)


def render(
    category: str,
    records: Iterable[Any],
    min_count: int,
    placeholder_table: Mapping[str, Sequence[Any]],
    title_for: Callable[[str], str] = fallback_title,
) -> RenderedSection:
    """
    Build the display items for one category.

    Real records come first, in input order, capped at `min_count`. When
    fewer are available the tail is padded from `placeholder_table[category]`
    by position: the item at index n takes table entry n, so two real
    benefits are followed by entries 3 and 4. Indexes past the end of the
    table wrap around.

    Args:
        category: Category label; must be a key of `placeholder_table`
        records: MergedRecords (title = name) or strings (title derived)
        min_count: Number of items to display
        placeholder_table: Category label -> ordered placeholder entries
        title_for: Title heuristic for string entries

    Returns:
        RenderedSection with exactly `min_count` items when the table allows

    Raises:
        UnknownCategoryError: If the category has no placeholder table entry
    """
    if category not in placeholder_table:
        raise UnknownCategoryError(category, placeholder_table.keys())

    selected = list(records)[:min_count]
    items = [_to_item(entry, title_for) for entry in selected]

    sources: List[str] = []
    for entry in selected:
        if isinstance(entry, MergedRecord):
            for name in entry.sources:
                if name not in sources:
                    sources.append(name)

    table = list(placeholder_table[category])
    missing = min_count - len(items)
    if missing > 0:
        if not table:
            logger.warning("No placeholders for '%s'; rendering %d of %d items",
                           category, len(items), min_count)
        else:
            for _ in range(missing):
                # Slot n takes table entry n; wrap only past the end of the table
                index = len(items)
                if index >= len(table):
                    index %= len(table)
                items.append(_to_item(table[index], title_for, placeholder=True))

    section = RenderedSection(category=category, items=items, sources=sources)
    if section.placeholder_count:
        logger.debug("Padded '%s' with %d placeholder(s)", category, section.placeholder_count)
    return section


def attribution_comment(source_names: Iterable[str]) -> str:
    """Return the trailing attribution comment line."""
    return f"<!-- Data sourced from: {', '.join(source_names)} -->\n"


def _source_names(sources: Iterable[dict]) -> List[str]:
    return [entry.get('source', '') for entry in sources]


class ContentRenderer:
    """
    Renders each guide section from its scraped source entries.

    Usage:
        renderer = ContentRenderer()
        html = renderer.render_section('benefits', sources)
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the renderer.

        Args:
            settings: Guide settings dict. If None, loads config/guide.yaml.
        """
        if settings is None:
            settings = load_guide_settings()

        self.min_counts = load_min_counts(settings)
        self.exclusions = load_exclusion_phrases(settings)
        self.min_length = load_min_fragment_length(settings)
        self.standard_types: List[str] = list(settings.get('standard_types', []))
        self.pose_intros: Dict[str, str] = dict(settings.get('pose_intros', {}))
        self.placeholders = {
            section: load_placeholders(section, settings)
            for section in ('poses', 'benefits', 'tips')
        }
        self.relabel = {
            section: load_relabel_map(section, settings)
            for section in ('benefits', 'tips')
        }

        self._handlers = {
            'types': self.render_types,
            'poses': self.render_poses,
            'benefits': self.render_benefits,
            'tips': self.render_tips,
        }

    @property
    def sections(self) -> List[str]:
        return list(self._handlers)

    @property
    def pose_categories(self) -> List[str]:
        return list(self.placeholders['poses'])

    def render_section(self, section: str, sources: List[dict]) -> str:
        """
        Render include markup for one guide section.

        Raises:
            UnknownCategoryError: If the section is not one of types/poses/benefits/tips
        """
        handler = self._handlers.get(section)
        if handler is None:
            raise UnknownCategoryError(section, self._handlers)

        logger.info("Generating content for %s from %d source(s)...", section, len(sources))
        return handler(sources)

    def render_types(self, sources: List[dict]) -> str:
        """Render one conditional block per standard yoga style."""
        merger = merge_types(sources, self.exclusions, self.min_length)
        content = ""

        for type_name in self.standard_types:
            record = merger.get(type_name)
            description = record.description if record and record.description else (
                f"{type_name} yoga is a popular style with many benefits."
            )
            benefit = record.benefits[0] if record and record.benefits else (
                f"{type_name} yoga offers numerous physical and mental benefits."
            )
            audience = record.suitable_for[0] if record and record.suitable_for else (
                f"{type_name} yoga can be adapted for practitioners of various levels."
            )

            content += f'{{% if type == "{type_name}" %}}\n'
            content += self._content_block("Overview", description)
            content += "\n"
            content += self._content_block("Benefits", benefit)
            content += "\n"
            content += self._content_block("Who It's For", audience)
            content += "{% endif %}\n\n"

        content += attribution_comment(_source_names(sources))
        return content

    @staticmethod
    def _content_block(heading: str, text: str) -> str:
        return (
            '  <div class="content-section">\n'
            f'    <h4>{escape_html(heading)}</h4>\n'
            f'    <p>{escape_html(text)}</p>\n'
            '  </div>\n'
        )

    def render_poses(self, sources: List[dict]) -> str:
        """Render one conditional block per pose category."""
        by_category = merge_poses(
            sources, self.pose_categories, self.exclusions, self.min_length,
        )
        min_count = self.min_counts.get('poses', 3)
        content = ""

        for category, merger in by_category.items():
            section = render(category, merger, min_count, self.placeholders['poses'])

            content += f'{{% if target == "{category}" %}}\n'
            content += '  <div class="poses-description">\n'
            intro = self.pose_intros.get(category)
            if intro:
                content += f'    <p>{escape_html(intro)}</p>\n'
            content += '    <div class="poses-list">\n'
            for _, title, body in section.triples():
                content += '      <div class="pose-item">\n'
                content += f'        <h4>{escape_html(title)}</h4>\n'
                content += f'        <p>{escape_html(body)}</p>\n'
                content += '      </div>\n'
            content += '    </div>\n'
            content += '  </div>\n'
            content += '{% endif %}\n\n'

        content += attribution_comment(_source_names(sources))
        return content

    def render_benefits(self, sources: List[dict]) -> str:
        return self._render_cards(
            'benefits', sources, 'benefits-grid', 'benefit-card', extract_benefit_title,
        )

    def render_tips(self, sources: List[dict]) -> str:
        return self._render_cards(
            'tips', sources, 'tips-grid', 'tip-card', extract_tip_title,
        )

    def _render_cards(
        self,
        section_name: str,
        sources: List[dict],
        grid_class: str,
        card_class: str,
        title_for: Callable[[str], str],
    ) -> str:
        """Render card grids for a pre-partitioned section (benefits, tips)."""
        buckets = relabel_partitions(sources, self.relabel[section_name])
        min_count = self.min_counts.get(section_name, 3)
        content = ""

        for category, items in buckets.items():
            try:
                section = render(
                    category, items, min_count, self.placeholders[section_name], title_for,
                )
            except UnknownCategoryError as e:
                logger.error("Skipping %s category: %s", section_name, e)
                continue

            content += f'{{% if target == "{category}" %}}\n'
            content += f'  <div class="{grid_class}">\n'
            for _, title, body in section.triples():
                content += f'    <div class="{card_class}">\n'
                content += f'      <h4>{escape_html(title)}</h4>\n'
                content += f'      <p>{escape_html(body)}</p>\n'
                content += '    </div>\n'
            content += '  </div>\n'
            content += '{% endif %}\n\n'

        content += attribution_comment(_source_names(sources))
        return content
