"""
Guide content engine: normalize, merge, categorize and render scraped data.

Modules:
    normalizer - Fragment and record normalization
    merger - Case-insensitive deduplication across sources
    categorizer - Ordered keyword rules and bucket relabeling
    renderer - Placeholder backfill, titles, escaping, include markup
    generator - Section files in, include files out
    template_updater - Swap include statements into the guide template
"""

from .categorizer import (
    POSE_RULES,
    PatternRule,
    categorize,
    categorize_pose,
    classify_benefit,
    classify_tip,
    relabel_partitions,
)
from .generator import GuideContentGenerator
from .merger import RecordMerger, merge, merge_poses, merge_types
from .normalizer import normalize_fragment, normalize_record, normalize_records
from .renderer import (
    ContentRenderer,
    UnknownCategoryError,
    extract_benefit_title,
    extract_tip_title,
    render,
)
from .template_updater import GuideTemplateUpdater

__all__ = [
    'PatternRule',
    'POSE_RULES',
    'categorize',
    'categorize_pose',
    'classify_benefit',
    'classify_tip',
    'relabel_partitions',
    'GuideContentGenerator',
    'RecordMerger',
    'merge',
    'merge_poses',
    'merge_types',
    'normalize_fragment',
    'normalize_record',
    'normalize_records',
    'ContentRenderer',
    'UnknownCategoryError',
    'extract_benefit_title',
    'extract_tip_title',
    'render',
    'GuideTemplateUpdater',
]
