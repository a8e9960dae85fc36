"""
Theme Attribution Verifier

Checks that every optimized theme image has a "### <Name>" credit heading in
image-sources.md and a matching entry in the Theme catalog.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List

from .catalog import Theme

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.webp')


def capitalize_words(text: str) -> str:
    """Capitalize the first letter of each space-separated word."""
    return ' '.join(word[:1].upper() + word[1:] for word in text.split(' '))


@dataclass
class AttributionReport:
    """Outcome of an attribution check."""
    checked: List[str] = field(default_factory=list)
    missing_attribution: List[str] = field(default_factory=list)
    missing_from_catalog: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_attribution and not self.missing_from_catalog


def list_theme_images(optimized_dir: str, extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> List[str]:
    """Return image file names in the optimized directory, sorted."""
    allowed = {ext.lower() for ext in extensions}
    return sorted(
        name for name in os.listdir(optimized_dir)
        if os.path.splitext(name)[1].lower() in allowed
    )


def verify_attributions(
    sources_md: str,
    optimized_dir: str,
    extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
) -> AttributionReport:
    """
    Verify credits and catalog entries for all optimized theme images.

    Args:
        sources_md: Path to image-sources.md
        optimized_dir: Directory of optimized theme images
        extensions: Image extensions to consider

    Returns:
        AttributionReport

    Raises:
        FileNotFoundError: If image-sources.md or the image directory is missing
    """
    if not os.path.exists(sources_md):
        raise FileNotFoundError(f"Image sources file not found: {sources_md}")

    with open(sources_md, "r", encoding="utf-8") as f:
        credits = f.read()

    report = AttributionReport()
    catalog_ids = {theme.theme_id for theme in Theme}

    for image in list_theme_images(optimized_dir, extensions):
        theme_id = os.path.splitext(image)[0]
        report.checked.append(theme_id)

        heading = f"### {capitalize_words(theme_id.replace('-', ' '))}"
        if heading not in credits:
            report.missing_attribution.append(theme_id)

        if theme_id not in catalog_ids:
            report.missing_from_catalog.append(theme_id)

    logger.info("Checked attributions for %d themes", len(report.checked))
    return report
