"""
Guide Template Updater

Points the guide page template at the generated include files by replacing
the content of known section containers with an include statement.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup, NavigableString

from ..common.config_loader import load_guide_settings

logger = logging.getLogger(__name__)

# Container whose existing loop/include markup must be preserved
TYPE_CONTAINER = 'yoga-type-content'

# html.parser escapes template delimiters in some positions
_TEMPLATE_TAG_FIXES = (
    ('&lt;%', '{%'),
    ('%&gt;', '%}'),
    ('&amp;#123;', '{'),
    ('&amp;#125;', '}'),
)


def include_statement(section: str) -> str:
    return f'{{% include "guide/{section}.html" %}}'


class GuideTemplateUpdater:
    """
    Rewrites section containers in the guide template.

    Usage:
        updater = GuideTemplateUpdater("guide/index.njk", "_includes/guide")
        updater.update()
    """

    def __init__(
        self,
        template_path: str,
        includes_dir: str,
        settings: Optional[Dict[str, Any]] = None,
    ):
        if settings is None:
            settings = load_guide_settings()

        self.template_path = template_path
        self.includes_dir = includes_dir
        self.containers: Dict[str, str] = dict(settings.get('template_containers', {}))

    def update_html(self, html: str) -> str:
        """
        Return the template with include statements swapped in.

        Only sections whose include file exists are touched.
        """
        soup = BeautifulSoup(html, "html.parser")

        for section, css_class in self.containers.items():
            if not os.path.exists(os.path.join(self.includes_dir, f"{section}.html")):
                continue

            for element in soup.select(f".{css_class}"):
                if css_class == TYPE_CONTAINER:
                    current = element.decode_contents()
                    if '{% include' in current or 'endfor %}' in current:
                        continue

                element.clear()
                element.append(NavigableString(f"\n{include_statement(section)}\n"))
                logger.debug("Replaced .%s with include for %s", css_class, section)

        updated = str(soup)
        for broken, fixed in _TEMPLATE_TAG_FIXES:
            updated = updated.replace(broken, fixed)
        return updated

    def update(self) -> bool:
        """
        Update the template file in place.

        Returns:
            True if the template was rewritten
        """
        if not os.path.exists(self.template_path):
            logger.error("Guide template not found: %s", self.template_path)
            return False

        with open(self.template_path, "r", encoding="utf-8") as f:
            html = f.read()

        updated = self.update_html(html)

        with open(self.template_path, "w", encoding="utf-8") as f:
            f.write(updated)

        logger.info("Updated guide template: %s", self.template_path)
        return True
