"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Browser User-Agent sent with every scrape request
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Fragments shorter than this are not meaningful headings or sentences
MIN_FRAGMENT_LENGTH = 3

DEFAULT_EXCLUSION_PHRASES = ("References",)

# Pose records that match no rule land here and are not rendered
DEFAULT_POSE_CATEGORY = "other"
