# Common utilities
from .config_loader import (
    load_config,
    load_exclusion_phrases,
    load_guide_settings,
    load_min_counts,
    load_min_fragment_length,
    load_placeholders,
    load_relabel_map,
    load_sources,
    load_theme_settings,
)
from .log_config import setup_logging
from .text_utils import (
    capitalize_first,
    collapse_whitespace,
    escape_html,
    sanitize_filename,
    split_sentences,
)
