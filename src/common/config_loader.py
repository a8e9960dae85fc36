"""
Configuration Loader

Loads YAML configuration files for guide generation (sections, minimum
display counts, placeholders, relabeling), scrape sources, and site themes.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .constants import DEFAULT_EXCLUSION_PHRASES, MIN_FRAGMENT_LENGTH


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'guide.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_guide_settings() -> Dict[str, Any]:
    """
    Load guide generation settings.

    Returns:
        Full contents of guide.yaml
    """
    return load_config('guide.yaml')


def load_min_counts(settings: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
    """
    Load the minimum display count per section.

    Example:
        {'poses': 3, 'benefits': 4, 'tips': 3}
    """
    if settings is None:
        settings = load_guide_settings()
    return dict(settings.get('min_counts', {}))


def load_exclusion_phrases(settings: Optional[Dict[str, Any]] = None) -> Tuple[str, ...]:
    """Phrases that disqualify a record name during normalization."""
    if settings is None:
        settings = load_guide_settings()
    phrases = settings.get('exclusion_phrases')
    if phrases is None:
        return DEFAULT_EXCLUSION_PHRASES
    return tuple(phrases)


def load_min_fragment_length(settings: Optional[Dict[str, Any]] = None) -> int:
    """Minimum trimmed length of a kept text fragment."""
    if settings is None:
        settings = load_guide_settings()
    return int(settings.get('min_fragment_length', MIN_FRAGMENT_LENGTH))


def load_placeholders(section: str, settings: Optional[Dict[str, Any]] = None) -> Dict[str, List[Any]]:
    """
    Load the placeholder table for one section.

    Args:
        section: Section name ('poses', 'benefits', 'tips')
        settings: Guide settings (if None, loads from config)

    Returns:
        Dictionary mapping category label to ordered placeholder entries.
        Pose entries are {'name', 'description'} dicts, the others are strings.
    """
    if settings is None:
        settings = load_guide_settings()
    return dict(settings.get('placeholders', {}).get(section, {}))


def load_relabel_map(section: str, settings: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Load the data-key to UI-label mapping for a pre-partitioned section.

    Example:
        >>> load_relabel_map('benefits')
        {'physical': 'physical', 'mental': 'mental', 'general': 'lifestyle'}
    """
    if settings is None:
        settings = load_guide_settings()
    return dict(settings.get('relabel', {}).get(section, {}))


def load_sources() -> Dict[str, List[Dict[str, str]]]:
    """
    Load scrape sources grouped by section.

    Returns:
        Dictionary mapping section name to a list of source definitions
        with 'name', 'url', 'selector' and 'processor' keys
    """
    config = load_config('sources.yaml')
    return config.get('sources', {})


def load_request_timeout() -> int:
    """Return the HTTP timeout (seconds) used by the scraper."""
    config = load_config('sources.yaml')
    return int(config.get('request_timeout', 30))


def load_theme_settings() -> Dict[str, Any]:
    """
    Load site theme settings.

    Returns:
        Dictionary with default_theme, storage_key, assets_dir,
        image_sources and image_extensions
    """
    return load_config('themes.yaml')
