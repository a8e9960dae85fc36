"""
Site themes: catalog, per-visitor selection and attribution checks.
"""

from .attribution import AttributionReport, verify_attributions
from .catalog import DEFAULT_THEME, Theme, ThemeContext

__all__ = ['Theme', 'ThemeContext', 'DEFAULT_THEME', 'AttributionReport', 'verify_attributions']
