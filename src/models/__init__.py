"""
Data models for guide content generation.

This module contains pure data classes with no business logic.
"""

from .records import DisplayItem, MergedRecord, RenderedSection, SourceRecord

__all__ = ['SourceRecord', 'MergedRecord', 'DisplayItem', 'RenderedSection']
