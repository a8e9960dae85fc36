"""
Mat & Mind Guide Content Tool

Modules:
    models      - Data models (SourceRecord, MergedRecord, RenderedSection)
    common      - Shared utilities (config loader, logging, text helpers)
    extraction  - Source page fetching and parsing
    guide       - Normalize, merge, categorize and render guide content
    themes      - Site theme catalog and attribution checks
"""
