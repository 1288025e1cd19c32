"""Statcodec data models.

This module exports the statistics entities shared by every codec:
- FileReport: Counts for one file
- Language: Aggregated counts for one language
- LanguageMap: Mergeable language name to Language mapping
"""

from statcodec.models.stats import FileReport, Language, LanguageMap, StatsFormatError

__all__ = [
    "FileReport",
    "Language",
    "LanguageMap",
    "StatsFormatError",
]
