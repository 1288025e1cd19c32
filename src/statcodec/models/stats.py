"""Line-count statistics entities.

This module contains the value types every codec produces and consumes:
- FileReport: Counts for a single source file
- Language: Aggregated counts for one language
- LanguageMap: Language name to Language mapping with ``+=`` merge

The serialized shape is shared by all codecs, so validation lives here and
not in the individual codecs.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

COUNTER_FIELDS = ("blanks", "code", "comments")


class StatsFormatError(ValueError):
    """Raised when decoded data does not have the statistics shape."""


def _read_counter(data: Mapping[str, Any], key: str, where: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise StatsFormatError(f"{where}: '{key}' must be an integer, got {value!r}")
    if value < 0:
        raise StatsFormatError(f"{where}: '{key}' must not be negative, got {value}")
    return value


@dataclass
class FileReport:
    """Counts for a single file.

    Attributes:
        name: File path as reported by the counting tool
        blanks: Blank lines
        code: Lines of code
        comments: Comment lines
    """

    name: str
    blanks: int = 0
    code: int = 0
    comments: int = 0

    @property
    def lines(self) -> int:
        """Total lines in the file."""
        return self.blanks + self.code + self.comments

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "blanks": self.blanks,
            "code": self.code,
            "comments": self.comments,
        }

    @classmethod
    def from_dict(cls, data: Any, where: str = "report") -> "FileReport":
        """Build a report from decoded data.

        Raises:
            StatsFormatError: If the data is not a valid report
        """
        if not isinstance(data, Mapping):
            raise StatsFormatError(f"{where}: expected a mapping, got {type(data).__name__}")
        name = data.get("name", "")
        if not isinstance(name, str):
            raise StatsFormatError(f"{where}: 'name' must be a string, got {name!r}")
        return cls(
            name=name,
            **{key: _read_counter(data, key, where) for key in COUNTER_FIELDS},
        )


@dataclass
class Language:
    """Aggregated statistics for one language.

    Attributes:
        blanks: Blank lines across all files
        code: Lines of code across all files
        comments: Comment lines across all files
        reports: Per-file breakdown (may be empty)
        inaccurate: Whether the counting tool flagged the numbers as unreliable
    """

    blanks: int = 0
    code: int = 0
    comments: int = 0
    reports: list[FileReport] = field(default_factory=list)
    inaccurate: bool = False

    @property
    def lines(self) -> int:
        """Total lines (blanks + code + comments)."""
        return self.blanks + self.code + self.comments

    @property
    def files(self) -> int:
        return len(self.reports)

    def __iadd__(self, other: "Language") -> "Language":
        if not isinstance(other, Language):
            return NotImplemented
        self.blanks += other.blanks
        self.code += other.code
        self.comments += other.comments
        self.reports.extend(other.reports)
        self.inaccurate = self.inaccurate or other.inaccurate
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "blanks": self.blanks,
            "code": self.code,
            "comments": self.comments,
            "reports": [report.to_dict() for report in self.reports],
            "inaccurate": self.inaccurate,
        }

    @classmethod
    def from_dict(cls, data: Any, where: str = "language") -> "Language":
        """Build a language record from decoded data.

        Missing fields take their defaults and unknown fields are ignored.

        Raises:
            StatsFormatError: If the data is not a valid language record
        """
        if not isinstance(data, Mapping):
            raise StatsFormatError(f"{where}: expected a mapping, got {type(data).__name__}")

        raw_reports = data.get("reports", [])
        if not isinstance(raw_reports, list):
            raise StatsFormatError(f"{where}: 'reports' must be a list")

        inaccurate = data.get("inaccurate", False)
        if not isinstance(inaccurate, bool):
            raise StatsFormatError(f"{where}: 'inaccurate' must be a boolean")

        return cls(
            reports=[
                FileReport.from_dict(item, f"{where}.reports[{index}]")
                for index, item in enumerate(raw_reports)
            ],
            inaccurate=inaccurate,
            **{key: _read_counter(data, key, where) for key in COUNTER_FIELDS},
        )


class LanguageMap(dict[str, Language]):
    """Mapping of language name to its statistics.

    Supports ``+=`` with another mapping: entries for the same language are
    merged, new languages are added. The right-hand side is never mutated.
    """

    def __iadd__(self, other: Mapping[str, Language]) -> "LanguageMap":  # type: ignore[override]
        for name, language in other.items():
            entry = self.setdefault(name, Language())
            entry += Language.from_dict(language.to_dict())
        return self

    @property
    def total(self) -> Language:
        """Sum of every language, without per-file reports."""
        total = Language()
        for language in self.values():
            total.blanks += language.blanks
            total.code += language.code
            total.comments += language.comments
            total.inaccurate = total.inaccurate or language.inaccurate
        return total

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary with languages in sorted order."""
        return {name: self[name].to_dict() for name in sorted(self)}

    @classmethod
    def from_dict(cls, data: Any) -> "LanguageMap":
        """Build a map from decoded data.

        Raises:
            StatsFormatError: If the top level is not a mapping of language
                names to language records
        """
        if not isinstance(data, Mapping):
            raise StatsFormatError(
                f"expected a mapping of languages, got {type(data).__name__}"
            )

        languages = cls()
        for name, value in data.items():
            if not isinstance(name, str) or not name:
                raise StatsFormatError(f"language name must be a non-empty string, got {name!r}")
            languages[name] = Language.from_dict(value, name)
        return languages
