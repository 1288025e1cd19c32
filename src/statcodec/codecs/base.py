"""Abstract base class for serialization codecs.

All codecs MUST implement this interface. Each codec:
1. Loads text with its format library into plain Python data
2. Validates the data into a LanguageMap
3. Dumps a LanguageMap's plain dictionary back to text
4. Reports every failure as CodecError

Codecs must be bounded, synchronous and free of side effects on process
state. The dispatcher calls them in sequence and relies on a clean
success-or-CodecError outcome.
"""

from abc import ABC, abstractmethod
from typing import Any

from statcodec.models import LanguageMap, StatsFormatError


class Codec(ABC):
    """Abstract interface for one serialization format.

    Subclasses implement ``load`` and ``dump``. Format libraries are imported
    lazily so that a missing optional dependency only disables its own codec;
    ``library_errors`` names the library exceptions that signal bad data.

    Attributes:
        name: Format identifier (e.g., "json", "cbor")
    """

    def __init__(self, name: str) -> None:
        """Initialize the codec.

        Args:
            name: Format identifier
        """
        self.name = name

    def library_errors(self) -> tuple[type[Exception], ...]:
        """Exceptions raised by the format library for invalid data."""
        return ()

    @abstractmethod
    def load(self, text: str) -> Any:
        """Parse text into plain Python data."""

    @abstractmethod
    def dump(self, data: dict[str, Any]) -> str:
        """Serialize plain Python data to text."""

    def decode(self, text: str) -> LanguageMap:
        """Decode text into statistics.

        Raises:
            CodecError: If the text is not valid in this format or does not
                describe language statistics
        """
        # Deeply nested documents exhaust the recursion limit in every parser
        try:
            data = self.load(text)
        except (ValueError, TypeError, RecursionError, *self.library_errors()) as e:
            raise CodecError(self.name, str(e) or type(e).__name__) from e

        try:
            return LanguageMap.from_dict(data)
        except StatsFormatError as e:
            raise CodecError(self.name, str(e)) from e

    def encode(self, languages: LanguageMap) -> str:
        """Encode statistics into text.

        Raises:
            CodecError: If the format library rejects the data
        """
        try:
            return self.dump(languages.to_dict())
        except (ValueError, TypeError, RecursionError, *self.library_errors()) as e:
            raise CodecError(self.name, str(e) or type(e).__name__) from e

    def get_metadata(self) -> dict[str, Any]:
        """Get codec metadata for logging and debugging."""
        return {"name": self.name, "codec": type(self).__name__}


class CodecError(Exception):
    """Raised when a codec fails to decode or encode."""

    def __init__(self, format_name: str, message: str) -> None:
        self.format_name = format_name
        self.reason = message
        super().__init__(f"{format_name}: {message}")


class UnknownFormatError(Exception):
    """Raised when a format name is not in the catalog at all."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = known or []
        super().__init__(f"{name!r} is not a supported serialization format")


class ConfigurationError(Exception):
    """Raised when a known format is disabled in this installation.

    Attributes:
        format_name: The requested format
        feature: Install extra that provides the format
        reason: Why it is disabled ("not_installed" or "disabled_in_config")
    """

    def __init__(
        self,
        format_name: str,
        feature: str,
        reason: str,
        message: str | None = None,
    ) -> None:
        self.format_name = format_name
        self.feature = feature
        self.reason = reason
        self.message = message or f"Serialization format not available: {format_name}"
        super().__init__(self.message)
