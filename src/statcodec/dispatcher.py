"""Format dispatcher: ordered-fallback decoding and gated encoding.

Decoding tries every enabled codec in catalog order and keeps the first
success. Declaration order is the only tie-break: input that happens to be
valid in several formats is decoded by the earliest enabled one.

Encoding requires a ``Format``, which only ``from_name`` hands out and only
for enabled formats. Name resolution is therefore the single place where a
disabled or unknown format is reported.

The dispatcher holds no mutable state. Calls are independent and can run
in parallel; merging results into an aggregate is the caller's business.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from statcodec.capabilities import CapabilitySet
from statcodec.codecs.base import Codec, CodecError, ConfigurationError, UnknownFormatError
from statcodec.diagnostics import configuration_error_message
from statcodec.models import LanguageMap
from statcodec.utils.logging import get_logger

logger = get_logger(__name__)


class ParseFailure(Enum):
    """Why a parse produced no result."""

    EMPTY_INPUT = "empty_input"
    NO_CODEC_MATCHED = "no_codec_matched"


@dataclass(frozen=True)
class Format:
    """An enabled serialization format, obtained from ``FormatDispatcher.from_name``.

    Attributes:
        name: Canonical format name
        codec: Codec resolved for this format. ``print`` always encodes with
            the dispatcher's own codec for ``name``
    """

    name: str
    codec: Codec = field(compare=False, repr=False)


@dataclass
class ParseOutcome:
    """Result of one decode attempt across all enabled codecs.

    Attributes:
        result: Decoded statistics, or None
        format_name: Format that decoded the input
        failure: Why there is no result
        errors: Per-codec decode failures, in attempt order
    """

    result: LanguageMap | None = None
    format_name: str | None = None
    failure: ParseFailure | None = None
    errors: list[CodecError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.result is not None


class FormatDispatcher:
    """Converts between serialized text and LanguageMap.

    Usage:
        dispatcher = FormatDispatcher(detect_capabilities())
        languages = dispatcher.parse(text)
        output = dispatcher.print(dispatcher.from_name("json"), languages)
    """

    def __init__(self, capabilities: CapabilitySet, config_path: str | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            capabilities: Formats usable in this process
            config_path: Configuration file, quoted when a format is disabled there
        """
        self.capabilities = capabilities
        self.config_path = config_path
        self._codecs: dict[str, Codec] = {
            spec.name: spec.create_codec() for spec in capabilities.enabled_specs()
        }

    # =========================================================================
    # Catalog
    # =========================================================================

    def supported_formats(self) -> list[str]:
        """Enabled format names in attempt order."""
        return self.capabilities.supported()

    def all_formats(self) -> list[str]:
        """Every known format name in catalog order."""
        return self.capabilities.all()

    def unsupported_formats(self) -> list[str]:
        """Disabled format names in catalog order."""
        return self.capabilities.not_supported()

    # =========================================================================
    # Decode
    # =========================================================================

    def try_parse(self, raw: str | bytes) -> ParseOutcome:
        """Decode input with the first enabled codec that accepts it.

        Args:
            raw: Serialized statistics; bytes are read as UTF-8

        Returns:
            ParseOutcome with the result or the failure kind and per-codec errors
        """
        if not raw:
            return ParseOutcome(failure=ParseFailure.EMPTY_INPUT)

        if isinstance(raw, bytes):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                return ParseOutcome(
                    failure=ParseFailure.NO_CODEC_MATCHED,
                    errors=[CodecError("utf-8", str(e))],
                )
        else:
            text = raw

        errors: list[CodecError] = []
        for name, codec in self._codecs.items():
            try:
                languages = codec.decode(text)
            except CodecError as e:
                logger.debug(f"Not {name}: {e.reason}")
                errors.append(e)
                continue
            logger.structured(
                logging.DEBUG,
                f"Decoded input as {name}",
                format=name,
                languages=len(languages),
                rejected=[e.format_name for e in errors],
            )
            return ParseOutcome(result=languages, format_name=name, errors=errors)

        return ParseOutcome(failure=ParseFailure.NO_CODEC_MATCHED, errors=errors)

    def parse(self, raw: str | bytes) -> LanguageMap | None:
        """Decode input, or return None if no enabled codec accepts it."""
        return self.try_parse(raw).result

    # =========================================================================
    # Encode
    # =========================================================================

    def from_name(self, name: str) -> Format:
        """Resolve a format name (case-sensitive) to an enabled Format.

        Raises:
            ConfigurationError: If the format is known but disabled here
            UnknownFormatError: If no such format exists
        """
        codec = self._codecs.get(name)
        if codec is not None:
            return Format(name=name, codec=codec)

        spec = self.capabilities.spec(name)
        if spec is None:
            raise UnknownFormatError(name, self.all_formats())

        reason = self.capabilities.disabled_reason(name) or ""
        raise ConfigurationError(
            format_name=name,
            feature=spec.feature,
            reason=reason,
            message=configuration_error_message(
                name,
                spec.feature,
                reason,
                config_path=self.config_path,
                disabled=self.unsupported_formats(),
            ),
        )

    def print(self, format: Format, languages: LanguageMap) -> str:
        """Encode statistics in the given format.

        Raises:
            CodecError: If the codec fails to encode
            ConfigurationError: If ``format`` is not enabled in this dispatcher
        """
        if format.name not in self._codecs:
            # Only reachable with a Format built outside from_name
            self.from_name(format.name)
        return self._codecs[format.name].encode(languages)
