"""Input acquisition and aggregation.

A source is resolved in this order:
1. An existing file path: its raw bytes, decoded as UTF-8 by the dispatcher
2. The literal ``stdin``: standard input is read to the end
3. Anything else: the string itself is the serialized content

Every parsed source is merged into one LanguageMap. A source no enabled
codec accepts raises InputParseError; deciding to exit is left to the CLI.
"""

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from statcodec.dispatcher import FormatDispatcher, ParseOutcome
from statcodec.models import LanguageMap
from statcodec.utils.logging import get_logger

logger = get_logger(__name__)

STDIN_SOURCE = "stdin"


class InputParseError(Exception):
    """Raised when no enabled codec accepts an input source.

    Attributes:
        source: The source as given by the caller
        outcome: The failed parse, including per-codec errors
    """

    def __init__(self, source: str, outcome: ParseOutcome) -> None:
        self.source = source
        self.outcome = outcome
        super().__init__(f"Failed to parse input: {source}")


def read_source(source: str, stdin: TextIO | None = None) -> str | bytes:
    """Read the serialized content a source refers to.

    Args:
        source: File path, ``stdin``, or inline content
        stdin: Stream used for ``stdin`` (default: sys.stdin)

    Raises:
        OSError: If the path exists but cannot be read
    """
    path = Path(source)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Inline content can be too long or contain characters no path can
        is_file = False

    if is_file:
        logger.debug(f"Reading input file: {path}")
        return path.read_bytes()

    if source == STDIN_SOURCE:
        logger.debug("Reading input from stdin")
        stream = stdin or sys.stdin
        # Binary streams leave UTF-8 decoding to the dispatcher
        buffer = getattr(stream, "buffer", None)
        return buffer.read() if buffer is not None else stream.read()

    return source


def add_input(
    source: str,
    languages: LanguageMap,
    dispatcher: FormatDispatcher,
    stdin: TextIO | None = None,
) -> str:
    """Parse one source and merge it into ``languages``.

    Returns:
        Name of the format the source was decoded as

    Raises:
        InputParseError: If no enabled codec accepts the content
    """
    outcome = dispatcher.try_parse(read_source(source, stdin))
    if outcome.result is None:
        for error in outcome.errors:
            logger.debug(f"{source}: {error}")
        raise InputParseError(source, outcome)

    languages += outcome.result
    logger.debug(f"Merged {len(outcome.result)} languages from {source} ({outcome.format_name})")
    return outcome.format_name or ""


def collect_inputs(
    sources: Iterable[str],
    dispatcher: FormatDispatcher,
    stdin: TextIO | None = None,
) -> LanguageMap:
    """Parse every source and merge them into a new LanguageMap.

    Raises:
        InputParseError: On the first source no enabled codec accepts
    """
    languages = LanguageMap()
    for source in sources:
        add_input(source, languages, dispatcher, stdin)
    return languages
