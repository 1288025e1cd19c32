"""Statcodec utility modules.

- logging: Standardized logging with human/verbose/JSON modes
- preflight: Codec library availability checks
"""

from statcodec.utils.logging import get_logger, setup_logging
from statcodec.utils.preflight import PreflightChecker, PreflightResult

__all__ = [
    "get_logger",
    "setup_logging",
    "PreflightChecker",
    "PreflightResult",
]
