"""Codec capability set.

Answers, without looking at any input, which formats exist, which are usable
in this installation and which are not. A capability set is a pure function
of the format catalog and one boolean flag per format; flags are resolved
once at startup by ``detect_capabilities`` from installed packages and
configuration.
"""

from collections.abc import Iterable, Mapping

from statcodec.codecs.registry import CodecRegistry, FormatSpec, get_registry
from statcodec.utils.logging import get_logger
from statcodec.utils.preflight import PreflightChecker

logger = get_logger(__name__)

# Reasons a catalog format is disabled
NOT_INSTALLED = "not_installed"
DISABLED_IN_CONFIG = "disabled_in_config"


class CapabilitySet:
    """Immutable view of enabled and disabled formats.

    Invariants: ``supported() + not_supported()`` covers ``all()`` exactly,
    the two never overlap, and all three keep catalog order.
    """

    def __init__(
        self,
        catalog: Iterable[FormatSpec],
        enabled: Iterable[str],
        reasons: Mapping[str, str] | None = None,
    ) -> None:
        self._catalog = tuple(catalog)
        enabled_names = set(enabled)
        self._enabled = tuple(s.name for s in self._catalog if s.name in enabled_names)
        self._disabled = tuple(s.name for s in self._catalog if s.name not in enabled_names)
        reasons = reasons or {}
        self._reasons = {name: reasons.get(name, NOT_INSTALLED) for name in self._disabled}

    @classmethod
    def from_flags(
        cls,
        catalog: Iterable[FormatSpec],
        flags: Mapping[str, bool],
        reasons: Mapping[str, str] | None = None,
    ) -> "CapabilitySet":
        """Build a capability set from per-format flags.

        Args:
            catalog: Every known format, in attempt order
            flags: Format name to enabled flag (missing names are disabled)
            reasons: Optional disabled reason per format name
        """
        return cls(catalog, [name for name, on in flags.items() if on], reasons)

    def supported(self) -> list[str]:
        """Enabled format names in catalog order."""
        return list(self._enabled)

    def all(self) -> list[str]:
        """Every known format name in catalog order."""
        return [spec.name for spec in self._catalog]

    def not_supported(self) -> list[str]:
        """Disabled format names in catalog order."""
        return list(self._disabled)

    def is_enabled(self, name: str) -> bool:
        return name in self._enabled

    def spec(self, name: str) -> FormatSpec | None:
        """Look up a catalog entry, enabled or not."""
        for spec in self._catalog:
            if spec.name == name:
                return spec
        return None

    def enabled_specs(self) -> tuple[FormatSpec, ...]:
        """Catalog entries of enabled formats, in attempt order."""
        return tuple(spec for spec in self._catalog if spec.name in self._enabled)

    def disabled_reason(self, name: str) -> str | None:
        """Why a catalog format is disabled, or None if it is enabled or unknown."""
        return self._reasons.get(name)

    def __repr__(self) -> str:
        return f"CapabilitySet(enabled={list(self._enabled)}, disabled={list(self._disabled)})"


def detect_capabilities(
    registry: CodecRegistry | None = None,
    configured: Mapping[str, bool] | None = None,
    checker: PreflightChecker | None = None,
) -> CapabilitySet:
    """Resolve the capability set for this process.

    A format is enabled when its libraries are installed and configuration
    does not switch it off.

    Args:
        registry: Format catalog (uses the global registry if None)
        configured: Format name to enabled-in-config flag (default: all on)
        checker: Preflight checker (created if None)

    Returns:
        CapabilitySet for the catalog
    """
    registry = registry or get_registry()
    configured = configured or {}
    checker = checker or PreflightChecker()

    flags: dict[str, bool] = {}
    reasons: dict[str, str] = {}
    for spec in registry:
        if not configured.get(spec.name, True):
            flags[spec.name] = False
            reasons[spec.name] = DISABLED_IN_CONFIG
            continue

        check = checker.check_format(spec, required=True)
        flags[spec.name] = check.available
        if not check.available:
            reasons[spec.name] = NOT_INSTALLED
            logger.debug(f"Format {spec.name} disabled, missing modules: {check.missing}")

    capabilities = CapabilitySet.from_flags(registry, flags, reasons)
    logger.debug(f"Capabilities: {capabilities!r}")
    return capabilities
