"""Format registry: the single ordered table of known serialization formats.

Every catalog query and the decode fallback loop read this table, so adding
a format means:
    1. Implement a Codec subclass
    2. Add a FormatSpec to DEFAULT_FORMATS (or register it at runtime)
    3. Declare the pip extra named by ``feature``

The registration order is the decode attempt order.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from statcodec.codecs.base import Codec
from statcodec.codecs.cbor_codec import CborHexCodec
from statcodec.codecs.json_codec import JsonCodec
from statcodec.codecs.toml_codec import TomlCodec
from statcodec.codecs.yaml_codec import YamlCodec


@dataclass(frozen=True)
class FormatSpec:
    """Declaration of one serialization format.

    Attributes:
        name: Canonical format name used on the command line and in config
        feature: pip extra that installs the format's dependencies
        requires: Importable module names the codec needs
        codec_factory: Callable building the codec from its name
        description: Short human-readable label
    """

    name: str
    feature: str
    codec_factory: Callable[[str], Codec]
    requires: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def create_codec(self) -> Codec:
        """Instantiate this format's codec."""
        return self.codec_factory(self.name)


DEFAULT_FORMATS: tuple[FormatSpec, ...] = (
    FormatSpec(
        name="cbor",
        feature="cbor",
        codec_factory=CborHexCodec,
        requires=("cbor2",),
        description="Hex-encoded CBOR",
    ),
    FormatSpec(
        name="json",
        feature="json",
        codec_factory=JsonCodec,
        description="JSON",
    ),
    FormatSpec(
        name="yaml",
        feature="yaml",
        codec_factory=YamlCodec,
        requires=("yaml",),
        description="YAML",
    ),
    FormatSpec(
        name="toml",
        feature="toml",
        codec_factory=TomlCodec,
        requires=("tomli_w",),
        description="TOML",
    ),
)


class CodecRegistry:
    """Ordered registry of format declarations.

    Attributes:
        specs: Registered formats in attempt order
    """

    def __init__(self, specs: Iterable[FormatSpec] = ()) -> None:
        """Initialize the registry.

        Args:
            specs: Initial formats, in attempt order
        """
        self._specs: dict[str, FormatSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: FormatSpec) -> None:
        """Append a format to the end of the attempt order.

        Raises:
            ValueError: If a format with the same name is already registered
        """
        if spec.name in self._specs:
            raise ValueError(f"Format already registered: {spec.name}")
        self._specs[spec.name] = spec

    def get(self, name: str) -> FormatSpec | None:
        """Look up a format by its exact name."""
        return self._specs.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    @property
    def specs(self) -> tuple[FormatSpec, ...]:
        return tuple(self._specs.values())

    def list_names(self) -> list[str]:
        """Get registered format names in attempt order."""
        return list(self._specs.keys())

    def get_metadata(self) -> dict[str, Any]:
        """Get registry metadata for logging and debugging."""
        return {
            "formats": [
                {"name": spec.name, "feature": spec.feature, "requires": list(spec.requires)}
                for spec in self._specs.values()
            ],
        }


# Global registry instance
_registry: CodecRegistry | None = None


def get_registry() -> CodecRegistry:
    """Get the global registry, populated with the built-in formats."""
    global _registry
    if _registry is None:
        _registry = CodecRegistry(DEFAULT_FORMATS)
    return _registry


def reset_registry() -> None:
    """Reset the global registry (primarily for testing)."""
    global _registry
    _registry = None
