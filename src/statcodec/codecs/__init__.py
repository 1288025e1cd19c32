"""Statcodec codecs - one per serialization format.

Codecs:
- CBOR: hex-encoded CBOR via cbor2
- JSON: standard library json
- YAML: PyYAML safe loader/dumper
- TOML: tomllib for reading, tomli-w for writing

The registry fixes the order in which codecs are tried on decode.
"""

from statcodec.codecs.base import Codec, CodecError, ConfigurationError, UnknownFormatError
from statcodec.codecs.cbor_codec import CborHexCodec
from statcodec.codecs.json_codec import JsonCodec
from statcodec.codecs.registry import (
    DEFAULT_FORMATS,
    CodecRegistry,
    FormatSpec,
    get_registry,
    reset_registry,
)
from statcodec.codecs.toml_codec import TomlCodec
from statcodec.codecs.yaml_codec import YamlCodec

__all__ = [
    "DEFAULT_FORMATS",
    "CborHexCodec",
    "Codec",
    "CodecError",
    "CodecRegistry",
    "ConfigurationError",
    "FormatSpec",
    "JsonCodec",
    "TomlCodec",
    "UnknownFormatError",
    "YamlCodec",
    "get_registry",
    "reset_registry",
]
