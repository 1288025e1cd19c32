"""statcodec - code statistics format converter.

Reads per-language line-count statistics serialized in any of several
formats, works out which format produced them, merges them, and writes them
back in any one requested format.

Core pieces:
- Capability set: which formats this installation can use
- Dispatcher: ordered-fallback decoding and gated encoding
- Codecs: hex-encoded CBOR, JSON, YAML and TOML
"""

__version__ = "0.1.0"
__author__ = "statcodec Contributors"
