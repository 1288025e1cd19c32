"""TOML codec.

Reading uses the standard library ``tomllib``; writing needs ``tomli-w``,
which is why the whole format is gated on that package.
"""

import tomllib
from typing import Any

from statcodec.codecs.base import Codec


class TomlCodec(Codec):
    """Codec for TOML documents."""

    def __init__(self, name: str = "toml") -> None:
        super().__init__(name)

    def load(self, text: str) -> Any:
        # TOMLDecodeError is a ValueError
        return tomllib.loads(text)

    def dump(self, data: dict[str, Any]) -> str:
        import tomli_w

        return tomli_w.dumps(data)
