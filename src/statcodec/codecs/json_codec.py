"""JSON codec (standard library ``json``)."""

import json
from typing import Any

from statcodec.codecs.base import Codec


class JsonCodec(Codec):
    """Codec for JSON documents."""

    def __init__(self, name: str = "json") -> None:
        super().__init__(name)

    def load(self, text: str) -> Any:
        return json.loads(text)

    def dump(self, data: dict[str, Any]) -> str:
        return json.dumps(data)
