"""CBOR codec, transported as a hexadecimal string.

CBOR is binary, so the text form is the lowercase hex encoding of the CBOR
document. Surrounding whitespace (e.g. a trailing newline from stdin) is
ignored on decode.
"""

from typing import Any

from statcodec.codecs.base import Codec


class CborHexCodec(Codec):
    """Codec for hex-encoded CBOR via the ``cbor2`` package."""

    def __init__(self, name: str = "cbor") -> None:
        super().__init__(name)

    def library_errors(self) -> tuple[type[Exception], ...]:
        import cbor2

        return (cbor2.CBORError, EOFError)

    def load(self, text: str) -> Any:
        import cbor2

        # Invalid hex raises ValueError, which is a plain decode failure
        payload = bytes.fromhex(text.strip())
        return cbor2.loads(payload)

    def dump(self, data: dict[str, Any]) -> str:
        import cbor2

        return cbor2.dumps(data).hex()
