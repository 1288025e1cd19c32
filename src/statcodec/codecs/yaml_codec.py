"""YAML codec via PyYAML.

Only the safe loader and dumper are used. Plain text is valid YAML (a bare
scalar), so documents that are not a mapping are rejected by the
statistics validation, not by the parser.
"""

from typing import Any

from statcodec.codecs.base import Codec


class YamlCodec(Codec):
    """Codec for YAML documents."""

    def __init__(self, name: str = "yaml") -> None:
        super().__init__(name)

    def library_errors(self) -> tuple[type[Exception], ...]:
        import yaml

        return (yaml.YAMLError,)

    def load(self, text: str) -> Any:
        import yaml

        return yaml.safe_load(text)

    def dump(self, data: dict[str, Any]) -> str:
        import yaml

        return yaml.safe_dump(
            data,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
