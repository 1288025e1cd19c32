"""Unit tests for the built-in codecs."""

import pytest

from statcodec.codecs import CborHexCodec, CodecError, JsonCodec, TomlCodec, YamlCodec
from statcodec.models import LanguageMap
from tests.fixtures import get_sample


class TestCodecErrors:
    """Tests for the error contract shared by all codecs."""

    def test_codec_error_carries_format_and_reason(self) -> None:
        error = CodecError("json", "Expecting value")

        assert error.format_name == "json"
        assert error.reason == "Expecting value"
        assert str(error) == "json: Expecting value"

    def test_non_statistics_data_is_codec_error(self) -> None:
        """Test that valid syntax with the wrong shape fails like bad syntax."""
        with pytest.raises(CodecError, match="json"):
            JsonCodec().decode("[1, 2, 3]")


class TestJsonCodec:
    """Tests for JsonCodec."""

    def test_decode_minimal_record(self) -> None:
        languages = JsonCodec().decode('{"Rust":{"code":10}}')

        assert list(languages) == ["Rust"]
        assert languages["Rust"].code == 10

    def test_decode_sample(self) -> None:
        languages = JsonCodec().decode(get_sample("rust.json").read_text())

        assert languages["Rust"].reports[0].name == "src/main.rs"

    def test_decode_invalid(self) -> None:
        with pytest.raises(CodecError):
            JsonCodec().decode("Rust: {code: 10}")

    def test_round_trip(self, sample_languages: LanguageMap) -> None:
        codec = JsonCodec()

        assert codec.decode(codec.encode(sample_languages)) == sample_languages


class TestYamlCodec:
    """Tests for YamlCodec."""

    def test_decode_sample(self) -> None:
        languages = YamlCodec().decode(get_sample("python.yaml").read_text())

        assert languages["Python"].code == 200
        assert languages["Python"].files == 1

    def test_plain_scalar_rejected(self) -> None:
        """Test that bare text, which YAML reads as a string, is not statistics."""
        with pytest.raises(CodecError, match="expected a mapping"):
            YamlCodec().decode("toml-looking-but-invalid-json-and-invalid-yaml text")

    def test_syntax_error(self) -> None:
        with pytest.raises(CodecError):
            YamlCodec().decode("Rust: {code: 10\n  - broken")

    def test_round_trip(self, sample_languages: LanguageMap) -> None:
        codec = YamlCodec()

        assert codec.decode(codec.encode(sample_languages)) == sample_languages


class TestTomlCodec:
    """Tests for TomlCodec."""

    def test_decode_sample(self) -> None:
        languages = TomlCodec().decode(get_sample("go.toml").read_text())

        assert languages["Go"].code == 50
        assert languages["Go"].reports[0].name == "main.go"

    def test_decode_invalid(self) -> None:
        with pytest.raises(CodecError):
            TomlCodec().decode('{"Rust":{"code":10}}')

    def test_round_trip(self, sample_languages: LanguageMap) -> None:
        pytest.importorskip("tomli_w")
        codec = TomlCodec()

        assert codec.decode(codec.encode(sample_languages)) == sample_languages


class TestCborHexCodec:
    """Tests for CborHexCodec."""

    def test_decode_sample(self) -> None:
        pytest.importorskip("cbor2")

        languages = CborHexCodec().decode(get_sample("c.cbor.hex").read_text())

        assert languages["C"].code == 5

    def test_invalid_hex_is_ordinary_failure(self) -> None:
        """Test that non-hex input raises CodecError instead of exiting."""
        pytest.importorskip("cbor2")

        with pytest.raises(CodecError, match="cbor"):
            CborHexCodec().decode('{"Rust":{"code":10}}')

    def test_truncated_payload(self) -> None:
        pytest.importorskip("cbor2")

        with pytest.raises(CodecError):
            CborHexCodec().decode("a16143a1")

    def test_encode_is_lowercase_hex(self, sample_languages: LanguageMap) -> None:
        pytest.importorskip("cbor2")

        encoded = CborHexCodec().encode(sample_languages)

        assert encoded == encoded.lower()
        bytes.fromhex(encoded)

    def test_round_trip(self, sample_languages: LanguageMap) -> None:
        pytest.importorskip("cbor2")
        codec = CborHexCodec()

        assert codec.decode(codec.encode(sample_languages)) == sample_languages
