"""Tests for signpost.routing.params: placeholder segment conversion."""

import enum
import uuid

import pytest

from signpost.errors import UnsupportedPlaceholderType
from signpost.routing.params import (
    CONVERTERS,
    INT_MAX,
    INT_MIN,
    SegmentConvertible,
    decode_segment,
    encode_segment,
    is_supported,
    register_converter,
)


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


class Priority(enum.IntEnum):
    LOW = 1
    HIGH = 2


class Slug:
    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Slug) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def from_segment(cls, value: str) -> "Slug | None":
        return cls(value) if value.islower() else None

    def to_segment(self) -> str:
        return self.value


class TestConverters:
    def test_builtin_types_registered(self) -> None:
        assert set(CONVERTERS) >= {str, int, bool, float, uuid.UUID}

    def test_enum_and_protocol_supported(self) -> None:
        assert is_supported(Color)
        assert is_supported(Slug)
        assert isinstance(Slug("x"), SegmentConvertible)

    def test_unsupported_type(self) -> None:
        assert not is_supported(bytes)
        assert not is_supported("int")


class TestDecodeStr:
    def test_passthrough(self) -> None:
        assert decode_segment("hello", str) == "hello"

    def test_empty_fails(self) -> None:
        assert decode_segment("", str) is None

    def test_slash_fails(self) -> None:
        assert decode_segment("a/b", str) is None


class TestDecodeInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("42", 42), ("0", 0), ("-7", -7), ("+7", 7), ("007", 7)],
    )
    def test_valid(self, raw: str, expected: int) -> None:
        assert decode_segment(raw, int) == expected

    @pytest.mark.parametrize("raw", ["abc", "4.2", " 42", "42 ", "1_000", "", "-", "٤٢"])
    def test_invalid(self, raw: str) -> None:
        assert decode_segment(raw, int) is None

    def test_range_limits(self) -> None:
        assert decode_segment(str(INT_MAX), int) == INT_MAX
        assert decode_segment(str(INT_MIN), int) == INT_MIN

    def test_overflow_fails(self) -> None:
        assert decode_segment(str(INT_MAX + 1), int) is None
        assert decode_segment(str(INT_MIN - 1), int) is None

    @pytest.mark.parametrize("value", [0, 1, -1, 123456789, INT_MAX, INT_MIN])
    def test_round_trip(self, value: int) -> None:
        assert decode_segment(encode_segment(value), int) == value


class TestDecodeBool:
    def test_canonical_tokens(self) -> None:
        assert decode_segment("true", bool) is True
        assert decode_segment("false", bool) is False

    @pytest.mark.parametrize("raw", ["True", "FALSE", "1", "0", "yes", ""])
    def test_other_tokens_fail(self, raw: str) -> None:
        assert decode_segment(raw, bool) is None

    def test_encode(self) -> None:
        assert encode_segment(True) == "true"
        assert encode_segment(False) == "false"


class TestDecodeFloat:
    def test_valid(self) -> None:
        assert decode_segment("3.14", float) == pytest.approx(3.14)
        assert decode_segment("10", float) == 10.0
        assert decode_segment("-1e-3", float) == pytest.approx(-0.001)

    @pytest.mark.parametrize("raw", ["abc", "inf", "nan", "1e999", " 1.0", "1,5"])
    def test_invalid(self, raw: str) -> None:
        assert decode_segment(raw, float) is None

    @pytest.mark.parametrize("value", [0.1, -2.5, 1e20, 1e-7, 123.456])
    def test_round_trip(self, value: float) -> None:
        assert decode_segment(encode_segment(value), float) == value


class TestDecodeUUID:
    def test_canonical(self) -> None:
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert decode_segment(str(value), uuid.UUID) == value

    def test_non_canonical_fails(self) -> None:
        assert decode_segment("12345678123456781234567812345678", uuid.UUID) is None
        assert decode_segment("not-a-uuid", uuid.UUID) is None


class TestDecodeEnum:
    def test_by_value(self) -> None:
        assert decode_segment("red", Color) is Color.RED
        assert decode_segment("2", Priority) is Priority.HIGH

    def test_unknown_value(self) -> None:
        assert decode_segment("blue", Color) is None
        assert decode_segment("RED", Color) is None

    def test_encode(self) -> None:
        assert encode_segment(Color.GREEN) == "green"
        assert encode_segment(Priority.LOW) == "1"


class TestSegmentConvertible:
    def test_decode(self) -> None:
        assert decode_segment("hello", Slug) == Slug("hello")
        assert decode_segment("Hello", Slug) is None

    def test_encode(self) -> None:
        assert encode_segment(Slug("abc")) == "abc"


class TestRegisterConverter:
    def test_custom_type(self) -> None:
        class Version(tuple):
            pass

        def decode(value: str) -> Version | None:
            major, _, minor = value.partition(".")
            return Version((int(major), int(minor)))

        register_converter(Version, decode, lambda v: f"{v[0]}.{v[1]}")
        try:
            assert decode_segment("1.2", Version) == (1, 2)
            # ValueError from the decoder counts as a decode failure
            assert decode_segment("x.y", Version) is None
            assert encode_segment(Version((3, 4))) == "3.4"
        finally:
            del CONVERTERS[Version]

    def test_unsupported_decode_raises(self) -> None:
        with pytest.raises(UnsupportedPlaceholderType):
            decode_segment("x", bytes)

    def test_unsupported_encode_raises(self) -> None:
        with pytest.raises(UnsupportedPlaceholderType):
            encode_segment(b"x")
