"""Placeholder segment conversion.

Built-in converters for template placeholders like
``placeholder("id", int)``. Every converter is lossless: encoding a
value and decoding the result yields an equal value.

Decoding never raises for malformed input. A converter signals a bad
segment by returning ``None`` (or raising ``ValueError``), which makes
the whole template match fail.
"""

import enum
import math
import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

from signpost.errors import UnsupportedPlaceholderType

# Signed 64-bit range; larger magnitudes fail to decode
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@runtime_checkable
class SegmentConvertible(Protocol):
    """A type with a canonical, bidirectional string form.

    Implement both methods to use a custom type as a placeholder::

        class Slug:
            @classmethod
            def from_segment(cls, value: str) -> "Slug | None":
                return cls(value) if value.islower() else None

            def to_segment(self) -> str:
                return self.value
    """

    @classmethod
    def from_segment(cls, value: str) -> Self | None: ...

    def to_segment(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Converter:
    """Decode/encode pair for one placeholder type."""

    type: type
    decode: Callable[[str], Any]
    encode: Callable[[Any], str]


def _decode_str(value: str) -> str | None:
    if not value or "/" in value:
        return None
    return value


def _decode_int(value: str) -> int | None:
    if not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if number < INT_MIN or number > INT_MAX:
        return None
    return number


def _decode_bool(value: str) -> bool | None:
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _decode_float(value: str) -> float | None:
    if not _FLOAT_RE.fullmatch(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _decode_uuid(value: str) -> uuid.UUID | None:
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return None
    # Only the canonical lowercase hyphenated form round-trips
    return parsed if str(parsed) == value else None


CONVERTERS: dict[type, Converter] = {
    str: Converter(str, _decode_str, str),
    int: Converter(int, _decode_int, str),
    bool: Converter(bool, _decode_bool, _encode_bool),
    float: Converter(float, _decode_float, repr),
    uuid.UUID: Converter(uuid.UUID, _decode_uuid, str),
}


def register_converter(
    tp: type,
    decode: Callable[[str], Any],
    encode: Callable[[Any], str] = str,
) -> None:
    """Register (or replace) the converter for *tp*.

    *decode* returns the typed value, or ``None`` when the segment is not
    a valid literal of *tp*. *encode* must be its exact inverse.
    """
    CONVERTERS[tp] = Converter(tp, decode, encode)


def _enum_converter(tp: type[enum.Enum]) -> Converter:
    def decode(value: str) -> enum.Enum | None:
        for member in tp:
            if str(member.value) == value:
                return member
        return None

    return Converter(tp, decode, lambda member: str(member.value))


def _protocol_converter(tp: type) -> Converter:
    return Converter(tp, tp.from_segment, lambda value: value.to_segment())


def converter_for(tp: Any) -> Converter | None:
    """Return the converter for *tp*, or ``None`` if the type is unsupported.

    Lookup order: registered converters, ``Enum`` subclasses, then types
    implementing ``SegmentConvertible``.
    """
    conv = CONVERTERS.get(tp)
    if conv is not None:
        return conv
    if not isinstance(tp, type):
        return None
    if issubclass(tp, enum.Enum):
        return _enum_converter(tp)
    if issubclass(tp, SegmentConvertible):
        return _protocol_converter(tp)
    return None


def is_supported(tp: Any) -> bool:
    """True if *tp* can be used as a placeholder type."""
    return converter_for(tp) is not None


def decode_segment[T](value: str, tp: type[T]) -> T | None:
    """Convert a raw path segment to *tp*, or ``None`` if it is not valid.

    Raises ``UnsupportedPlaceholderType`` if *tp* has no converter.
    """
    conv = converter_for(tp)
    if conv is None:
        raise UnsupportedPlaceholderType(tp)
    try:
        return conv.decode(value)
    except ValueError:
        return None


def encode_segment(value: Any) -> str:
    """Render *value* as a path segment using its type's converter.

    Raises ``UnsupportedPlaceholderType`` if the value's type has no converter.
    """
    conv = converter_for(type(value))
    if conv is None:
        raise UnsupportedPlaceholderType(type(value))
    return conv.encode(value)
