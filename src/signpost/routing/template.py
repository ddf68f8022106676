"""Compiled route templates.

A template is an ordered run of literal and placeholder segments.
Matching walks the segments pairwise against the input path; the
template string (``"items/:id"``) is for display only and is never
re-parsed for matching.
"""

from dataclasses import dataclass
from typing import Any

from signpost.routing.params import decode_segment
from signpost.routing.path import Path, split_path

# Largest number of placeholders a single template may carry
MAX_ARITY = 10


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One segment of a template.

    Literal:      ``items``  (is_param=False)
    Placeholder:  ``:id``    (is_param=True, param_name="id", param_type=int)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: type = str

    @classmethod
    def literal(cls, value: str) -> "PathSegment":
        return cls(value=value)

    @classmethod
    def placeholder(cls, name: str, tp: type) -> "PathSegment":
        return cls(value=f":{name}", is_param=True, param_name=name, param_type=tp)


@dataclass(frozen=True, slots=True)
class Template[*Ts]:
    """An immutable route pattern producing a typed tuple on match.

    Built with ``TemplateFactory``::

        template = TemplateFactory.start().path("items").placeholder("id", int).template()
        template.template_string   # "items/:id"
        template.match("items/42")  # (42,)
        template.match("items/x")   # None
    """

    segments: tuple[PathSegment, ...] = ()

    @property
    def template_string(self) -> str:
        return "/".join(seg.value for seg in self.segments)

    @property
    def arity(self) -> int:
        return sum(1 for seg in self.segments if seg.is_param)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.param_name or "" for seg in self.segments if seg.is_param)

    @property
    def param_types(self) -> tuple[type, ...]:
        return tuple(seg.param_type for seg in self.segments if seg.is_param)

    def match(self, path: "str | Path") -> tuple[*Ts] | None:
        """Match *path* and return the decoded placeholder values.

        Returns ``None`` if the segment counts differ, a literal segment
        disagrees, or a placeholder segment fails to decode. Values are
        returned in placeholder declaration order.
        """
        parts = split_path(str(path))
        if len(parts) != len(self.segments):
            return None

        values: list[Any] = []
        for seg, part in zip(self.segments, parts, strict=True):
            if not seg.is_param:
                if part != seg.value:
                    return None
                continue
            value = decode_segment(part, seg.param_type)
            if value is None:
                return None
            values.append(value)
        return tuple(values)  # type: ignore[return-value]

    def __str__(self) -> str:
        return self.template_string
