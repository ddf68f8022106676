"""Fluent template builder.

Each chaining call returns a new factory, so a partially built factory
can be shared as the starting point for several templates::

    base = TemplateFactory.start().path("product")
    details = base.path("details").placeholder("id", int).template()
    reviews = base.placeholder("id", int).path("reviews").template()
"""

from __future__ import annotations

from dataclasses import dataclass

from signpost.errors import (
    ConfigurationError,
    InvalidSegment,
    TemplateArityError,
    UnsupportedPlaceholderType,
)
from signpost.routing.params import is_supported
from signpost.routing.template import MAX_ARITY, PathSegment, Template


@dataclass(frozen=True, slots=True)
class TemplateFactory[*Ts]:
    """Accumulates literal segments and typed placeholders into a ``Template``.

    The placeholder types are tracked statically: after
    ``.placeholder("a", str).placeholder("b", int)`` the factory is a
    ``TemplateFactory[str, int]`` and ``template()`` returns
    ``Template[str, int]``.
    """

    segments: tuple[PathSegment, ...] = ()

    @classmethod
    def start(cls) -> TemplateFactory[()]:
        """Return a fresh, empty factory."""
        return TemplateFactory()

    def path(self, *segments: str) -> TemplateFactory[*Ts]:
        """Append one or more literal segments, in order.

        Raises ``InvalidSegment`` if a segment is empty, contains ``/``, or
        starts with ``:`` (which would render as a placeholder).
        """
        for segment in segments:
            if not segment or "/" in segment or segment.startswith(":"):
                raise InvalidSegment(segment)
        added = tuple(PathSegment.literal(s) for s in segments)
        return TemplateFactory(self.segments + added)

    def placeholder[T](self, name: str, tp: type[T]) -> TemplateFactory[*Ts, T]:
        """Append a placeholder that captures one segment decoded as *tp*.

        Raises ``ConfigurationError`` for an empty, slash-containing, or
        duplicate name, ``UnsupportedPlaceholderType`` if *tp* has no
        converter, and ``TemplateArityError`` past ``MAX_ARITY``.
        """
        if not name or "/" in name:
            msg = f"Placeholder name {name!r} must be non-empty and contain no '/'."
            raise ConfigurationError(msg)
        if name in self.param_names:
            msg = f"Duplicate placeholder name {name!r}."
            raise ConfigurationError(msg)
        if len(self.param_names) >= MAX_ARITY:
            raise TemplateArityError(MAX_ARITY)
        if not is_supported(tp):
            raise UnsupportedPlaceholderType(tp)
        return TemplateFactory((*self.segments, PathSegment.placeholder(name, tp)))

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.param_name or "" for seg in self.segments if seg.is_param)

    def template(self) -> Template[*Ts]:
        """Freeze the accumulated segments into an immutable ``Template``."""
        return Template(self.segments)

    build = template
