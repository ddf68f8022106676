"""Signpost exception hierarchy.

Only construction-time misuse raises. Resolution failures are returned
as ``NotFound`` values (see ``signpost.routing.outcome``), never raised.
"""


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when a template or route is built incorrectly.

    Typically surfaces while routes are being registered at startup.
    """


class InvalidSegment(ConfigurationError):  # noqa: N818
    """A literal path segment is empty, contains a ``/``, or starts with ``:``."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        if not segment:
            detail = "Path segments must not be empty."
        elif segment.startswith(":"):
            detail = f"Path segment {segment!r} must not start with ':'; use placeholder()."
        else:
            detail = f"Path segment {segment!r} must not contain '/'."
        super().__init__(detail)


class TemplateArityError(ConfigurationError):
    """A template would exceed the maximum number of placeholders."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Templates support at most {limit} placeholders.")


class UnsupportedPlaceholderType(ConfigurationError):  # noqa: N818
    """No segment converter is registered for a placeholder type."""

    def __init__(self, tp: object) -> None:
        self.type = tp
        name = getattr(tp, "__qualname__", repr(tp))
        super().__init__(
            f"No segment converter for {name}. "
            "Use register_converter() or implement from_segment()/to_segment()."
        )
