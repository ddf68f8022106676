"""Not-found outcomes.

Resolution never raises for an unmatched path or alias. It returns a
``NotFound`` value tagged with the reason, and the caller decides how to
present it.
"""

from dataclasses import dataclass
from enum import StrEnum


class NotFoundReason(StrEnum):
    """Why a resolution produced no result."""

    NO_ROUTE_MATCHED = "no_route_matched"
    ALIAS_NOT_FOUND = "alias_not_found"
    # The alias's apply function returned None for the context
    ALIAS_CONTEXT_REJECTED = "alias_context_rejected"
    # The context was not an instance of the alias's declared type
    ALIAS_CONTEXT_MISMATCH = "alias_context_mismatch"


@dataclass(frozen=True, slots=True)
class NotFound:
    """A resolution that matched nothing.

    ``path`` is the requested path, or the path an alias redirected to.
    For failures before an alias produced a path it is the alias identifier.
    """

    path: str
    reason: NotFoundReason = NotFoundReason.NO_ROUTE_MATCHED
    alias: str | None = None

    @property
    def is_alias(self) -> bool:
        return self.alias is not None

    @property
    def detail(self) -> str:
        match self.reason:
            case NotFoundReason.NO_ROUTE_MATCHED:
                detail = f"No route matches {self.path!r}"
            case NotFoundReason.ALIAS_NOT_FOUND:
                detail = f"No alias registered for {self.alias!r}"
            case NotFoundReason.ALIAS_CONTEXT_REJECTED:
                detail = f"Alias {self.alias!r} produced no path for its context"
            case NotFoundReason.ALIAS_CONTEXT_MISMATCH:
                detail = f"Alias {self.alias!r} received a context of the wrong type"
        if self.alias is not None and self.reason is NotFoundReason.NO_ROUTE_MATCHED:
            detail = f"{detail} (via alias {self.alias!r})"
        return detail

    def __str__(self) -> str:
        return self.detail
