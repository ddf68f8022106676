"""Path and Alias value types."""

from dataclasses import dataclass, field
from types import NoneType
from typing import Any

from signpost.routing.params import encode_segment


def split_path(path: str) -> list[str]:
    """Split *path* on ``/``, dropping empty segments.

    Leading, trailing, and doubled slashes are ignored::

        "/users//42/" -> ["users", "42"]
        ""            -> []
    """
    return [part for part in path.split("/") if part]


@dataclass(frozen=True, slots=True)
class Path:
    """A normalized path string.

    Equality and hashing use the normalized form, so ``Path("/a//b/")``
    equals ``Path("a/b")``. Build paths from literals or by appending::

        Path("product/details") / 42   # Path("product/details/42")
        Path("product") + "/details"   # Path("product/details")
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value.value if isinstance(self.value, Path) else self.value
        object.__setattr__(self, "value", "/".join(split_path(raw)))

    @property
    def segments(self) -> tuple[str, ...]:
        if not self.value:
            return ()
        return tuple(self.value.split("/"))

    def __str__(self) -> str:
        return self.value

    def __truediv__(self, other: Any) -> "Path":
        segment = other if isinstance(other, str) else encode_segment(other)
        return Path(f"{self.value}/{segment}")

    def __add__(self, other: "str | Path") -> "Path":
        return Path(self.value + str(other))


@dataclass(frozen=True, slots=True)
class Alias[C]:
    """A named indirection from a typed context value to a ``Path``.

    ``context_type`` is checked at resolution time before the registered
    apply function runs. Aliases without a context use ``NoneType``::

        PRODUCT = Alias[int]("product", int)
        HOME = Alias("home")
    """

    identifier: str
    context_type: type[C] = field(default=NoneType)  # type: ignore[assignment]

    @property
    def takes_context(self) -> bool:
        return self.context_type is not NoneType

    def __str__(self) -> str:
        if not self.takes_context:
            return f"Alias({self.identifier!r})"
        name = getattr(self.context_type, "__qualname__", repr(self.context_type))
        return f"Alias[{name}]({self.identifier!r})"
