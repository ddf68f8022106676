"""Route, RouteMatch, and RegisteredAlias frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import typing
from types import NoneType, UnionType
from typing import Any

from signpost.routing.path import Path
from signpost.routing.template import Template


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", repr(tp))


def _matches_type(value: Any, tp: Any) -> bool:
    """isinstance() that also understands unions, Annotated, and generics.

    Parameterized generics are checked against their origin class only
    (``list[int]`` accepts any ``list``). ``bool`` is not accepted for ``int``.
    Forms that cannot be checked reject every value.
    """
    if tp is Any:
        return True
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return _matches_type(value, typing.get_args(tp)[0])
    if origin is typing.Union or origin is UnionType:
        return any(_matches_type(value, arg) for arg in typing.get_args(tp))
    if origin is typing.Literal:
        return value in typing.get_args(tp)
    cls = origin or tp
    if not isinstance(cls, type):
        return False
    if cls is int and isinstance(value, bool):
        return False
    return isinstance(value, cls)


def _action_name(action: Callable[..., Any]) -> str:
    return getattr(action, "__name__", repr(action))


@dataclass(frozen=True, slots=True)
class Route:
    """A template bound to the action invoked with its decoded values.

    Created by ``Router.add_route()``; never mutated afterwards.
    """

    template: Template[Any]
    action: Callable[..., Any]
    name: str | None = None

    @property
    def description(self) -> str:
        """Human-readable form, e.g. ``Route('items/:id' (int) -> show_item)``."""
        args = ", ".join(_type_name(tp) for tp in self.template.param_types)
        handler = _action_name(self.action)
        if self.name:
            handler = f"{handler} ({self.name})"
        return f"Route({self.template.template_string!r} ({args}) -> {handler})"

    def match(self, path: str | Path) -> "RouteMatch | None":
        """Decode *path* against the template without invoking the action."""
        args = self.template.match(path)
        if args is None:
            return None
        return RouteMatch(route=self, args=args, path=Path(str(path)))

    def invoke(self, match: "RouteMatch") -> Any:
        """Call the action with the values captured by *match*."""
        return self.action(*match.args)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful template match."""

    route: Route
    args: tuple[Any, ...]
    path: Path

    @property
    def params(self) -> Mapping[str, Any]:
        """Decoded values keyed by placeholder name."""
        return dict(zip(self.route.template.param_names, self.args, strict=True))


@dataclass(frozen=True, slots=True)
class RegisteredAlias:
    """An alias identifier bound to its context-to-path function.

    The apply function is stored with its context erased; ``apply_context``
    performs the checked downcast against ``context_type``.
    """

    identifier: str
    context_type: Any
    apply: Callable[..., Path | str | None]

    @property
    def description(self) -> str:
        if self.context_type is NoneType:
            return f"Alias({self.identifier!r})"
        return f"Alias[{_type_name(self.context_type)}]({self.identifier!r})"

    def accepts(self, context: Any) -> bool:
        """True if *context* is an instance of the declared context type."""
        return _matches_type(context, self.context_type)

    def apply_context(self, context: Any) -> Path | None:
        """Run the apply function and normalize its result to a ``Path``.

        Context-free aliases call the function with no arguments.
        """
        if self.context_type is NoneType:
            target = self.apply()
        else:
            target = self.apply(context)
        if target is None:
            return None
        return target if isinstance(target, Path) else Path(target)

    def __str__(self) -> str:
        return self.description
