"""String template syntax.

Parses ``"product/details/:id"`` into a ``Template``: a segment that
begins with ``:`` becomes a placeholder named by the remainder, every
other segment is literal. Placeholder types are given explicitly or
inferred from the route action's positional parameter annotations.
"""

import inspect
import typing
from collections.abc import Callable, Sequence
from types import NoneType, UnionType
from typing import Any

from signpost.errors import ConfigurationError, UnsupportedPlaceholderType
from signpost.routing.factory import TemplateFactory
from signpost.routing.params import is_supported
from signpost.routing.path import split_path
from signpost.routing.template import Template

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def placeholder_names(text: str) -> list[str]:
    """Return the placeholder names in *text*, in order."""
    return [part[1:] for part in split_path(text) if part.startswith(":")]


def parse_template(text: str, types: Sequence[type] = ()) -> Template[Any]:
    """Build a ``Template`` from a ``:name`` template string.

    *types* gives the placeholder types in order; missing entries
    default to ``str``. Raises ``ConfigurationError`` if more types than
    placeholders are given, or for an invalid placeholder name.

    Examples::

        parse_template("home")                     -> "home", arity 0
        parse_template("items/:id", [int])         -> "items/:id", (int,)
        parse_template(":a/x/:b")                  -> ":a/x/:b", (str, str)
    """
    names = placeholder_names(text)
    if len(types) > len(names):
        msg = (
            f"Template {text!r} has {len(names)} placeholder(s) "
            f"but {len(types)} type(s) were given."
        )
        raise ConfigurationError(msg)

    factory: TemplateFactory[Any] = TemplateFactory.start()
    index = 0
    for part in split_path(text):
        if part.startswith(":"):
            tp = types[index] if index < len(types) else str
            factory = factory.placeholder(part[1:], tp)
            index += 1
        else:
            factory = factory.path(part)
    return factory.template()


def _placeholder_type(hint: Any) -> type:
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        return _placeholder_type(typing.get_args(hint)[0])
    if origin is typing.Union or origin is UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not NoneType]
        if len(args) == 1:
            return _placeholder_type(args[0])
    if hint is Any:
        return str
    if not is_supported(hint):
        raise UnsupportedPlaceholderType(hint)
    return hint


def placeholder_types_for(action: Callable[..., Any], count: int) -> tuple[type, ...]:
    """Infer *count* placeholder types from *action*'s positional parameters.

    Unannotated or ``Any`` parameters are ``str``. ``Annotated[T, ...]`` and
    ``T | None`` both infer ``T``. Raises ``UnsupportedPlaceholderType`` for
    an annotation with no segment converter, and ``ConfigurationError`` if
    the action cannot accept exactly *count* positional arguments.
    """
    try:
        sig = inspect.signature(action)
    except (TypeError, ValueError):
        return (str,) * count

    params = [p for p in sig.parameters.values() if p.kind in _POSITIONAL]
    has_varargs = any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in sig.parameters.values())
    required = [p for p in params if p.default is inspect.Parameter.empty]

    if len(required) > count or (len(params) < count and not has_varargs):
        name = getattr(action, "__name__", repr(action))
        msg = (
            f"Action {name} takes {len(params)} positional parameter(s) "
            f"but the template has {count} placeholder(s)."
        )
        raise ConfigurationError(msg)

    try:
        hints = typing.get_type_hints(action, include_extras=True)
    except (NameError, TypeError):
        hints = {}

    types: list[type] = []
    for param in params[:count]:
        types.append(_placeholder_type(hints.get(param.name, str)))
    types.extend(str for _ in range(count - len(types)))
    return tuple(types)
