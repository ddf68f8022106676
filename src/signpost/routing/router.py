"""Route registry with newest-first matching and alias resolution.

Routes are tried in reverse registration order, so a later registration
shadows an earlier one for overlapping templates. Aliases are unique by
identifier: registering an identifier again replaces the previous entry.

The router does no locking. If one instance is shared between threads,
registration and resolution must be serialized by the caller.
"""

import logging
import time
from collections.abc import Callable
from typing import Any, overload

from signpost.config import RouterConfig
from signpost.errors import ConfigurationError
from signpost.routing.dsl import parse_template, placeholder_names, placeholder_types_for
from signpost.routing.observer import RouterObserver
from signpost.routing.outcome import NotFound, NotFoundReason
from signpost.routing.path import Alias, Path
from signpost.routing.route import RegisteredAlias, Route, RouteMatch
from signpost.routing.template import Template

logger = logging.getLogger("signpost.router")


class Router:
    """Ordered route and alias registry.

    Usage::

        router = Router()
        router.add_route(
            TemplateFactory.start().path("items").placeholder("id", int).template(),
            lambda item_id: f"item {item_id}",
        )
        router.add_alias(Alias[int]("item", int), lambda item_id: Path("items") / item_id)

        router.resolve("items/42")                  # "item 42"
        router.resolve(Alias[int]("item", int), 7)  # "item 7"
        router.resolve("missing")                   # NotFound("missing", ...)
    """

    __slots__ = ("_aliases", "_observer", "_routes", "config")

    def __init__(
        self,
        config: RouterConfig | None = None,
        observer: RouterObserver | None = None,
    ) -> None:
        self.config = config or RouterConfig()
        self.observer = observer
        self._routes: list[Route] = []
        self._aliases: list[RegisteredAlias] = []

    @property
    def observer(self) -> RouterObserver:
        return self._observer

    @observer.setter
    def observer(self, observer: RouterObserver | None) -> None:
        """Swap the observer. ``None`` restores the no-op default."""
        self._observer = RouterObserver() if observer is None else observer

    # -- Registration -------------------------------------------------------

    def add_route(
        self,
        template: Template[Any] | str,
        action: Callable[..., Any],
        *,
        types: tuple[type, ...] | list[type] | None = None,
        name: str | None = None,
    ) -> Route:
        """Register *action* for *template* and return the new ``Route``.

        *template* is a ``Template`` or a ``":name"`` template string. For
        strings the placeholder types come from *types*, or are inferred
        from the action's positional parameter annotations.
        """
        if isinstance(template, str):
            if types is None:
                types = placeholder_types_for(action, len(placeholder_names(template)))
            template = parse_template(template, types)
        elif types is not None:
            msg = "types= only applies to string templates."
            raise ConfigurationError(msg)

        route = Route(template=template, action=action, name=name)
        self._routes.append(route)
        logger.debug("Registered %s", route.description)
        return route

    def route[F: Callable[..., Any]](
        self,
        template: Template[Any] | str,
        *,
        types: tuple[type, ...] | list[type] | None = None,
        name: str | None = None,
    ) -> Callable[[F], F]:
        """Decorator form of ``add_route()``::

            @router.route("items/:id")
            def show_item(item_id: int) -> str: ...
        """

        def decorator(func: F) -> F:
            self.add_route(template, func, types=types, name=name)
            return func

        return decorator

    def add_alias[C](
        self,
        alias: Alias[C],
        apply: Callable[[C], Path | str | None] | Callable[[], Path | str | None],
    ) -> RegisteredAlias:
        """Register *apply* for *alias*, replacing any alias with the same identifier.

        *apply* maps the alias context to a path, or returns ``None`` when
        the context has no target. Context-free aliases take no arguments.
        """
        for index, existing in enumerate(self._aliases):
            if existing.identifier == alias.identifier:
                del self._aliases[index]
                logger.debug("Replacing %s", existing.description)
                break

        registered = RegisteredAlias(
            identifier=alias.identifier,
            context_type=alias.context_type,
            apply=apply,
        )
        self._aliases.append(registered)
        logger.debug("Registered %s", registered.description)
        return registered

    def alias[F: Callable[..., Any]](self, alias: Alias[Any]) -> Callable[[F], F]:
        """Decorator form of ``add_alias()``."""

        def decorator(func: F) -> F:
            self.add_alias(alias, func)
            return func

        return decorator

    # -- Introspection ------------------------------------------------------

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in registration order."""
        return tuple(self._routes)

    @property
    def aliases(self) -> tuple[RegisteredAlias, ...]:
        """Registered aliases in registration order."""
        return tuple(self._aliases)

    def describe_routes(self) -> list[str]:
        return [route.description for route in self._routes]

    def describe_aliases(self) -> list[str]:
        return [registered.description for registered in self._aliases]

    # -- Resolution ---------------------------------------------------------

    def match(self, path: Path | str) -> RouteMatch | None:
        """Find the newest route whose template matches *path*.

        Decodes the placeholders but does not invoke the action.
        """
        target = path if isinstance(path, Path) else Path(path)
        for route in reversed(self._routes):
            found = route.match(target.value)
            if found is not None:
                return found
        return None

    @overload
    def resolve(self, target: Path | str) -> Any: ...

    @overload
    def resolve[C](self, target: Alias[C], context: C) -> Any: ...

    @overload
    def resolve(self, target: Alias[None]) -> Any: ...

    def resolve(self, target: Path | str | Alias[Any], context: Any = None) -> Any:
        """Resolve a path or an alias to its action's result.

        Returns a ``NotFound`` value when nothing matches.
        """
        if isinstance(target, Alias):
            return self.resolve_alias(target, context)
        if context is not None:
            msg = "A context can only be supplied when resolving an Alias."
            raise TypeError(msg)
        return self.resolve_path(target)

    def resolve_path(self, path: Path | str) -> Any:
        """Invoke the newest route matching *path*, or return ``NotFound``."""
        target = path if isinstance(path, Path) else Path(path)
        return self._resolve_path(target, alias=None)

    def resolve_alias[C](self, alias: Alias[C], context: C | None = None) -> Any:
        """Apply *context* to the alias registered as *alias* and resolve the path.

        Failures are returned as ``NotFound`` tagged ``ALIAS_NOT_FOUND``,
        ``ALIAS_CONTEXT_MISMATCH``, ``ALIAS_CONTEXT_REJECTED``, or, when the
        alias produced a path that no route matches, ``NO_ROUTE_MATCHED``.
        """
        identifier = alias.identifier
        self.observer.alias_started(identifier)
        start = time.perf_counter()

        registered = self._find_alias(identifier)
        if registered is None:
            return self._alias_failed(identifier, start, NotFoundReason.ALIAS_NOT_FOUND)

        if self.config.check_alias_context and not registered.accepts(context):
            return self._alias_failed(identifier, start, NotFoundReason.ALIAS_CONTEXT_MISMATCH)

        target = registered.apply_context(context)
        if target is None:
            return self._alias_failed(identifier, start, NotFoundReason.ALIAS_CONTEXT_REJECTED)

        result = self._resolve_path(target, alias=identifier)
        elapsed = time.perf_counter() - start
        if isinstance(result, NotFound):
            self.observer.alias_failed(identifier, elapsed, result.reason)
        else:
            self.observer.alias_succeeded(identifier, elapsed)
        return result

    def _find_alias(self, identifier: str) -> RegisteredAlias | None:
        for registered in self._aliases:
            if registered.identifier == identifier:
                return registered
        return None

    def _resolve_path(self, path: Path, alias: str | None) -> Any:
        self.observer.match_started(path.value)
        start = time.perf_counter()

        found = self.match(path)
        if found is None:
            self.observer.match_failed(path.value, time.perf_counter() - start)
            not_found = NotFound(path.value, NotFoundReason.NO_ROUTE_MATCHED, alias)
            self._log_not_found(not_found)
            return not_found

        result = found.route.invoke(found)
        self.observer.match_succeeded(path.value, time.perf_counter() - start)
        return result

    def _alias_failed(self, identifier: str, start: float, reason: NotFoundReason) -> NotFound:
        self.observer.alias_failed(identifier, time.perf_counter() - start, reason)
        not_found = NotFound(identifier, reason, identifier)
        self._log_not_found(not_found)
        return not_found

    def _log_not_found(self, not_found: NotFound) -> None:
        if not self.config.log_unmatched:
            return
        if self.config.debug:
            from signpost.debug import format_not_found

            logger.info("%s", format_not_found(self, not_found))
        else:
            logger.info("%s", not_found.detail)
