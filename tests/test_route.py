"""Tests for signpost.routing.route: Route, RouteMatch, RegisteredAlias."""

from typing import Any

import pytest

from signpost.routing.factory import TemplateFactory
from signpost.routing.path import Path
from signpost.routing.route import RegisteredAlias, Route, RouteMatch


def show_item(item_id: int) -> str:
    return f"item {item_id}"


def _route(name: str | None = None) -> Route:
    template = TemplateFactory.start().path("items").placeholder("id", int).template()
    return Route(template=template, action=show_item, name=name)


class TestRoute:
    def test_creation(self) -> None:
        route = _route()
        assert route.template.template_string == "items/:id"
        assert route.action is show_item
        assert route.name is None

    def test_description(self) -> None:
        assert _route().description == "Route('items/:id' (int) -> show_item)"

    def test_description_named(self) -> None:
        assert _route("item").description == "Route('items/:id' (int) -> show_item (item))"

    def test_description_no_args(self) -> None:
        def home() -> str:
            return "home"

        route = Route(template=TemplateFactory.start().path("home").template(), action=home)
        assert str(route) == "Route('home' () -> home)"

    def test_match_does_not_invoke(self) -> None:
        calls: list[int] = []
        template = TemplateFactory.start().path("items").placeholder("id", int).template()
        route = Route(template=template, action=calls.append)

        match = route.match("items/42")
        assert match is not None
        assert calls == []
        assert route.invoke(match) is None
        assert calls == [42]

    def test_match_failure(self) -> None:
        assert _route().match("items/abc") is None

    def test_frozen(self) -> None:
        route = _route()
        with pytest.raises(AttributeError):
            route.name = "other"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        match = _route().match("/items/7/")
        assert isinstance(match, RouteMatch)
        assert match.args == (7,)
        assert match.path == Path("items/7")

    def test_params(self) -> None:
        template = (
            TemplateFactory.start().placeholder("user", str).path("posts").placeholder("post", int)
            .template()
        )
        match = Route(template=template, action=lambda u, p: None).match("ada/posts/3")
        assert match is not None
        assert match.params == {"user": "ada", "post": 3}

    def test_invoke(self) -> None:
        route = _route()
        match = route.match("items/5")
        assert match is not None
        assert route.invoke(match) == "item 5"


class TestRegisteredAlias:
    def test_description(self) -> None:
        typed = RegisteredAlias("item", int, lambda item_id: None)
        void = RegisteredAlias("home", type(None), lambda: None)
        assert typed.description == "Alias[int]('item')"
        assert void.description == "Alias('home')"

    def test_accepts(self) -> None:
        alias = RegisteredAlias("item", int, lambda item_id: None)
        assert alias.accepts(3)
        assert not alias.accepts("3")

    def test_apply_context_wraps_strings(self) -> None:
        alias = RegisteredAlias("item", int, lambda item_id: f"items/{item_id}")
        assert alias.apply_context(4) == Path("items/4")

    def test_apply_context_none(self) -> None:
        alias = RegisteredAlias("item", int, lambda item_id: None)
        assert alias.apply_context(4) is None

    def test_context_free_alias_takes_no_arguments(self) -> None:
        alias = RegisteredAlias("home", type(None), lambda: Path("home"))
        assert alias.apply_context(None) == Path("home")

    def test_accepts_generic_and_union_types(self) -> None:
        ids = RegisteredAlias("ids", list[int], lambda ids: None)
        maybe = RegisteredAlias("maybe", int | None, lambda value: None)
        assert ids.accepts([1, 2])
        assert not ids.accepts("12")
        assert maybe.accepts(None)
        assert maybe.accepts(3)
        assert not maybe.accepts(3.0)

    def test_accepts_any(self) -> None:
        alias = RegisteredAlias("anything", Any, lambda value: None)
        assert alias.accepts(object())
        assert alias.accepts(None)

    def test_bool_is_not_accepted_as_int(self) -> None:
        alias = RegisteredAlias("item", int, lambda item_id: None)
        assert not alias.accepts(True)
        assert RegisteredAlias("flag", bool, lambda flag: None).accepts(True)
