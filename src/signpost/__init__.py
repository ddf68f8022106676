"""Signpost: typed path routing.

Maps string paths like ``"product/details/42"`` to typed handler calls,
decoding placeholder segments to their declared types, and resolves
named aliases to paths through a context value.

Basic usage::

    from signpost import Alias, Path, Router, TemplateFactory

    router = Router()

    @router.route(TemplateFactory.start().path("product", "details").placeholder("id", int).template())
    def product_details(product_id: int) -> str:
        return f"product {product_id}"

    router.resolve("product/details/42")       # "product 42"

    PRODUCT = Alias[int]("product", int)
    router.add_alias(PRODUCT, lambda pid: Path("product/details") / pid)
    router.resolve(PRODUCT, 42)                  # "product 42"

Failures are returned, not raised::

    result = router.resolve("nowhere")
    if isinstance(result, NotFound):
        print(result.reason)
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "Alias",
    "ConfigurationError",
    "InvalidSegment",
    "LoggingObserver",
    "MAX_ARITY",
    "NotFound",
    "NotFoundReason",
    "Path",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "RouterObserver",
    "SegmentConvertible",
    "SignpostError",
    "Template",
    "TemplateArityError",
    "TemplateFactory",
    "UnsupportedPlaceholderType",
    "format_not_found",
    "parse_template",
    "register_converter",
    "render_not_found",
]

# Public name -> defining module. Keeps ``import signpost`` fast and
# defers the kida import until the debug helpers are used.
_LAZY_IMPORTS: dict[str, str] = {
    "Alias": "signpost.routing.path",
    "ConfigurationError": "signpost.errors",
    "InvalidSegment": "signpost.errors",
    "LoggingObserver": "signpost.routing.observer",
    "MAX_ARITY": "signpost.routing.template",
    "NotFound": "signpost.routing.outcome",
    "NotFoundReason": "signpost.routing.outcome",
    "Path": "signpost.routing.path",
    "Route": "signpost.routing.route",
    "RouteMatch": "signpost.routing.route",
    "Router": "signpost.routing.router",
    "RouterConfig": "signpost.config",
    "RouterObserver": "signpost.routing.observer",
    "SegmentConvertible": "signpost.routing.params",
    "SignpostError": "signpost.errors",
    "Template": "signpost.routing.template",
    "TemplateArityError": "signpost.errors",
    "TemplateFactory": "signpost.routing.factory",
    "UnsupportedPlaceholderType": "signpost.errors",
    "format_not_found": "signpost.debug",
    "parse_template": "signpost.routing.dsl",
    "register_converter": "signpost.routing.params",
    "render_not_found": "signpost.debug",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
