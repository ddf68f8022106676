"""Not-found diagnostics.

Renders what a router knows when a resolution fails: the requested path
or alias, the reason, and every registered route and alias. Uses only
the router's public ``describe_routes()`` / ``describe_aliases()`` API.

Two output modes:
- Text: for logs and terminals (``format_not_found``)
- HTML: a standalone page rendered with kida (``render_not_found``)
"""

import logging
from typing import TYPE_CHECKING

from kida import Environment

from signpost.routing.outcome import NotFound

if TYPE_CHECKING:
    from signpost.routing.router import Router

logger = logging.getLogger("signpost.debug")

_NOT_FOUND_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>404: Not Found</title>
</head>
<body>
<h1>404: Not Found</h1>
<p class="signpost-detail" data-reason="{{ reason }}">{{ detail }}</p>
<h2>Known Routes</h2>
{% if routes %}
  <ul class="signpost-routes">{% for route in routes %}<li>{{ route }}</li>{% end %}</ul>
{% else %}
  <p class="signpost-empty">No routes registered.</p>
{% end %}
<h2>Known Aliases</h2>
{% if aliases %}
  <ul class="signpost-aliases">{% for alias in aliases %}<li>{{ alias }}</li>{% end %}</ul>
{% else %}
  <p class="signpost-empty">No aliases registered.</p>
{% end %}
</body>
</html>
"""


def format_not_found(router: "Router", not_found: NotFound) -> str:
    """Plain-text report of a failed resolution and the router's contents."""
    lines = ["404: Not Found", not_found.detail, "", "Known routes:"]
    routes = router.describe_routes()
    lines.extend(f"  {line}" for line in routes)
    if not routes:
        lines.append("  (none)")
    lines.append("Known aliases:")
    aliases = router.describe_aliases()
    lines.extend(f"  {line}" for line in aliases)
    if not aliases:
        lines.append("  (none)")
    return "\n".join(lines)


def render_not_found(
    router: "Router",
    not_found: NotFound,
    env: Environment | None = None,
) -> str:
    """Render the not-found page as HTML.

    Uses *env* when given (so an application's filters and globals are
    available), otherwise a bare autoescaping environment.
    """
    env = env or Environment(autoescape=True)
    template = env.from_string(_NOT_FOUND_PAGE)
    logger.debug("Rendering not-found page for %r", not_found.path)
    return template.render({
        "detail": not_found.detail,
        "reason": str(not_found.reason),
        "routes": router.describe_routes(),
        "aliases": router.describe_aliases(),
    })
