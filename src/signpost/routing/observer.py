"""Resolution observers.

A router reports each resolution attempt to an optional observer:
a start event, then either success or failure with the elapsed time
in seconds. Observers are notified synchronously and cannot change the
outcome. Exceptions raised by an observer propagate to the caller.
"""

import logging

from signpost.routing.outcome import NotFoundReason


class RouterObserver:
    """Base observer. Every hook is a no-op; override what you need."""

    def match_started(self, path: str) -> None:
        pass

    def match_succeeded(self, path: str, duration: float) -> None:
        pass

    def match_failed(self, path: str, duration: float) -> None:
        pass

    def alias_started(self, identifier: str) -> None:
        pass

    def alias_succeeded(self, identifier: str, duration: float) -> None:
        pass

    def alias_failed(self, identifier: str, duration: float, reason: NotFoundReason) -> None:
        pass


class LoggingObserver(RouterObserver):
    """Report resolution events through the ``signpost.router`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("signpost.router")

    def match_started(self, path: str) -> None:
        self.logger.debug("Matching path %r", path)

    def match_succeeded(self, path: str, duration: float) -> None:
        self.logger.debug("Matched path %r in %.3fms", path, duration * 1000)

    def match_failed(self, path: str, duration: float) -> None:
        self.logger.info("Failed to match path %r after %.3fms", path, duration * 1000)

    def alias_started(self, identifier: str) -> None:
        self.logger.debug("Resolving alias %r", identifier)

    def alias_succeeded(self, identifier: str, duration: float) -> None:
        self.logger.debug("Resolved alias %r in %.3fms", identifier, duration * 1000)

    def alias_failed(self, identifier: str, duration: float, reason: NotFoundReason) -> None:
        self.logger.info(
            "Failed to resolve alias %r after %.3fms: %s",
            identifier,
            duration * 1000,
            reason,
        )
