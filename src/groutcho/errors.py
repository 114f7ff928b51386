"""Groutcho exception hierarchy.

Shared across Router, Route, and intent normalization so every module
raises and catches the same types. None of these are recovered
internally: each one points at a routing-table defect to fix.
"""

from typing import Any


class GroutchoError(Exception):
    """Base for all groutcho-specific errors."""


class ConfigurationError(GroutchoError):
    """Raised when router or route configuration is invalid.

    Typically raised while the route table is being built, before any
    navigation intent is resolved.
    """


class InvalidInput(GroutchoError):  # noqa: N818 — mirrors the other routing errors
    """A navigation intent had a shape that cannot be classified."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid input passed to match: {value!r} "
            f"(expected a str or a mapping, got {type(value).__name__})"
        )


class NoRouteNamed(GroutchoError):  # noqa: N818
    """``get_route_by_name`` was asked for an unregistered name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No route named {name!r}")


class MaxRedirectsExceeded(GroutchoError):  # noqa: N818
    """A redirect chain reached ``max_redirects`` without settling.

    ``history`` holds every match visited before the bound was hit,
    starting with the original match.
    """

    def __init__(self, max_redirects: int, history: tuple[Any, ...] = ()) -> None:
        self.max_redirects = max_redirects
        self.history = history
        super().__init__(f"Number of redirects exceeded max_redirects ({max_redirects})")


class NoMatchForRedirect(GroutchoError):  # noqa: N818
    """A redirect hook or rule produced a target no route matches."""

    def __init__(self, target: Any, source: Any = None) -> None:
        self.target = target
        self.source = source
        super().__init__(f"No match for redirect result {target!r}")


class NotFound(GroutchoError):  # noqa: N818 — conventional name in routers
    """``go`` was called with an intent that matches no route."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"No route matches {value!r}")
