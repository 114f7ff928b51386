"""Router with ordered matching and redirect-chain resolution.

Routes and redirect rules are registered during setup. ``match``
normalizes the intent, takes the first route that matches, then follows
per-route hooks and global rules until the result settles, leaves for an
external url, or loops back on itself.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from groutcho._internal.types import Listener, NavigationInput, RedirectTest
from groutcho.config import DEFAULT_MAX_REDIRECTS, RouterConfig
from groutcho.errors import (
    ConfigurationError,
    MaxRedirectsExceeded,
    NoMatchForRedirect,
    NoRouteNamed,
    NotFound,
)
from groutcho.routing.intent import normalize
from groutcho.routing.match import MatchResult
from groutcho.routing.route import RedirectRule, Route

logger = logging.getLogger("groutcho.router")


def _describe(match: MatchResult) -> str:
    if match.route is None:
        return match.url or "<external>"
    return match.route.name


def _find_repeat(current: MatchResult, earlier: list[MatchResult]) -> MatchResult | None:
    """First earlier match on the same route with equal params."""
    for match in earlier:
        if match.route is current.route and match.params == current.params:
            return match
    return None


@dataclass(slots=True)
class _RedirectState:
    """Accumulator carried through one redirect resolution."""

    original: MatchResult
    previous: MatchResult | None = None
    current: MatchResult | None = None
    num_redirects: int = 0
    history: list[MatchResult] = field(default_factory=list)


class Router:
    """Ordered route table with redirect resolution.

    Usage::

        router = Router(
            routes={
                "home": {"path": "/"},
                "profile": {"path": "/u/:id"},
                "login": {"path": "/login", "redirect": lambda m: session and "/"},
            },
            redirects={"maintenance": lambda m: down and "/maintenance"},
        )
        match = router.match("/u/42")
        match.name, match.params    # ("profile", {"id": "42"})

    Route order is match priority: the first route that matches wins.
    Redirect rules run in registration order after the route's own hook.
    """

    __slots__ = ("_listeners", "_max_redirects", "_redirects", "_routes")

    def __init__(
        self,
        routes: Mapping[str, Mapping[str, Any]] | None = None,
        redirects: Mapping[str, RedirectTest] | None = None,
        *,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        config = RouterConfig(
            routes=routes if routes is not None else {},
            redirects=redirects if redirects is not None else {},
            max_redirects=max_redirects,
        )
        self._routes: list[Route] = []
        self._redirects: list[RedirectRule] = []
        self._listeners: list[Listener] = []
        self._max_redirects = config.max_redirects

        self.add_routes(config.routes)
        for name, test in config.redirects.items():
            self.add_redirect(name, test)

    @classmethod
    def from_config(cls, config: RouterConfig) -> "Router":
        return cls(config.routes, config.redirects, max_redirects=config.max_redirects)

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in match-priority order."""
        return tuple(self._routes)

    @property
    def redirects(self) -> tuple[RedirectRule, ...]:
        """Global redirect rules in evaluation order."""
        return tuple(self._redirects)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    @property
    def max_redirects(self) -> int:
        return self._max_redirects

    # -- Registration --

    def add_routes(self, routes: Mapping[str, Mapping[str, Any]]) -> None:
        """Append routes in mapping order.

        The name is stamped onto each Route; the config mappings are left
        untouched. Nothing is added if any entry is invalid.
        """
        if not isinstance(routes, Mapping):
            msg = f"routes must be a mapping of name -> config, got {type(routes).__name__}"
            raise ConfigurationError(msg)

        taken = {route.name for route in self._routes}
        new_routes: list[Route] = []
        for name, config in routes.items():
            if not isinstance(name, str) or not name:
                msg = f"Route names must be non-empty strings, got {name!r}"
                raise ConfigurationError(msg)
            if name in taken:
                msg = f"Duplicate route name {name!r}"
                raise ConfigurationError(msg)
            taken.add(name)
            new_routes.append(Route.from_config(name, config))

        self._routes.extend(new_routes)
        for route in new_routes:
            logger.debug("Registered route %s -> %s", route.name, route.path)

    def add_redirect(self, name: str, test: RedirectTest) -> None:
        """Append a global redirect rule. Later rules have lower priority."""
        if not callable(test):
            msg = f"Redirect rule {name!r} must be callable, got {type(test).__name__}"
            raise ConfigurationError(msg)
        self._redirects.append(RedirectRule(name=name, test=test))

    def on_change(self, listener: Listener) -> None:
        """Register a callback for ``go``. There is no way to unregister."""
        if not callable(listener):
            msg = f"Listener must be callable, got {type(listener).__name__}"
            raise ConfigurationError(msg)
        self._listeners.append(listener)

    # -- Lookup --

    def get_route(self, query: Mapping[str, Any]) -> Route | None:
        """Return the first route whose attributes equal every item in *query*."""
        for route in self._routes:
            if all(route.has(key, value) for key, value in query.items()):
                return route
        return None

    def get_route_by_name(self, name: str) -> Route:
        route = self.get_route({"name": name})
        if route is None:
            raise NoRouteNamed(name)
        return route

    # -- Matching --

    def match(self, value: NavigationInput) -> MatchResult | None:
        """Resolve a navigation intent to its final match.

        Returns the raw match when no redirect applies, the end of the
        redirect chain (marked with ``original``) when one does, and
        ``None`` when nothing matches.

        Raises ``InvalidInput``, ``MaxRedirectsExceeded`` or
        ``NoMatchForRedirect``.
        """
        original = self._match(value)
        if original is None:
            return None

        state = _RedirectState(original=original)
        redirect = self._check_redirects(state)
        if redirect is not None:
            redirect.mark_as_redirect(original, tuple(state.history))
            return redirect
        return original

    def _match(self, value: Any) -> MatchResult | None:
        """Normalize *value* and match it without following redirects."""
        intent = normalize(value)

        # A full url leaves the app; no route can claim it
        if intent.is_external:
            logger.debug("External url %s", intent.url)
            return MatchResult.external(intent)

        for route in self._routes:
            result = route.match(intent)
            if result is not None:
                return result
        return None

    def _check_redirects(self, state: _RedirectState) -> MatchResult | None:
        """Follow hooks and rules from ``state.original`` until settled.

        Returns the final match of the chain, or ``None`` when no redirect
        ever applied. When the chain steps back onto a match it already
        visited (same route, equal params), that earlier match is returned.
        """
        while True:
            if state.num_redirects >= self._max_redirects:
                chain = tuple(state.history) or (state.original,)
                logger.warning(
                    "Redirect limit (%d) reached: %s",
                    self._max_redirects,
                    " -> ".join(_describe(m) for m in chain),
                )
                raise MaxRedirectsExceeded(self._max_redirects, chain)

            if state.current is not None and state.previous is not None:
                earlier = _find_repeat(state.current, state.history[:-1])
                if earlier is not None:
                    logger.debug("Redirect cycle at %s, keeping earlier match", _describe(earlier))
                    return earlier

            if state.current is None:
                state.current = state.original
                state.history = [state.original]
            current = state.current

            if current.redirect:
                return current

            target = self._next_intent(current)
            if not target:
                if state.num_redirects > 0:
                    logger.debug(
                        "Settled on %s after %d redirect(s)",
                        _describe(current),
                        state.num_redirects,
                    )
                    return current
                return None

            state.previous = current
            next_match = self._match(target)
            if next_match is None:
                raise NoMatchForRedirect(target, current)
            state.current = next_match
            state.history.append(next_match)
            state.num_redirects += 1
            logger.debug(
                "redirect %d: %s -> %s",
                state.num_redirects,
                _describe(current),
                _describe(next_match),
            )

    def _next_intent(self, current: MatchResult) -> Any:
        """The route's own hook wins; otherwise the first rule that fires."""
        route = current.route
        if route is not None and route.redirect is not None:
            target = route.redirect(current)
            if target:
                return target

        for rule in self._redirects:
            target = rule.test(current)
            if target:
                logger.debug("Redirect rule %s fired on %s", rule.name, _describe(current))
                return target
        return False

    # -- Navigation --

    def go(self, value: NavigationInput) -> None:
        """Resolve *value* and notify every listener with the resolved url.

        Listeners run in registration order; an exception from one stops
        the rest. Raises ``NotFound`` when *value* matches nothing.
        """
        result = self.match(value)
        if result is None:
            raise NotFound(value)
        for listener in self._listeners:
            listener(result.url)
