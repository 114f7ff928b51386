"""Route and RedirectRule frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from groutcho._internal.types import RedirectHook, RedirectTest
from groutcho.errors import ConfigurationError
from groutcho.routing.intent import Intent
from groutcho.routing.match import MatchResult
from groutcho.routing.path import PathSegment, build_path, match_path, parse_path
from groutcho.routing.query import QueryParams

_MISSING = object()


@dataclass(frozen=True, slots=True, eq=False)
class Route:
    """A registered destination.

    Created from a config mapping when routes are added to a Router.
    ``path`` is a template (``/u/:id``); ``redirect`` is an optional hook
    called with the current match that returns the next intent, or a
    falsy value for "stay here". Every other config key lands in
    ``options`` and is visible to ``Router.get_route`` queries.

    Routes compare by identity.
    """

    name: str
    path: str
    redirect: RedirectHook | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    segments: tuple[PathSegment, ...] = field(default=(), repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.segments:
            object.__setattr__(self, "segments", parse_path(self.path))

    @classmethod
    def from_config(cls, name: str, config: Mapping[str, Any]) -> "Route":
        """Build a Route from a ``{"path": ..., "redirect": ..., **options}`` mapping.

        The caller's mapping is not modified.
        """
        if not isinstance(config, Mapping):
            msg = f"Route {name!r} config must be a mapping, got {type(config).__name__}"
            raise ConfigurationError(msg)
        options = dict(config)
        options.pop("name", None)
        path = options.pop("path", None)
        if not isinstance(path, str):
            msg = f"Route {name!r} needs a 'path' string, got {path!r}"
            raise ConfigurationError(msg)
        redirect = options.pop("redirect", None)
        if redirect is not None and not callable(redirect):
            msg = f"Route {name!r} redirect hook must be callable, got {type(redirect).__name__}"
            raise ConfigurationError(msg)
        return cls(name=name, path=path, redirect=redirect, options=MappingProxyType(options))

    def get(self, key: str, default: Any = None) -> Any:
        """Read a route attribute, falling back to config ``options``."""
        if key in ("name", "path", "redirect"):
            return getattr(self, key)
        return self.options.get(key, default)

    def has(self, key: str, value: Any) -> bool:
        """True when this route's *key* attribute equals *value* exactly."""
        actual = self.get(key, _MISSING)
        return actual is not _MISSING and actual == value

    def match(self, intent: Intent) -> MatchResult | None:
        """Match a normalized intent against this route.

        Url intents match on the path (query and fragment are split off).
        Route-query intents match on ``name`` and build the url from
        ``params``. Anything else never matches.
        """
        if intent.url is not None:
            return self._match_url(intent)
        if intent.route is not None:
            return self._match_query(intent)
        return None

    def url_for(self, params: Mapping[str, Any], query: Mapping[str, Any] | None = None) -> str:
        """Build this route's url. Raises ``KeyError`` for a missing parameter."""
        url = build_path(self.segments, dict(params))
        if query:
            url = f"{url}?{QueryParams(query)}"
        return url

    def _match_url(self, intent: Intent) -> MatchResult | None:
        parts = urlsplit(intent.url or "")
        params = match_path(self.segments, parts.path)
        if params is None:
            return None
        return MatchResult(
            route=self,
            params=params,
            url=intent.url,
            intent=intent,
            query=QueryParams(parts.query),
        )

    def _match_query(self, intent: Intent) -> MatchResult | None:
        route = intent.route or {}
        if route.get("name") != self.name:
            return None
        params = dict(route.get("params") or {})
        query = route.get("query") or {}
        try:
            url = self.url_for(params, query)
        except KeyError:
            return None
        return MatchResult(
            route=self,
            params=params,
            url=url,
            intent=intent,
            query=QueryParams(query),
        )


@dataclass(frozen=True, slots=True)
class RedirectRule:
    """A named global redirect predicate.

    ``test`` receives the current match and returns the next intent,
    or a falsy value when no redirect is needed.
    """

    name: str
    test: RedirectTest
