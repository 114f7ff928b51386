"""Groutcho — navigation intent resolution for client-side routers.

Turns a route name, a path, a full url, or a route query into a settled
match, following per-route redirect hooks and global redirect rules.

Basic usage::

    from groutcho import Router

    router = Router(
        routes={"home": {"path": "/"}, "profile": {"path": "/u/:id"}},
        redirects={},
    )
    router.on_change(print)
    router.go("/u/42")        # prints "/u/42"
"""

from importlib import import_module

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "GroutchoError",
    "Intent",
    "IntentKind",
    "InvalidInput",
    "MatchResult",
    "MaxRedirectsExceeded",
    "NoMatchForRedirect",
    "NoRouteNamed",
    "NotFound",
    "QueryParams",
    "RedirectRule",
    "Route",
    "Router",
    "RouterConfig",
    "normalize",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "groutcho.errors",
    "GroutchoError": "groutcho.errors",
    "InvalidInput": "groutcho.errors",
    "MaxRedirectsExceeded": "groutcho.errors",
    "NoMatchForRedirect": "groutcho.errors",
    "NoRouteNamed": "groutcho.errors",
    "NotFound": "groutcho.errors",
    "Intent": "groutcho.routing.intent",
    "IntentKind": "groutcho.routing.intent",
    "normalize": "groutcho.routing.intent",
    "MatchResult": "groutcho.routing.match",
    "QueryParams": "groutcho.routing.query",
    "RedirectRule": "groutcho.routing.route",
    "Route": "groutcho.routing.route",
    "Router": "groutcho.routing.router",
    "RouterConfig": "groutcho.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import groutcho`` fast while providing a clean top-level API.
    """
    module = _LAZY_IMPORTS.get(name)
    if module is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module), name)
