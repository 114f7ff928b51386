"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, validated
once, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from groutcho._internal.types import RedirectTest
from groutcho.errors import ConfigurationError

DEFAULT_MAX_REDIRECTS = 10


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    ``routes`` maps each route name to its config mapping; ``redirects``
    maps each global rule name to its test. Both keep insertion order,
    which is their priority::

        config = RouterConfig(
            routes={"home": {"path": "/"}, "profile": {"path": "/u/:id"}},
            redirects={"auth": require_login},
            max_redirects=5,
        )
    """

    routes: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    redirects: Mapping[str, RedirectTest] = field(default_factory=dict)
    max_redirects: int = DEFAULT_MAX_REDIRECTS

    def __post_init__(self) -> None:
        if not isinstance(self.routes, Mapping):
            msg = f"routes must be a mapping of name -> config, got {type(self.routes).__name__}"
            raise ConfigurationError(msg)
        if not isinstance(self.redirects, Mapping):
            msg = f"redirects must be a mapping of name -> test, got {type(self.redirects).__name__}"
            raise ConfigurationError(msg)
        # bool is an int subclass; max_redirects=True is always a mistake
        if isinstance(self.max_redirects, bool) or not isinstance(self.max_redirects, int):
            msg = f"max_redirects must be an int, got {self.max_redirects!r}"
            raise ConfigurationError(msg)
        if self.max_redirects < 0:
            msg = f"max_redirects must be >= 0, got {self.max_redirects}"
            raise ConfigurationError(msg)
        for name, test in self.redirects.items():
            if not callable(test):
                msg = f"Redirect rule {name!r} must be callable, got {type(test).__name__}"
                raise ConfigurationError(msg)
        # Snapshot so later mutation of the caller's dicts can't leak in
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))
        object.__setattr__(self, "redirects", MappingProxyType(dict(self.redirects)))
