"""Shared type aliases used across groutcho modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Anything ``normalize`` accepts: a path or name string, or a mapping
NavigationInput: TypeAlias = str | Mapping[str, Any]

# Per-route hook — receives the current match, returns the next intent or False
RedirectHook: TypeAlias = Callable[[Any], Any]

# Global redirect rule predicate — same contract as a route hook
RedirectTest: TypeAlias = Callable[[Any], Any]

# Navigation listener — receives the resolved url
Listener: TypeAlias = Callable[[str | None], Any]
