"""Navigation intent classification.

Every input to ``Router.match`` is turned into an ``Intent`` before it
reaches the route table. Precedence:

1. an ``Intent``                      -> unchanged
2. ``str`` containing ``/``           -> PATH  (``url=value``)
3. ``str`` without ``/``              -> NAME  (``route={"name": value}``)
4. mapping with a ``name``            -> QUERY (``route=value``)
5. any other mapping                  -> PASSTHROUGH (its ``url``/``route`` fields)
6. anything else                      -> ``InvalidInput``
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from groutcho.errors import InvalidInput

EXTERNAL_URL = re.compile(r"^https?://")


class IntentKind(Enum):
    PATH = "path"
    NAME = "name"
    QUERY = "query"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True, slots=True)
class Intent:
    """A classified navigation intent.

    ``url`` is set for path intents, ``route`` (a mapping carrying at
    least ``name``, optionally ``params`` and ``query``) for name and
    query intents. Passthrough intents keep the caller's mapping in
    ``fields`` and lift its ``url``/``route`` entries.
    """

    kind: IntentKind
    url: str | None = None
    route: Mapping[str, Any] | None = None
    fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_external(self) -> bool:
        """True when ``url`` is an absolute http(s) URL."""
        return isinstance(self.url, str) and EXTERNAL_URL.match(self.url) is not None


def _route_fields_ok(route: Mapping[str, Any]) -> bool:
    """``params`` and ``query`` of a route query must be mappings when present."""
    return all(
        route.get(key) is None or isinstance(route.get(key), Mapping)
        for key in ("params", "query")
    )


def normalize(value: Any) -> Intent:
    """Classify a navigation input. Raises ``InvalidInput`` for unknown shapes."""
    if isinstance(value, Intent):
        return value

    if isinstance(value, str):
        if "/" in value:
            return Intent(IntentKind.PATH, url=value)
        return Intent(IntentKind.NAME, route={"name": value})

    if isinstance(value, Mapping):
        if value.get("name"):
            if not _route_fields_ok(value):
                raise InvalidInput(value)
            return Intent(IntentKind.QUERY, route=value, fields=value)
        url = value.get("url")
        route = value.get("route")
        if url is not None and not isinstance(url, str):
            raise InvalidInput(value)
        if route is not None and not (isinstance(route, Mapping) and _route_fields_ok(route)):
            raise InvalidInput(value)
        return Intent(
            IntentKind.PASSTHROUGH,
            url=url,
            route=route,
            fields=value,
        )

    raise InvalidInput(value)
