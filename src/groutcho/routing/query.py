"""Query strings carried by navigation intents.

Path intents bring their query as text (``/search?q=x``); route queries
bring it as a mapping (``{"name": "search", "query": {"q": "x"}}``).
``QueryParams`` reads either form and renders back to text when a url
is built from a route query.
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode


def _pairs(values: Mapping[str, Any]) -> list[tuple[str, str]]:
    # list/tuple values become repeated keys
    pairs: list[tuple[str, str]] = []
    for key, value in values.items():
        items = value if isinstance(value, (list, tuple)) else (value,)
        pairs.extend((str(key), str(item)) for item in items)
    return pairs


class QueryParams(Mapping[str, str]):
    """Read-only query parameters in their original order.

    ``params["tag"]`` is the first value for a key, ``get_list("tag")``
    every value. ``str(params)`` is the encoded query string.
    """

    __slots__ = ("_pairs",)

    def __init__(self, source: str | Mapping[str, Any] = "") -> None:
        if isinstance(source, str):
            self._pairs = tuple(parse_qsl(source.lstrip("?"), keep_blank_values=True))
        else:
            self._pairs = tuple(_pairs(source))

    def __getitem__(self, key: str) -> str:
        for name, value in self._pairs:
            if name == key:
                return value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._pairs))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._pairs))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._grouped() == other._grouped()
        return super().__eq__(other)

    def __repr__(self) -> str:
        return f"QueryParams({str(self)!r})"

    def __str__(self) -> str:
        return urlencode(self._pairs)

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return [value for name, value in self._pairs if name == key]

    def _grouped(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for name, value in self._pairs:
            grouped.setdefault(name, []).append(value)
        return grouped
