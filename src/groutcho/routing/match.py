"""MatchResult — one step of navigation resolution."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from groutcho.routing.intent import Intent
from groutcho.routing.query import QueryParams

if TYPE_CHECKING:
    from groutcho.routing.route import Route


@dataclass(slots=True)
class MatchResult:
    """Outcome of matching one intent against the route table.

    Internal matches carry the ``route`` that produced them. External
    matches (an absolute http(s) url) have ``route=None`` and
    ``redirect=True``; the router hands those off without consulting
    the route table.

    ``original`` and ``history`` are filled in by ``mark_as_redirect``
    once the router has followed a redirect chain to this result.
    """

    route: "Route | None" = None
    params: dict[str, Any] = field(default_factory=dict)
    url: str | None = None
    redirect: bool = False
    intent: Intent | None = field(default=None, compare=False)
    query: QueryParams = field(default_factory=QueryParams)
    original: "MatchResult | None" = field(default=None, repr=False, compare=False)
    history: "tuple[MatchResult, ...]" = field(default=(), repr=False, compare=False)

    @classmethod
    def external(cls, intent: Intent) -> "MatchResult":
        """Short-circuit result for an absolute url."""
        return cls(redirect=True, url=intent.url, intent=intent)

    @property
    def name(self) -> str | None:
        """Name of the matched route, ``None`` for external results."""
        return self.route.name if self.route is not None else None

    @property
    def is_redirected(self) -> bool:
        return self.original is not None

    def mark_as_redirect(
        self,
        original: "MatchResult",
        history: "tuple[MatchResult, ...]" = (),
    ) -> None:
        """Record that this result was reached by redirecting from *original*."""
        self.original = original
        self.history = history
