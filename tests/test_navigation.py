"""Tests for groutcho.routing.router — go() and change listeners."""

import pytest

from groutcho.errors import ConfigurationError, NotFound
from groutcho.routing.router import Router


def _router() -> Router:
    return Router(
        routes={
            "home": {"path": "/"},
            "profile": {"path": "/u/:id"},
            "old": {"path": "/old", "redirect": lambda m: "/u/1"},
        }
    )


class TestOnChange:
    def test_registers_in_order(self) -> None:
        r = _router()
        first, second = (lambda url: None), (lambda url: None)
        r.on_change(first)
        r.on_change(second)
        assert r.listeners == (first, second)

    def test_non_callable(self) -> None:
        with pytest.raises(ConfigurationError):
            _router().on_change("not a function")  # type: ignore[arg-type]


class TestGo:
    def test_notifies_every_listener_in_order(self) -> None:
        r = _router()
        calls: list[tuple[str, str | None]] = []
        r.on_change(lambda url: calls.append(("a", url)))
        r.on_change(lambda url: calls.append(("b", url)))
        r.on_change(lambda url: calls.append(("c", url)))

        r.go("/u/42")

        assert calls == [("a", "/u/42"), ("b", "/u/42"), ("c", "/u/42")]

    def test_resolved_url_after_redirect(self) -> None:
        r = _router()
        urls: list[str | None] = []
        r.on_change(urls.append)

        r.go("/old")

        assert urls == ["/u/1"]

    def test_name_resolves_to_url(self) -> None:
        r = _router()
        urls: list[str | None] = []
        r.on_change(urls.append)

        r.go({"name": "profile", "params": {"id": "5"}})

        assert urls == ["/u/5"]

    def test_external_url(self) -> None:
        r = _router()
        urls: list[str | None] = []
        r.on_change(urls.append)

        r.go("https://example.com/")

        assert urls == ["https://example.com/"]

    def test_no_listeners(self) -> None:
        assert _router().go("/") is None

    def test_not_found(self) -> None:
        r = _router()
        urls: list[str | None] = []
        r.on_change(urls.append)

        with pytest.raises(NotFound):
            r.go("/missing/page")
        assert urls == []

    def test_listener_error_stops_the_rest(self) -> None:
        r = _router()
        calls: list[str] = []

        def broken(url: str | None) -> None:
            raise RuntimeError("listener failed")

        r.on_change(lambda url: calls.append("first"))
        r.on_change(broken)
        r.on_change(lambda url: calls.append("third"))

        with pytest.raises(RuntimeError, match="listener failed"):
            r.go("/")
        assert calls == ["first"]

    def test_each_call_notifies_once(self) -> None:
        r = _router()
        urls: list[str | None] = []
        r.on_change(urls.append)

        r.go("/")
        r.go("/u/2")

        assert urls == ["/", "/u/2"]
