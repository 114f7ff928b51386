"""Tests for groutcho.routing.path — template parsing, matching, building."""

import pytest

from groutcho.errors import ConfigurationError
from groutcho.routing.path import PathSegment, build_path, match_path, parse_path


class TestParsePath:
    def test_root(self) -> None:
        assert parse_path("/") == ()

    def test_static(self) -> None:
        segments = parse_path("/users")
        assert segments == (PathSegment("users"),)

    def test_multi_static(self) -> None:
        segments = parse_path("/api/v2/users")
        assert [s.value for s in segments] == ["api", "v2", "users"]

    def test_param(self) -> None:
        segments = parse_path("/u/:id")
        assert len(segments) == 2
        assert segments[1].is_param is True
        assert segments[1].param_name == "id"
        assert segments[1].catch_all is False

    def test_catch_all(self) -> None:
        segments = parse_path("/files/*path")
        assert segments[1].catch_all is True
        assert segments[1].param_name == "path"

    def test_trailing_slash_ignored(self) -> None:
        assert parse_path("/users/") == parse_path("/users")

    def test_unnamed_param_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unnamed parameter"):
            parse_path("/u/:")

    def test_catch_all_must_be_last(self) -> None:
        with pytest.raises(ConfigurationError, match="last segment"):
            parse_path("/files/*path/edit")

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestMatchPath:
    def test_root(self) -> None:
        assert match_path(parse_path("/"), "/") == {}

    def test_root_rejects_deeper_path(self) -> None:
        assert match_path(parse_path("/"), "/users") is None

    def test_static(self) -> None:
        assert match_path(parse_path("/users"), "/users") == {}
        assert match_path(parse_path("/users"), "/posts") is None

    def test_param(self) -> None:
        assert match_path(parse_path("/u/:id"), "/u/42") == {"id": "42"}

    def test_multiple_params(self) -> None:
        segments = parse_path("/u/:user/posts/:post")
        assert match_path(segments, "/u/1/posts/9") == {"user": "1", "post": "9"}

    def test_too_short(self) -> None:
        assert match_path(parse_path("/u/:id"), "/u") is None

    def test_too_long(self) -> None:
        assert match_path(parse_path("/u/:id"), "/u/42/edit") is None

    def test_trailing_slash_ignored(self) -> None:
        assert match_path(parse_path("/u/:id"), "/u/42/") == {"id": "42"}

    def test_percent_decoded(self) -> None:
        assert match_path(parse_path("/tag/:name"), "/tag/c%2B%2B") == {"name": "c++"}

    def test_catch_all(self) -> None:
        segments = parse_path("/files/*path")
        assert match_path(segments, "/files/docs/api/index.html") == {
            "path": "docs/api/index.html"
        }

    def test_catch_all_needs_one_segment(self) -> None:
        assert match_path(parse_path("/files/*path"), "/files") is None


class TestBuildPath:
    def test_root(self) -> None:
        assert build_path(parse_path("/"), {}) == "/"

    def test_params(self) -> None:
        assert build_path(parse_path("/u/:id"), {"id": 42}) == "/u/42"

    def test_quotes_params(self) -> None:
        assert build_path(parse_path("/tag/:name"), {"name": "a b/c"}) == "/tag/a%20b%2Fc"

    def test_catch_all_keeps_slashes(self) -> None:
        assert build_path(parse_path("/files/*path"), {"path": "a/b"}) == "/files/a/b"

    def test_missing_param(self) -> None:
        with pytest.raises(KeyError, match="id"):
            build_path(parse_path("/u/:id"), {})
