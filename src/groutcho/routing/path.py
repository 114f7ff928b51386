"""Path templates for the default Route.

Segments are ``/``-separated. ``:name`` captures one segment, a final
``*name`` captures the rest of the path, anything else is static::

    "/"              -> []
    "/u/:id"         -> [PathSegment("u"), PathSegment(":id", is_param=True, ...)]
    "/files/*path"   -> [PathSegment("files"), PathSegment("*path", is_param=True, catch_all=True, ...)]
"""

from dataclasses import dataclass
from urllib.parse import quote, unquote

from groutcho.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:    ``/users``  (is_param=False)
    Param:     ``/:id``    (is_param=True, param_name="id")
    Catch-all: ``/*path``  (is_param=True, param_name="path", catch_all=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    catch_all: bool = False


def _split(path: str) -> list[str]:
    return [part for part in path.strip("/").split("/") if part]


def parse_path(template: str) -> tuple[PathSegment, ...]:
    """Parse a route path template into segments.

    Raises ``ConfigurationError`` for unnamed parameters or a catch-all
    that is not the last segment.
    """
    parts = _split(template)
    segments: list[PathSegment] = []
    for index, part in enumerate(parts):
        if part[0] in ":*":
            param_name = part[1:]
            if not param_name:
                msg = f"Unnamed parameter {part!r} in route path {template!r}"
                raise ConfigurationError(msg)
            catch_all = part[0] == "*"
            if catch_all and index != len(parts) - 1:
                msg = f"Catch-all {part!r} must be the last segment of {template!r}"
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    catch_all=catch_all,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def match_path(segments: tuple[PathSegment, ...], path: str) -> dict[str, str] | None:
    """Match a url path against parsed segments.

    Returns the extracted parameters (percent-decoded), or ``None``.
    """
    parts = _split(path)
    params: dict[str, str] = {}

    for index, seg in enumerate(segments):
        if seg.catch_all:
            remaining = parts[index:]
            if not remaining:
                return None
            params[seg.param_name or ""] = unquote("/".join(remaining))
            return params
        if index >= len(parts):
            return None
        part = parts[index]
        if seg.is_param:
            params[seg.param_name or ""] = unquote(part)
        elif part != seg.value:
            return None

    if len(parts) != len(segments):
        return None
    return params


def build_path(segments: tuple[PathSegment, ...], params: dict[str, object]) -> str:
    """Build a url path from segments, filling in *params*.

    Raises ``KeyError`` if a parameter the template needs is missing.
    """
    parts: list[str] = []
    for seg in segments:
        if not seg.is_param:
            parts.append(seg.value)
            continue
        name = seg.param_name or ""
        if name not in params:
            raise KeyError(name)
        safe = "/" if seg.catch_all else ""
        parts.append(quote(str(params[name]), safe=safe))
    return "/" + "/".join(parts)
