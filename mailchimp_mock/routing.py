"""Ordered route table with path-segment matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple


class RoutePatternError(ValueError):
    """Raised when a route pattern string cannot be compiled."""


@dataclass(frozen=True, slots=True)
class Segment:
    """One path segment of a pattern: a literal or a named wildcard."""

    value: str
    wildcard: bool = False

    def matches(self, part: str) -> bool:
        if self.wildcard:
            return part != ""
        return part == self.value


@dataclass(frozen=True, slots=True)
class Route:
    """A ``(method, pattern, handler)`` entry of the route table."""

    method: str
    pattern: str
    handler: Callable[..., Any]
    segments: Tuple[Segment, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", compile_pattern(self.pattern))

    def match(self, method: str, path: str) -> Optional[Dict[str, str]]:
        """Return captured wildcards if the request matches this route."""

        if method.upper() != self.method:
            return None

        parts = split_path(path)
        if len(parts) != len(self.segments):
            return None

        params: Dict[str, str] = {}
        for segment, part in zip(self.segments, parts):
            if not segment.matches(part):
                return None
            if segment.wildcard:
                params[segment.value] = part
        return params


def compile_pattern(pattern: str) -> Tuple[Segment, ...]:
    """Turn ``/3.0/lists/{list_id}/members`` into a tuple of segments."""

    segments = []
    for part in split_path(pattern):
        if part.startswith("{") and part.endswith("}"):
            name = part[1:-1]
            if not name.isidentifier():
                raise RoutePatternError(f"Invalid wildcard name in pattern {pattern!r}")
            segments.append(Segment(name, wildcard=True))
        elif "{" in part or "}" in part:
            raise RoutePatternError(f"Unbalanced wildcard in pattern {pattern!r}")
        else:
            segments.append(Segment(part))
    return tuple(segments)


def split_path(path: str) -> list[str]:
    """Split a URL path into segments, tolerating a single trailing slash."""

    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path.split("/")


def resolve(
    routes: Iterable[Route], method: str, path: str
) -> Optional[Tuple[Route, Dict[str, str]]]:
    """Find the first route matching the request, in table order."""

    for route in routes:
        params = route.match(method, path)
        if params is not None:
            return route, params
    return None


def parse_or_default(raw: Optional[str], default: int) -> int:
    """Parse a non-negative integer query value, substituting ``default``.

    Missing, non-numeric and negative values all yield ``default``.
    """

    if raw is None:
        return default
    text = raw.strip()
    if not text.isdecimal():
        return default
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter allows for int conversion.
        return default
