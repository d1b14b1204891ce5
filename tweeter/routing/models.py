"""Data models for the static route table."""

from dataclasses import dataclass
from typing import NamedTuple


class Resolution(NamedTuple):
    """Outcome of a route table lookup."""

    content: bytes
    content_type: str
    status: int


@dataclass(frozen=True)
class Resource:
    """A static file served by the route table.

    ``paths`` lists every exact request path answered with this file.
    """

    filename: str
    content_type: str
    paths: tuple[str, ...]


@dataclass(frozen=True)
class RouteEntry:
    """Preloaded file contents plus the metadata used to serve them."""

    path: str
    content: bytes
    content_type: str
    status: int = 200

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"path must start with '/': {self.path!r}")
        if not isinstance(self.content, bytes):
            raise ValueError("content must be bytes")

    def as_resolution(self) -> Resolution:
        return Resolution(self.content, self.content_type, self.status)
