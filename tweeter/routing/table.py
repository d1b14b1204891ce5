"""Static route table: exact request path to preloaded resource."""

import logging
import os
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from tweeter.routing.models import Resolution, Resource, RouteEntry

logger = logging.getLogger(__name__)

NOT_FOUND_FILENAME = "404.html"
NOT_FOUND_CONTENT_TYPE = "text/html"

RESOURCES: tuple[Resource, ...] = (
    Resource("index.html", "text/html", ("/", "/index.html")),
    Resource("style.css", "text/css", ("/style.css",)),
    Resource("index.js", "application/javascript", ("/index.js",)),
    # Asking for the 404 page by name is not an error.
    Resource(NOT_FOUND_FILENAME, NOT_FOUND_CONTENT_TYPE, ("/404.html",)),
)


class ResourceLoadError(Exception):
    """Raised when a static resource cannot be read at startup."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load static resource {path}: {reason}")
        self.path = path


class RouteTable:
    """Immutable mapping from exact request path to a route entry.

    Lookups never fall through to prefix, case-insensitive or
    trailing-slash matching. Any miss resolves to the fallback entry,
    which carries status 404.
    """

    def __init__(self, entries: Mapping[str, RouteEntry], fallback: RouteEntry) -> None:
        self._entries = MappingProxyType(dict(entries))
        self._fallback = fallback

    @property
    def fallback(self) -> RouteEntry:
        return self._fallback

    def resolve(self, request_path: str) -> Resolution:
        """Return ``(content, content_type, status)`` for a request path."""
        entry = self._entries.get(request_path, self._fallback)
        return entry.as_resolution()

    def __contains__(self, request_path: object) -> bool:
        return request_path in self._entries

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _read_resource(public_dir: str, filename: str) -> bytes:
    path = os.path.join(public_dir, filename)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceLoadError(path, e.strerror or str(e)) from e


def build_route_table(public_dir: str, resources: tuple[Resource, ...] = RESOURCES) -> RouteTable:
    """Read every resource once and build the route table.

    Raises:
        ResourceLoadError: If any resource file is missing or unreadable.
    """
    entries: dict[str, RouteEntry] = {}
    fallback_content: bytes | None = None

    for resource in resources:
        content = _read_resource(public_dir, resource.filename)
        logger.info("Loaded resource %s | bytes=%d | type=%s", resource.filename, len(content), resource.content_type)
        if resource.filename == NOT_FOUND_FILENAME:
            fallback_content = content
        for path in resource.paths:
            if path in entries:
                raise ValueError(f"Duplicate route path: {path}")
            entries[path] = RouteEntry(path, content, resource.content_type)

    if fallback_content is None:
        fallback_content = _read_resource(public_dir, NOT_FOUND_FILENAME)

    fallback = RouteEntry("/" + NOT_FOUND_FILENAME, fallback_content, NOT_FOUND_CONTENT_TYPE, status=404)
    return RouteTable(entries, fallback)
