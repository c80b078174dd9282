"""
Client router with last-route memory.

Two routes are declared: the root path ``/`` and ``/:schemaId``. Before a
route is entered, a request for the root is redirected to the last visited
path if one is stored. After a successful navigation to any non-root path,
that path is stored as the new last visited path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from apps.frontend.storage import KeyValueStorage

logger = logging.getLogger(__name__)

LAST_ROUTE_KEY = "lastVisitedRoute"
ROOT_PATH = "/"


@dataclass(frozen=True)
class Route:
    """Matched route: its name, the normalised path and extracted params."""

    name: str
    path: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Navigation:
    """Outcome of :meth:`Router.navigate`.

    ``route`` is ``None`` when the final path matches no declared route.
    ``redirected_from`` holds the requested path when a guard redirected.
    """

    path: str
    route: Route | None
    redirected_from: str | None = None


def normalize_path(path: str) -> str:
    """Give ``path`` a single leading slash and no trailing slash."""
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or ROOT_PATH
    return path


def match(path: str) -> Route | None:
    """Match ``path`` against ``/`` and ``/:schemaId``."""
    path = normalize_path(path)
    if path == ROOT_PATH:
        return Route(name="home", path=path)
    segments = path[1:].split("/")
    if len(segments) == 1 and segments[0]:
        return Route(name="schema", path=path, params={"schemaId": segments[0]})
    return None


class Router:
    """Resolves paths to routes and remembers the last visited one.

    Args:
        storage: Durable key-value store for the last visited path.
        remember_last_route: When false, the store is never read or written.
    """

    def __init__(self, storage: KeyValueStorage, remember_last_route: bool = True):
        self.storage = storage
        self.remember_last_route = remember_last_route
        self.current: Route | None = None

    @property
    def last_route(self) -> str | None:
        return self.storage.get_item(LAST_ROUTE_KEY)

    def forget(self) -> None:
        self.storage.remove_item(LAST_ROUTE_KEY)

    def _before_each(self, path: str) -> str | None:
        """Return the redirect target for ``path``, if any."""
        if self.remember_last_route and path == ROOT_PATH:
            last = self.last_route
            if last:
                return normalize_path(last)
        return None

    def _after_each(self, route: Route) -> None:
        if self.remember_last_route and route.path != ROOT_PATH:
            self.storage.set_item(LAST_ROUTE_KEY, route.path)

    def navigate(self, path: str = ROOT_PATH) -> Navigation:
        path = normalize_path(path)
        redirected_from = None

        target = self._before_each(path)
        if target is not None and target != path:
            logger.debug("Redirecting %s -> %s", path, target)
            redirected_from, path = path, target

        route = match(path)
        if route is None:
            logger.debug("No route matches %s", path)
            return Navigation(path=path, route=None, redirected_from=redirected_from)

        self.current = route
        self._after_each(route)
        return Navigation(path=path, route=route, redirected_from=redirected_from)
