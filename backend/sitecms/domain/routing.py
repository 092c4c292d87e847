# sitecms/domain/routing.py
"""
Client route resolution.

Maps an in-app path to what the client should render. Missing pages
(including slugs left dangling by a deleted page) resolve to ``not_found``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
from urllib.parse import parse_qs, unquote, urlsplit

from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.domain.targets import ADMIN_SLUG, IFRAME_VIEWER_PREFIX, RESERVED_PATHS, menu_item_target

PageLookup = Callable[[str], Optional[Dict[str, Any]]]

HOME_SLUG = "home"
PAGE_PREFIX = "/page/"


@dataclass(frozen=True)
class RenderOutcome:
    kind: str  # page | iframe | admin | external | not_found
    path: str
    page: Optional[Dict[str, Any]] = None
    url: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.kind != "not_found"


def _not_found(path):
    return RenderOutcome("not_found", path)


def _iframe(path, url):
    url = (url or "").strip()
    if not url:
        return _not_found(path)
    return RenderOutcome("iframe", path, url=url)


def _page(path, slug, find_page):
    page = find_page(slug) if slug else None
    if page is None:
        return _not_found(path)
    return RenderOutcome("page", path, page=page)


def resolve_path(path: str, find_page: PageLookup) -> RenderOutcome:
    parts = urlsplit(path or "/")
    route = parts.path or "/"
    if not route.startswith("/"):
        route = "/" + route

    if route == "/":
        return _page(route, HOME_SLUG, find_page)

    if route == RESERVED_PATHS[ADMIN_SLUG]:
        return RenderOutcome("admin", route)

    if route.startswith(IFRAME_VIEWER_PREFIX):
        return _iframe(route, unquote(route[len(IFRAME_VIEWER_PREFIX):]))

    # older buttons stored the viewer url as /iframe?url=...
    if route.rstrip("/") == IFRAME_VIEWER_PREFIX.rstrip("/"):
        return _iframe(route, parse_qs(parts.query).get("url", [""])[0])

    if route.startswith(PAGE_PREFIX):
        slug = route[len(PAGE_PREFIX):]
    else:
        slug = route[1:]

    slug = unquote(slug.rstrip("/"))
    if "/" in slug:
        return _not_found(route)

    return _page(route, slug, find_page)


def resolve_menu_item(item, find_page: PageLookup) -> RenderOutcome:
    """What clicking a stored menu item renders."""
    try:
        target = menu_item_target(item)
    except InvariantViolation:
        return _not_found("#")

    if not target.in_app:
        return RenderOutcome("external", target.href, url=target.href)

    return resolve_path(target.href, find_page)
