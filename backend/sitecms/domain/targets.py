# sitecms/domain/targets.py
"""
Navigation target classification.

Pure functions shared by menu items and custom buttons; no I/O.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.domain.invariants.targets import TARGET_FIELD_BY_TYPE, TARGET_FIELDS

IFRAME_VIEWER_PREFIX = "/iframe/"
ADMIN_SLUG = "alex"

# Well-known slugs with fixed top-level routes
RESERVED_PATHS = {
    "home": "/",
    "servicos": "/servicos",
    "site": "/site",
    ADMIN_SLUG: f"/{ADMIN_SLUG}",
}

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "!~*'()"


@dataclass(frozen=True)
class NavigationTarget:
    href: str
    in_app: bool  # False: opened in a new browsing context, not routed


def with_scheme(url: str) -> str:
    url = (url or "").strip()
    return url if _SCHEME_RE.match(url) else f"http://{url}"


def iframe_viewer_path(url: str) -> str:
    return IFRAME_VIEWER_PREFIX + quote(with_scheme(url), safe=_URI_COMPONENT_SAFE)


def internal_path(slug: str) -> str:
    return RESERVED_PATHS.get(slug, f"/{slug}")


def menu_item_target(item) -> NavigationTarget:
    link_type = item.get("type")

    if link_type == "internal":
        slug = item.get("internal_link")
        if not slug:
            raise InvariantViolation("internal menu item without internal_link")
        return NavigationTarget(internal_path(slug), in_app=True)

    url = item.get("external_url")
    if link_type in ("iframe", "external") and not url:
        raise InvariantViolation(f"{link_type} menu item without external_url")

    if link_type == "iframe":
        return NavigationTarget(iframe_viewer_path(url), in_app=True)
    if link_type == "external":
        return NavigationTarget(url, in_app=False)

    raise InvariantViolation(f"Unknown menu item type: {link_type!r}")


def button_url(link_type, *, internal_link=None, external_url=None, email=None) -> str:
    """The precomputed url stored on a custom button."""
    if link_type == "internal":
        return f"/{internal_link}"
    if link_type == "external":
        return external_url
    if link_type == "iframe":
        return iframe_viewer_path(external_url)
    if link_type == "email":
        return f"mailto:{email}"
    raise InvariantViolation(f"Unknown button type: {link_type!r}")


def merge_target_fields(existing, changes, editable):
    """
    Overlay a partial update on the editable fields of a stored link.

    Target fields that no longer match the (possibly new) type are cleared
    unless the caller set them explicitly, so stale targets never survive a
    type change and an explicit mismatch is still caught by validation.
    """
    merged = {name: existing.get(name) for name in editable}
    merged.update(changes)

    expected = TARGET_FIELD_BY_TYPE.get(merged.get("type"))
    for name in TARGET_FIELDS:
        if name in merged and name != expected and name not in changes:
            merged[name] = None

    return merged
