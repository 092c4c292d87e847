import logging
from typing import Any, Dict, List, Optional

from sitecms.application.exceptions import ValidationFailed
from sitecms.domain.invariants.page import assert_page
from sitecms.schemas.page import PageCreate, PageUpdate
from sitecms.storage import EntityStore, UniqueConstraintError
from sitecms.utils.validation import validate

logger = logging.getLogger(__name__)

INVALID_PAGE = "Invalid page data"


def _slug_taken() -> ValidationFailed:
    return ValidationFailed.for_field(
        INVALID_PAGE, "slug", "A page with this slug already exists", "unique"
    )


def _assert_slug_available(store: EntityStore, slug: str, exclude_id: Optional[int] = None) -> None:
    existing = store.pages.get_by_unique_key(slug)
    if existing is not None and existing["id"] != exclude_id:
        raise _slug_taken()


def list_pages(*, store: EntityStore) -> List[Dict[str, Any]]:
    return store.pages.list()


def get_page(*, store: EntityStore, page_id: int) -> Optional[Dict[str, Any]]:
    return store.pages.get_by_id(page_id)


def get_page_by_slug(*, store: EntityStore, slug: str) -> Optional[Dict[str, Any]]:
    return store.pages.get_by_unique_key(slug)


def create_page(*, store: EntityStore, data: Any) -> Dict[str, Any]:
    """
    Create a page from a request payload.

    Edge cases handled:
    - Missing fields / slug outside ^[a-z0-9-]+$
    - Duplicate slug, checked up front and again by the store's unique key
    """
    fields = validate(PageCreate, data, message=INVALID_PAGE).model_dump()

    _assert_slug_available(store, fields["slug"])
    assert_page(fields)

    try:
        page = store.pages.create(fields)
    except UniqueConstraintError as exc:
        # lost a race with a concurrent create
        raise _slug_taken() from exc

    logger.info("page.create id=%s slug=%s", page["id"], page["slug"])
    return page


def update_page(*, store: EntityStore, page_id: int, data: Any) -> Optional[Dict[str, Any]]:
    """
    Merge a partial update onto a page. Returns None when the page is missing.

    The slug pattern is re-checked by validation; a changed slug must not
    collide with another page.
    """
    changes = validate(PageUpdate, data, message=INVALID_PAGE).model_dump(exclude_unset=True)

    existing = store.pages.get_by_id(page_id)
    if existing is None:
        return None

    if "slug" in changes and changes["slug"] != existing["slug"]:
        _assert_slug_available(store, changes["slug"], exclude_id=page_id)

    assert_page({**existing, **changes})

    try:
        page = store.pages.update(page_id, changes)
    except UniqueConstraintError as exc:
        raise _slug_taken() from exc

    if page is not None:
        logger.info("page.update id=%s fields=%s", page_id, sorted(changes))
    return page


def delete_page(*, store: EntityStore, page_id: int) -> bool:
    """Menu items and buttons pointing at the slug are left in place."""
    deleted = store.pages.delete(page_id)
    if deleted:
        logger.info("page.delete id=%s", page_id)
    return deleted
