import logging
from typing import Any, Dict, List, Optional

from sitecms.domain.invariants.exceptions import InvariantViolation
from sitecms.domain.invariants.menu_item import assert_menu_item, assert_menu_order
from sitecms.domain.targets import menu_item_target, merge_target_fields
from sitecms.schemas.menu_item import MenuItemUpdate, MenuReorder, menu_item_adapter
from sitecms.storage import EntityStore
from sitecms.utils.order import reorder_ranks, sort_by_order
from sitecms.utils.validation import validate

logger = logging.getLogger(__name__)

INVALID_MENU_ITEM = "Invalid menu item data"
INVALID_REORDER = "Invalid request data"

EDITABLE_FIELDS = ("text", "type", "internal_link", "external_url")


def list_menu_items(*, store: EntityStore) -> List[Dict[str, Any]]:
    return sort_by_order(store.menu_items.list())


def get_menu_item(*, store: EntityStore, item_id: int) -> Optional[Dict[str, Any]]:
    return store.menu_items.get_by_id(item_id)


def create_menu_item(*, store: EntityStore, data: Any) -> Dict[str, Any]:
    """New items are ranked last (count + 1)."""
    fields = validate(menu_item_adapter, data, message=INVALID_MENU_ITEM).model_dump(exclude={"order"})
    assert_menu_item(fields)

    fields["order"] = store.menu_items.count() + 1
    item = store.menu_items.create(fields)

    logger.info("menu.create id=%s order=%s type=%s", item["id"], item["order"], item["type"])
    return item


def update_menu_item(*, store: EntityStore, item_id: int, data: Any) -> Optional[Dict[str, Any]]:
    """
    Partial update. The merged item is validated as a whole so that a type
    change always comes with the matching target.
    """
    changes = validate(MenuItemUpdate, data, message=INVALID_MENU_ITEM).model_dump(exclude_unset=True)

    existing = store.menu_items.get_by_id(item_id)
    if existing is None:
        return None

    merged = merge_target_fields(existing, changes, EDITABLE_FIELDS)
    fields = validate(menu_item_adapter, merged, message=INVALID_MENU_ITEM).model_dump(exclude={"order"})
    assert_menu_item(fields)

    item = store.menu_items.update(item_id, fields)
    if item is not None:
        logger.info("menu.update id=%s fields=%s", item_id, sorted(changes))
    return item


def delete_menu_item(*, store: EntityStore, item_id: int) -> bool:
    deleted = store.menu_items.delete(item_id)
    if deleted:
        logger.info("menu.delete id=%s", item_id)
    return deleted


def reorder_menu_items(*, store: EntityStore, data: Any) -> List[Dict[str, Any]]:
    """
    Re-rank the whole menu from a caller-supplied id sequence.

    Listed ids take ranks 1..k in the given order, the rest keep their
    relative order after them. Every changed row is written before this
    returns; a storage failure propagates to the caller.
    """
    item_ids = validate(MenuReorder, data, message=INVALID_REORDER).item_ids

    items = store.menu_items.list()
    ranks = reorder_ranks(items, item_ids)
    assert_menu_order([{"order": rank} for rank in ranks.values()])

    current = {item["id"]: item["order"] for item in items}
    changes = {
        item_id: {"order": rank}
        for item_id, rank in ranks.items()
        if current[item_id] != rank
    }
    store.menu_items.update_many(changes)

    logger.info("menu.reorder requested=%s changed=%s", len(item_ids), len(changes))
    return list_menu_items(store=store)


def navigation(*, store: EntityStore) -> List[Dict[str, Any]]:
    """Ordered menu with each item's resolved href."""
    entries = []
    for item in list_menu_items(store=store):
        try:
            target = menu_item_target(item)
        except InvariantViolation:
            logger.warning("menu item %s has no usable target", item["id"])
            target = None
        entries.append({"item": item, "target": target})
    return entries
