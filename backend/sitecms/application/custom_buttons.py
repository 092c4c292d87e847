import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from sitecms.domain.invariants.custom_button import assert_custom_button
from sitecms.domain.targets import button_url, merge_target_fields
from sitecms.schemas.custom_button import CustomButtonUpdate, custom_button_adapter
from sitecms.storage import EntityStore
from sitecms.utils.validation import validate

logger = logging.getLogger(__name__)

INVALID_BUTTON = "Invalid custom button data"

EDITABLE_FIELDS = (
    "text",
    "type",
    "internal_link",
    "external_url",
    "email",
    "page_slug",
    "style",
    "size",
    "open_in_new_tab",
)


def _with_url(fields: Dict[str, Any]) -> Dict[str, Any]:
    fields["url"] = button_url(
        fields["type"],
        internal_link=fields.get("internal_link"),
        external_url=fields.get("external_url"),
        email=fields.get("email"),
    )
    assert_custom_button(fields)
    return fields


def list_custom_buttons(*, store: EntityStore) -> List[Dict[str, Any]]:
    return store.custom_buttons.list()


def list_buttons_for_page(*, store: EntityStore, slug: str) -> List[Dict[str, Any]]:
    return [button for button in store.custom_buttons.list() if button["page_slug"] == slug]


def get_custom_button(*, store: EntityStore, button_id: int) -> Optional[Dict[str, Any]]:
    return store.custom_buttons.get_by_id(button_id)


def create_custom_button(*, store: EntityStore, data: Any) -> Dict[str, Any]:
    """
    Create a button. Any url sent by the caller is ignored; the stored url
    is derived from type + target.
    """
    payload = validate(custom_button_adapter, data, message=INVALID_BUTTON)
    fields = _with_url(payload.model_dump(exclude={"url"}))

    button = store.custom_buttons.create(fields)
    logger.info(
        "button.create id=%s page=%s type=%s", button["id"], button["page_slug"], button["type"]
    )
    return button


def update_custom_button(*, store: EntityStore, button_id: int, data: Any) -> Optional[Dict[str, Any]]:
    """
    Partial update. The url is recomputed from the merged record every
    time, so switching type or target never leaves a stale url behind.
    """
    changes = validate(CustomButtonUpdate, data, message=INVALID_BUTTON).model_dump(
        exclude_unset=True, exclude={"url"}
    )

    existing = store.custom_buttons.get_by_id(button_id)
    if existing is None:
        return None

    merged = merge_target_fields(existing, changes, EDITABLE_FIELDS)
    payload = validate(custom_button_adapter, merged, message=INVALID_BUTTON)
    fields = _with_url(payload.model_dump(exclude={"url"}))

    button = store.custom_buttons.update(button_id, fields)
    if button is not None:
        logger.info("button.update id=%s fields=%s", button_id, sorted(changes))
    return button


def delete_custom_button(*, store: EntityStore, button_id: int) -> bool:
    deleted = store.custom_buttons.delete(button_id)
    if deleted:
        logger.info("button.delete id=%s", button_id)
    return deleted


def group_buttons_by_page(buttons: Iterable[Dict[str, Any]]) -> "OrderedDict[str, List[Dict[str, Any]]]":
    grouped: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
    for button in buttons:
        grouped.setdefault(button["page_slug"], []).append(button)
    return grouped
