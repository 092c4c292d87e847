from typing import Any, Dict, List, Optional, Tuple

from sitecms.application.custom_buttons import list_buttons_for_page
from sitecms.domain.routing import RenderOutcome, resolve_menu_item, resolve_path
from sitecms.storage import EntityStore

Rendered = Tuple[RenderOutcome, List[Dict[str, Any]]]


def _with_buttons(store: EntityStore, outcome: RenderOutcome) -> Rendered:
    buttons: List[Dict[str, Any]] = []
    if outcome.kind == "page":
        buttons = list_buttons_for_page(store=store, slug=outcome.page["slug"])
    return outcome, buttons


def render_path(*, store: EntityStore, path: str) -> Rendered:
    """Outcome for a client path, plus the buttons shown on a resolved page."""
    return _with_buttons(store, resolve_path(path, store.pages.get_by_unique_key))


def render_menu_item(*, store: EntityStore, item_id: int) -> Optional[Rendered]:
    """None when the menu item itself does not exist."""
    item = store.menu_items.get_by_id(item_id)
    if item is None:
        return None
    return _with_buttons(store, resolve_menu_item(item, store.pages.get_by_unique_key))
