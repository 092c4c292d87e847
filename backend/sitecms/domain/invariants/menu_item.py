from .exceptions import InvariantViolation
from .targets import assert_single_target

MENU_ITEM_TYPES = ("internal", "external", "iframe")

def assert_menu_item(item):
    assert_single_target(item, MENU_ITEM_TYPES)

    if item.get("email"):
        raise InvariantViolation("Menu items have no email target.")

def assert_menu_order(items):
    orders = [item["order"] for item in items]
    if not orders:
        return

    expected = list(range(1, len(orders) + 1))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Menu orders are not consecutive starting from 1: {orders}"
        )
