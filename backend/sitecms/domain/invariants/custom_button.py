from sitecms.domain.targets import button_url
from .exceptions import InvariantViolation
from .targets import assert_single_target

BUTTON_TYPES = ("internal", "external", "iframe", "email")

def assert_custom_button(button):
    assert_single_target(button, BUTTON_TYPES)

    expected_url = button_url(
        button["type"],
        internal_link=button.get("internal_link"),
        external_url=button.get("external_url"),
        email=button.get("email"),
    )
    if button.get("url") != expected_url:
        raise InvariantViolation(
            f"Button url {button.get('url')!r} does not match its target ({expected_url!r})."
        )

    if not button.get("page_slug"):
        raise InvariantViolation("Button must belong to a page.")
