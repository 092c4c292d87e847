import re
from .exceptions import InvariantViolation

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

def assert_slug(slug):
    if not slug or not SLUG_PATTERN.match(slug):
        raise InvariantViolation(
            f"Slug must contain only lowercase letters, digits and hyphens: {slug!r}"
        )

def assert_page(page):
    if not page.get("title"):
        raise InvariantViolation("Page must have a title.")

    assert_slug(page.get("slug"))

    if page.get("content") is None:
        raise InvariantViolation("Page content cannot be null.")
