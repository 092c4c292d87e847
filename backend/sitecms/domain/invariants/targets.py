from .exceptions import InvariantViolation

TARGET_FIELDS = ("internal_link", "external_url", "email")

# which target field each link type populates
TARGET_FIELD_BY_TYPE = {
    "internal": "internal_link",
    "external": "external_url",
    "iframe": "external_url",
    "email": "email",
}

def assert_single_target(record, allowed_types):
    """Exactly one target field is set, and it is the one its type calls for."""
    link_type = record.get("type")
    if link_type not in allowed_types:
        raise InvariantViolation(f"Unknown link type: {link_type!r}")

    expected = TARGET_FIELD_BY_TYPE[link_type]
    if not record.get(expected):
        raise InvariantViolation(f"{link_type} link must have {expected} set.")

    for field in TARGET_FIELDS:
        if field != expected and record.get(field):
            raise InvariantViolation(
                f"{link_type} link should not have {field} set."
            )
