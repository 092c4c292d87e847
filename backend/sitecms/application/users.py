from typing import Any, Dict, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from sitecms.application.exceptions import ValidationFailed
from sitecms.storage import EntityStore, UniqueConstraintError

INVALID_USER = "Invalid user data"


def _public(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if user is None:
        return None
    return {"id": user["id"], "username": user["username"]}


def get_user(*, store: EntityStore, user_id: int) -> Optional[Dict[str, Any]]:
    return _public(store.users.get_by_id(user_id))


def get_user_by_username(*, store: EntityStore, username: str) -> Optional[Dict[str, Any]]:
    return _public(store.users.get_by_unique_key(username))


def create_user(*, store: EntityStore, username: str, password: str) -> Dict[str, Any]:
    """Placeholder identity table; the access gate does not read it."""
    username = (username or "").strip()
    if not username:
        raise ValidationFailed.for_field(INVALID_USER, "username", "Username is required")
    if not password:
        raise ValidationFailed.for_field(INVALID_USER, "password", "Password is required")

    try:
        user = store.users.create({
            "username": username,
            "password": generate_password_hash(password),
        })
    except UniqueConstraintError as exc:
        raise ValidationFailed.for_field(
            INVALID_USER, "username", "Username already taken", "unique"
        ) from exc

    return _public(user)


def verify_user(*, store: EntityStore, username: str, password: str) -> bool:
    user = store.users.get_by_unique_key(username)
    if user is None:
        return False
    return check_password_hash(user["password"], password)
