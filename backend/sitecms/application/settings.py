import logging
from typing import Any, Dict, List, Optional

from sitecms.schemas.setting import SettingSave
from sitecms.storage import EntityStore, StorageError, UniqueConstraintError
from sitecms.utils.validation import validate

logger = logging.getLogger(__name__)

INVALID_SETTING = "Invalid setting data"


def list_settings(*, store: EntityStore) -> List[Dict[str, Any]]:
    return store.settings.list()


def get_setting(*, store: EntityStore, name: str) -> Optional[Dict[str, Any]]:
    return store.settings.get_by_unique_key(name)


def save_setting(*, store: EntityStore, name: str, value: Any) -> Dict[str, Any]:
    """Upsert by name: create when absent, otherwise overwrite the value."""
    payload = validate(SettingSave, {"name": name, "value": value}, message=INVALID_SETTING)

    # a concurrent create or delete can move the row under us; two passes
    # cover one collision followed by one disappearance
    for _ in range(2):
        existing = store.settings.get_by_unique_key(payload.name)
        if existing is None:
            try:
                setting = store.settings.create({"name": payload.name, "value": payload.value})
            except UniqueConstraintError:
                continue
            logger.info("setting.create name=%s", payload.name)
            return setting

        setting = store.settings.update(existing["id"], {"value": payload.value})
        if setting is not None:
            logger.info("setting.update name=%s", payload.name)
            return setting

    raise StorageError(f"setting {payload.name!r} changed concurrently, save not applied")


def delete_setting(*, store: EntityStore, name: str) -> bool:
    existing = store.settings.get_by_unique_key(name)
    if existing is None:
        return False
    deleted = store.settings.delete(existing["id"])
    if deleted:
        logger.info("setting.delete name=%s", name)
    return deleted
