import pytest

from sitecms.storage import MemoryStore, StorageError, UniqueConstraintError, build_store


def _page(slug, **extra):
    return {"title": slug.title(), "slug": slug, "content": "<p></p>", **extra}


def test_create_assigns_id_and_timestamps(store):
    page = store.pages.create(_page("about"))

    assert isinstance(page["id"], int)
    assert page["slug"] == "about"
    assert page["created_at"] is not None
    assert page["updated_at"] is not None


def test_create_ignores_caller_id(store):
    page = store.pages.create(_page("about", id=999))
    assert page["id"] != 999
    assert store.pages.get_by_id(page["id"])["slug"] == "about"


def test_list_is_ascending_by_id(store):
    ids = [store.pages.create(_page(slug))["id"] for slug in ("c", "a", "b")]
    assert [p["id"] for p in store.pages.list()] == sorted(ids)


def test_missing_rows_are_none_or_false(store):
    assert store.pages.get_by_id(12345) is None
    assert store.pages.get_by_unique_key("nope") is None
    assert store.pages.update(12345, {"title": "x"}) is None
    assert store.pages.delete(12345) is False


def test_get_by_unique_key_then_delete(store):
    created = store.pages.create(_page("contact"))

    assert store.pages.get_by_unique_key("contact") == created
    assert store.pages.delete(created["id"]) is True
    assert store.pages.get_by_unique_key("contact") is None
    assert store.pages.delete(created["id"]) is False


def test_duplicate_unique_key_is_rejected(store):
    store.pages.create(_page("about"))

    with pytest.raises(UniqueConstraintError) as exc_info:
        store.pages.create(_page("about"))

    assert exc_info.value.key == "slug"
    assert store.pages.count() == 1


def test_update_into_existing_unique_key_is_rejected(store):
    store.pages.create(_page("a"))
    b = store.pages.create(_page("b"))

    with pytest.raises(UniqueConstraintError):
        store.pages.update(b["id"], {"slug": "a"})

    assert store.pages.get_by_id(b["id"])["slug"] == "b"


def test_update_merges_and_touches_updated_at(store):
    page = store.pages.create(_page("about"))
    updated = store.pages.update(page["id"], {"title": "About us"})

    assert updated["title"] == "About us"
    assert updated["slug"] == "about"
    assert updated["created_at"] == page["created_at"]
    assert updated["updated_at"] >= page["updated_at"]


def test_returned_records_are_copies(store):
    page = store.pages.create(_page("about"))
    page["title"] = "mutated"

    assert store.pages.get_by_id(page["id"])["title"] == "About"


def test_button_defaults_are_filled(store):
    button = store.custom_buttons.create({
        "text": "Go",
        "type": "internal",
        "url": "/home",
        "internal_link": "home",
        "page_slug": "home",
    })

    assert button["style"] == "primary"
    assert button["size"] == "default"
    assert button["open_in_new_tab"] is True
    assert button["created_at"] is not None


def test_update_many_applies_known_ids_only(store):
    first = store.menu_items.create({"text": "A", "order": 1, "type": "internal", "internal_link": "a"})
    second = store.menu_items.create({"text": "B", "order": 2, "type": "internal", "internal_link": "b"})

    updated = store.menu_items.update_many({
        first["id"]: {"order": 2},
        second["id"]: {"order": 1},
        9999: {"order": 3},
    })

    assert {row["id"]: row["order"] for row in updated} == {first["id"]: 2, second["id"]: 1}
    assert store.menu_items.get_by_id(first["id"])["order"] == 2


def test_update_many_collision_within_batch_writes_nothing(store):
    a = store.pages.create(_page("a"))
    b = store.pages.create(_page("b"))

    with pytest.raises(UniqueConstraintError):
        store.pages.update_many({a["id"]: {"slug": "c"}, b["id"]: {"slug": "c"}})

    assert store.pages.get_by_id(a["id"])["slug"] == "a"
    assert store.pages.get_by_id(b["id"])["slug"] == "b"
    assert store.pages.get_by_unique_key("c") is None


def test_count(store):
    assert store.settings.count() == 0
    store.settings.create({"name": "title", "value": "Site"})
    assert store.settings.count() == 1


def test_collection_without_unique_key_rejects_lookup(store):
    with pytest.raises(TypeError):
        store.menu_items.get_by_unique_key("x")


def test_memory_ids_are_never_reused():
    store = MemoryStore()
    first = store.pages.create(_page("a"))
    store.pages.delete(first["id"])

    second = store.pages.create(_page("b"))
    assert second["id"] > first["id"]


def test_memory_store_continues_after_initial_rows():
    store = MemoryStore({"pages": [{"id": 7, **_page("seeded")}]})
    assert store.pages.create(_page("next"))["id"] == 8


def test_memory_update_many_is_all_or_nothing():
    store = MemoryStore()
    a = store.pages.create(_page("a"))
    b = store.pages.create(_page("b"))

    with pytest.raises(UniqueConstraintError):
        store.pages.update_many({a["id"]: {"title": "A2"}, b["id"]: {"slug": "a"}})

    assert store.pages.get_by_id(a["id"])["title"] == "A"


def test_unique_constraint_error_is_a_storage_error():
    assert issubclass(UniqueConstraintError, StorageError)


def test_build_store_rejects_unknown_backend():
    with pytest.raises(ValueError):
        build_store("redis")


def test_backend_name(app, store):
    assert store.backend_name == app.config["STORAGE_BACKEND"]
