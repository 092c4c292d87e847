import pytest

from sitecms.application import pages as page_service
from sitecms.application.exceptions import ValidationFailed


def test_create_then_get_by_slug(client, make_page):
    created = make_page("about", title="About", content="<h1>Hi</h1>")

    response = client.get("/api/pages/about")
    assert response.status_code == 200
    assert response.get_json() == created
    assert set(created) == {"id", "title", "slug", "content", "createdAt", "updatedAt"}


def test_get_by_id(client, make_page):
    created = make_page("about")

    assert client.get(f"/api/pages/id/{created['id']}").get_json()["slug"] == "about"
    assert client.get("/api/pages/id/999").status_code == 404


def test_unknown_slug_is_404(client):
    response = client.get("/api/pages/missing")
    assert response.status_code == 404
    assert response.get_json() == {"message": "Page not found"}


def test_list_pages(client, make_page):
    make_page("a")
    make_page("b")
    assert [p["slug"] for p in client.get("/api/pages").get_json()] == ["a", "b"]


@pytest.mark.parametrize("slug", ["About", "with space", "acentuação", "", "a_b"])
def test_invalid_slug_is_rejected(client, slug):
    response = client.post("/api/pages", json={"title": "T", "slug": slug, "content": ""})

    assert response.status_code == 400
    body = response.get_json()
    assert body["message"] == "Invalid page data"
    assert body["errors"][0]["loc"] == ["slug"]


def test_missing_fields_are_rejected(client):
    response = client.post("/api/pages", json={"slug": "x"})
    assert response.status_code == 400
    locs = {tuple(e["loc"]) for e in response.get_json()["errors"]}
    assert locs == {("title",), ("content",)}


def test_non_json_body_is_rejected(client):
    response = client.post("/api/pages", data="nope", content_type="text/plain")
    assert response.status_code == 400


def test_duplicate_slug_is_400_and_nothing_written(client, make_page):
    make_page("about")

    response = client.post("/api/pages", json={"title": "Again", "slug": "about", "content": ""})
    assert response.status_code == 400
    assert response.get_json()["errors"][0]["type"] == "unique"
    assert len(client.get("/api/pages").get_json()) == 1


def test_partial_update(client, make_page):
    created = make_page("about", title="About")

    response = client.put(f"/api/pages/{created['id']}", json={"content": "<p>new</p>"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["title"] == "About"
    assert body["content"] == "<p>new</p>"


def test_update_slug_collision(client, make_page):
    make_page("a")
    b = make_page("b")

    response = client.put(f"/api/pages/{b['id']}", json={"slug": "a"})
    assert response.status_code == 400
    assert client.get("/api/pages/b").status_code == 200


def test_update_to_own_slug_is_allowed(client, make_page):
    page = make_page("a")
    assert client.put(f"/api/pages/{page['id']}", json={"slug": "a", "title": "A2"}).status_code == 200


def test_update_rejects_null_and_unknown_fields(client, make_page):
    page = make_page("a")
    assert client.put(f"/api/pages/{page['id']}", json={"title": None}).status_code == 400
    assert client.put(f"/api/pages/{page['id']}", json={"author": "x"}).status_code == 400


def test_update_missing_page(client):
    assert client.put("/api/pages/999", json={"title": "x"}).status_code == 404


def test_delete_page(client, make_page):
    page = make_page("about")

    assert client.delete(f"/api/pages/{page['id']}").status_code == 204
    assert client.get("/api/pages/about").status_code == 404
    assert client.delete(f"/api/pages/{page['id']}").status_code == 404


def test_service_rejects_duplicate_slug(store):
    page_service.create_page(store=store, data={"title": "A", "slug": "a", "content": ""})

    with pytest.raises(ValidationFailed) as exc_info:
        page_service.create_page(store=store, data={"title": "B", "slug": "a", "content": ""})

    assert exc_info.value.errors[0]["loc"] == ["slug"]


def test_deleting_page_keeps_menu_items(client, make_page, make_menu_item):
    page = make_page("blog")
    item = make_menu_item("Blog", type="internal", internalLink="blog")

    client.delete(f"/api/pages/{page['id']}")

    assert client.get(f"/api/menu/{item['id']}").status_code == 200
