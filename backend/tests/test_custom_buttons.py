import pytest

from sitecms.application.custom_buttons import group_buttons_by_page


def _create(client, **fields):
    body = {"text": "Go", "pageSlug": "home", **fields}
    return client.post("/api/custom-buttons", json=body)


@pytest.mark.parametrize("fields, url", [
    ({"type": "internal", "internalLink": "servicos"}, "/servicos"),
    ({"type": "external", "externalUrl": "https://example.com"}, "https://example.com"),
    ({"type": "iframe", "externalUrl": "https://example.com/a?b=1"},
     "/iframe/https%3A%2F%2Fexample.com%2Fa%3Fb%3D1"),
    ({"type": "email", "email": "hello@example.com"}, "mailto:hello@example.com"),
])
def test_url_is_derived_from_target(client, fields, url):
    response = _create(client, **fields)

    assert response.status_code == 201
    assert response.get_json()["url"] == url


def test_caller_url_is_ignored(client):
    body = _create(client, type="internal", internalLink="site", url="javascript:alert(1)").get_json()
    assert body["url"] == "/site"


def test_defaults(client):
    body = _create(client, type="internal", internalLink="site").get_json()

    assert body["style"] == "primary"
    assert body["size"] == "default"
    assert body["openInNewTab"] is True
    assert body["createdAt"]


def test_update_recomputes_url_on_type_change(client):
    button = _create(client, type="internal", internalLink="servicos").get_json()

    response = client.put(
        f"/api/custom-buttons/{button['id']}",
        json={"type": "external", "externalUrl": "https://example.com"},
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["url"] == "https://example.com"
    assert body["internalLink"] is None


def test_update_recomputes_url_on_target_change(client):
    button = _create(client, type="email", email="a@example.com").get_json()

    body = client.put(
        f"/api/custom-buttons/{button['id']}", json={"email": "b@example.com", "url": "/x"}
    ).get_json()

    assert body["url"] == "mailto:b@example.com"


def test_update_style_keeps_url(client):
    button = _create(client, type="internal", internalLink="site").get_json()

    body = client.put(
        f"/api/custom-buttons/{button['id']}", json={"style": "outline", "openInNewTab": False}
    ).get_json()

    assert body["style"] == "outline"
    assert body["openInNewTab"] is False
    assert body["url"] == "/site"


@pytest.mark.parametrize("fields", [
    {"type": "internal"},
    {"type": "external", "externalUrl": "example.com"},
    {"type": "email", "email": "not-an-email"},
    {"type": "internal", "internalLink": "site", "email": "a@example.com"},
    {"type": "internal", "internalLink": "site", "style": "loud"},
    {"type": "internal", "internalLink": "site", "pageSlug": "Not A Slug"},
    {"type": "phone", "externalUrl": "tel:123"},
])
def test_invalid_buttons_are_rejected(client, fields):
    assert _create(client, **fields).status_code == 400
    assert client.get("/api/custom-buttons").get_json() == []


def test_list_for_page(client):
    _create(client, type="internal", internalLink="site", pageSlug="home")
    _create(client, type="internal", internalLink="home", pageSlug="site")

    buttons = client.get("/api/custom-buttons/page/home").get_json()
    assert [b["pageSlug"] for b in buttons] == ["home"]
    assert client.get("/api/custom-buttons/page/nowhere").get_json() == []


def test_get_and_delete(client):
    button = _create(client, type="internal", internalLink="site").get_json()

    assert client.get(f"/api/custom-buttons/{button['id']}").get_json() == button
    assert client.delete(f"/api/custom-buttons/{button['id']}").status_code == 204
    assert client.get(f"/api/custom-buttons/{button['id']}").status_code == 404
    assert client.delete(f"/api/custom-buttons/{button['id']}").status_code == 404


def test_update_missing_button(client):
    assert client.put("/api/custom-buttons/999", json={"text": "x"}).status_code == 404


def test_group_buttons_by_page():
    buttons = [
        {"id": 1, "page_slug": "home"},
        {"id": 2, "page_slug": "site"},
        {"id": 3, "page_slug": "home"},
    ]
    grouped = group_buttons_by_page(buttons)

    assert list(grouped) == ["home", "site"]
    assert [b["id"] for b in grouped["home"]] == [1, 3]
