import pytest

from sitecms import create_app
from sitecms.extensions import STORE_EXTENSION_KEY, db
from sitecms.storage.seed import seed_default_content

BACKENDS = ["memory", "database"]


@pytest.fixture(params=BACKENDS)
def app(request):
    app = create_app("testing", {"STORAGE_BACKEND": request.param})

    with app.app_context():
        yield app

        if request.param == "database":
            db.session.remove()
            db.drop_all()


@pytest.fixture
def store(app):
    return app.extensions[STORE_EXTENSION_KEY]


@pytest.fixture
def seeded_store(store):
    seed_default_content(store)
    return store


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_page(client):
    def _make(slug, title=None, content="<p>body</p>"):
        response = client.post("/api/pages", json={
            "title": title or slug.title(),
            "slug": slug,
            "content": content,
        })
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make


@pytest.fixture
def make_menu_item(client):
    def _make(text, **target):
        response = client.post("/api/menu", json={"text": text, **target})
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _make
