"""
Fixtures communes : registries neufs, contexte de rendu, faux WordPress, client HTTP.
"""
import pytest
from fastapi.testclient import TestClient

from beacon_front.api.cache import PageCache
from beacon_front.api.main import create_app
from beacon_front.blocks import create_default_registry
from beacon_front.templates import RenderContext, create_default_templates
from beacon_front.wp.client import QueryResult


class FakeWordPress:
    """
    Remplace WordPressClient : document GraphQL → data (dict), QueryResult,
    ou fonction(variables) → data. Document inconnu → erreur (« pas de données »).
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def query(self, document, variables=None):
        variables = variables or {}
        self.calls.append((document, variables))
        value = self.responses.get(document)
        if value is None:
            return QueryResult(error="no data")
        if isinstance(value, QueryResult):
            return value
        if callable(value):
            return QueryResult(data=value(variables))
        return QueryResult(data=value)

    def count(self, document):
        return sum(1 for d, _ in self.calls if d == document)


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Environnement stable : développement, recette, pas de secret Faust."""
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("SITE_ENV", "staging")
    monkeypatch.delenv("FAUST_SECRET_KEY", raising=False)
    for name in ("REVALIDATE_SECONDS", "WORDPRESS_URL", "WP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def blocks():
    return create_default_registry()


@pytest.fixture
def templates():
    return create_default_templates()


@pytest.fixture
def ctx(blocks):
    return RenderContext(blocks=blocks)


@pytest.fixture
def wp():
    return FakeWordPress()


@pytest.fixture
def app(wp):
    return create_app(client=wp, cache=PageCache(ttl=60))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


# ── Données WordPress ───────────────────────────────────────────────────────

def page_payload(**overrides):
    data = {
        "__typename": "Page",
        "id": "cG9zdDoy",
        "databaseId": 2,
        "uri": "/about/",
        "slug": "about",
        "title": "About Us",
        "content": "<p>We teach.</p>",
        "editorBlocks": [],
    }
    data.update(overrides)
    return data


def post_payload(**overrides):
    data = {
        "__typename": "Post",
        "id": "cG9zdDox",
        "databaseId": 1,
        "uri": "/hello-world/",
        "slug": "hello-world",
        "title": "Hello World",
        "date": "2024-01-15T10:00:00",
        "content": "<p>First post.</p>",
        "excerpt": "<p>First post.</p>",
        "categories": {"nodes": [{"id": "c1", "name": "News", "slug": "news"}]},
        "author": {"node": {"id": "u1", "name": "Jane Smith", "avatar": {"url": "https://example.com/a.png"}}},
    }
    data.update(overrides)
    return data


def course_payload(**overrides):
    data = {
        "__typename": "FlmsCourse",
        "id": "Y291cnNlOjk=",
        "databaseId": 9,
        "uri": "/course/ethics/",
        "slug": "ethics",
        "title": "Ethics for CPAs",
        "courseNumber": "101",
        "courseDescription": "<p>Professional ethics.</p>",
        "wooProductId": 555,
        "courseCredits": [{"type": "cpe", "name": "CPA/CPE", "credits": "4"}],
        "courseMaterials": [{"title": "Workbook", "file": "https://example.com/workbook.pdf"}],
    }
    data.update(overrides)
    return data
