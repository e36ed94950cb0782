import io
import json
from typing import List

import pytest
from fastapi.testclient import TestClient

from leetsearch.catalog.errors import TransportError
from leetsearch.catalog.mapper import filter_problems
from leetsearch.catalog.schemas import Problem, Question
from leetsearch.config import Settings
from leetsearch.main import create_app


def make_question(title, slug=None, difficulty="Easy", content="<p>...</p>", tags=()):
    return {
        "title": title,
        "titleSlug": slug or title.lower().replace(" ", "-"),
        "difficulty": difficulty,
        "content": content,
        "topicTags": [
            {"name": name, "slug": name.lower().replace(" ", "-")} for name in tags
        ],
    }


def graphql_body(questions, total=None) -> dict:
    return {
        "data": {
            "problemsetQuestionList": {
                "totalNum": len(questions) if total is None else total,
                "data": questions,
            }
        }
    }


CATALOG = [
    make_question("Two Sum", difficulty="Easy", tags=["Array", "Hash Table"]),
    make_question("Add Two Numbers", difficulty="Medium", tags=["Linked List", "Math", "Recursion"]),
    make_question("Two Sum II - Input Array Is Sorted", slug="two-sum-ii-input-array-is-sorted",
                  difficulty="Medium", tags=["Array", "Two Pointers", "Binary Search"]),
    # upstream fuzzy search also hands back titles that do not contain the keyword
    make_question("Pairs With Sum", difficulty="Hard", tags=["Array"]),
]


class FakeResponse(io.BytesIO):
    def __init__(self, payload, status=200):
        raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        super().__init__(raw)
        self.status = status


class FakeCatalogClient:
    """Stands in for ``LeetCodeClient`` in route tests."""

    def __init__(self, questions=None, error=None):
        self.questions = [Question.model_validate(q) for q in (questions or [])]
        self.error = error
        self.calls: List[str] = []

    def search_problems(self, search: str) -> List[Problem]:
        self.calls.append(search)
        if self.error is not None:
            raise self.error
        return filter_problems(self.questions, search)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        graphql_url="http://catalog.test/graphql",
        allowed_origins=["http://localhost:3000", "https://bruteforce-app.vercel.app"],
    )


@pytest.fixture()
def fake_catalog() -> FakeCatalogClient:
    return FakeCatalogClient(CATALOG)


@pytest.fixture()
def app(settings, fake_catalog):
    application = create_app(settings)
    application.state.catalog_client = fake_catalog
    return application


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def failing_catalog(app) -> FakeCatalogClient:
    fake = FakeCatalogClient(error=TransportError("upstream said 502 at http://catalog.test/graphql"))
    app.state.catalog_client = fake
    return fake
