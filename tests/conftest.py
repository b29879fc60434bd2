"""Shared fixtures: in-memory SQLite, a canned catalog and an API client."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from animelog import models  # noqa: F401
from animelog.core.interfaces import AnimeCatalogInterface, JikanError
from animelog.core.jikan_service import get_catalog_service
from animelog.db import Base, get_db
from animelog.main import app
from animelog.models.user import User
from animelog.repositories.user_repository import UserRepository
from animelog.schemas.anime import (
    JikanGenre, JikanPaginatedResponse, JikanSingleResponse
)


def make_anime(mal_id: int, title: Optional[str] = None, **extra) -> Dict:
    payload = {
        "mal_id": mal_id,
        "title": title or f"Anime {mal_id}",
        "images": {
            "jpg": {"image_url": f"https://cdn.test/{mal_id}.jpg", "large_image_url": f"https://cdn.test/{mal_id}l.jpg"},
            "webp": {"image_url": f"https://cdn.test/{mal_id}.webp", "large_image_url": f"https://cdn.test/{mal_id}l.webp"},
        },
        "score": 8.5,
        "genres": [{"mal_id": 1, "name": "Action"}],
        "type": "TV",
        "status": "Finished Airing",
    }
    payload.update(extra)
    return payload


def make_page(ids: List[int], has_next_page: bool = False, current_page: int = 1) -> Dict:
    return {
        "data": [make_anime(i) for i in ids],
        "pagination": {
            "last_visible_page": current_page + (1 if has_next_page else 0),
            "has_next_page": has_next_page,
            "current_page": current_page,
        },
    }


class FakeCatalog(AnimeCatalogInterface):
    """Canned catalog that records every call"""

    def __init__(self):
        self.calls = []
        self.details = {}
        self.fail_with: Optional[int] = None

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail_with is not None:
            raise JikanError(f"Jikan API error: {self.fail_with}", self.fail_with)

    def get_top_anime(self, page: int = 1):
        self._record("top", page)
        return JikanPaginatedResponse.model_validate(make_page(list(range(100, 115)), has_next_page=True, current_page=page))

    def search_anime(self, query: str, page: int = 1, genres: Optional[str] = None):
        self._record("search", query, page, genres)
        return JikanPaginatedResponse.model_validate(make_page([200, 201], current_page=page))

    def get_anime_by_id(self, mal_id: int):
        self._record("by_id", mal_id)
        if mal_id not in self.details:
            raise JikanError("Jikan API error: 404", 404)
        return JikanSingleResponse.model_validate({"data": self.details[mal_id]})

    def get_anime_by_genre(self, genre_ids: str, page: int = 1):
        self._record("by_genre", genre_ids, page)
        return JikanPaginatedResponse.model_validate(make_page(list(range(300, 312))))

    def get_seasonal_anime(self, page: int = 1):
        self._record("seasonal", page)
        return JikanPaginatedResponse.model_validate(make_page(list(range(400, 412))))

    def get_genres(self):
        self._record("genres")
        return [JikanGenre(mal_id=1, name="Action", count=5000), JikanGenre(mal_id=4, name="Comedy", count=7000)]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db_session) -> User:
    return UserRepository(db_session).create_user("Rin", "rin@example.com", None)


@pytest.fixture
def other_user(db_session) -> User:
    return UserRepository(db_session).create_user("Kai", "kai@example.com", None)


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def client(db_session, fake_catalog):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_service] = lambda: fake_catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client: TestClient, email: str = "ayu@example.com", password: str = "secret123") -> Dict[str, str]:
    """Register an account and return its auth headers"""
    resp = client.post("/auth/register", json={"name": "Ayu", "email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def auth_headers(client) -> Dict[str, str]:
    return register(client)
