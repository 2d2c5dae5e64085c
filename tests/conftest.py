import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from portal.config import settings
from portal.database import Base, get_db
from portal.main import app
from portal.models.user import User
from portal.utils.security import hash_password

TEST_DB_URL = "sqlite:///./test_portal.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

settings.BCRYPT_ROUNDS = 4


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def session_factory():
    return TestingSession


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(username="admin", email="admin@example.go.id",
                      password_hash=hash_password("admin123"), role="admin"),
        "editor": User(username="editor", email="editor@example.go.id",
                       password_hash=hash_password("editor123"), role="editor"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def news_payload(**overrides) -> dict:
    payload = {
        "title": "Berita Uji",
        "content": "<p>Isi berita</p>",
        "publish_date": "2026-01-10T09:00:00",
        "author": "Humas",
        "category": "umum",
    }
    payload.update(overrides)
    return payload


def login_headers(client, username: str, password: str) -> dict:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}
