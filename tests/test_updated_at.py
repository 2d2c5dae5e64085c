"""Every write path refreshes updated_at, including empty patches and upserts."""

from datetime import datetime, timezone

import pytest

from portal.models.announcement import Announcement
from portal.models.download import Download
from portal.models.event import Event
from portal.models.news import News
from portal.models.static_content import StaticContent
from portal.models.user import User
from portal.models.website_config import WebsiteConfig
from tests.conftest import news_payload

STALE = datetime(2020, 1, 1, 8, 0)

CRUD_CASES = [
    (News, "/api/news", news_payload(), {"title": "Judul Baru"}),
    (
        Announcement,
        "/api/announcements",
        {"title": "Pengumuman", "description": "Isi", "publish_date": "2026-03-01T08:00:00"},
        {"status": False},
    ),
    (
        Download,
        "/api/downloads",
        {"document_name": "Formulir", "publisher": "Sekretariat", "category": "formulir",
         "file_path": "/uploads/f.pdf", "description": "Formulir"},
        {"category": "panduan"},
    ),
    (
        Event,
        "/api/events",
        {"event_name": "Rapat", "start_date": "2026-06-01T09:00:00", "end_date": "2026-06-01T12:00:00",
         "time": "09:00 WIB", "location": "Aula", "description": "Rapat", "organizer": "Sekretariat"},
        {"location": "Ruang 2"},
    ),
    (
        User,
        "/api/users",
        {"username": "operator", "email": "operator@example.go.id", "password": "rahasia1"},
        {"email": "op@example.go.id"},
    ),
]


def _parse(text: str) -> datetime:
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


def _make_stale(db, model, **criteria):
    db.query(model).filter_by(**criteria).update({model.updated_at: STALE}, synchronize_session=False)
    db.commit()


@pytest.mark.parametrize(
    "model, path, create, patch",
    CRUD_CASES,
    ids=[case[0].__tablename__ for case in CRUD_CASES],
)
def test_update_refreshes_updated_at(client, db, model, path, create, patch):
    created = client.post(path, json=create)
    assert created.status_code == 200, created.text
    row_id = created.json()["id"]

    for body in (patch, {}):
        _make_stale(db, model, id=row_id)
        resp = client.put(f"{path}/{row_id}", json=body)
        assert resp.status_code == 200, resp.text
        assert _parse(resp.json()["updated_at"]) > STALE.replace(tzinfo=timezone.utc)

        db.expire_all()
        assert db.query(model).filter(model.id == row_id).one().updated_at > STALE


@pytest.mark.parametrize(
    "model, path, body",
    [
        (StaticContent, "/api/static-content/visi_misi", {"title": "Visi", "content": "<p>Visi</p>"}),
        (WebsiteConfig, "/api/website-config/footer_content", {"value": "Jl. Merdeka No. 1"}),
    ],
    ids=["static_content", "website_config"],
)
def test_upsert_refreshes_updated_at(client, db, model, path, body):
    assert client.put(path, json=body).status_code == 200
    key = path.rsplit("/", 1)[-1]
    _make_stale(db, model, key=key)

    resp = client.put(path, json=body)
    assert resp.status_code == 200, resp.text
    assert _parse(resp.json()["updated_at"]) > STALE.replace(tzinfo=timezone.utc)
