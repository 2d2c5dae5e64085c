"""News API behaviour: defaults, view counter, listings and partial updates."""

from concurrent.futures import ThreadPoolExecutor

from portal.models.news import News
from portal.schemas.news import NewsCreate, NewsUpdate
from portal.services import news_service
from tests.conftest import news_payload


def test_create_news_defaults(client):
    resp = client.post("/api/news", json=news_payload())
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["id"] > 0
    assert data["view_count"] == 0
    assert data["status"] is False
    assert data["featured_image"] is None
    assert data["publish_date"].startswith("2026-01-10T09:00:00")


def test_create_news_rejects_empty_title(client):
    resp = client.post("/api/news", json=news_payload(title=""))
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "validation_error"
    assert body["field"] == "title"


def test_create_news_rejects_unknown_category(client, db):
    resp = client.post("/api/news", json=news_payload(category="olahraga"))
    assert resp.status_code == 422
    assert resp.json()["field"] == "category"
    assert db.query(News).count() == 0


def test_create_news_rejects_unparseable_date(client):
    resp = client.post("/api/news", json=news_payload(publish_date="kemarin"))
    assert resp.status_code == 422
    assert resp.json()["field"] == "publish_date"


def test_get_news_by_id_increments_view_count(client, db):
    news_id = client.post("/api/news", json=news_payload()).json()["id"]

    first = client.get(f"/api/news/{news_id}")
    second = client.get(f"/api/news/{news_id}")
    assert first.json()["view_count"] == 1
    assert second.json()["view_count"] == 2

    stored = db.query(News).filter(News.id == news_id).one()
    assert stored.view_count == 2


def test_get_news_by_id_missing_returns_null(client):
    resp = client.get("/api/news/999")
    assert resp.status_code == 200
    assert resp.json() is None


def test_view_count_sequential_service_calls(db):
    news = news_service.create_news(db, NewsCreate(**news_payload()))
    for _ in range(3):
        news_service.get_news_by_id(db, news.id)
    result = news_service.get_news_by_id(db, news.id)
    assert result.view_count == 4


def test_concurrent_reads_keep_every_view(client, session_factory):
    news_id = client.post("/api/news", json=news_payload()).json()["id"]

    def read_once(_):
        session = session_factory()
        try:
            return news_service.get_news_by_id(session, news_id).view_count
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=8) as pool:
        counts = list(pool.map(read_once, range(40)))

    assert sorted(counts) == list(range(1, 41))
    check = session_factory()
    try:
        assert check.query(News).filter(News.id == news_id).one().view_count == 40
    finally:
        check.close()


def test_round_trip_matches_except_view_count(client):
    created = client.post("/api/news", json=news_payload(featured_image="/uploads/a.png", status=True)).json()
    fetched = client.get(f"/api/news/{created['id']}").json()
    assert fetched["view_count"] == created["view_count"] + 1
    for key in ("id", "title", "content", "publish_date", "author", "category",
                "featured_image", "status", "created_at"):
        assert fetched[key] == created[key]


def test_popular_news_sorted_by_view_count(client):
    ids = [client.post("/api/news", json=news_payload(title=f"N{i}")).json()["id"] for i in range(3)]
    for _ in range(3):
        client.get(f"/api/news/{ids[1]}")
    client.get(f"/api/news/{ids[2]}")

    rows = client.get("/api/news/popular").json()
    counts = [row["view_count"] for row in rows]
    assert counts == sorted(counts, reverse=True)
    assert rows[0]["id"] == ids[1]


def test_latest_news_excludes_drafts(client):
    client.post("/api/news", json=news_payload(title="Draft", status=False))
    client.post("/api/news", json=news_payload(title="Old", status=True, publish_date="2026-01-01T08:00:00"))
    client.post("/api/news", json=news_payload(title="New", status=True, publish_date="2026-02-01T08:00:00"))

    rows = client.get("/api/news/latest").json()
    assert [row["title"] for row in rows] == ["New", "Old"]


def test_get_news_filters_and_paginates(client):
    client.post("/api/news", json=news_payload(title="A", category="kegiatan", publish_date="2026-01-01T08:00:00"))
    client.post("/api/news", json=news_payload(title="B", category="kegiatan", publish_date="2026-01-02T08:00:00"))
    client.post("/api/news", json=news_payload(title="C", category="umum", status=True))

    kegiatan = client.get("/api/news", params={"category": "kegiatan"}).json()
    assert [row["title"] for row in kegiatan] == ["B", "A"]

    published = client.get("/api/news", params={"status": "true"}).json()
    assert [row["title"] for row in published] == ["C"]

    page = client.get("/api/news", params={"category": "kegiatan", "limit": 1, "offset": 1}).json()
    assert [row["title"] for row in page] == ["A"]


def test_get_news_rejects_non_positive_limit(client):
    resp = client.get("/api/news", params={"limit": 0})
    assert resp.status_code == 422
    assert resp.json()["field"] == "limit"


def test_update_news_patches_only_given_fields(client):
    created = client.post("/api/news", json=news_payload()).json()
    resp = client.put(f"/api/news/{created['id']}", json={"title": "Judul Baru", "status": True})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["title"] == "Judul Baru"
    assert data["status"] is True
    assert data["content"] == created["content"]
    assert data["author"] == created["author"]


def test_update_news_can_clear_featured_image(client):
    created = client.post("/api/news", json=news_payload(featured_image="/uploads/a.png")).json()
    data = client.put(f"/api/news/{created['id']}", json={"featured_image": None}).json()
    assert data["featured_image"] is None


def test_update_news_empty_patch_returns_existing_record(db):
    news = news_service.create_news(db, NewsCreate(**news_payload()))
    result = news_service.update_news(db, news.id, NewsUpdate())
    assert result is not None
    assert result.title == "Berita Uji"


def test_update_news_missing_returns_null(client):
    resp = client.put("/api/news/404", json={"title": "X"})
    assert resp.status_code == 200
    assert resp.json() is None


def test_delete_news(client):
    news_id = client.post("/api/news", json=news_payload()).json()["id"]
    assert client.delete(f"/api/news/{news_id}").json() == {"success": True}
    assert client.delete(f"/api/news/{news_id}").json() == {"success": False}
    assert client.get(f"/api/news/{news_id}").json() is None
