"""Announcement API behaviour: default status and public/admin listings."""


def _payload(**overrides):
    payload = {
        "title": "Pengumuman",
        "description": "Isi pengumuman",
        "publish_date": "2026-03-01T08:00:00",
    }
    payload.update(overrides)
    return payload


def test_create_announcement_defaults_to_active(client):
    resp = client.post("/api/announcements", json=_payload())
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["status"] is True
    assert data["attachment_file"] is None

    public_ids = [row["id"] for row in client.get("/api/announcements").json()]
    assert data["id"] in public_ids


def test_public_listing_hides_inactive_and_orders_by_publish_date(client):
    client.post("/api/announcements", json=_payload(title="Lama", publish_date="2026-01-01T08:00:00"))
    client.post("/api/announcements", json=_payload(title="Baru", publish_date="2026-02-01T08:00:00"))
    client.post("/api/announcements", json=_payload(title="Nonaktif", status=False))

    rows = client.get("/api/announcements").json()
    assert [row["title"] for row in rows] == ["Baru", "Lama"]


def test_admin_listing_includes_all_newest_created_first(client):
    first = client.post("/api/announcements", json=_payload(title="Pertama", status=False)).json()
    second = client.post("/api/announcements", json=_payload(title="Kedua")).json()

    rows = client.get("/api/announcements/all").json()
    assert [row["id"] for row in rows] == [second["id"], first["id"]]


def test_listing_default_page_size_is_ten(client):
    for i in range(12):
        client.post("/api/announcements", json=_payload(title=f"P{i}"))
    assert len(client.get("/api/announcements").json()) == 10
    assert len(client.get("/api/announcements/all").json()) == 10
    assert len(client.get("/api/announcements", params={"limit": 5, "offset": 10}).json()) == 2


def test_get_update_delete_announcement(client):
    created = client.post("/api/announcements", json=_payload(attachment_file="/uploads/p.pdf")).json()
    ann_id = created["id"]

    assert client.get(f"/api/announcements/{ann_id}").json()["title"] == "Pengumuman"

    updated = client.put(f"/api/announcements/{ann_id}", json={"status": False}).json()
    assert updated["status"] is False
    assert updated["attachment_file"] == "/uploads/p.pdf"

    assert client.delete(f"/api/announcements/{ann_id}").json()["success"] is True
    assert client.get(f"/api/announcements/{ann_id}").json() is None
    assert client.put(f"/api/announcements/{ann_id}", json={"title": "X"}).json() is None
