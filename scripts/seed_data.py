"""Seed the database with the initial admin, default pages and sample content."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import timedelta
from portal.database import SessionLocal, engine, Base
import portal.models  # noqa: F401

from portal.models.announcement import Announcement
from portal.models.download import Download
from portal.models.event import Event
from portal.models.news import News
from portal.models.user import User
from portal.schemas.common import utcnow
from portal.schemas.static_content import StaticContentUpdate
from portal.schemas.website_config import WebsiteConfigUpdate
from portal.services import static_content_service, website_config_service
from portal.utils.security import hash_password

DEFAULT_STATIC_CONTENT = {
    "visi_misi": ("Visi dan Misi", "<p>Visi dan misi instansi.</p>"),
    "struktur_organisasi": ("Struktur Organisasi", "<p>Bagan struktur organisasi.</p>"),
}

DEFAULT_WEBSITE_CONFIG = {
    "header_logo": "/uploads/logo-header.png",
    "footer_logo": "/uploads/logo-footer.png",
    "footer_content": "Jl. Merdeka No. 1, Jakarta",
}


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for key, (title, content) in DEFAULT_STATIC_CONTENT.items():
            if not static_content_service.get_static_content_by_key(db, key):
                static_content_service.update_static_content(
                    db, key, StaticContentUpdate(title=title, content=content)
                )
        for key, value in DEFAULT_WEBSITE_CONFIG.items():
            if not website_config_service.get_website_config_by_key(db, key):
                website_config_service.update_website_config(db, key, WebsiteConfigUpdate(value=value))

        if db.query(User).count() > 0:
            print("Users already seeded. Skipping sample content.")
            return

        admin_password = os.environ.get("PORTAL_ADMIN_PASSWORD", "admin12345")
        db.add_all([
            User(username="admin", email="admin@example.go.id",
                 password_hash=hash_password(admin_password), role="admin"),
            User(username="editor", email="editor@example.go.id",
                 password_hash=hash_password("editor12345"), role="editor"),
        ])

        now = utcnow()
        db.add_all([
            News(title="Peluncuran Layanan Daring", content="<p>Layanan daring resmi diluncurkan.</p>",
                 publish_date=now - timedelta(days=2), author="Humas", category="umum", status=True),
            News(title="Seleksi Jabatan Fungsional", content="<p>Pendaftaran seleksi dibuka.</p>",
                 publish_date=now - timedelta(days=1), author="Bagian Kepegawaian",
                 category="kepegawaian", status=True),
            News(title="Draf Rencana Kerja", content="<p>Draf belum terbit.</p>",
                 publish_date=now, author="Perencanaan", category="pengembangan", status=False),
        ])
        db.add(Announcement(title="Libur Nasional", description="Kantor tutup pada hari libur nasional.",
                            publish_date=now, status=True))
        db.add(Download(document_name="Formulir Cuti", publisher="Bagian Kepegawaian", category="formulir",
                        file_path="/uploads/formulir-cuti.pdf", description="Formulir pengajuan cuti pegawai."))
        db.add(Event(event_name="Rapat Koordinasi", start_date=now + timedelta(days=3),
                     end_date=now + timedelta(days=3), time="09:00 - 12:00 WIB", location="Aula Utama",
                     description="Rapat koordinasi bulanan.", organizer="Sekretariat"))
        db.commit()
        print("Database seeded successfully.")
        print(f"  Admin login: admin / {admin_password}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
