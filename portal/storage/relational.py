"""
Relational storage: one row per application, one row for About Us.

Ids come from the database (SERIAL / AUTOINCREMENT) via INSERT ... RETURNING,
so concurrent creations never compute the same id. The SQL runs on
PostgreSQL and on SQLite >= 3.35.
"""

from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from portal.db.postgres import get_db_session, init_schema, make_session_factory, test_postgres_connection
from portal.schemas.schemas import (
    ABOUT_US_ID, AboutUs, Application, ApplicationCreate, ApplicationSummary, ResumeFile
)
from portal.storage.base import StorageBackend, utcnow


APPLICATION_COLUMNS = """
    id, name, contact_info, department, branch, year, experience,
    resume_file_name, resume_file_content, resume_file_type, created_at
"""

# Listing columns: the resume payload stays in the database, only its presence is read
SUMMARY_COLUMNS = """
    id, name, contact_info, department, branch, year, experience,
    resume_file_name, resume_file_type, created_at,
    (COALESCE(resume_file_name, '') <> '' AND COALESCE(resume_file_content, '') <> '') AS has_resume
"""


def row_to_application(row) -> Application:
    m = row._mapping
    return Application(
        id=m["id"],
        name=m["name"],
        contact_info=m["contact_info"] or "",
        department=m["department"],
        branch=m["branch"] or "",
        year=m["year"] or "",
        experience=m["experience"] or "",
        resume_file_name=m["resume_file_name"] or None,
        resume_file_content=m["resume_file_content"] or None,
        resume_file_type=m["resume_file_type"] or None,
        created_at=m["created_at"],
    )


def row_to_summary(row) -> ApplicationSummary:
    m = row._mapping
    return ApplicationSummary(
        id=m["id"],
        name=m["name"],
        contact_info=m["contact_info"] or "",
        department=m["department"],
        branch=m["branch"] or "",
        year=m["year"] or "",
        experience=m["experience"] or "",
        resume_file_name=m["resume_file_name"] or None,
        resume_file_type=m["resume_file_type"] or None,
        # SQLite reports the flag as 0/1
        has_resume=bool(m["has_resume"]),
        created_at=m["created_at"],
    )


def row_to_about_us(row) -> AboutUs:
    m = row._mapping
    return AboutUs(id=m["id"], content=m["content"], updated_at=m["updated_at"])


class RelationalStorage(StorageBackend):
    name = "relational"

    def __init__(self, engine: Engine, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    def ensure_schema(self) -> None:
        init_schema(self.engine)

    def _list_applications(self) -> List[ApplicationSummary]:
        with get_db_session(self.session_factory) as db:
            result = db.execute(
                text(f"SELECT {SUMMARY_COLUMNS} FROM applications ORDER BY id DESC")
            )
            return [row_to_summary(row) for row in result.fetchall()]

    def _get_application(self, application_id: int) -> Optional[Application]:
        with get_db_session(self.session_factory) as db:
            row = db.execute(
                text(f"SELECT {APPLICATION_COLUMNS} FROM applications WHERE id = :id"),
                {"id": application_id}
            ).fetchone()
            return row_to_application(row) if row else None

    def _get_application_resume(self, application_id: int) -> Optional[ResumeFile]:
        with get_db_session(self.session_factory) as db:
            row = db.execute(
                text("""
                    SELECT resume_file_name, resume_file_content, resume_file_type
                    FROM applications WHERE id = :id
                """),
                {"id": application_id}
            ).fetchone()
        if row is None:
            return None
        file_name, content, mime_type = row
        if not file_name or not content:
            return None
        return ResumeFile(file_name=file_name, content=content, mime_type=mime_type or None)

    def _create_application(self, data: ApplicationCreate) -> Application:
        with get_db_session(self.session_factory) as db:
            row = db.execute(
                text(f"""
                    INSERT INTO applications (name, contact_info, department, branch, year, experience,
                        resume_file_name, resume_file_content, resume_file_type, created_at)
                    VALUES (:name, :contact_info, :department, :branch, :year, :experience,
                        :resume_file_name, :resume_file_content, :resume_file_type, :created_at)
                    RETURNING {APPLICATION_COLUMNS}
                """),
                {
                    **data.model_dump(),
                    # ISO text binds the same way on PostgreSQL (cast to timestamptz) and SQLite
                    "created_at": utcnow().isoformat(),
                }
            ).fetchone()
            return row_to_application(row)

    def _get_about_us(self) -> AboutUs:
        with get_db_session(self.session_factory) as db:
            db.execute(
                text("""
                    INSERT INTO about_us (id, content, updated_at)
                    VALUES (:id, :content, :updated_at)
                    ON CONFLICT (id) DO NOTHING
                """),
                {"id": ABOUT_US_ID, "content": self.default_about_us, "updated_at": utcnow().isoformat()}
            )
            row = db.execute(
                text("SELECT id, content, updated_at FROM about_us WHERE id = :id"),
                {"id": ABOUT_US_ID}
            ).fetchone()
            return row_to_about_us(row)

    def _update_about_us(self, content: str) -> AboutUs:
        with get_db_session(self.session_factory) as db:
            row = db.execute(
                text("""
                    INSERT INTO about_us (id, content, updated_at)
                    VALUES (:id, :content, :updated_at)
                    ON CONFLICT (id) DO UPDATE
                    SET content = EXCLUDED.content, updated_at = EXCLUDED.updated_at
                    RETURNING id, content, updated_at
                """),
                {"id": ABOUT_US_ID, "content": content, "updated_at": utcnow().isoformat()}
            ).fetchone()
            return row_to_about_us(row)

    def ping(self) -> bool:
        return test_postgres_connection(self.engine)
