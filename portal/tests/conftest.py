from contextlib import contextmanager
import sqlite3

import pytest
from fastapi.testclient import TestClient

from portal.app import create_application
from portal.core.config import Settings
from portal.database.record_store import RecordStore, get_record_store

CREATE_TABLE = """
CREATE TABLE class_semester_info (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    class_name TEXT NOT NULL,
    semester INTEGER NOT NULL,
    section TEXT,
    academic_year TEXT,
    mentor_name TEXT,
    designation TEXT,
    contact TEXT,
    timetable_link TEXT,
    syllabus_link TEXT,
    mentor_photo TEXT
)
"""


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "portal.db")
    conn = sqlite3.connect(path)
    conn.execute(CREATE_TABLE)
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def sqlite_connection():
    """Build a connection context manager factory for a SQLite file."""

    def _factory(path, connect=sqlite3.connect):
        @contextmanager
        def _connection():
            conn = connect(path)
            try:
                yield conn
            finally:
                conn.close()

        return _connection

    return _factory


@pytest.fixture
def store(db_path, sqlite_connection):
    return RecordStore(connection=sqlite_connection(db_path), errors=(sqlite3.Error,))


@pytest.fixture
def broken_store(tmp_path, sqlite_connection):
    """Store pointing at a database without the table: every query fails."""
    path = str(tmp_path / "empty.db")
    return RecordStore(connection=sqlite_connection(path), errors=(sqlite3.Error,))


@pytest.fixture
def upload_root(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_root):
    return Settings(upload_root=str(upload_root), report_missing_records=False)


@pytest.fixture
def make_client(store):
    def _make(settings, record_store=None):
        application = create_application(settings)
        application.dependency_overrides[get_record_store] = lambda: record_store or store
        return TestClient(application)

    return _make


@pytest.fixture
def client(make_client, settings):
    return make_client(settings)


@pytest.fixture
def insert_row(db_path):
    """Insert a raw row, bypassing the API's normalization."""

    def _insert(class_name, semester, section=None, **extra):
        row = {"class_name": class_name, "semester": semester, "section": section}
        row.update(extra)
        columns = ", ".join(row.keys())
        placeholders = ", ".join(["?" for _ in row])
        conn = sqlite3.connect(db_path)
        cursor = conn.execute(
            f"INSERT INTO class_semester_info ({columns}) VALUES ({placeholders})",
            tuple(row.values()),
        )
        conn.commit()
        record_id = cursor.lastrowid
        conn.close()
        return record_id

    return _insert


@pytest.fixture
def fetch_row(db_path):
    def _fetch(record_id):
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        row = conn.execute("SELECT * FROM class_semester_info WHERE id = ?", (record_id,)).fetchone()
        conn.close()
        return dict(row) if row else None

    return _fetch


@pytest.fixture
def all_rows(db_path):
    def _all():
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        rows = conn.execute("SELECT * FROM class_semester_info ORDER BY id").fetchall()
        conn.close()
        return [dict(row) for row in rows]

    return _all
