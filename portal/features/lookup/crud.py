from typing import Dict, List, Optional

from portal.database.record_store import TABLE_NAME, RecordStore

DETAIL_COLUMNS = """
    id, class_name, semester, section, academic_year,
    mentor_name, designation, contact,
    timetable_link, syllabus_link, mentor_photo
"""


def get_class_names(store: RecordStore) -> List[Dict]:
    query = f"""
    SELECT DISTINCT class_name
    FROM {TABLE_NAME}
    ORDER BY class_name
    """
    return store.fetch_all("list classes", query)


def get_semesters(store: RecordStore, class_name: str) -> List[Dict]:
    query = f"""
    SELECT DISTINCT semester
    FROM {TABLE_NAME}
    WHERE class_name = ?
    ORDER BY semester
    """
    return store.fetch_all("list semesters", query, (class_name,))


def get_sections(store: RecordStore, class_name: str, semester: int) -> List[Dict]:
    """Sections of a class/semester. Rows without a section are left out."""
    query = f"""
    SELECT DISTINCT section
    FROM {TABLE_NAME}
    WHERE class_name = ?
      AND semester = ?
      AND section IS NOT NULL
      AND TRIM(section) <> ''
    ORDER BY section
    """
    return store.fetch_all("list sections", query, (class_name, semester))


def get_details(store: RecordStore, class_name: str, semester: int, section: str) -> Optional[Dict]:
    """
    Fetch the record for a lookup key.

    ``class_name`` and ``section`` must already be trimmed. An empty section
    matches rows whose stored section is NULL or blank. Duplicate keys resolve
    to the lowest id.
    """
    if section:
        query = f"""
        SELECT {DETAIL_COLUMNS}
        FROM {TABLE_NAME}
        WHERE TRIM(class_name) = ?
          AND semester = ?
          AND TRIM(section) = ?
        ORDER BY id
        LIMIT 1
        """
        params = (class_name, semester, section)
    else:
        query = f"""
        SELECT {DETAIL_COLUMNS}
        FROM {TABLE_NAME}
        WHERE TRIM(class_name) = ?
          AND semester = ?
          AND (section IS NULL OR TRIM(section) = '')
        ORDER BY id
        LIMIT 1
        """
        params = (class_name, semester)

    return store.fetch_one("get details", query, params)
