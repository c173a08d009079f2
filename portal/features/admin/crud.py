from typing import Any, Dict, List, Optional

from portal.core.errors import FieldValidationError
from portal.database.record_store import TABLE_NAME, RecordStore
from portal.utils.fields import clean_string, clean_string_or_none, normalize_section, parse_semester

EDITABLE_COLUMNS = (
    "class_name",
    "semester",
    "section",
    "academic_year",
    "mentor_name",
    "designation",
    "contact",
    "timetable_link",
)


def build_record_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Trim and default the editable fields shared by add and update.

    :param data: raw form or JSON values keyed by column name
    :type data: Dict[str, Any]
    :returns: values ready to bind, in ``EDITABLE_COLUMNS`` order
    :rtype: Dict[str, Any]
    :raises FieldValidationError: class name missing or semester not a number
    """
    class_name = clean_string(data.get("class_name"))
    if not class_name:
        raise FieldValidationError("Invalid class name", {"class_name": "Class name is required."})

    return {
        "class_name": class_name,
        "semester": parse_semester(data.get("semester")),
        "section": normalize_section(data.get("section")),
        "academic_year": clean_string_or_none(data.get("academic_year")),
        "mentor_name": clean_string_or_none(data.get("mentor_name")),
        "designation": clean_string_or_none(data.get("designation")),
        "contact": clean_string_or_none(data.get("contact")),
        "timetable_link": clean_string(data.get("timetable_link")),
    }


''' 
*** ADD RECORD ENDPOINT *** 
Insert a new row; attachment columns hold public upload paths or NULL
'''
def add_record(
    store: RecordStore,
    fields: Dict[str, Any],
    syllabus_link: Optional[str] = None,
    mentor_photo: Optional[str] = None,
) -> int:
    columns = list(EDITABLE_COLUMNS) + ["syllabus_link", "mentor_photo"]
    values = [fields[column] for column in EDITABLE_COLUMNS] + [syllabus_link, mentor_photo]
    placeholders = ", ".join(["?" for _ in columns])
    query = f"""
    INSERT INTO {TABLE_NAME} ({", ".join(columns)})
    VALUES ({placeholders})
    """
    return store.execute("add record", query, values)


''' 
*** LIST RECORDS ENDPOINT *** 
Summary projection of every row
'''
def list_records(store: RecordStore) -> List[Dict]:
    query = f"""
    SELECT id, class_name, semester, section,
           mentor_name, designation
    FROM {TABLE_NAME}
    ORDER BY class_name, semester, id
    """
    return store.fetch_all("list records", query)


def record_exists(store: RecordStore, record_id: int) -> bool:
    query = f"SELECT id FROM {TABLE_NAME} WHERE id = ?"
    return store.fetch_one("find record", query, (record_id,)) is not None


''' 
*** UPDATE RECORD ENDPOINT *** 
Full replace of the editable columns
'''
def update_record(store: RecordStore, record_id: int, fields: Dict[str, Any]) -> int:
    update_fields = ", ".join([f"{column} = ?" for column in EDITABLE_COLUMNS])
    values = [fields[column] for column in EDITABLE_COLUMNS] + [record_id]
    query = f"UPDATE {TABLE_NAME} SET {update_fields} WHERE id = ?"
    return store.execute("update record", query, values)


''' 
*** DELETE RECORD ENDPOINT *** 
'''
def delete_record(store: RecordStore, record_id: int) -> int:
    query = f"DELETE FROM {TABLE_NAME} WHERE id = ?"
    return store.execute("delete record", query, (record_id,))
