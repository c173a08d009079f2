#  Read-only endpoints behind the portal's class / semester / section pickers.
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from portal.core.errors import StoreError
from portal.database.record_store import RecordStore, get_record_store
from portal.features.lookup.crud import get_class_names, get_details, get_sections, get_semesters
from portal.features.lookup.schemas import ClassNameItem, RecordDetails, SectionItem, SemesterItem
from portal.utils.fields import clean_string, coerce_semester, normalize_section

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/classes", response_model=List[ClassNameItem])
def fetch_classes(store: RecordStore = Depends(get_record_store)):
    """Distinct class names, sorted."""
    try:
        return get_class_names(store)
    except StoreError:
        return JSONResponse(status_code=500, content=[])


@router.get("/semesters", response_model=List[SemesterItem])
def fetch_semesters(
    class_name: Optional[str] = Query(None, alias="class"),
    store: RecordStore = Depends(get_record_store),
):
    """Distinct semesters offered for a class, ascending."""
    try:
        return get_semesters(store, class_name or "")
    except StoreError:
        return JSONResponse(status_code=500, content=[])


@router.get("/sections", response_model=List[SectionItem])
def fetch_sections(
    class_name: Optional[str] = Query(None, alias="class"),
    semester: Optional[str] = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """
    Distinct named sections for a class and semester. An empty list means the
    caller should ask for details without a section.
    """
    semester_value = coerce_semester(semester)
    if semester_value is None:
        return []
    try:
        return get_sections(store, class_name or "", semester_value)
    except StoreError:
        return JSONResponse(status_code=500, content=[])


@router.get("/details", response_model=Optional[RecordDetails])
def fetch_details(
    class_name: Optional[str] = Query(None, alias="class"),
    semester: Optional[str] = Query(None),
    section: Optional[str] = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """Single record for (class, semester, section), or null when none matches."""
    semester_value = coerce_semester(semester)
    if semester_value is None:
        return None
    try:
        return get_details(store, clean_string(class_name), semester_value, normalize_section(section))
    except StoreError:
        return JSONResponse(status_code=500, content=None)
