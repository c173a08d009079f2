import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from portal.core.config import Settings, get_settings
from portal.core.errors import FieldValidationError, RecordNotFound, StoreError
from portal.database.record_store import RecordStore, get_record_store
from portal.features.admin.crud import (
    add_record,
    build_record_fields,
    delete_record,
    list_records,
    record_exists,
    update_record,
)
from portal.features.admin.schemas import MessageResponse, RecordSummary, RecordUpdate
from portal.services.upload_storage import UploadStorage, get_upload_storage

logger = logging.getLogger(__name__)

router = APIRouter()


def _single_upload(field_name: str, files: Optional[List[UploadFile]]) -> Optional[UploadFile]:
    """Each attachment field takes at most one file."""
    files = [file for file in files or [] if file.filename]
    if len(files) > 1:
        raise FieldValidationError("Too many files", {field_name: "Only one file is allowed."})
    return files[0] if files else None


@router.post("/add", response_model=MessageResponse)
async def add_record_route(
    class_name: Optional[str] = Form(None),
    semester: Optional[str] = Form(None),
    section: Optional[str] = Form(None),
    academic_year: Optional[str] = Form(None),
    mentor_name: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    timetable_link: Optional[str] = Form(None),
    syllabus: Optional[List[UploadFile]] = File(None),
    mentor_photo: Optional[List[UploadFile]] = File(None),
    store: RecordStore = Depends(get_record_store),
    uploads: UploadStorage = Depends(get_upload_storage),
):
    """
    Create a record from a multipart form. Uploaded files are written first;
    if the insert then fails they are deleted again.
    """
    # Validate before touching the disk so a 400 never leaves files behind.
    fields = build_record_fields({
        "class_name": class_name,
        "semester": semester,
        "section": section,
        "academic_year": academic_year,
        "mentor_name": mentor_name,
        "designation": designation,
        "contact": contact,
        "timetable_link": timetable_link,
    })
    files = {
        "syllabus": _single_upload("syllabus", syllabus),
        "mentor_photo": _single_upload("mentor_photo", mentor_photo),
    }

    stored = []
    try:
        for field_name, file in files.items():
            saved = await uploads.save(field_name, file)
            if saved:
                stored.append(saved)
    except OSError as e:
        logger.error("Writing upload failed: %s", e)
        uploads.remove(stored)
        return JSONResponse(status_code=500, content={"error": "Upload failed"})

    links = {saved.field_name: saved.public_path for saved in stored}
    try:
        await run_in_threadpool(
            add_record,
            store,
            fields,
            syllabus_link=links.get("syllabus"),
            mentor_photo=links.get("mentor_photo"),
        )
    except Exception as e:
        if not isinstance(e, StoreError):
            logger.exception("Unexpected error while adding record")
        uploads.remove(stored)
        return JSONResponse(status_code=500, content={"error": "Insert failed"})

    logger.info("Added record for %s semester %s", fields["class_name"], fields["semester"])
    return {"message": "Record added successfully"}


@router.get("/records", response_model=List[RecordSummary])
def fetch_records(store: RecordStore = Depends(get_record_store)):
    """Every record, summary fields only, ordered by class then semester."""
    try:
        return list_records(store)
    except StoreError:
        return JSONResponse(status_code=500, content=[])


@router.put("/update/{record_id}", response_model=MessageResponse)
def update_record_route(
    record_id: int,
    data: RecordUpdate = Body(...),
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """
    Replace every editable field of a record. Attachments stay as they are.
    A missing id is only reported when ``report_missing_records`` is on.
    """
    fields = build_record_fields(data.model_dump())
    try:
        if settings.report_missing_records and not record_exists(store, record_id):
            raise RecordNotFound(record_id)
        update_record(store, record_id, fields)
    except StoreError:
        return JSONResponse(status_code=500, content={"error": "Update failed"})

    logger.info("Updated record %s", record_id)
    return {"message": "Record updated successfully"}


@router.delete("/delete/{record_id}", response_model=MessageResponse)
def delete_record_route(
    record_id: int,
    store: RecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
):
    """Delete a record by id."""
    try:
        rows_deleted = delete_record(store, record_id)
    except StoreError:
        return JSONResponse(status_code=500, content={"error": "Delete failed"})

    if rows_deleted == 0 and settings.report_missing_records:
        raise RecordNotFound(record_id)

    logger.info("Deleted record %s (%s row(s))", record_id, rows_deleted)
    return {"message": "Record deleted successfully"}
