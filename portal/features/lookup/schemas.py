from typing import Optional
from pydantic import BaseModel


class ClassNameItem(BaseModel):
    class_name: str


class SemesterItem(BaseModel):
    semester: int


class SectionItem(BaseModel):
    section: str


class RecordDetails(BaseModel):
    """Full record as shown on the portal's class page."""
    id: int
    class_name: str
    semester: int
    section: Optional[str] = None
    academic_year: Optional[str] = None
    mentor_name: Optional[str] = None
    designation: Optional[str] = None
    contact: Optional[str] = None
    timetable_link: Optional[str] = None
    syllabus_link: Optional[str] = None
    mentor_photo: Optional[str] = None