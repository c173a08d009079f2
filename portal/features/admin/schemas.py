from typing import Optional, Union
from pydantic import BaseModel


class RecordUpdate(BaseModel):
    """Schema for replacing a record's descriptive fields. Attachments are not editable."""
    class_name: Optional[str] = None
    semester: Optional[Union[int, str]] = None
    section: Optional[str] = None
    academic_year: Optional[str] = None
    mentor_name: Optional[str] = None
    designation: Optional[str] = None
    contact: Optional[str] = None
    timetable_link: Optional[str] = None


class RecordSummary(BaseModel):
    id: int
    class_name: str
    semester: int
    section: Optional[str] = None
    mentor_name: Optional[str] = None
    designation: Optional[str] = None

class MessageResponse(BaseModel):
    message: str
