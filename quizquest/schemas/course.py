from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


# --- Courses ---
class Course(BaseModel):
    id: Optional[str] = None
    teacher_id: str
    title: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateCourse(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value


# --- Topics ---
class Topic(BaseModel):
    id: Optional[str] = None
    course_id: str
    title: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateTopic(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value
