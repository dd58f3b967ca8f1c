from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

# --- Teacher <-> student connections ---
ConnectionStatusValue = Literal["pending", "approved", "rejected"]


class Connection(BaseModel):
    id: Optional[str] = None
    teacher_id: str
    student_id: str
    status: ConnectionStatusValue = "pending"
    created_at: Optional[datetime] = None


class ConnectionStatusUpdate(BaseModel):
    status: Literal["approved", "rejected"]


class StudentSummary(BaseModel):
    full_name: str
    email: str
    bio: Optional[str] = None


class ConnectionRequest(BaseModel):
    id: str
    student_id: str
    status: ConnectionStatusValue
    created_at: Optional[datetime] = None
    student: StudentSummary


class TeacherListing(BaseModel):
    user_id: str
    full_name: str
    email: str
    bio: Optional[str] = None
    connection_status: Literal["none", "pending", "approved", "rejected"] = "none"
