from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from quizquest.schemas.connection import Connection, TeacherListing
from quizquest.dependencies.auth import require_student
from quizquest.utils.connection_status import ConnectionStatus
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def matches_search(teacher: dict, q: Optional[str]) -> bool:
    if not q:
        return True
    needle = q.lower()
    return needle in (teacher.get("full_name") or "").lower() \
        or needle in (teacher.get("email") or "").lower()


# -------- Find teachers --------
@router.get("", response_model=List[TeacherListing])
def list_teachers(q: Optional[str] = Query(None, description="Filter by name or email"), context=Depends(require_student)):
    supabase = context["supabase"]
    student_id = context["user_id"]

    teacher_roles = supabase.table("user_roles").select("user_id").eq("role", "teacher").execute().data
    teacher_ids = [r["user_id"] for r in teacher_roles]
    if not teacher_ids:
        return []

    profiles = supabase \
        .table("profiles") \
        .select("user_id, full_name, email, bio") \
        .in_("user_id", teacher_ids) \
        .execute().data

    connections = supabase \
        .table("teacher_student_connections") \
        .select("teacher_id, status") \
        .eq("student_id", student_id) \
        .execute().data
    status_by_teacher = {c["teacher_id"]: c["status"] for c in connections}

    return [
        TeacherListing(
            user_id=p["user_id"],
            full_name=p["full_name"],
            email=p["email"],
            bio=p.get("bio"),
            connection_status=status_by_teacher.get(p["user_id"], "none"),
        )
        for p in profiles
        if matches_search(p, q)
    ]


# -------- Request a connection --------
@router.post("/{teacher_id}/connect", response_model=Connection, status_code=201)
def request_connection(teacher_id: str, context=Depends(require_student)):
    supabase = context["supabase"]
    student_id = context["user_id"]

    # Verify the target is a teacher
    teacher_role = supabase.table("user_roles").select("role").eq("user_id", teacher_id).eq("role", "teacher").execute()
    if not teacher_role.data:
        raise HTTPException(status_code=404, detail="Teacher not found")

    existing = supabase \
        .table("teacher_student_connections") \
        .select("id, status") \
        .eq("teacher_id", teacher_id) \
        .eq("student_id", student_id) \
        .execute()
    if existing.data:
        raise HTTPException(
            status_code=409,
            detail=f"A connection request already exists ({existing.data[0]['status']})"
        )

    response = supabase.table("teacher_student_connections").insert({
        "teacher_id": teacher_id,
        "student_id": student_id,
        "status": ConnectionStatus.PENDING.value,
    }).execute()

    logger.info(f"Student {student_id} requested connection with teacher {teacher_id}")
    return response.data[0]
