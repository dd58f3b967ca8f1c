from fastapi import APIRouter, Depends, HTTPException
from typing import List
from quizquest.schemas.connection import ConnectionRequest, ConnectionStatusUpdate, StudentSummary
from quizquest.dependencies.auth import require_teacher
from quizquest.utils.connection_status import transition, InvalidTransition
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

UNKNOWN_STUDENT = StudentSummary(full_name="Unknown", email="Unknown", bio=None)


# -------- Connection requests addressed to the logged in teacher --------
@router.get("", response_model=List[ConnectionRequest])
def list_connection_requests(context=Depends(require_teacher)):
    supabase = context["supabase"]
    teacher_id = context["user_id"]

    connections = supabase \
        .table("teacher_student_connections") \
        .select("id, student_id, status, created_at") \
        .eq("teacher_id", teacher_id) \
        .order("created_at", desc=True) \
        .execute().data
    if not connections:
        return []

    student_ids = [c["student_id"] for c in connections]
    profiles = {
        p["user_id"]: p for p in supabase.table("profiles")
        .select("user_id, full_name, email, bio")
        .in_("user_id", student_ids)
        .execute().data
    }

    return [
        ConnectionRequest(
            id=c["id"],
            student_id=c["student_id"],
            status=c["status"],
            created_at=c.get("created_at"),
            student=StudentSummary(
                full_name=profiles[c["student_id"]]["full_name"],
                email=profiles[c["student_id"]]["email"],
                bio=profiles[c["student_id"]].get("bio"),
            ) if c["student_id"] in profiles else UNKNOWN_STUDENT,
        )
        for c in connections
    ]


# -------- Approve / reject --------
@router.put("/{connection_id}")
def update_connection_status(connection_id: str, payload: ConnectionStatusUpdate, context=Depends(require_teacher)):
    supabase = context["supabase"]
    teacher_id = context["user_id"]

    # Verify connection is addressed to the user
    existing = supabase \
        .table("teacher_student_connections") \
        .select("*") \
        .eq("id", connection_id) \
        .eq("teacher_id", teacher_id) \
        .execute()
    if not existing.data:
        raise HTTPException(status_code=404, detail="Connection request not found")

    current_status = existing.data[0]["status"]
    try:
        new_status = transition(current_status, payload.status)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))

    response = supabase \
        .table("teacher_student_connections") \
        .update({"status": new_status.value}) \
        .eq("id", connection_id) \
        .execute()

    logger.info(f"Connection {connection_id}: {current_status} -> {new_status.value}")
    return {
        "message": f"Connection request has been {new_status.value}",
        "connection": response.data[0] if response.data else None,
    }
