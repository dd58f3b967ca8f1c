from fastapi import APIRouter, Depends
from quizquest.dependencies.auth import user_supabase_client, get_user_role
from quizquest.utils.connection_status import ConnectionStatus

router = APIRouter()


def count_connections(supabase, user_id: str, role: str, status: ConnectionStatus) -> int:
    column = "teacher_id" if role == "teacher" else "student_id"
    response = supabase \
        .table("teacher_student_connections") \
        .select("id", count="exact") \
        .eq(column, user_id) \
        .eq("status", status.value) \
        .execute()
    return response.count or 0


# -------- Dashboard: profile, role and connection stats --------
@router.get("")
def get_dashboard(context=Depends(user_supabase_client), role: str = Depends(get_user_role)):
    supabase = context["supabase"]
    user_id = context["user_id"]

    profile_res = supabase.table("profiles").select("*").eq("user_id", user_id).execute()

    return {
        "profile": profile_res.data[0] if profile_res.data else None,
        "role": role,
        "connection_stats": {
            "total": count_connections(supabase, user_id, role, ConnectionStatus.APPROVED),
            "pending": count_connections(supabase, user_id, role, ConnectionStatus.PENDING),
        },
    }
