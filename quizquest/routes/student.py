from fastapi import APIRouter, Depends
from quizquest.dependencies.auth import require_student
from quizquest.utils.connection_status import ConnectionStatus

router = APIRouter()

QUIZ_LISTING_COLUMNS = "id, teacher_id, course_id, topic_id, title, description, time_limit, questions_per_page, created_at"


# -------- Published quizzes from approved teachers --------
@router.get("/quizzes")
def get_available_quizzes(context=Depends(require_student)):
    supabase = context["supabase"]
    student_id = context["user_id"]

    approved = supabase \
        .table("teacher_student_connections") \
        .select("teacher_id") \
        .eq("student_id", student_id) \
        .eq("status", ConnectionStatus.APPROVED.value) \
        .execute().data
    teacher_ids = [c["teacher_id"] for c in approved]
    if not teacher_ids:
        return []

    response = supabase \
        .table("quizzes") \
        .select(QUIZ_LISTING_COLUMNS) \
        .in_("teacher_id", teacher_ids) \
        .eq("is_published", True) \
        .order("created_at", desc=True) \
        .execute()
    return response.data
