from fastapi import APIRouter, Depends, HTTPException
from typing import List
from quizquest.schemas.quiz import Quiz, PublishUpdate, QuizSettings, StoredQuizSettings, Question, CreateQuestion
from quizquest.dependencies.auth import require_teacher
from quizquest.dependencies.ownership import get_owned_quiz
from quizquest.services.question_builder import build_question_payload, QuestionValidationError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

SETTINGS_FIELDS = ("shuffle_questions", "marks_per_question", "questions_per_page", "time_limit")


# -------- Quizzes --------
@router.get("/{quiz_id}", response_model=Quiz)
def get_quiz(quiz_id: str, context=Depends(require_teacher)):
    return get_owned_quiz(context["supabase"], quiz_id, context["user_id"])


@router.delete("/{quiz_id}")
def delete_quiz(quiz_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_quiz(supabase, quiz_id, context["user_id"])

    supabase.table("quizzes").delete().eq("id", quiz_id).execute()
    logger.info(f"Deleted quiz {quiz_id}")
    return {"message": "Quiz has been removed"}


def set_published(supabase, quiz_id: str, is_published: bool) -> dict:
    response = supabase.table("quizzes").update({"is_published": is_published}).eq("id", quiz_id).execute()
    logger.info(f"Quiz {quiz_id} {'published' if is_published else 'unpublished'}")
    return {
        "is_published": is_published,
        "message": "Students can now access this quiz" if is_published
        else "Students can no longer access this quiz",
        "quiz": response.data[0] if response.data else None,
    }


@router.put("/{quiz_id}/publish")
def update_publish_status(quiz_id: str, payload: PublishUpdate, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_quiz(supabase, quiz_id, context["user_id"])
    return set_published(supabase, quiz_id, payload.is_published)


@router.post("/{quiz_id}/toggle-publish")
def toggle_publish(quiz_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    quiz = get_owned_quiz(supabase, quiz_id, context["user_id"])
    return set_published(supabase, quiz_id, not quiz["is_published"])


# -------- Settings --------
@router.get("/{quiz_id}/settings", response_model=StoredQuizSettings)
def get_quiz_settings(quiz_id: str, context=Depends(require_teacher)):
    quiz = get_owned_quiz(context["supabase"], quiz_id, context["user_id"])
    return StoredQuizSettings(**{field: quiz[field] for field in SETTINGS_FIELDS if field in quiz})


@router.put("/{quiz_id}/settings", response_model=QuizSettings)
def update_quiz_settings(quiz_id: str, settings: QuizSettings, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_quiz(supabase, quiz_id, context["user_id"])

    supabase.table("quizzes").update(settings.model_dump()).eq("id", quiz_id).execute()
    return settings


# -------- Questions --------
@router.get("/{quiz_id}/questions", response_model=List[Question])
def get_quiz_questions(quiz_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_quiz(supabase, quiz_id, context["user_id"])

    response = supabase \
        .table("questions") \
        .select("*") \
        .eq("quiz_id", quiz_id) \
        .order("order_index") \
        .execute()
    return response.data


@router.post("/{quiz_id}/questions", response_model=Question, status_code=201)
def create_question(quiz_id: str, question: CreateQuestion, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_quiz(supabase, quiz_id, context["user_id"])

    existing = supabase.table("questions").select("id", count="exact").eq("quiz_id", quiz_id).execute()
    order_index = existing.count if existing.count is not None else len(existing.data)

    try:
        question_dict = build_question_payload(quiz_id, question, order_index)
    except QuestionValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    response = supabase.table("questions").insert(question_dict).execute()
    return response.data[0]
