from fastapi import APIRouter, Depends, HTTPException
from typing import List
from quizquest.schemas.course import Course, CreateCourse, Topic, CreateTopic
from quizquest.schemas.quiz import Quiz, CreateQuiz
from quizquest.dependencies.auth import require_teacher
from quizquest.dependencies.ownership import get_owned_course
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_QUIZ_SETTINGS = {
    "is_published": False,
    "shuffle_questions": False,
    "marks_per_question": 1,
    "questions_per_page": 1,
    "time_limit": None,
}


# -------- Courses --------
@router.get("", response_model=List[Course])
def get_all_courses(context=Depends(require_teacher)):
    supabase = context["supabase"]
    user_id = context["user_id"]

    response = supabase \
        .table("courses") \
        .select("*") \
        .eq("teacher_id", user_id) \
        .order("created_at", desc=True) \
        .execute()
    return response.data


@router.post("", response_model=Course, status_code=201)
def create_course(course: CreateCourse, context=Depends(require_teacher)):
    supabase = context["supabase"]
    user_id = context["user_id"]

    response = supabase.table("courses").insert({
        "teacher_id": user_id,
        "title": course.title,
        "description": course.description or None,
    }).execute()
    logger.info(f"Teacher {user_id} created course {course.title!r}")
    return response.data[0]


@router.get("/{course_id}", response_model=Course)
def get_course(course_id: str, context=Depends(require_teacher)):
    return get_owned_course(context["supabase"], course_id, context["user_id"])


@router.put("/{course_id}", response_model=Course)
def update_course(course_id: str, course: CreateCourse, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_course(supabase, course_id, context["user_id"])

    response = supabase.table("courses").update({
        "title": course.title,
        "description": course.description or None,
    }).eq("id", course_id).execute()
    return response.data[0]


@router.delete("/{course_id}")
def delete_course(course_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_course(supabase, course_id, context["user_id"])

    supabase.table("courses").delete().eq("id", course_id).execute()
    logger.info(f"Deleted course {course_id}")
    return {"message": "Course has been removed"}


# -------- Topics of a course --------
@router.get("/{course_id}/topics")
def get_course_topics(course_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    course = get_owned_course(supabase, course_id, context["user_id"])

    topics = supabase \
        .table("topics") \
        .select("*") \
        .eq("course_id", course_id) \
        .order("created_at", desc=True) \
        .execute().data
    return {"course": {"id": course["id"], "title": course["title"]}, "topics": topics}


@router.post("/{course_id}/topics", response_model=Topic, status_code=201)
def create_topic(course_id: str, topic: CreateTopic, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_course(supabase, course_id, context["user_id"])

    response = supabase.table("topics").insert({
        "course_id": course_id,
        "title": topic.title,
        "description": topic.description or None,
    }).execute()
    return response.data[0]


# -------- Quizzes of a course --------
@router.get("/{course_id}/quizzes", response_model=List[Quiz])
def get_course_quizzes(course_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    user_id = context["user_id"]
    get_owned_course(supabase, course_id, user_id)

    response = supabase \
        .table("quizzes") \
        .select("*") \
        .eq("course_id", course_id) \
        .eq("teacher_id", user_id) \
        .order("created_at", desc=True) \
        .execute()
    return response.data


@router.post("/{course_id}/quizzes", response_model=Quiz, status_code=201)
def create_quiz(course_id: str, quiz: CreateQuiz, context=Depends(require_teacher)):
    supabase = context["supabase"]
    user_id = context["user_id"]
    get_owned_course(supabase, course_id, user_id)

    topic_id = quiz.topic_id or None
    if topic_id:
        topic = supabase.table("topics").select("id").eq("id", topic_id).eq("course_id", course_id).execute()
        if not topic.data:
            raise HTTPException(status_code=422, detail="Topic does not belong to this course")

    quiz_dict = {
        "teacher_id": user_id,
        "course_id": course_id,
        "topic_id": topic_id,
        "title": quiz.title,
        "description": quiz.description or None,
        **DEFAULT_QUIZ_SETTINGS,
    }
    response = supabase.table("quizzes").insert(quiz_dict).execute()
    logger.info(f"Teacher {user_id} created quiz {quiz.title!r} in course {course_id}")
    return response.data[0]
