from fastapi import HTTPException


# -------- Ownership lookups shared by teacher routes --------

def get_owned_course(supabase, course_id: str, teacher_id: str) -> dict:
    existing_course = supabase.table("courses").select("*").eq("id", course_id).eq("teacher_id", teacher_id).execute()
    if not existing_course.data:
        raise HTTPException(status_code=404, detail="Course not found")
    return existing_course.data[0]


def get_owned_topic(supabase, topic_id: str, teacher_id: str) -> dict:
    existing_topic = supabase.table("topics").select("*").eq("id", topic_id).execute()
    if not existing_topic.data:
        raise HTTPException(status_code=404, detail="Topic not found")
    topic = existing_topic.data[0]

    # Topics carry no teacher_id; ownership comes from the course
    course = supabase.table("courses").select("id").eq("id", topic["course_id"]).eq("teacher_id", teacher_id).execute()
    if not course.data:
        raise HTTPException(status_code=404, detail="Topic not found")
    return topic


def get_owned_quiz(supabase, quiz_id: str, teacher_id: str) -> dict:
    existing_quiz = supabase.table("quizzes").select("*").eq("id", quiz_id).eq("teacher_id", teacher_id).execute()
    if not existing_quiz.data:
        raise HTTPException(status_code=404, detail="Quiz not found")
    return existing_quiz.data[0]
