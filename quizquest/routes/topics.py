from fastapi import APIRouter, Depends
from quizquest.schemas.course import Topic, CreateTopic
from quizquest.dependencies.auth import require_teacher
from quizquest.dependencies.ownership import get_owned_topic

router = APIRouter()


@router.put("/{topic_id}", response_model=Topic)
def update_topic(topic_id: str, topic: CreateTopic, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_topic(supabase, topic_id, context["user_id"])

    response = supabase.table("topics").update({
        "title": topic.title,
        "description": topic.description or None,
    }).eq("id", topic_id).execute()
    return response.data[0]


@router.delete("/{topic_id}")
def delete_topic(topic_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]
    get_owned_topic(supabase, topic_id, context["user_id"])

    supabase.table("topics").delete().eq("id", topic_id).execute()
    return {"message": "Topic has been removed"}
