from fastapi import APIRouter, Depends, HTTPException
from quizquest.dependencies.auth import require_teacher
from quizquest.dependencies.ownership import get_owned_quiz

router = APIRouter()


@router.delete("/{question_id}")
def delete_question(question_id: str, context=Depends(require_teacher)):
    supabase = context["supabase"]

    existing_question = supabase.table("questions").select("*").eq("id", question_id).execute()
    if not existing_question.data:
        raise HTTPException(status_code=404, detail="Question not found")

    # Verify the quiz belongs to the user
    get_owned_quiz(supabase, existing_question.data[0]["quiz_id"], context["user_id"])

    supabase.table("questions").delete().eq("id", question_id).execute()
    return {"message": "Question has been removed"}
