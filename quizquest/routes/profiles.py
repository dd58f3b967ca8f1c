from fastapi import APIRouter, Depends, HTTPException
from quizquest.schemas.profile import Profile, ProfileUpdate
from quizquest.dependencies.auth import user_supabase_client
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_profile_row(supabase, user_id: str) -> dict:
    response = supabase.table("profiles").select("*").eq("user_id", user_id).execute()
    if not response.data:
        raise HTTPException(status_code=404, detail="Profile not found")
    return response.data[0]


# Get logged in user's profile
@router.get("/me", response_model=Profile)
def get_my_profile(context=Depends(user_supabase_client)):
    return get_profile_row(context["supabase"], context["user_id"])


# Edit logged in user's profile
@router.put("/me", response_model=Profile)
def update_my_profile(profile: ProfileUpdate, context=Depends(user_supabase_client)):
    supabase = context["supabase"]
    user_id = context["user_id"]

    existing_profile = get_profile_row(supabase, user_id)

    # Email belongs to the auth account and is not written here
    response = supabase.table("profiles").update({
        "full_name": profile.full_name,
        "phone": profile.phone or None,
        "address": profile.address or None,
        "bio": profile.bio or None,
    }).eq("id", existing_profile["id"]).execute()

    logger.info(f"Updated profile for user {user_id}")
    return response.data[0] if response.data else existing_profile
