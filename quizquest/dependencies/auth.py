from fastapi import Depends, Header, HTTPException
from quizquest.services.supabase import anon_client
import time
import logging

logger = logging.getLogger(__name__)

ROLES = ("teacher", "student")


def bearer_token(authorization: str = Header(None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid token format")
    return authorization.split(" ", 1)[1]


async def user_supabase_client(token: str = Depends(bearer_token), supabase=Depends(anon_client)):
    try:
        start_time = time.time()
        logger.info("Validating token with Supabase")
        user_res = supabase.auth.get_user(token)
        end_time = time.time()
        logger.info(f"Token validation completed in {end_time - start_time:.2f} seconds")
    except Exception as e:
        logger.error(f"Supabase token validation error: {str(e)}")
        if "timed out" in str(e).lower():
            raise HTTPException(
                status_code=504,
                detail="Connection to authentication service timed out. Please try again later."
            )
        raise HTTPException(status_code=401, detail=f"Authentication error: {str(e)}")

    if not user_res or not user_res.user:
        logger.warning("User not found after successful token validation")
        raise HTTPException(status_code=401, detail="User not found")

    # Table queries run as the user so row-level security applies
    supabase.postgrest.auth(token)

    logger.info(f"Successfully authenticated user: {user_res.user.id}")
    return {
        "supabase": supabase,
        "user_id": user_res.user.id,
        "user": user_res.user,
        "token": token,
    }


def get_user_role(context=Depends(user_supabase_client)) -> str:
    supabase = context["supabase"]
    user_id = context["user_id"]

    role_res = supabase \
        .table("user_roles") \
        .select("role") \
        .eq("user_id", user_id) \
        .limit(1) \
        .execute()

    if not role_res.data:
        logger.warning(f"No role assigned to user {user_id}")
        raise HTTPException(status_code=403, detail="No role assigned to this account")
    return role_res.data[0]["role"]


def require_role(role: str):
    """Dependency factory: pass the user context through only for users holding `role`."""
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")

    def dependency(context=Depends(user_supabase_client), user_role: str = Depends(get_user_role)):
        if user_role != role:
            logger.info(f"User {context['user_id']} with role {user_role} denied {role}-only route")
            raise HTTPException(status_code=403, detail=f"Only {role}s can access this resource")
        context["role"] = user_role
        return context

    return dependency


require_teacher = require_role("teacher")
require_student = require_role("student")
