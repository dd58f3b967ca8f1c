from fastapi import APIRouter, Depends, HTTPException
from supabase import AuthApiError
from postgrest.exceptions import APIError
from quizquest.schemas.auth import SignupRequest, LoginRequest, AuthSession
from quizquest.services.supabase import anon_client, service_client
from quizquest.dependencies.auth import bearer_token
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


# -------- Signup --------
@router.post("/signup", response_model=AuthSession, status_code=201)
def signup(payload: SignupRequest, supabase=Depends(anon_client), admin=Depends(service_client)):
    try:
        auth_res = supabase.auth.sign_up({
            "email": payload.email,
            "password": payload.password,
            "options": {"data": {"full_name": payload.full_name, "role": payload.role}},
        })
    except AuthApiError as e:
        logger.error(f"Signup failed for {payload.email}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)

    if not auth_res.user:
        raise HTTPException(status_code=400, detail="Signup failed")

    user_id = auth_res.user.id

    # Profile and role rows are written with the service key: the new user may not have a session yet
    try:
        admin.table("profiles").insert({
            "user_id": user_id,
            "full_name": payload.full_name,
            "email": payload.email,
        }).execute()
        admin.table("user_roles").insert({"user_id": user_id, "role": payload.role}).execute()
    except APIError as e:
        logger.error(
            f"Auth user {user_id} ({payload.email}) created but profile/role write failed, "
            f"account needs cleanup: {e.message}"
        )
        raise
    logger.info(f"Created {payload.role} account {user_id}")

    session = auth_res.session
    return AuthSession(
        user_id=user_id,
        email=payload.email,
        role=payload.role,
        access_token=session.access_token if session else None,
        refresh_token=session.refresh_token if session else None,
    )


# -------- Login --------
@router.post("/login", response_model=AuthSession)
def login(payload: LoginRequest, supabase=Depends(anon_client)):
    try:
        auth_res = supabase.auth.sign_in_with_password({
            "email": payload.email,
            "password": payload.password,
        })
    except AuthApiError as e:
        logger.warning(f"Login failed for {payload.email}: {e.message}")
        raise HTTPException(status_code=401, detail=e.message)

    if not auth_res.user or not auth_res.session:
        raise HTTPException(status_code=401, detail="Invalid login credentials")

    user_id = auth_res.user.id
    supabase.postgrest.auth(auth_res.session.access_token)
    role_res = supabase.table("user_roles").select("role").eq("user_id", user_id).limit(1).execute()

    return AuthSession(
        user_id=user_id,
        email=auth_res.user.email,
        role=role_res.data[0]["role"] if role_res.data else None,
        access_token=auth_res.session.access_token,
        refresh_token=auth_res.session.refresh_token,
    )


# -------- Logout --------
@router.post("/logout")
def logout(token: str = Depends(bearer_token), supabase=Depends(anon_client)):
    try:
        supabase.auth.admin.sign_out(token)
    except AuthApiError as e:
        logger.error(f"Logout failed: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    return {"message": "You've been successfully logged out."}
