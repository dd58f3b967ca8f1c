from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Literal

Role = Literal["teacher", "student"]


# --- Signup / Login ---
class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    full_name: str = Field(..., min_length=1)
    role: Role = "student"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthSession(BaseModel):
    user_id: str
    email: str
    role: Optional[Role] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
