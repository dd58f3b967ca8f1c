from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


# --- Profiles (auth.users.id -> profiles.user_id) ---
class Profile(BaseModel):
    id: Optional[str] = None
    user_id: str
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    full_name: str = Field(..., min_length=2, description="Name must be at least 2 characters")
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500, description="Bio must be less than 500 characters")
