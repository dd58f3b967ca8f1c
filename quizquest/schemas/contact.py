from pydantic import BaseModel, EmailStr, Field, field_validator


class ContactMessage(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=1000)

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("email")
    @classmethod
    def email_length(cls, value):
        if len(value) > 255:
            raise ValueError("Email must be less than 255 characters")
        return value
