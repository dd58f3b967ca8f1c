from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
from datetime import datetime


# --- Quizzes ---
class Quiz(BaseModel):
    id: Optional[str] = None
    teacher_id: str
    course_id: str
    topic_id: Optional[str] = None
    title: str
    description: Optional[str] = None
    is_published: bool = False
    shuffle_questions: bool = False
    marks_per_question: int = 1
    questions_per_page: int = 1
    time_limit: Optional[int] = None
    created_at: Optional[datetime] = None


class CreateQuiz(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    topic_id: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value


class PublishUpdate(BaseModel):
    is_published: bool


class QuizSettings(BaseModel):
    shuffle_questions: bool = False
    marks_per_question: int = Field(1, ge=1, le=100)
    questions_per_page: int = Field(1, ge=1, le=20)
    time_limit: Optional[int] = Field(None, ge=1, description="Time limit in minutes, null for untimed")


# Stored settings are echoed as-is; the bounds above only apply to the form
class StoredQuizSettings(BaseModel):
    shuffle_questions: bool = False
    marks_per_question: int = 1
    questions_per_page: int = 1
    time_limit: Optional[int] = None


# --- Questions ---
QuestionType = Literal["mcq", "true_false", "short_answer"]


class Question(BaseModel):
    id: Optional[str] = None
    quiz_id: str
    question_text: str
    question_type: QuestionType
    options: Optional[List[str]] = None
    correct_answer: str
    marks: int = 1
    order_index: int = 0
    created_at: Optional[datetime] = None


class CreateQuestion(BaseModel):
    question_text: str = Field(..., min_length=1)
    question_type: QuestionType = "mcq"
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    marks: int = Field(1, ge=1)

    @field_validator("question_text", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value
