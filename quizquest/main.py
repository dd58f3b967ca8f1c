from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError
from quizquest.routes import (
    auth, health, dashboard, profiles, teachers, connections,
    courses, topics, quizzes, questions, student, contact,
)
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

app = FastAPI(
    redirect_slashes=False,
    title="QuizQuest API",
    description="API for the QuizQuest learning platform",
    version="1.0.0",
    openapi_tags=[
        {
            "name": "Connections",
            "description": "Student requests and teacher approvals",
        },
    ],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[os.getenv("FRONTEND_URL", "http://localhost:5173")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Backend errors reach the client as a message, like the toast in the web app
@app.exception_handler(APIError)
async def supabase_error_handler(request: Request, exc: APIError):
    logger.error(f"Supabase error on {request.method} {request.url.path}: {exc.code} {exc.message}")
    status_code = 409 if exc.code == UNIQUE_VIOLATION else 400
    return JSONResponse(status_code=status_code, content={"detail": exc.message or "Request failed"})


# Include routers
app.include_router(health.router, prefix="/health")
app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
app.include_router(profiles.router, prefix="/profiles", tags=["Profiles"])
app.include_router(teachers.router, prefix="/teachers", tags=["Connections"])
app.include_router(connections.router, prefix="/connections", tags=["Connections"])
app.include_router(courses.router, prefix="/courses", tags=["Courses"])
app.include_router(topics.router, prefix="/topics", tags=["Courses"])
app.include_router(quizzes.router, prefix="/quizzes", tags=["Quizzes"])
app.include_router(questions.router, prefix="/questions", tags=["Quizzes"])
app.include_router(student.router, prefix="/student", tags=["Student"])
app.include_router(contact.router, prefix="/contact")
