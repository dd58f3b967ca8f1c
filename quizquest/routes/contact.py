from fastapi import APIRouter
from quizquest.schemas.contact import ContactMessage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def submit_contact(message: ContactMessage):
    logger.info(f"Contact message from {message.email}: {message.subject!r}")
    return {"message": "Message sent successfully! We'll get back to you as soon as possible."}
