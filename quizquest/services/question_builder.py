from typing import Any, Dict, List, Optional
import logging

from quizquest.schemas.quiz import CreateQuestion

logger = logging.getLogger(__name__)

TRUE_FALSE_OPTIONS = ["True", "False"]
MIN_MCQ_OPTIONS = 2


class QuestionValidationError(ValueError):
    pass


def normalize_options(question: CreateQuestion) -> Optional[List[str]]:
    if question.question_type == "mcq":
        options = [opt.strip() for opt in (question.options or []) if opt and opt.strip()]
        if len(options) < MIN_MCQ_OPTIONS:
            raise QuestionValidationError("Please provide at least 2 options for MCQ")
        return options
    if question.question_type == "true_false":
        return list(TRUE_FALSE_OPTIONS)
    # short_answer has no options
    return None


def normalize_correct_answer(question: CreateQuestion, options: Optional[List[str]]) -> str:
    answer = (question.correct_answer or "").strip()

    if question.question_type == "true_false":
        answer = answer or "True"
        if answer not in TRUE_FALSE_OPTIONS:
            raise QuestionValidationError("Correct answer must be 'True' or 'False'")
        return answer

    if not answer:
        raise QuestionValidationError("Please provide the correct answer")
    if question.question_type == "mcq" and answer not in options:
        raise QuestionValidationError("Correct answer must be one of the options")
    return answer


def build_question_payload(quiz_id: str, question: CreateQuestion, order_index: int) -> Dict[str, Any]:
    """
    Turn a question form into the row stored in `questions`.

    Options and answer are normalized per question type, and the question is
    appended after the `order_index` existing questions of the quiz.
    """
    options = normalize_options(question)
    correct_answer = normalize_correct_answer(question, options)

    payload = {
        "quiz_id": quiz_id,
        "question_text": question.question_text.strip(),
        "question_type": question.question_type,
        "options": options,
        "correct_answer": correct_answer,
        "marks": question.marks,
        "order_index": order_index,
    }
    logger.debug(f"Built {question.question_type} question for quiz {quiz_id} at index {order_index}")
    return payload
