# quiz_engine/endpoints/answer.py
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from quiz_engine.models.attempt import SubmittedAnswer
from quiz_engine.models.enums import GradeReason
from quiz_engine.models.question import Question
from quiz_engine.services.grader import grade_with_reason
from quiz_engine.utils.logger import logger

router = APIRouter()

class AnswerRequest(BaseModel):
    question: Question
    answer: Optional[SubmittedAnswer] = None

class AnswerResponse(BaseModel):
    question_id: str
    correct: bool
    reason: GradeReason

@router.post("/", response_model=AnswerResponse)
async def grade_answer(request: AnswerRequest):
    """Grades a single answer. Malformed input is judged incorrect, never rejected."""
    outcome = grade_with_reason(request.question, request.answer)
    logger.debug(f"Graded question {request.question.id}: {outcome.reason.value}")
    return AnswerResponse(
        question_id=request.question.id,
        correct=outcome.correct,
        reason=outcome.reason,
    )
