# quiz_engine/endpoints/attempts.py
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from quiz_engine.models.attempt import AttemptRecord, AttemptResult, AttemptSummary, QuizResults, SubmittedAnswer
from quiz_engine.models.enums import AttemptOrder
from quiz_engine.models.question import Question, QuizSettings
from quiz_engine.services.analytics import attempt_statistics
from quiz_engine.services.scorer import attempt_scorer
from quiz_engine.utils.config import settings
from quiz_engine.utils.logger import logger

router = APIRouter()

class ScoreRequest(BaseModel):
    questions: List[Question]
    answers: List[SubmittedAnswer] = Field(default_factory=list)
    elapsed_seconds: Optional[float] = None

class SummaryRequest(BaseModel):
    attempts: List[AttemptRecord] = Field(default_factory=list)
    passing_score: Optional[float] = None
    order: Optional[AttemptOrder] = None

class ResultsRequest(ScoreRequest):
    result: Optional[AttemptResult] = None
    settings: QuizSettings = Field(default_factory=QuizSettings)

@router.post("/score", response_model=AttemptResult)
async def score_attempt(request: ScoreRequest):
    """Grades a finished attempt. Storing the result (id, timestamp) is the caller's job."""
    result = attempt_scorer.score(request.questions, request.answers, request.elapsed_seconds)
    logger.info(f"Scored attempt over {result.total_questions} questions: score={result.score}")
    return result

@router.post("/summary", response_model=AttemptSummary)
async def summarize_attempts(request: SummaryRequest):
    passing_score = request.passing_score if request.passing_score is not None else settings.default_passing_score
    if passing_score is not None and not 0 <= passing_score <= 100:
        raise HTTPException(status_code=400, detail="passing_score must be between 0 and 100")
    order = request.order or settings.default_attempt_order
    return attempt_statistics.summarize(request.attempts, passing_score=passing_score, order=order)

@router.post("/results", response_model=QuizResults)
async def attempt_results(request: ResultsRequest):
    result = request.result
    if result is None:
        result = attempt_scorer.score(request.questions, request.answers, request.elapsed_seconds)
    return attempt_scorer.build_results(request.questions, request.answers, result, request.settings)
