# quiz_engine/endpoints/quizzes.py
from fastapi import APIRouter

from quiz_engine.models.question import QuizSettings
from quiz_engine.models.validation import ValidationResult
from quiz_engine.services.validation import validate_quiz_settings

router = APIRouter()

@router.post("/settings/validate", response_model=ValidationResult)
async def validate_settings(quiz_settings: QuizSettings):
    return validate_quiz_settings(quiz_settings)
