# Endpoints for checking question definitions before they are saved
# quiz_engine/endpoints/questions.py
from fastapi import APIRouter

from quiz_engine.models.question import Question
from quiz_engine.models.validation import ValidationResult
from quiz_engine.services.validation import validate_question

router = APIRouter()

@router.post("/validate", response_model=ValidationResult)
async def validate(question: Question):
    return validate_question(question)
