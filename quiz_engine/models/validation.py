# quiz_engine/models/validation.py
from typing import List
from pydantic import BaseModel

class ValidationIssue(BaseModel):
    field: str
    message: str

class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[ValidationIssue] = []
