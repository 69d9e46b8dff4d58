# Data models for quiz questions, their type-specific payloads and quiz-level settings
# quiz_engine/models/question.py
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel


class Question(BaseModel):
    """Read-only question definition as fetched by the persistence layer."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    question_text: str = ""
    question_type: str  # 'mcq', 'fill_blank', 'true_false' or 'match_following'
    question_data: Any = Field(default_factory=dict)  # Type-specific payload, read by the grader
    explanation: Optional[str] = None
    order_index: int = 0

    @field_validator("question_type", mode="before")
    @classmethod
    def unwrap_enum(cls, v):
        # QuestionType members hash by name, the grader registry is keyed by value
        return v.value if isinstance(v, Enum) else v

    @field_validator("question_data", mode="before")
    @classmethod
    def default_question_data(cls, v):
        return {} if v is None else v


class QuestionDataModel(BaseModel):
    """Base for the camelCase payloads stored in Question.question_data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MCQData(QuestionDataModel):
    options: List[str] = Field(default_factory=list)
    correct_answer: StrictInt
    shuffle_options: bool = False  # Presentation only


class FillBlankData(QuestionDataModel):
    correct_answers: List[StrictStr] = Field(min_length=1)
    case_sensitive: bool = False


class TrueFalseData(QuestionDataModel):
    correct_answer: StrictBool


class MatchPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    left: StrictInt
    right: StrictInt


class MatchFollowingData(QuestionDataModel):
    left_items: List[str] = Field(default_factory=list)
    right_items: List[str] = Field(default_factory=list)
    correct_pairs: List[MatchPair] = Field(min_length=1)
    shuffle_items: bool = False


class QuizSettings(BaseModel):
    """Quiz-level settings. Only passing_score is read by the grading core."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    time_limit: Optional[float] = None  # minutes
    shuffle_questions: bool = False
    show_results: bool = True
    allow_retakes: bool = True
    max_retakes: Optional[int] = None
    show_correct_answers: bool = True
    show_explanations: bool = True
    passing_score: Optional[float] = None
