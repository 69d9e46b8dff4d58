# Data models for submitted answers, graded attempts and attempt analytics
# quiz_engine/models/attempt.py
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from quiz_engine.models.enums import AttemptOrder, GradeReason, QuestionType
from quiz_engine.models.question import MatchPair


class SubmittedAnswer(BaseModel):
    """One user answer. `answer` is the type-tagged payload, e.g. {"selectedOption": 2}."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, coerce_numbers_to_str=True)

    question_id: str = Field(alias="questionId")
    answer: Optional[Any] = None
    time_spent: Optional[float] = Field(default=None, alias="timeSpent")


# --- Answer payloads, one per question type ---
class AnswerPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    type: Optional[QuestionType] = None


class MCQAnswer(AnswerPayload):
    selected_option: StrictInt


class FillBlankAnswer(AnswerPayload):
    answer: StrictStr


class TrueFalseAnswer(AnswerPayload):
    answer: StrictBool


class MatchFollowingAnswer(AnswerPayload):
    pairs: List[MatchPair]


class GradeOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: bool
    reason: GradeReason


class QuestionJudgment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question_id: str = Field(alias="questionId")
    correct: bool


class TypeTally(BaseModel):
    model_config = ConfigDict(frozen=True)

    correct: int = 0
    total: int = 0


class TimeMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_time: float
    average_time_per_question: float
    fastest_question: float
    slowest_question: float


class AttemptResult(BaseModel):
    """Outcome of grading one attempt. Created once at finalize time."""
    model_config = ConfigDict(frozen=True)

    score: Optional[float] = None  # None when the quiz has no questions
    correct_answers: int = 0
    total_questions: int = 0
    time_taken: Optional[float] = None  # seconds
    judgments: List[QuestionJudgment] = Field(default_factory=list)
    breakdown: Dict[str, TypeTally] = Field(default_factory=dict)
    time_metrics: Optional[TimeMetrics] = None


class AttemptRecord(BaseModel):
    """A stored attempt as handed back by the persistence layer for analytics."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    score: Optional[float] = None
    correct_answers: int = 0
    total_questions: int = 0
    time_taken: Optional[float] = None


class AttemptSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_attempts: int = 0
    scored_attempts: int = 0
    best_score: Optional[float] = None
    latest_score: Optional[float] = None
    average_score: Optional[float] = None
    average_time: Optional[float] = None
    has_passed: Optional[bool] = None
    improvement_trend: Optional[float] = None
    consistency_score: Optional[float] = None
    pass_streak: Optional[int] = None
    best_pass_streak: Optional[int] = None
    passing_score: Optional[float] = None
    order: AttemptOrder = AttemptOrder.MOST_RECENT_FIRST


class QuestionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(alias="questionId")
    question_type: str
    question_text: str
    correct: bool
    answer: Optional[Any] = None
    question_data: Optional[Any] = None  # Only when correct answers are shown
    explanation: Optional[str] = None  # Only when explanations are shown


class QuizResults(BaseModel):
    """Presentation-ready view of one graded attempt."""
    questions: List[QuestionResult]
    passed: Optional[bool] = None
    score_percentage: Optional[float] = None
    correct_count: int
    total_count: int
    time_formatted: str
    breakdown: Dict[str, TypeTally]
    show_correct_answers: bool
    show_explanations: bool
