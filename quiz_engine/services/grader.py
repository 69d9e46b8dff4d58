# quiz_engine/services/grader.py
from typing import Any, Callable, Dict, NamedTuple, Optional, Type

from pydantic import BaseModel, ValidationError

from quiz_engine.models.attempt import (
    FillBlankAnswer,
    GradeOutcome,
    MatchFollowingAnswer,
    MCQAnswer,
    SubmittedAnswer,
    TrueFalseAnswer,
)
from quiz_engine.models.enums import GradeReason, QuestionType
from quiz_engine.models.question import (
    FillBlankData,
    MatchFollowingData,
    MCQData,
    Question,
    TrueFalseData,
)
from quiz_engine.utils.logger import logger


class GraderEntry(NamedTuple):
    """How to read and judge one question type."""
    data_model: Type[BaseModel]
    answer_model: Type[BaseModel]
    compare: Callable[[Any, Any], bool]


_GRADERS: Dict[str, GraderEntry] = {}


def register_grader(question_type: str, data_model: Type[BaseModel],
                    answer_model: Type[BaseModel], compare: Callable[[Any, Any], bool]) -> None:
    """Registers (or replaces) the grading rule for a question type tag."""
    tag = question_type.value if isinstance(question_type, QuestionType) else question_type
    _GRADERS[tag] = GraderEntry(data_model, answer_model, compare)
    logger.debug(f"Registered grader for question type '{tag}'")


def registered_types() -> list[str]:
    return list(_GRADERS)


# --- Type-specific rules ---

def _compare_mcq(data: MCQData, submitted: MCQAnswer) -> bool:
    # Out-of-range indices simply never equal a valid correctAnswer
    return submitted.selected_option == data.correct_answer


def _normalize_text(text: str, case_sensitive: bool) -> str:
    """Trims surrounding whitespace; folds case unless matching is case sensitive."""
    text = text.strip()
    return text if case_sensitive else text.casefold()


def _compare_fill_blank(data: FillBlankData, submitted: FillBlankAnswer) -> bool:
    candidate = _normalize_text(submitted.answer, data.case_sensitive)
    if not candidate:
        return False
    return any(
        candidate == _normalize_text(accepted, data.case_sensitive)
        for accepted in data.correct_answers
    )


def _compare_true_false(data: TrueFalseData, submitted: TrueFalseAnswer) -> bool:
    return submitted.answer is data.correct_answer


def _compare_match_following(data: MatchFollowingData, submitted: MatchFollowingAnswer) -> bool:
    """All-or-nothing: the submitted pairing must be exactly the configured pairing."""
    left_indices = [pair.left for pair in submitted.pairs]
    if len(left_indices) != len(set(left_indices)):
        return False
    if len(submitted.pairs) != len(data.correct_pairs):
        return False
    return set(submitted.pairs) == set(data.correct_pairs)


register_grader(QuestionType.MCQ, MCQData, MCQAnswer, _compare_mcq)
register_grader(QuestionType.FILL_BLANK, FillBlankData, FillBlankAnswer, _compare_fill_blank)
register_grader(QuestionType.TRUE_FALSE, TrueFalseData, TrueFalseAnswer, _compare_true_false)
register_grader(QuestionType.MATCH_FOLLOWING, MatchFollowingData, MatchFollowingAnswer, _compare_match_following)


# --- Public API ---

def grade_with_reason(question: Question, answer: Optional[SubmittedAnswer]) -> GradeOutcome:
    """
    Grades a single answer and explains the verdict. Never raises: anything
    that cannot be read is judged incorrect so the rest of the attempt still scores.
    """
    entry = _GRADERS.get(question.question_type)
    if entry is None:
        logger.error(f"No grader registered for question type '{question.question_type}' (question {question.id})")
        return GradeOutcome(correct=False, reason=GradeReason.UNKNOWN_TYPE)

    if answer is None or answer.answer is None:
        return GradeOutcome(correct=False, reason=GradeReason.MISSING_ANSWER)

    payload = answer.answer
    if not isinstance(payload, dict):
        logger.debug(f"Answer for question {question.id} is not an object: {payload!r}")
        return GradeOutcome(correct=False, reason=GradeReason.MALFORMED_ANSWER)

    tag = payload.get("type")
    if tag is not None and tag != question.question_type:
        logger.warning(f"Answer for question {question.id} is tagged '{tag}', expected '{question.question_type}'")
        return GradeOutcome(correct=False, reason=GradeReason.TYPE_MISMATCH)

    if not isinstance(question.question_data, dict):
        logger.warning(f"question_data for question {question.id} is not an object")
        return GradeOutcome(correct=False, reason=GradeReason.MALFORMED_QUESTION)

    try:
        data = entry.data_model.model_validate(question.question_data)
    except ValidationError as ve:
        logger.warning(f"Malformed question_data for question {question.id}: {ve.errors(include_url=False)}")
        return GradeOutcome(correct=False, reason=GradeReason.MALFORMED_QUESTION)

    try:
        submitted = entry.answer_model.model_validate(payload)
    except ValidationError as ve:
        logger.debug(f"Unreadable answer for question {question.id}: {ve.errors(include_url=False)}")
        return GradeOutcome(correct=False, reason=GradeReason.MALFORMED_ANSWER)

    try:
        correct = bool(entry.compare(data, submitted))
    except Exception as e:
        logger.exception(f"Grader for '{question.question_type}' failed on question {question.id}: {e}")
        return GradeOutcome(correct=False, reason=GradeReason.MALFORMED_ANSWER)

    return GradeOutcome(correct=correct, reason=GradeReason.CORRECT if correct else GradeReason.INCORRECT)


def grade(question: Question, answer: Optional[SubmittedAnswer]) -> bool:
    """Returns True iff the answer is correct for the question."""
    return grade_with_reason(question, answer).correct
