# Authoring-time checks for questions and quiz settings. Grading never depends on these.
# quiz_engine/services/validation.py
from typing import Any, Callable, Dict, List, NamedTuple, Type

from pydantic import BaseModel, ValidationError

from quiz_engine.models.enums import QuestionType
from quiz_engine.models.question import (
    FillBlankData,
    MatchFollowingData,
    MCQData,
    Question,
    QuizSettings,
    TrueFalseData,
)
from quiz_engine.models.validation import ValidationIssue, ValidationResult

MIN_MCQ_OPTIONS = 2
MAX_MCQ_OPTIONS = 6
MAX_TIME_LIMIT_MINUTES = 1440  # 24 hours


def _issue(field: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=f"question_data.{field}", message=message)


def _field_path(loc: tuple) -> str:
    """('correctPairs', 1, 'left') -> 'correctPairs[1].left'"""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


# --- Checks the payload models do not express ---

def _check_mcq(data: MCQData) -> List[ValidationIssue]:
    issues = []
    options = data.options
    if not MIN_MCQ_OPTIONS <= len(options) <= MAX_MCQ_OPTIONS:
        issues.append(_issue("options", f"MCQ questions need between {MIN_MCQ_OPTIONS} and {MAX_MCQ_OPTIONS} options"))
    elif any(not option.strip() for option in options):
        issues.append(_issue("options", "Options cannot be empty"))

    if not 0 <= data.correct_answer < len(options):
        issues.append(_issue("correctAnswer", "correctAnswer must be the index of one of the options"))
    return issues


def _check_fill_blank(data: FillBlankData) -> List[ValidationIssue]:
    if any(not answer.strip() for answer in data.correct_answers):
        return [_issue("correctAnswers", "Correct answers must be non-empty text")]
    return []


def _check_true_false(data: TrueFalseData) -> List[ValidationIssue]:
    return []


def _check_match_following(data: MatchFollowingData) -> List[ValidationIssue]:
    issues = []
    if not data.left_items:
        issues.append(_issue("leftItems", "At least one left item is required"))
    if not data.right_items:
        issues.append(_issue("rightItems", "At least one right item is required"))
    if issues:
        return issues

    seen_left = set()
    for position, pair in enumerate(data.correct_pairs):
        field = f"correctPairs[{position}]"
        if not 0 <= pair.left < len(data.left_items) or not 0 <= pair.right < len(data.right_items):
            issues.append(_issue(field, "Pair index is out of range"))
        if pair.left in seen_left:
            issues.append(_issue(field, f"Left item {pair.left} is paired more than once"))
        seen_left.add(pair.left)
    return issues


class _Rule(NamedTuple):
    data_model: Type[BaseModel]
    check: Callable[[Any], List[ValidationIssue]]


_RULES: Dict[str, _Rule] = {
    QuestionType.MCQ.value: _Rule(MCQData, _check_mcq),
    QuestionType.FILL_BLANK.value: _Rule(FillBlankData, _check_fill_blank),
    QuestionType.TRUE_FALSE.value: _Rule(TrueFalseData, _check_true_false),
    QuestionType.MATCH_FOLLOWING.value: _Rule(MatchFollowingData, _check_match_following),
}


def validate_question_data(question_type: str, question_data: Any) -> List[ValidationIssue]:
    """Parses the payload with the same models the grader uses, then applies authoring limits."""
    rule = _RULES.get(question_type)
    if rule is None:
        return [ValidationIssue(field="question_type", message=f"Unknown question type: {question_type}")]
    if not isinstance(question_data, dict):
        return [ValidationIssue(field="question_data", message="question_data must be an object")]

    try:
        data = rule.data_model.model_validate(question_data)
    except ValidationError as ve:
        return [_issue(_field_path(error["loc"]), error["msg"]) for error in ve.errors(include_url=False)]
    return rule.check(data)


def validate_question(question: Question) -> ValidationResult:
    errors = []
    if not question.question_text.strip():
        errors.append(ValidationIssue(field="question_text", message="Question text is required"))
    if question.order_index < 0:
        errors.append(ValidationIssue(field="order_index", message="Order index cannot be negative"))
    errors.extend(validate_question_data(question.question_type, question.question_data))
    return ValidationResult(is_valid=not errors, errors=errors)


def validate_quiz_settings(quiz_settings: QuizSettings) -> ValidationResult:
    errors = []
    if quiz_settings.time_limit is not None:
        if quiz_settings.time_limit <= 0:
            errors.append(ValidationIssue(field="settings.timeLimit", message="Time limit must be greater than 0"))
        elif quiz_settings.time_limit > MAX_TIME_LIMIT_MINUTES:
            errors.append(ValidationIssue(field="settings.timeLimit", message="Time limit cannot exceed 24 hours"))

    if quiz_settings.max_retakes is not None and quiz_settings.max_retakes < 0:
        errors.append(ValidationIssue(field="settings.maxRetakes", message="Max retakes cannot be negative"))

    if quiz_settings.passing_score is not None and not 0 <= quiz_settings.passing_score <= 100:
        errors.append(ValidationIssue(field="settings.passingScore", message="Passing score must be between 0 and 100"))

    return ValidationResult(is_valid=not errors, errors=errors)
