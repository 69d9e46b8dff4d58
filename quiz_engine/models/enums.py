# quiz_engine/models/enums.py
from enum import Enum

class QuestionType(str, Enum):
    """Enumeration for the question kinds the grader knows how to judge."""
    MCQ = "mcq"
    FILL_BLANK = "fill_blank"
    TRUE_FALSE = "true_false"
    MATCH_FOLLOWING = "match_following"

class AttemptOrder(str, Enum):
    """Order in which a caller supplies an attempt history."""
    MOST_RECENT_FIRST = "most_recent_first"
    OLDEST_FIRST = "oldest_first"

class GradeReason(str, Enum):
    """Why a single answer was judged the way it was."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    MISSING_ANSWER = "missing_answer"
    MALFORMED_QUESTION = "malformed_question"
    MALFORMED_ANSWER = "malformed_answer"
    TYPE_MISMATCH = "type_mismatch"
    UNKNOWN_TYPE = "unknown_type"
