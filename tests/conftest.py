# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
import os
import sys
import logging

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quiz_engine.models.attempt import SubmittedAnswer
from quiz_engine.models.question import Question

MATCH_PAIRS = [{"left": 0, "right": 2}, {"left": 1, "right": 0}, {"left": 2, "right": 1}]

# --- TestClient Fixture ---
@pytest.fixture(scope="session")
def client():
    from quiz_engine.main import app
    logger.info("Creating TestClient instance for the session.")
    with TestClient(app) as c:
        yield c

# --- Sample Quiz Fixtures ---
@pytest.fixture
def mcq_question():
    return Question(
        id="q-mcq",
        question_text="Which planet is known as the Red Planet?",
        question_type="mcq",
        question_data={"options": ["Venus", "Jupiter", "Mars", "Saturn"], "correctAnswer": 2},
        explanation="Iron oxide on its surface gives Mars its colour.",
        order_index=0,
    )

@pytest.fixture
def fill_blank_question():
    return Question(
        id="q-fill",
        question_text="The capital of France is ____.",
        question_type="fill_blank",
        question_data={"correctAnswers": ["Paris", "paris"], "caseSensitive": False},
        order_index=1,
    )

@pytest.fixture
def true_false_question():
    return Question(
        id="q-tf",
        question_text="Water boils at 100 degrees Celsius at sea level.",
        question_type="true_false",
        question_data={"correctAnswer": True},
        order_index=2,
    )

@pytest.fixture
def match_question():
    return Question(
        id="q-match",
        question_text="Match each country to its capital.",
        question_type="match_following",
        question_data={
            "leftItems": ["Japan", "Kenya", "Peru"],
            "rightItems": ["Nairobi", "Lima", "Tokyo"],
            "correctPairs": MATCH_PAIRS,
        },
        order_index=3,
    )

@pytest.fixture
def sample_questions(mcq_question, fill_blank_question, true_false_question, match_question):
    return [mcq_question, fill_blank_question, true_false_question, match_question]

@pytest.fixture
def perfect_answers():
    return [
        SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 2}, time_spent=12),
        SubmittedAnswer(question_id="q-fill", answer={"answer": "paris"}, time_spent=20),
        SubmittedAnswer(question_id="q-tf", answer={"answer": True}, time_spent=4),
        SubmittedAnswer(question_id="q-match", answer={"pairs": MATCH_PAIRS}, time_spent=40),
    ]
