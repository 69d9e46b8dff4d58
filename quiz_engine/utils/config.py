# quiz_engine/utils/config.py
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from quiz_engine.models.enums import AttemptOrder

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # API metadata
    api_title: str = "Quiz Grading API"
    api_version: str = "1.0.0"

    # Scoring
    score_decimal_places: int = 1  # Precision for score, average, trend and consistency

    # Analytics defaults, used when the quiz settings carry no passingScore / order
    default_passing_score: float | None = None
    default_attempt_order: AttemptOrder = AttemptOrder.MOST_RECENT_FIRST

    class Config:
        # Environment variables still win over .env values loaded above
        env_file_encoding = 'utf-8'

settings = Settings()

# --- Validation for scoring defaults ---
if settings.default_passing_score is not None and not 0 <= settings.default_passing_score <= 100:
    raise ValueError("DEFAULT_PASSING_SCORE must be between 0 and 100")
if settings.score_decimal_places < 0:
    raise ValueError("SCORE_DECIMAL_PLACES cannot be negative")
