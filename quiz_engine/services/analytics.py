# quiz_engine/services/analytics.py
import math
import statistics
from typing import List, Optional, Protocol, Sequence

from quiz_engine.models.attempt import AttemptSummary
from quiz_engine.models.enums import AttemptOrder
from quiz_engine.utils.config import settings
from quiz_engine.utils.formatting import round_percentage
from quiz_engine.utils.logger import logger


class ScoredAttempt(Protocol):
    """Anything carrying a score and an optional duration, e.g. AttemptResult or AttemptRecord."""
    score: Optional[float]
    time_taken: Optional[float]


def _is_measured(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


class AttemptStatistics:
    def __init__(self, decimal_places: int = settings.score_decimal_places):
        self.decimal_places = decimal_places
        logger.info(f"AttemptStatistics initialized with decimal_places={decimal_places}")

    def _round(self, value: float) -> float:
        return round_percentage(value, self.decimal_places)

    @staticmethod
    def _passes(score: Optional[float], passing_score: float) -> bool:
        return _is_measured(score) and score >= passing_score

    def _pass_streaks(self, history: List[ScoredAttempt], passing_score: float) -> tuple[int, int]:
        """Returns (current streak from the most recent attempt, longest streak anywhere)."""
        current = 0
        for attempt in history:
            if not self._passes(attempt.score, passing_score):
                break
            current += 1

        best = run = 0
        for attempt in history:
            run = run + 1 if self._passes(attempt.score, passing_score) else 0
            best = max(best, run)
        return current, best

    def summarize(self, attempts: Sequence[ScoredAttempt], passing_score: Optional[float] = None,
                  order: AttemptOrder = AttemptOrder.MOST_RECENT_FIRST) -> AttemptSummary:
        """
        Computes longitudinal statistics for one user's attempts at one quiz.

        "Most recent" is defined purely by the supplied order; nothing is sorted
        by timestamp. Missing data yields None fields, never an exception.
        """
        # Work most-recent-first from here on
        history = list(attempts)
        if order == AttemptOrder.OLDEST_FIRST:
            history.reverse()

        if not history:
            logger.debug("Summarizing empty attempt history")
            return AttemptSummary(passing_score=passing_score, order=order)

        # NaN or infinite values count as unscored
        scores = [attempt.score for attempt in history if _is_measured(attempt.score)]
        times = [attempt.time_taken for attempt in history if _is_measured(attempt.time_taken)]

        best_score = max(scores) if scores else None
        latest_score = scores[0] if scores else None
        average_score = self._round(statistics.fmean(scores)) if scores else None
        average_time = round(statistics.fmean(times), 1) if times else None

        has_passed = None
        pass_streak = best_pass_streak = None
        if passing_score is not None:
            if latest_score is not None:
                has_passed = latest_score >= passing_score
            pass_streak, best_pass_streak = self._pass_streaks(history, passing_score)

        improvement_trend = None
        consistency_score = None
        if len(scores) >= 2:
            improvement_trend = self._round(scores[0] - scores[1])
            consistency_score = self._round(100 - min(100.0, statistics.pstdev(scores)))

        summary = AttemptSummary(
            total_attempts=len(history),
            scored_attempts=len(scores),
            best_score=best_score,
            latest_score=latest_score,
            average_score=average_score,
            average_time=average_time,
            has_passed=has_passed,
            improvement_trend=improvement_trend,
            consistency_score=consistency_score,
            pass_streak=pass_streak,
            best_pass_streak=best_pass_streak,
            passing_score=passing_score,
            order=order,
        )
        logger.debug(f"Summarized {len(history)} attempts: best={best_score}, average={average_score}, trend={improvement_trend}")
        return summary


# Instantiate the statistics service
attempt_statistics = AttemptStatistics()
