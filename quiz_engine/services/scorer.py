# quiz_engine/services/scorer.py
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from quiz_engine.models.attempt import (
    AttemptResult,
    QuestionJudgment,
    QuestionResult,
    QuizResults,
    SubmittedAnswer,
    TimeMetrics,
    TypeTally,
)
from quiz_engine.models.enums import QuestionType
from quiz_engine.models.question import Question, QuizSettings
from quiz_engine.services.grader import grade
from quiz_engine.utils.config import settings
from quiz_engine.utils.formatting import format_time, round_percentage
from quiz_engine.utils.logger import logger


class AttemptScorer:
    def __init__(self, decimal_places: int = settings.score_decimal_places):
        self.decimal_places = decimal_places
        logger.info(f"AttemptScorer initialized with decimal_places={decimal_places}")

    @staticmethod
    def _index_answers(questions: Sequence[Question], answers: Iterable[SubmittedAnswer]) -> Dict[str, SubmittedAnswer]:
        """Maps question id to its answer. The first answer for an id wins."""
        by_question: Dict[str, SubmittedAnswer] = {}
        for answer in answers:
            by_question.setdefault(answer.question_id, answer)

        known_ids = {question.id for question in questions}
        orphaned = [question_id for question_id in by_question if question_id not in known_ids]
        if orphaned:
            logger.warning(f"Ignoring answers for unknown questions: {orphaned}")
        return by_question

    @staticmethod
    def _time_metrics(answers: List[SubmittedAnswer]) -> Optional[TimeMetrics]:
        times = [a.time_spent for a in answers if a.time_spent is not None and a.time_spent > 0]
        if not times:
            return None
        total = sum(times)
        return TimeMetrics(
            total_time=total,
            average_time_per_question=round(total / len(times), 1),
            fastest_question=min(times),
            slowest_question=max(times),
        )

    def score(self, questions: Sequence[Question], answers: Iterable[SubmittedAnswer],
              elapsed_seconds: Optional[float] = None) -> AttemptResult:
        """
        Grades every question in the order given and aggregates the attempt.
        Deterministic: identical inputs always produce an identical result.
        `answers` is treated as a snapshot; callers must not mutate it while scoring.
        """
        by_question = self._index_answers(questions, answers)

        correct_by_type: Counter = Counter()
        total_by_type: Counter = Counter()
        judgments: List[QuestionJudgment] = []
        matched: List[SubmittedAnswer] = []

        for question in questions:
            answer = by_question.get(question.id)
            if answer is not None:
                matched.append(answer)

            is_correct = grade(question, answer)
            judgments.append(QuestionJudgment(question_id=question.id, correct=is_correct))

            total_by_type[question.question_type] += 1
            if is_correct:
                correct_by_type[question.question_type] += 1

        total_questions = len(questions)
        correct_answers = sum(1 for judgment in judgments if judgment.correct)

        if total_questions:
            score = round_percentage(100 * correct_answers / total_questions, self.decimal_places)
            breakdown = {
                question_type.value: TypeTally(
                    correct=correct_by_type[question_type.value],
                    total=total_by_type[question_type.value],
                )
                for question_type in QuestionType
            }
        else:
            score = None
            breakdown = {}

        result = AttemptResult(
            score=score,
            correct_answers=correct_answers,
            total_questions=total_questions,
            time_taken=elapsed_seconds,
            judgments=judgments,
            breakdown=breakdown,
            time_metrics=self._time_metrics(matched),
        )
        logger.debug(f"Scored attempt: {correct_answers}/{total_questions} correct, score={score}")
        return result

    def build_results(self, questions: Sequence[Question], answers: Iterable[SubmittedAnswer],
                      result: AttemptResult, quiz_settings: Optional[QuizSettings] = None) -> QuizResults:
        """Combines a graded attempt with its questions for the results screen."""
        quiz_settings = quiz_settings or QuizSettings()
        by_question = self._index_answers(questions, answers)
        verdicts = {judgment.question_id: judgment.correct for judgment in result.judgments}

        question_results = []
        for question in questions:
            answer = by_question.get(question.id)
            question_results.append(QuestionResult(
                question_id=question.id,
                question_type=question.question_type,
                question_text=question.question_text,
                correct=verdicts.get(question.id, False),
                answer=answer.answer if answer is not None else None,
                question_data=question.question_data if quiz_settings.show_correct_answers else None,
                explanation=question.explanation if quiz_settings.show_explanations else None,
            ))

        passed = None
        if quiz_settings.passing_score is not None:
            passed = result.score is not None and result.score >= quiz_settings.passing_score

        return QuizResults(
            questions=question_results,
            passed=passed,
            score_percentage=result.score,
            correct_count=result.correct_answers,
            total_count=result.total_questions,
            time_formatted=format_time(result.time_taken),
            breakdown=result.breakdown,
            show_correct_answers=quiz_settings.show_correct_answers,
            show_explanations=quiz_settings.show_explanations,
        )


# Instantiate the scorer service
attempt_scorer = AttemptScorer()
