# tests/test_scorer.py
import pytest

from quiz_engine.models.attempt import SubmittedAnswer
from quiz_engine.models.question import Question, QuizSettings
from quiz_engine.services.scorer import AttemptScorer, attempt_scorer


@pytest.mark.scoring
class TestAttemptScorer:
    def test_perfect_attempt(self, sample_questions, perfect_answers):
        result = attempt_scorer.score(sample_questions, perfect_answers)

        assert result.score == 100
        assert result.correct_answers == 4
        assert result.total_questions == 4
        assert {k: (v.correct, v.total) for k, v in result.breakdown.items()} == {
            "mcq": (1, 1),
            "fill_blank": (1, 1),
            "true_false": (1, 1),
            "match_following": (1, 1),
        }
        assert [j.question_id for j in result.judgments] == ["q-mcq", "q-fill", "q-tf", "q-match"]
        assert all(j.correct for j in result.judgments)

    def test_zero_questions(self):
        result = attempt_scorer.score([], [])
        assert result.score is None
        assert result.correct_answers == 0
        assert result.total_questions == 0
        assert result.breakdown == {}
        assert result.judgments == []

    def test_missing_answers_count_as_incorrect(self, sample_questions, perfect_answers):
        result = attempt_scorer.score(sample_questions, perfect_answers[:3])
        assert result.correct_answers == 3
        assert result.score == 75.0
        assert result.breakdown["match_following"].correct == 0
        assert result.breakdown["match_following"].total == 1

    def test_score_rounded_to_one_decimal(self, mcq_question, true_false_question, fill_blank_question):
        questions = [mcq_question, true_false_question, fill_blank_question]
        answers = [SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 2})]
        assert attempt_scorer.score(questions, answers).score == 33.3

        answers.append(SubmittedAnswer(question_id="q-tf", answer={"answer": True}))
        assert attempt_scorer.score(questions, answers).score == 66.7

    def test_breakdown_reports_all_known_types(self, mcq_question, perfect_answers):
        result = attempt_scorer.score([mcq_question], perfect_answers)
        assert set(result.breakdown) == {"mcq", "fill_blank", "true_false", "match_following"}
        assert result.breakdown["fill_blank"].total == 0

    def test_unknown_type_counts_toward_total_only(self, mcq_question, perfect_answers):
        essay = Question(id="q-essay", question_type="essay")
        result = attempt_scorer.score([mcq_question, essay], perfect_answers)
        assert result.total_questions == 2
        assert result.correct_answers == 1
        assert result.score == 50.0
        assert "essay" not in result.breakdown

    def test_answers_for_unknown_questions_are_ignored(self, mcq_question):
        answers = [
            SubmittedAnswer(question_id="not-in-quiz", answer={"selectedOption": 2}),
            SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 1}),
        ]
        result = attempt_scorer.score([mcq_question], answers)
        assert result.correct_answers == 0
        assert result.total_questions == 1

    def test_first_answer_for_a_question_wins(self, mcq_question):
        answers = [
            SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 2}),
            SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 0}),
        ]
        assert attempt_scorer.score([mcq_question], answers).correct_answers == 1

    def test_malformed_question_does_not_abort_attempt(self, sample_questions, perfect_answers):
        broken = Question(id="q-broken", question_type="true_false", question_data={})
        result = attempt_scorer.score(sample_questions + [broken], perfect_answers)
        assert result.total_questions == 5
        assert result.correct_answers == 4
        assert result.score == 80.0

    def test_time_taken_only_when_provided(self, sample_questions, perfect_answers):
        assert attempt_scorer.score(sample_questions, perfect_answers).time_taken is None
        assert attempt_scorer.score(sample_questions, perfect_answers, elapsed_seconds=95).time_taken == 95

    def test_time_metrics_from_answers(self, sample_questions, perfect_answers):
        metrics = attempt_scorer.score(sample_questions, perfect_answers).time_metrics
        assert metrics.total_time == 76
        assert metrics.average_time_per_question == 19.0
        assert metrics.fastest_question == 4
        assert metrics.slowest_question == 40

    def test_no_time_metrics_without_times(self, mcq_question):
        answers = [SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 2})]
        assert attempt_scorer.score([mcq_question], answers).time_metrics is None

    def test_scoring_is_deterministic(self, sample_questions, perfect_answers):
        first = attempt_scorer.score(sample_questions, perfect_answers[1:], elapsed_seconds=61.5)
        second = attempt_scorer.score(sample_questions, perfect_answers[1:], elapsed_seconds=61.5)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_custom_precision(self, mcq_question, true_false_question, fill_blank_question):
        scorer = AttemptScorer(decimal_places=2)
        answers = [SubmittedAnswer(question_id="q-mcq", answer={"selectedOption": 2})]
        result = scorer.score([mcq_question, true_false_question, fill_blank_question], answers)
        assert result.score == 33.33


@pytest.mark.scoring
class TestQuizResults:
    def test_passed_against_passing_score(self, sample_questions, perfect_answers):
        result = attempt_scorer.score(sample_questions, perfect_answers[:3], elapsed_seconds=150)
        quiz_results = attempt_scorer.build_results(
            sample_questions, perfect_answers[:3], result, QuizSettings(passing_score=70)
        )
        assert quiz_results.passed is True
        assert quiz_results.score_percentage == 75.0
        assert quiz_results.time_formatted == "2m 30s"
        assert [q.correct for q in quiz_results.questions] == [True, True, True, False]
        assert quiz_results.questions[3].answer is None

    def test_passed_is_none_without_threshold(self, sample_questions, perfect_answers):
        result = attempt_scorer.score(sample_questions, perfect_answers)
        assert attempt_scorer.build_results(sample_questions, perfect_answers, result).passed is None

    def test_empty_quiz_never_passes(self):
        result = attempt_scorer.score([], [])
        quiz_results = attempt_scorer.build_results([], [], result, QuizSettings(passing_score=0))
        assert quiz_results.passed is False

    def test_hidden_answers_and_explanations(self, sample_questions, perfect_answers):
        result = attempt_scorer.score(sample_questions, perfect_answers)
        hidden = attempt_scorer.build_results(
            sample_questions, perfect_answers, result,
            QuizSettings(show_correct_answers=False, show_explanations=False),
        )
        assert hidden.questions[0].question_data is None
        assert hidden.questions[0].explanation is None

        shown = attempt_scorer.build_results(sample_questions, perfect_answers, result, QuizSettings())
        assert shown.questions[0].question_data["correctAnswer"] == 2
        assert shown.questions[0].explanation.startswith("Iron oxide")
