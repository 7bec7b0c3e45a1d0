"""
Test cases for grading and review reconstruction.
"""
from datetime import datetime, timezone

import pytest

from quizguard.models import Quiz, Submission
from quizguard.services import ScoringService, NOT_ANSWERED


def make_quizzes(*answers):
    return [
        Quiz(id=i, question=f'Q{i}', options={'A': 'a', 'B': 'b', 'C': 'c'}, correct_answer=answer)
        for i, answer in enumerate(answers, 1)
    ]


class TestGrade:
    """Test cases for ScoringService.grade."""

    def test_mixed_case_scenario(self):
        """Lower-case correct answer counts, wrong answer is recorded."""
        quizzes = make_quizzes('B', 'C')
        result = ScoringService.grade(quizzes, [
            {'questionId': 1, 'answer': 'b'},
            {'questionId': 2, 'answer': 'A'},
        ])
        assert result['score'] == 50
        assert result['correct_count'] == 1
        assert result['wrong_answers'] == [
            {'questionId': 2, 'selectedAnswer': 'A', 'correctAnswer': 'C'},
        ]

    def test_empty_quiz_set_scores_zero(self):
        result = ScoringService.grade([], [{'questionId': 1, 'answer': 'A'}])
        assert result['score'] == 0
        assert result['total'] == 0
        assert result['wrong_answers'] == []

    def test_missing_answer_uses_sentinel(self):
        quizzes = make_quizzes('A', 'B')
        result = ScoringService.grade(quizzes, [
            {'questionId': 1, 'answer': 'A'},
            {'questionId': 2, 'answer': ''},
        ])
        assert result['score'] == 50
        assert result['wrong_answers'][0]['selectedAnswer'] == NOT_ANSWERED

    def test_question_not_submitted_counts_as_wrong(self):
        quizzes = make_quizzes('A', 'B', 'C')
        result = ScoringService.grade(quizzes, [{'questionId': 1, 'answer': 'A'}])
        assert result['correct_count'] == 1
        assert [w['questionId'] for w in result['wrong_answers']] == [2, 3]

    def test_string_question_ids_are_accepted(self):
        quizzes = make_quizzes('A')
        result = ScoringService.grade(quizzes, [{'questionId': '1', 'answer': 'a'}])
        assert result['score'] == 100

    def test_unknown_question_ids_are_ignored(self):
        quizzes = make_quizzes('A')
        result = ScoringService.grade(quizzes, [
            {'questionId': 1, 'answer': 'A'},
            {'questionId': 99, 'answer': 'B'},
            {'questionId': 'abc', 'answer': 'B'},
        ])
        assert result['score'] == 100
        assert result['wrong_answers'] == []

    @pytest.mark.parametrize('correct,total,expected', [
        (0, 3, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (4, 4, 100),
        (0, 0, 0),
    ])
    def test_percentage_rounds_half_up(self, correct, total, expected):
        assert ScoringService.percentage(correct, total) == expected


class TestAnswersMatch:
    """Test cases for the answer comparison."""

    def test_case_insensitive(self):
        assert ScoringService.answers_match('a', 'A')
        assert ScoringService.answers_match('A', 'A')

    def test_empty_answer_never_matches(self):
        assert not ScoringService.answers_match(None, 'A')
        assert not ScoringService.answers_match('', 'A')

    def test_different_letter(self):
        assert not ScoringService.answers_match('B', 'A')


class TestBuildReview:
    """Test cases for review reconstruction."""

    def test_unlisted_question_reports_correct_answer(self):
        quizzes = make_quizzes('B', 'C')
        submission = Submission(
            student_name='Budi',
            student_absen=7,
            student_class='X-1',
            score=50,
            wrong_answers=[{'questionId': 2, 'selectedAnswer': 'A', 'correctAnswer': 'C'}],
            submitted_at=datetime(2026, 10, 1, 3, 0, tzinfo=timezone.utc),
        )
        review = ScoringService.build_review(submission, quizzes)

        assert review['student'] == {'student_name': 'Budi'}
        assert review['score'] == 50
        assert review['date'].startswith('2026-10-01')

        first, second = review['details']
        assert first['userAnswer'] == 'B'
        assert first['isCorrect'] is True
        assert second['userAnswer'] == 'A'
        assert second['correctAnswer'] == 'C'
        assert second['isCorrect'] is False

    def test_no_wrong_answers_means_all_correct(self):
        quizzes = make_quizzes('A', 'D')
        submission = Submission(student_name='Sari', score=100, wrong_answers=None)
        review = ScoringService.build_review(submission, quizzes)
        assert all(d['isCorrect'] for d in review['details'])
        assert [d['userAnswer'] for d in review['details']] == ['A', 'D']
        assert review['date'] is None
