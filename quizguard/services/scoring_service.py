"""
Scoring Service
Grades a submission against the answer key and rebuilds the review
"""
import math

# Stored as selectedAnswer when a question was left blank
NOT_ANSWERED = 'Not answered'


def _to_question_id(value):
    """Question ids come from JSON as ints or numeric strings"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class ScoringService:
    """Service for scoring answers"""

    @staticmethod
    def answers_match(selected, correct):
        """Case-insensitive single-letter comparison"""
        if not selected or not correct:
            return False
        return str(selected).strip().lower() == str(correct).strip().lower()

    @staticmethod
    def percentage(correct_count, total_questions):
        """
        Percentage score rounded half-up, 0 for an empty quiz set

        Python's round() is banker's rounding; the browser client
        rounds 12.5 up to 13, so we do the same.
        """
        if total_questions <= 0:
            return 0
        return int(math.floor(correct_count / total_questions * 100 + 0.5))

    @staticmethod
    def grade(quizzes, answers):
        """
        Grade submitted answers against the quiz set

        Args:
            quizzes: quiz rows ordered by id (need .id and .correct_answer)
            answers: list of {"questionId": .., "answer": ..} dicts

        Returns:
            dict: correct_count, total, score, wrong_answers
        """
        submitted = {}
        for entry in answers or []:
            if not isinstance(entry, dict):
                continue
            question_id = _to_question_id(entry.get('questionId'))
            if question_id is not None:
                submitted[question_id] = entry.get('answer')

        correct_count = 0
        wrong_answers = []

        for quiz in quizzes:
            selected = submitted.get(quiz.id)
            if ScoringService.answers_match(selected, quiz.correct_answer):
                correct_count += 1
            else:
                wrong_answers.append({
                    'questionId': quiz.id,
                    'selectedAnswer': selected or NOT_ANSWERED,
                    'correctAnswer': quiz.correct_answer,
                })

        total = len(quizzes)
        return {
            'correct_count': correct_count,
            'total': total,
            'score': ScoringService.percentage(correct_count, total),
            'wrong_answers': wrong_answers,
        }

    @staticmethod
    def build_review(submission, quizzes):
        """
        Rebuild the per-question review for a stored submission

        Questions missing from wrong_answers are assumed to have been
        answered correctly. Quizzes edited after the submission are not
        detected.
        """
        wrong_map = {}
        for wrong in submission.wrong_answers or []:
            question_id = _to_question_id(wrong.get('questionId'))
            if question_id is not None:
                wrong_map[question_id] = wrong.get('selectedAnswer')

        details = []
        for quiz in quizzes:
            is_wrong = quiz.id in wrong_map
            details.append({
                'question': quiz.question,
                'options': quiz.options,
                'image_base64': quiz.image_base64,
                'image_mimetype': quiz.image_mimetype,
                'userAnswer': wrong_map[quiz.id] if is_wrong else quiz.correct_answer,
                'correctAnswer': quiz.correct_answer,
                'isCorrect': not is_wrong,
            })

        return {
            'student': {'student_name': submission.student_name},
            'score': submission.score,
            'date': submission.submitted_at.isoformat() if submission.submitted_at else None,
            'details': details,
        }
