"""
Models Package
Exports all database models
"""
from quizguard.models.quiz import Quiz
from quizguard.models.submission import Submission
from quizguard.models.quiz_session import QuizSession, STATUS_ACTIVE, STATUS_BLOCKED

__all__ = ['Quiz', 'Submission', 'QuizSession', 'STATUS_ACTIVE', 'STATUS_BLOCKED']
