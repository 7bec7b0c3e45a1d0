"""
Services Package
"""
from quizguard.services.scoring_service import ScoringService, NOT_ANSWERED
from quizguard.services.session_service import SessionService, ALL_CLASSES

__all__ = ['ScoringService', 'SessionService', 'NOT_ANSWERED', 'ALL_CLASSES']
