"""
Sockets Package
"""
from quizguard.sockets.monitor_events import (
    register_socket_events,
    emit_session_update,
    emit_submission_added,
    emit_submission_deleted,
)

__all__ = [
    'register_socket_events',
    'emit_session_update',
    'emit_submission_added',
    'emit_submission_deleted',
]
