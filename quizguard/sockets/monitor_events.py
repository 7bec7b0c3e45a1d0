"""
Socket.IO Event Handlers
Live updates for the admin monitor page
"""
from flask import request
from flask_socketio import emit, join_room, leave_room
from quizguard.extensions import socketio, MONITOR_ROOM
from quizguard.utils import is_admin_request


def register_socket_events():
    """Register all Socket.IO event handlers"""

    @socketio.on('join_monitor')
    def join_monitor(data=None):
        """Admin monitor page subscribes to session and submission events"""
        if not is_admin_request():
            print(f'⛔ Monitor join refused for {request.sid}')
            emit('monitor_error', {'message': 'Admin login required'})
            return
        join_room(MONITOR_ROOM)
        print(f'✅ Monitor joined: {request.sid}')
        emit('monitor_joined', {'room': MONITOR_ROOM})

    @socketio.on('leave_monitor')
    def leave_monitor(data=None):
        leave_room(MONITOR_ROOM)


def emit_session_update(absen, student_class, status):
    """Push a session status change to monitoring admins"""
    socketio.emit('session_update', {
        'student_absen': absen,
        'student_class': student_class,
        'status': status,
    }, to=MONITOR_ROOM)


def emit_submission_added(submission):
    socketio.emit('submission_added', {
        'student_name': submission.student_name,
        'student_absen': submission.student_absen,
        'student_class': submission.student_class,
        'score': submission.score,
    }, to=MONITOR_ROOM)


def emit_submission_deleted(absen, student_class):
    socketio.emit('submission_deleted', {
        'student_absen': absen,
        'student_class': student_class,
    }, to=MONITOR_ROOM)
