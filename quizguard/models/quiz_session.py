"""
QuizSession Model
Per-student active/blocked flag, keyed like submissions
"""
from quizguard.extensions import db
from quizguard.utils import now_utc

STATUS_ACTIVE = 'active'
STATUS_BLOCKED = 'blocked'


class QuizSession(db.Model):
    """Quiz session model"""
    __tablename__ = 'quiz_sessions'

    id = db.Column(db.Integer, primary_key=True)
    student_absen = db.Column(db.Integer, nullable=False)
    student_class = db.Column(db.String(50), nullable=False)

    # Free text in storage; the app only writes 'active' and 'blocked'
    status = db.Column(db.String(50), nullable=False, default=STATUS_ACTIVE)
    last_updated = db.Column(db.DateTime(timezone=True), default=now_utc)

    __table_args__ = (
        db.UniqueConstraint(
            'student_absen', 'student_class',
            name='unique_session_per_student'
        ),
    )

    def __repr__(self):
        return f'<QuizSession {self.student_class}/{self.student_absen}: {self.status}>'
