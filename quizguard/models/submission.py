"""
Submission Model
A student's finished, scored attempt. One per (absen, class).
"""
from quizguard.extensions import db
from quizguard.utils import now_utc
from quizguard.models.quiz import JSONType


class Submission(db.Model):
    """Submission model"""
    __tablename__ = 'submissions'

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(db.String(255), nullable=False)
    student_absen = db.Column(db.Integer, nullable=False)
    student_class = db.Column(db.String(50), nullable=False)
    score = db.Column(db.Integer, nullable=False)

    # [{"questionId": .., "selectedAnswer": .., "correctAnswer": ..}, ...]
    wrong_answers = db.Column(JSONType)
    submitted_at = db.Column(db.DateTime(timezone=True), default=now_utc)

    __table_args__ = (
        db.UniqueConstraint(
            'student_absen', 'student_class',
            name='unique_submission_per_student'
        ),
    )

    def __repr__(self):
        return f'<Submission {self.student_class}/{self.student_absen}: {self.score}>'

    def to_dict(self):
        return {
            'id': self.id,
            'student_name': self.student_name,
            'student_absen': self.student_absen,
            'student_class': self.student_class,
            'score': self.score,
            'wrong_answers': self.wrong_answers or [],
            'submitted_at': self.submitted_at.isoformat() if self.submitted_at else None,
        }
