"""
Quiz Model
One stored question with labeled options and a single-letter answer key
"""
from sqlalchemy.dialects.postgresql import JSONB
from quizguard.extensions import db

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = db.JSON().with_variant(JSONB(), 'postgresql')


class Quiz(db.Model):
    """Quiz question model"""
    __tablename__ = 'quizzes'

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)

    # Ordered/labeled choice set, e.g. {"A": "...", "B": "..."}
    options = db.Column(JSONType, nullable=False)
    correct_answer = db.Column(db.String(1), nullable=False)

    # Optional embedded image
    image_base64 = db.Column(db.Text)
    image_mimetype = db.Column(db.Text)

    def __repr__(self):
        return f'<Quiz {self.id}: {self.question[:50]}>'

    def to_dict(self):
        return {
            'id': self.id,
            'question': self.question,
            'options': self.options,
            'correct_answer': self.correct_answer,
            'image_base64': self.image_base64,
            'image_mimetype': self.image_mimetype,
        }
