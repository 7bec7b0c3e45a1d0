"""
Session Service
Tracks the active/blocked flag per (absen, class)
"""
from sqlalchemy import and_
from sqlalchemy.dialects import postgresql, sqlite
from quizguard.extensions import db
from quizguard.models import QuizSession, Submission, STATUS_ACTIVE, STATUS_BLOCKED
from quizguard.utils import now_utc

ALL_CLASSES = 'semua'

_DIALECT_INSERTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


class SessionService:
    """
    Session status writes

    There is no transition table: any status may follow any other and
    concurrent writes for the same student are last-write-wins.
    """

    @staticmethod
    def start(absen, student_class):
        """Create the session row or reset it to active"""
        insert = _DIALECT_INSERTS[db.engine.dialect.name]
        stmt = insert(QuizSession).values(
            student_absen=absen,
            student_class=student_class,
            status=STATUS_ACTIVE,
            last_updated=now_utc(),
        ).on_conflict_do_update(
            index_elements=['student_absen', 'student_class'],
            set_={'status': STATUS_ACTIVE, 'last_updated': now_utc()},
        )
        db.session.execute(stmt)
        db.session.commit()

    @staticmethod
    def set_status(absen, student_class, status):
        """
        Overwrite the status of an existing row

        Returns:
            int: rows touched (0 when the student never started)
        """
        updated = QuizSession.query.filter_by(
            student_absen=absen,
            student_class=student_class,
        ).update(
            {'status': status, 'last_updated': now_utc()},
            synchronize_session=False,
        )
        db.session.commit()
        return updated

    @staticmethod
    def block(absen, student_class):
        return SessionService.set_status(absen, student_class, STATUS_BLOCKED)

    @staticmethod
    def unblock(absen, student_class):
        return SessionService.set_status(absen, student_class, STATUS_ACTIVE)

    @staticmethod
    def status(absen, student_class):
        """Stored status string, or None when no session exists"""
        session_row = QuizSession.query.filter_by(
            student_absen=absen,
            student_class=student_class,
        ).first()
        return session_row.status if session_row else None

    @staticmethod
    def list_sessions(kelas=None):
        """
        Sessions joined with the student's name from submissions

        Returns:
            list: dicts with student_absen, student_class, student_name, status
        """
        query = db.session.query(
            QuizSession.student_absen,
            QuizSession.student_class,
            Submission.student_name,
            QuizSession.status,
        ).outerjoin(
            Submission,
            and_(
                QuizSession.student_absen == Submission.student_absen,
                QuizSession.student_class == Submission.student_class,
            ),
        )

        if kelas and kelas != ALL_CLASSES:
            query = query.filter(QuizSession.student_class == kelas)

        rows = query.order_by(
            QuizSession.student_class,
            QuizSession.student_absen,
        ).all()

        return [
            {
                'student_absen': row.student_absen,
                'student_class': row.student_class,
                'student_name': row.student_name,
                'status': row.status,
            }
            for row in rows
        ]
