"""
Student Routes
Public quiz API: questions, answer check, submission, review, session lifecycle
"""
from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from quizguard.extensions import db
from quizguard.models import Quiz, Submission, STATUS_ACTIVE, STATUS_BLOCKED
from quizguard.services import ScoringService, SessionService
from quizguard.sockets import emit_session_update, emit_submission_added
from quizguard.utils import (
    error_response,
    json_body,
    missing_fields,
    parse_absen,
    parse_db_int,
    read_student_key,
)

student_bp = Blueprint('student', __name__)


@student_bp.route('/api/quiz-questions', methods=['GET'])
def quiz_questions():
    """
    Quiz set for the student page, ordered by id
    correct_answer is included for the client-side self-check
    """
    try:
        quizzes = Quiz.query.order_by(Quiz.id.asc()).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching quiz questions: {e}")
        return error_response('Server error', 500, error=e)
    return jsonify([quiz.to_dict() for quiz in quizzes])


@student_bp.route('/api/check-answer', methods=['POST'])
def check_answer():
    data = json_body()
    question_id = data.get('questionId')
    user_answer = data.get('userAnswer')
    if not question_id or not user_answer:
        return error_response('questionId and userAnswer are required.', 400)

    question_id = parse_db_int(question_id)
    if question_id is None:
        return error_response('questionId must be a number.', 400)

    try:
        quiz = db.session.get(Quiz, question_id)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error checking answer: {e}")
        return error_response('Server error', 500, error=e)

    if quiz is None:
        return error_response('Question not found.', 404)

    return jsonify({
        'success': True,
        'isCorrect': ScoringService.answers_match(user_answer, quiz.correct_answer),
        'correctAnswer': quiz.correct_answer,
    })


@student_bp.route('/api/submit-quiz', methods=['POST'])
def submit_quiz():
    """Grade and store the one allowed attempt for (absen, class)"""
    data = json_body()
    if missing_fields(data, 'student_name'):
        return error_response('Missing required fields: student_name', 400)
    absen, student_class, problem = read_student_key(data)
    if problem:
        return problem
    answers = data.get('answers')
    if not isinstance(answers, list):
        return error_response('answers must be a list', 400)

    try:
        quizzes = Quiz.query.order_by(Quiz.id.asc()).all()
        result = ScoringService.grade(quizzes, answers)

        submission = Submission(
            student_name=data['student_name'],
            student_absen=absen,
            student_class=student_class,
            score=result['score'],
            wrong_answers=result['wrong_answers'],
        )
        db.session.add(submission)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        current_app.logger.warning('Duplicate submission for %s/%s', student_class, absen)
        return error_response('This roll number has already been used in the same class.', 409)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error submitting quiz: {e}")
        return error_response('Failed to save answers', 500, error=e)

    print(f"📝 Submission {student_class}/{absen}: {result['correct_count']}/{result['total']} -> {result['score']}")
    emit_submission_added(submission)

    return jsonify({
        'success': True,
        'message': 'Answers saved!',
        'score': result['score'],
    }), 201


@student_bp.route('/api/check-absen', methods=['POST'])
def check_absen():
    """Duplicate pre-check before a student starts"""
    data = json_body()
    absen, student_class, problem = read_student_key(data)
    if problem:
        return problem

    try:
        exists = Submission.query.filter_by(
            student_absen=absen,
            student_class=student_class,
        ).first() is not None
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error checking absen: {e}")
        return error_response('Server error', 500, error=e)

    if exists:
        return jsonify({
            'exists': True,
            'message': (
                f'A score for roll number {absen} in class {student_class} already exists. '
                'The quiz can only be completed once; ask your teacher for a review.'
            ),
        }), 409
    return jsonify({'exists': False})


@student_bp.route('/api/last-submission', methods=['GET'])
def last_submission():
    """Review of the student's stored attempt"""
    absen = request.args.get('absen')
    kelas = request.args.get('kelas')
    if not absen or not kelas:
        return error_response('absen and kelas are required.', 400)
    student_absen = parse_absen(absen)
    if student_absen is None:
        return error_response('absen must be a number.', 400)

    try:
        submission = Submission.query.filter_by(
            student_absen=student_absen,
            student_class=kelas,
        ).order_by(Submission.submitted_at.desc()).first()
        if submission is None:
            return error_response('Submission not found.', 404)
        quizzes = Quiz.query.order_by(Quiz.id.asc()).all()
    except SQLAlchemyError as e:
        current_app.logger.exception(f"Error fetching last submission: {e}")
        return error_response('Server error', 500)

    return jsonify(ScoringService.build_review(submission, quizzes))


# ================= SESSION LIFECYCLE =================

@student_bp.route('/api/session/start', methods=['POST'])
def start_session():
    data = json_body()
    absen, student_class, problem = read_student_key(data)
    if problem:
        return problem

    try:
        SessionService.start(absen, student_class)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error starting session: {e}")
        return error_response('Server error', 500)

    current_app.logger.info('Session started: %s/%s', student_class, absen)
    emit_session_update(absen, student_class, STATUS_ACTIVE)
    return jsonify({'success': True})


@student_bp.route('/api/session/block', methods=['POST'])
def block_session():
    """Client reports cheating (tab switch etc.); no-op if never started"""
    data = json_body()
    absen, student_class, problem = read_student_key(data)
    if problem:
        return problem

    try:
        updated = SessionService.block(absen, student_class)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error blocking session: {e}")
        return error_response('Server error', 500)

    if updated:
        current_app.logger.info('Session blocked: %s/%s', student_class, absen)
        emit_session_update(absen, student_class, STATUS_BLOCKED)
    return jsonify({'success': True})


@student_bp.route('/api/session/status', methods=['GET'])
def session_status():
    absen = parse_absen(request.args.get('absen'))
    kelas = request.args.get('kelas')
    if absen is None or not kelas:
        return error_response('absen and kelas are required.', 400)

    try:
        status = SessionService.status(absen, kelas)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error reading session status: {e}")
        return error_response('Server error', 500)

    if status is None:
        return jsonify({'status': 'not_found'}), 404
    return jsonify({'status': status})
