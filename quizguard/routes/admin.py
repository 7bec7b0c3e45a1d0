"""
Admin Routes
Dashboard and monitor pages, quiz CRUD, submissions and session monitoring
"""
from flask import Blueprint, render_template, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from quizguard.extensions import db
from quizguard.models import Quiz, Submission, STATUS_ACTIVE
from quizguard.services import SessionService, ALL_CLASSES
from quizguard.sockets import emit_session_update, emit_submission_deleted
from quizguard.utils import (
    require_admin,
    error_response,
    json_body,
    missing_fields,
    parse_absen,
    read_student_key,
    to_local_time,
)

admin_bp = Blueprint('admin', __name__)

QUIZ_FIELDS = ('question', 'options', 'correct_answer')


def validate_quiz_payload(data):
    """Returns an error message, or None when the payload is usable"""
    missing = missing_fields(data, *QUIZ_FIELDS)
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    if not isinstance(data['options'], (dict, list)) or not data['options']:
        return 'options must be a non-empty object or list'
    answer = data['correct_answer']
    if not isinstance(answer, str) or len(answer.strip()) != 1:
        return 'correct_answer must be a single letter'
    return None


def apply_quiz_payload(quiz, data):
    quiz.question = data['question']
    quiz.options = data['options']
    quiz.correct_answer = data['correct_answer'].strip()
    quiz.image_base64 = data.get('image_base64') or None
    quiz.image_mimetype = data.get('image_mimetype') or None


# ================= PAGES =================

@admin_bp.route('/dashboard')
@require_admin
def dashboard():
    """Admin dashboard"""
    return render_template('dashboard.html')


@admin_bp.route('/monitor')
@require_admin
def monitor():
    """Live session monitor"""
    return render_template('monitor.html')


# ================= QUIZZES =================

@admin_bp.route('/api/quizzes', methods=['GET'])
@require_admin
def list_quizzes():
    try:
        quizzes = Quiz.query.order_by(Quiz.id.asc()).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error listing quizzes: {e}")
        return error_response('Server error', 500, error=e)
    return jsonify([quiz.to_dict() for quiz in quizzes])


@admin_bp.route('/api/quizzes', methods=['POST'])
@require_admin
def create_quiz():
    data = json_body()
    problem = validate_quiz_payload(data)
    if problem:
        return error_response(problem, 400)

    quiz = Quiz()
    apply_quiz_payload(quiz, data)
    try:
        db.session.add(quiz)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error inserting quiz: {e}")
        return error_response('Failed to add question', 500, error=e)

    return jsonify({'success': True, 'data': {'id': quiz.id}}), 201


@admin_bp.route('/api/quizzes/<int:quiz_id>', methods=['PUT'])
@require_admin
def update_quiz(quiz_id):
    data = json_body()
    problem = validate_quiz_payload(data)
    if problem:
        return error_response(problem, 400)

    try:
        quiz = db.session.get(Quiz, quiz_id)
        if quiz is None:
            return error_response('Question not found.', 404)
        apply_quiz_payload(quiz, data)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating quiz {quiz_id}: {e}")
        return error_response('Failed to update question', 500, error=e)

    return jsonify({'success': True, 'data': {'id': quiz.id}})


@admin_bp.route('/api/quizzes/<int:quiz_id>', methods=['DELETE'])
@require_admin
def delete_quiz(quiz_id):
    try:
        Quiz.query.filter_by(id=quiz_id).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting quiz {quiz_id}: {e}")
        return error_response('Failed to delete question', 500, error=e)
    return jsonify({'success': True, 'message': 'Question deleted.'})


# ================= SUBMISSIONS =================

@admin_bp.route('/api/submissions', methods=['GET'])
@require_admin
def list_submissions():
    """Scores, optionally for one class; 'semua' means all classes"""
    kelas = request.args.get('kelas')
    try:
        query = Submission.query
        if kelas and kelas != ALL_CLASSES:
            query = query.filter_by(student_class=kelas)
        submissions = query.order_by(
            Submission.student_class.asc(),
            Submission.score.desc(),
        ).all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error listing submissions: {e}")
        return error_response('Server error', 500, error=e)

    rows = []
    for submission in submissions:
        row = submission.to_dict()
        local = to_local_time(submission.submitted_at)
        row['submitted_at_local'] = local.strftime('%d-%m-%Y %H:%M') if local else None
        rows.append(row)
    return jsonify(rows)


@admin_bp.route('/api/submissions/<absen>/<kelas>', methods=['DELETE'])
@require_admin
def delete_submission(absen, kelas):
    """Remove a student's score so they can take the quiz again"""
    student_absen = parse_absen(absen)
    if student_absen is None:
        return error_response('absen must be a number', 400)

    try:
        Submission.query.filter_by(
            student_absen=student_absen,
            student_class=kelas,
        ).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting submission {kelas}/{absen}: {e}")
        return error_response('Failed to delete student data', 500, error=e)

    emit_submission_deleted(student_absen, kelas)
    return jsonify({'success': True, 'message': 'Student score deleted.'})


# ================= SESSIONS =================

@admin_bp.route('/api/sessions', methods=['GET'])
@require_admin
def list_sessions():
    try:
        sessions = SessionService.list_sessions(request.args.get('kelas'))
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching sessions: {e}")
        return error_response('Server error', 500, error=e)
    return jsonify(sessions)


@admin_bp.route('/api/session/unblock', methods=['POST'])
@require_admin
def unblock_session():
    absen, student_class, problem = read_student_key(json_body())
    if problem:
        return problem

    try:
        SessionService.unblock(absen, student_class)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error unblocking session: {e}")
        return error_response('Failed to unblock student.', 500, error=e)

    current_app.logger.info('Session unblocked: %s/%s', student_class, absen)
    emit_session_update(absen, student_class, STATUS_ACTIVE)
    return jsonify({'success': True, 'message': 'Student unblocked.'})
