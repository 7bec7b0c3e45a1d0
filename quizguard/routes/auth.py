"""
Authentication Routes
Single shared admin credential: login page, login and logout API
"""
from flask import Blueprint, render_template, request, jsonify, current_app, redirect, url_for
from quizguard.utils import (
    check_admin_credentials,
    set_admin_cookie,
    clear_admin_cookie,
    is_admin_request,
    error_response,
    json_body,
)

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login')
def login_page():
    """Admin login page"""
    if is_admin_request():
        return redirect(url_for('admin.dashboard'))
    return render_template('login.html')


@auth_bp.route('/api/login', methods=['POST'])
def login():
    """Check the admin credential and hand out the signed cookie"""
    data = json_body()
    username = data.get('username')
    password = data.get('password')

    if not check_admin_credentials(username, password):
        current_app.logger.warning('Failed admin login for %r from %s', username, request.remote_addr)
        return error_response('Wrong username or password.', 401)

    response = jsonify({
        'success': True,
        'message': 'Login successful',
        'redirectUrl': url_for('admin.dashboard'),
    })
    return set_admin_cookie(response, username)


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    """Admin logout"""
    response = jsonify({
        'success': True,
        'message': 'Logout successful',
        'redirectUrl': url_for('auth.login_page'),
    })
    return clear_admin_cookie(response)
