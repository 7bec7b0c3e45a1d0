"""
Helper Functions
Utility functions used across the application
Admin gate: credential check, signed cookie, require_admin decorator
"""
from datetime import datetime, timezone
from functools import wraps
import hmac

from flask import current_app, request, redirect, url_for, jsonify
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
import pytz

ADMIN_COOKIE_SALT = 'quizguard-admin-cookie'


def now_utc():
    """Get current UTC timestamp"""
    return datetime.now(timezone.utc)


def to_local_time(utc_dt):
    """Convert a UTC datetime to the configured TIMEZONE for display"""
    if not utc_dt:
        return None
    if utc_dt.tzinfo is None:
        utc_dt = utc_dt.replace(tzinfo=pytz.utc)
    local_tz = pytz.timezone(current_app.config['TIMEZONE'])
    return utc_dt.astimezone(local_tz)


def error_response(message, status, error=None, **extra):
    """JSON error body shared by all API routes"""
    body = {'success': False, 'message': message}
    if error is not None:
        body['error'] = str(error)
    body.update(extra)
    return jsonify(body), status


def json_body():
    """Request JSON when it is an object, {} for anything else"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def missing_fields(data, *fields):
    """Names of required fields that are absent or empty"""
    return [f for f in fields if data.get(f) in (None, '')]


# Bounds of an SQL INTEGER column
DB_INT_MIN = -2 ** 31
DB_INT_MAX = 2 ** 31 - 1


def parse_db_int(value):
    """int that fits an INTEGER column, or None"""
    if isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not DB_INT_MIN <= number <= DB_INT_MAX:
        return None
    return number


def parse_absen(value):
    """Roll numbers are integers; returns None for anything else"""
    return parse_db_int(value)


def read_student_key(data):
    """
    Pull (absen, class) out of a JSON body

    Returns:
        tuple: (absen, student_class, error_response or None)
    """
    missing = missing_fields(data, 'student_absen', 'student_class')
    if missing:
        return None, None, error_response(f"Missing required fields: {', '.join(missing)}", 400)
    absen = parse_absen(data['student_absen'])
    if absen is None:
        return None, None, error_response('student_absen must be a number', 400)
    return absen, str(data['student_class']), None


# ================= ADMIN GATE =================

def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=ADMIN_COOKIE_SALT)


def check_admin_credentials(username, password):
    """Compare against the ADMIN_USERNAME / ADMIN_PASSWORD settings"""
    expected_user = current_app.config.get('ADMIN_USERNAME') or ''
    expected_pass = current_app.config.get('ADMIN_PASSWORD') or ''
    if not expected_user or not expected_pass:
        return False
    user_ok = hmac.compare_digest(str(username or ''), expected_user)
    pass_ok = hmac.compare_digest(str(password or ''), expected_pass)
    return user_ok and pass_ok


def issue_admin_token(username):
    """Signed, timestamped cookie value naming the admin"""
    return _serializer().dumps({'admin': username})


def verify_admin_token(token):
    """
    True when the token is validly signed, younger than the cookie max
    age and still names the configured admin username
    """
    if not token:
        return False
    try:
        payload = _serializer().loads(
            token, max_age=current_app.config['ADMIN_COOKIE_MAX_AGE']
        )
    except SignatureExpired:
        current_app.logger.info('Expired admin cookie rejected')
        return False
    except BadSignature:
        current_app.logger.warning('Admin cookie with bad signature rejected')
        return False
    return payload.get('admin') == current_app.config.get('ADMIN_USERNAME')


def is_admin_request():
    """Check the admin cookie on the current request"""
    return verify_admin_token(request.cookies.get(current_app.config['ADMIN_COOKIE_NAME']))


def set_admin_cookie(response, username):
    cfg = current_app.config
    response.set_cookie(
        cfg['ADMIN_COOKIE_NAME'],
        issue_admin_token(username),
        max_age=cfg['ADMIN_COOKIE_MAX_AGE'],
        httponly=True,
        secure=cfg['ADMIN_COOKIE_SECURE'],
        samesite='Lax',
    )
    return response


def clear_admin_cookie(response):
    response.delete_cookie(current_app.config['ADMIN_COOKIE_NAME'])
    return response


# Decorators
def require_admin(f):
    """
    Decorator to require the admin cookie
    API routes get a 401 JSON body, pages are redirected to the login page
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_admin_request():
            if request.path.startswith('/api/'):
                return error_response('Admin login required', 401)
            return redirect(url_for('auth.login_page'))
        return f(*args, **kwargs)
    return decorated_function
