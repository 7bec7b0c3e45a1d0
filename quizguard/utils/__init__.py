"""
Utils Package
"""
from quizguard.utils.helpers import (
    now_utc,
    to_local_time,
    error_response,
    json_body,
    missing_fields,
    parse_absen,
    parse_db_int,
    read_student_key,
    check_admin_credentials,
    issue_admin_token,
    verify_admin_token,
    is_admin_request,
    set_admin_cookie,
    clear_admin_cookie,
    require_admin,
)

__all__ = [
    'now_utc',
    'to_local_time',
    'error_response',
    'json_body',
    'missing_fields',
    'parse_absen',
    'parse_db_int',
    'read_student_key',
    'check_admin_credentials',
    'issue_admin_token',
    'verify_admin_token',
    'is_admin_request',
    'set_admin_cookie',
    'clear_admin_cookie',
    'require_admin',
]
