"""
Routes Package
Exports all route blueprints
"""
from quizguard.routes.auth import auth_bp
from quizguard.routes.admin import admin_bp
from quizguard.routes.student import student_bp
from quizguard.routes.public import public_bp

__all__ = ['auth_bp', 'admin_bp', 'student_bp', 'public_bp']
