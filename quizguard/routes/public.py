from flask import Blueprint, render_template

public_bp = Blueprint('public', __name__)


@public_bp.route('/')
def quiz_page():
    """Student quiz page"""
    return render_template('quiz.html')


@public_bp.route('/statistik')
def statistics_page():
    """Public score statistics page"""
    return render_template('statistik.html')
