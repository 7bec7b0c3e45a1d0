"""
Application Factory
Creates and configures the Flask application
"""
import logging

from flask import Flask, request, jsonify
from quizguard.config import get_config
from quizguard.extensions import db, socketio


def create_app(config_name=None):
    """
    Application factory pattern
    Creates and configures Flask app
    """
    app = Flask(__name__, template_folder='../templates', static_folder='../static')

    # Load configuration
    if config_name:
        from quizguard.config import config
        app.config.from_object(config[config_name])
    else:
        app.config.from_object(get_config())

    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'], logging.INFO))

    # Initialize extensions
    db.init_app(app)
    socketio.init_app(
        app,
        cors_allowed_origins=app.config['SOCKETIO_CORS_ALLOWED_ORIGINS'],
        async_mode=app.config['SOCKETIO_ASYNC_MODE']
    )

    # Register blueprints (all routes live at the root, API under /api)
    from quizguard.routes import auth_bp, admin_bp, student_bp, public_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(student_bp)
    app.register_blueprint(public_bp)

    register_error_handlers(app)

    # Register Socket.IO events
    from quizguard.sockets import register_socket_events
    with app.app_context():
        register_socket_events()

    # Create database tables
    with app.app_context():
        import quizguard.models  # noqa: F401
        db.create_all()
        print('>>> Database tables created/verified')

    return app


def register_error_handlers(app):
    """JSON bodies for API errors, default pages elsewhere"""

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Not found'}), 404
        return error

    @app.errorhandler(405)
    def method_not_allowed(error):
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Method not allowed'}), 405
        return error

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({'success': False, 'message': 'Request body too large'}), 413

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        original = getattr(error, 'original_exception', None)
        app.logger.error(f"Unhandled error on {request.method} {request.path}: {original or error}")
        if request.path.startswith('/api/'):
            return jsonify({'success': False, 'message': 'Server error'}), 500
        return error
