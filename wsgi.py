"""
Production WSGI Entry Point
Used by gunicorn and other WSGI servers
"""
import os
from dotenv import load_dotenv

load_dotenv()

from quizguard import create_app  # noqa: E402
from quizguard.extensions import socketio  # noqa: E402

# Create Flask app
app = create_app()

# For development server
if __name__ == '__main__':
    # In production, use: gunicorn -w 1 --threads 100 wsgi:app
    port = int(os.getenv('PORT', 3000))

    socketio.run(
        app,
        host='0.0.0.0',
        port=port,
        debug=app.config.get('DEBUG', False),
        use_reloader=False,
        allow_unsafe_werkzeug=True
    )
