import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma-separated list; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Points awarded to the winner of a match
    WIN_REWARD = int(os.environ.get('WIN_REWARD', '10'))
    # Completed matches retained in memory, and how many are shown to clients
    HISTORY_LIMIT = int(os.environ.get('HISTORY_LIMIT', '20'))
    HISTORY_PAGE_SIZE = int(os.environ.get('HISTORY_PAGE_SIZE', '5'))
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '5'))


def parse_origins(value):
    """Turn the CORS_ORIGINS setting into what Flask-CORS and Socket.IO expect."""
    if not value or value.strip() == '*':
        return '*'
    return [o.strip() for o in value.split(',') if o.strip()]
