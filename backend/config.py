import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma-separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    # Random draws per ticket cell before falling back to a linear scan
    TICKET_MAX_ATTEMPTS = int(os.environ.get('TICKET_MAX_ATTEMPTS', '50'))
    # 0 means names of any length are accepted
    MAX_NAME_LENGTH = int(os.environ.get('MAX_NAME_LENGTH', '0'))
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
    # Lets socketio.run serve through Werkzeug outside debug mode
    ALLOW_UNSAFE_WERKZEUG = os.environ.get('ALLOW_UNSAFE_WERKZEUG', '0') == '1'
