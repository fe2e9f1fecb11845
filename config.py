import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / '.env')


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'casebook-secret-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///casebook.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # CSRF Protection settings
    WTF_CSRF_ENABLED = _env_flag('WTF_CSRF_ENABLED', 'true')
    WTF_CSRF_TIME_LIMIT = 3600

    # Superadmin – created/updated on startup
    SUPERADMIN_LOGIN = os.environ.get('SUPERADMIN_LOGIN') or 'admin'
    SUPERADMIN_PASSWORD = os.environ.get('SUPERADMIN_PASSWORD') or ''

    # Quiz DSL
    QUIZ_STRICT_PARSE = _env_flag('QUIZ_STRICT_PARSE')  # unknown lines -> 400 instead of being dropped
    QUIZ_MIN_OPTIONS = int(os.environ.get('QUIZ_MIN_OPTIONS', 2))
    QUIZ_REQUIRE_SINGLE_CORRECT = _env_flag('QUIZ_REQUIRE_SINGLE_CORRECT', 'true')

    # Logging
    LOGS_DIR = Path(os.environ.get('LOGS_DIR') or BASE_DIR / 'logs')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_MAX_BYTES = int(os.environ.get('LOG_MAX_BYTES', 10 * 1024 * 1024))  # 10 MB
    LOG_BACKUP_COUNT = int(os.environ.get('LOG_BACKUP_COUNT', 5))

    # Session
    PERMANENT_SESSION_LIFETIME = timedelta(minutes=30)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.environ.get('FLASK_ENV') == 'production'
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Server (waitress)
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', 5000))
    THREADS = int(os.environ.get('WAITRESS_THREADS', 4))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    SUPERADMIN_LOGIN = 'admin'
    SUPERADMIN_PASSWORD = 'admin-pass'
    QUIZ_STRICT_PARSE = False
