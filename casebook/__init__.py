import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask, jsonify, request
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect

from config import Config

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
csrf = CSRFProtect()


@login_manager.unauthorized_handler
def unauthorized_callback():
    """Admin API is JSON-only: no redirect to a login page."""
    return jsonify({'status': 'error', 'message': 'Login required', 'path': request.path}), 401


def setup_logging(app):
    """Configure rotating file logging."""
    if app.debug or app.testing:
        return
    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)
    app.logger.setLevel(log_level)

    logs_dir = Path(app.config.get('LOGS_DIR', 'logs'))
    logs_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        logs_dir / 'casebook.log',
        maxBytes=app.config.get('LOG_MAX_BYTES', 10 * 1024 * 1024),
        backupCount=app.config.get('LOG_BACKUP_COUNT', 5),
        encoding='utf-8',
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
    ))
    app.logger.addHandler(handler)
    # casebook.* module loggers (parser, notifications) share the file
    package_logger = logging.getLogger('casebook')
    package_logger.setLevel(log_level)
    package_logger.addHandler(handler)
    app.logger.info('Casebook started')


def _ensure_superadmin(app):
    from casebook.models import User
    login = app.config.get('SUPERADMIN_LOGIN')
    password = app.config.get('SUPERADMIN_PASSWORD')
    if not login or not password:
        return
    user = User.query.filter_by(login=login).first()
    if not user:
        user = User(login=login, full_name='Superadmin', is_admin=True, is_active=True)
        db.session.add(user)
    # keep the password in sync with config
    user.set_password(password)
    user.is_admin = True
    user.is_active = True
    db.session.commit()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    csrf.init_app(app)
    setup_logging(app)

    @app.before_request
    def make_session_permanent():
        from flask import session
        session.permanent = True

    @app.route('/health')
    def health():
        return {'status': 'ok', 'service': 'casebook'}, 200

    from casebook.routes import admin, auth
    app.register_blueprint(auth.bp)
    app.register_blueprint(admin.bp)

    from casebook.cli import quiz_cli
    app.cli.add_command(quiz_cli)

    with app.app_context():
        db.create_all()
        _ensure_superadmin(app)

    return app
