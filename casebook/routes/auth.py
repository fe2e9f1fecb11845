import logging
from datetime import datetime

from flask import Blueprint, jsonify, request, session
from flask_login import current_user, login_required, login_user, logout_user
from flask_wtf.csrf import generate_csrf

from casebook import db
from casebook.models import User

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__)


@bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or request.form
    login_input = (data.get('login') or '').strip()
    password = data.get('password') or ''

    user = User.query.filter_by(login=login_input).first() if login_input else None
    if not user or not user.check_password(password):
        logger.info("Failed login for %r", login_input)
        return jsonify({'status': 'error', 'message': 'Invalid login or password'}), 401
    if not user.is_active:
        return jsonify({'status': 'error', 'message': 'Account blocked'}), 403

    user.last_login = datetime.utcnow()
    db.session.commit()
    session.permanent = True
    login_user(user, remember=bool(data.get('remember')))
    return jsonify({'status': 'success', 'user': {'id': user.id, 'login': user.login, 'is_admin': user.is_admin}})


@bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'status': 'success'})


@bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify({'id': current_user.id, 'login': current_user.login, 'is_admin': current_user.is_admin})


@bp.route('/csrf-token', methods=['GET'])
def csrf_token():
    """Token for the X-CSRFToken header of JSON POST/PUT/DELETE requests."""
    return jsonify({'csrf_token': generate_csrf()})
