"""
Admin JSON API – clinical cases, inscriptions and lab cases authored in the Quiz DSL.

Text is parsed on save and regenerated (canonical form) on load for editing.
"""
import logging
from functools import wraps

from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user

from casebook import db
from casebook.models import Category, ClinicalCase, Inscription, LabCase
from casebook.quiz import RandomIds, encode_document, encode_options, parse_document, parse_options
from casebook.quiz.bilingual import merge_texts, split_texts
from casebook.quiz.errors import QuizSyntaxError, QuizValidationError
from casebook.quiz.ids import POSITIONAL
from casebook.quiz.schemas import steps_from_flag_records, steps_to_flag_records
from casebook.quiz.validation import ensure_valid, ensure_valid_options, validate_document
from casebook.services.notifications import notify_new_case, notify_new_inscription, notify_new_lab

logger = logging.getLogger(__name__)

bp = Blueprint('admin', __name__, url_prefix='/admin')


def admin_required(f):
    """Logged-in admin only (JSON responses, no redirects)"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return jsonify({'status': 'error', 'message': 'Login required'}), 401
        if not getattr(current_user, 'is_admin', False):
            return jsonify({'status': 'error', 'message': 'Access denied'}), 403
        return f(*args, **kwargs)
    return decorated_function


@bp.errorhandler(QuizSyntaxError)
def handle_syntax_error(e):
    return jsonify(e.to_dict()), 400


@bp.errorhandler(QuizValidationError)
def handle_validation_error(e):
    return jsonify(e.to_dict()), 400


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(data, key):
    value = data.get(key)
    return value if isinstance(value, str) else ''


def _object(data, key, default):
    """JSON field of the expected container type, else `default`."""
    value = data.get(key)
    return value if isinstance(value, type(default)) else default


def _save(obj, what):
    """Commit; on failure roll back, log and return a 500 response."""
    try:
        db.session.add(obj)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        logger.exception("%s save failed: %s", what, e)
        return jsonify({'status': 'error', 'message': 'Internal server error'}), 500
    return None


def _strict(data):
    if 'strict' in data:
        return bool(data.get('strict'))
    return current_app.config.get('QUIZ_STRICT_PARSE', False)


def _rules():
    return {
        'min_options': current_app.config.get('QUIZ_MIN_OPTIONS', 2),
        'require_single_correct': current_app.config.get('QUIZ_REQUIRE_SINGLE_CORRECT', True),
    }


def _steps_from_body(data, ids=POSITIONAL):
    """Quiz steps from either one bilingual `text` or `text_en` + `text_ka`."""
    strict = _strict(data)
    if 'text_en' in data or 'text_ka' in data:
        return merge_texts(_text(data, 'text_en'), _text(data, 'text_ka'), ids=ids, strict=strict)
    return parse_document(_text(data, 'text'), ids=ids, strict=strict)


def _editor_texts(steps):
    text_en, text_ka = split_texts(steps)
    return {'text': encode_document(steps), 'text_en': text_en, 'text_ka': text_ka}


# ==================== QUIZ PREVIEW ====================
@bp.route('/quiz/preview', methods=['POST'])
@admin_required
def quiz_preview():
    """Parse without saving: steps, canonical text and rule violations."""
    data = _json_body()
    steps = _steps_from_body(data)
    return jsonify({
        'steps': steps_to_flag_records(steps),
        'canonical': encode_document(steps),
        'issues': [issue.to_dict() for issue in validate_document(steps, **_rules())],
    })


@bp.route('/quiz/format', methods=['POST'])
@admin_required
def quiz_format():
    """Stored steps -> canonical text."""
    data = _json_body()
    steps = steps_from_flag_records(data.get('steps'))
    return jsonify({'text': encode_document(steps)})


# ==================== CLINICAL CASES ====================
@bp.route('/cases', methods=['GET'])
@admin_required
def list_cases():
    cases = ClinicalCase.query.order_by(ClinicalCase.created_at.desc()).all()
    return jsonify([c.to_dict() for c in cases])


@bp.route('/cases/<case_id>', methods=['GET'])
@admin_required
def get_case(case_id):
    case = db.get_or_404(ClinicalCase, case_id)
    result = case.to_dict()
    result.update(_editor_texts(case.get_steps()))
    return jsonify(result)


def _apply_case(case, data):
    category = _text(data, 'category').strip()
    if not category:
        return jsonify({'status': 'error', 'message': 'Category is required'}), 400
    steps = ensure_valid(_steps_from_body(data), **_rules())
    if data.get('new_category'):
        Category.get_or_create(category)
    case.category = category
    case.title = _object(data, 'title', {})
    case.patient_data = _object(data, 'patient_data', {})
    case.set_steps(steps)
    return None


@bp.route('/cases', methods=['POST'])
@admin_required
def create_case():
    data = _json_body()
    case = ClinicalCase()
    error = _apply_case(case, data) or _save(case, 'Clinical case')
    if error:
        return error
    logger.info("Clinical case %s created (%d steps)", case.id, len(case.steps))
    notified = notify_new_case(case)
    return jsonify({'status': 'success', 'case': case.to_dict(), 'notified': notified}), 201


@bp.route('/cases/<case_id>', methods=['PUT'])
@admin_required
def update_case(case_id):
    case = db.get_or_404(ClinicalCase, case_id)
    error = _apply_case(case, _json_body()) or _save(case, 'Clinical case')
    if error:
        return error
    logger.info("Clinical case %s updated", case.id)
    return jsonify({'status': 'success', 'case': case.to_dict()})


@bp.route('/cases/<case_id>', methods=['DELETE'])
@admin_required
def delete_case(case_id):
    case = db.get_or_404(ClinicalCase, case_id)
    db.session.delete(case)
    db.session.commit()
    return jsonify({'status': 'success'})


# ==================== INSCRIPTIONS ====================
@bp.route('/inscriptions', methods=['GET'])
@admin_required
def list_inscriptions():
    rows = Inscription.query.order_by(Inscription.created_at.desc()).all()
    return jsonify([r.to_dict() for r in rows])


@bp.route('/inscriptions/<int:inscription_id>', methods=['GET'])
@admin_required
def get_inscription(inscription_id):
    inscription = db.get_or_404(Inscription, inscription_id)
    result = inscription.to_dict()
    result['text'] = encode_document(inscription.get_test())
    return jsonify(result)


def _apply_inscription(inscription, data):
    # the test is optional on inscriptions; when present it must be valid
    steps = _steps_from_body(data, ids=RandomIds())
    if steps:
        ensure_valid(steps, **_rules())

    new_category = _text(data, 'new_category').strip()
    category_id = data.get('category_id')
    if new_category:
        category = Category.get_or_create(new_category)
    elif isinstance(category_id, (int, str)) and category_id:
        category = db.session.get(Category, category_id)
    else:
        category = None
    if category is None:
        return jsonify({'status': 'error', 'message': 'Select or create a category'}), 400

    inscription.category = category
    inscription.title = _object(data, 'title', {})
    inscription.content = _object(data, 'content', {})
    inscription.set_test(steps)
    return None


@bp.route('/inscriptions', methods=['POST'])
@admin_required
def create_inscription():
    inscription = Inscription()
    error = _apply_inscription(inscription, _json_body())
    if error:
        db.session.rollback()
        return error
    error = _save(inscription, 'Inscription')
    if error:
        return error
    notified = notify_new_inscription(inscription)
    return jsonify({'status': 'success', 'inscription': inscription.to_dict(), 'notified': notified}), 201


@bp.route('/inscriptions/<int:inscription_id>', methods=['PUT'])
@admin_required
def update_inscription(inscription_id):
    inscription = db.get_or_404(Inscription, inscription_id)
    error = _apply_inscription(inscription, _json_body())
    if error:
        db.session.rollback()
        return error
    error = _save(inscription, 'Inscription')
    if error:
        return error
    return jsonify({'status': 'success', 'inscription': inscription.to_dict()})


@bp.route('/inscriptions/<int:inscription_id>', methods=['DELETE'])
@admin_required
def delete_inscription(inscription_id):
    inscription = db.get_or_404(Inscription, inscription_id)
    db.session.delete(inscription)
    db.session.commit()
    return jsonify({'status': 'success'})


# ==================== LAB CASES ====================
@bp.route('/labs', methods=['GET'])
@admin_required
def list_labs():
    labs = LabCase.query.order_by(LabCase.created_at.desc()).all()
    return jsonify([lab.to_dict() for lab in labs])


@bp.route('/labs/<lab_id>', methods=['GET'])
@admin_required
def get_lab(lab_id):
    lab = db.get_or_404(LabCase, lab_id)
    result = lab.to_dict()
    result['text'] = encode_options(lab.get_options())
    return jsonify(result)


def _apply_lab(lab, data):
    category = _text(data, 'category').strip()
    if not category:
        return jsonify({'status': 'error', 'message': 'Category is required'}), 400
    options = ensure_valid_options(
        parse_options(_text(data, 'text'), strict=_strict(data)),
        min_options=_rules()['min_options'],
    )
    xp_reward = data.get('xp_reward', 25)
    if isinstance(xp_reward, bool) or not isinstance(xp_reward, int) or xp_reward < 0:
        return jsonify({'status': 'error', 'message': 'xp_reward must be a non-negative integer'}), 400
    if data.get('new_category'):
        Category.get_or_create(category)
    lab.category = category
    lab.title = _object(data, 'title', {})
    lab.explanation = _object(data, 'explanation', {})
    lab.lab_values = _object(data, 'values', [])
    lab.xp_reward = xp_reward
    lab.set_options(options)
    return None


@bp.route('/labs', methods=['POST'])
@admin_required
def create_lab():
    lab = LabCase()
    error = _apply_lab(lab, _json_body()) or _save(lab, 'Lab case')
    if error:
        return error
    logger.info("Lab case %s created (%d options)", lab.id, len(lab.options))
    notified = notify_new_lab(lab)
    return jsonify({'status': 'success', 'lab': lab.to_dict(), 'notified': notified}), 201


@bp.route('/labs/<lab_id>', methods=['PUT'])
@admin_required
def update_lab(lab_id):
    lab = db.get_or_404(LabCase, lab_id)
    error = _apply_lab(lab, _json_body()) or _save(lab, 'Lab case')
    if error:
        return error
    logger.info("Lab case %s updated", lab.id)
    return jsonify({'status': 'success', 'lab': lab.to_dict()})


@bp.route('/labs/<lab_id>', methods=['DELETE'])
@admin_required
def delete_lab(lab_id):
    lab = db.get_or_404(LabCase, lab_id)
    db.session.delete(lab)
    db.session.commit()
    return jsonify({'status': 'success'})


# ==================== CATEGORIES ====================
@bp.route('/categories', methods=['GET'])
@admin_required
def list_categories():
    return jsonify([c.to_dict() for c in Category.query.order_by(Category.slug).all()])
