import uuid
from datetime import datetime

from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from casebook import db, login_manager
from casebook.quiz.schemas import (
    options_from_flag_records, options_to_flag_records,
    steps_from_flag_records, steps_from_pointer_records,
    steps_to_flag_records, steps_to_pointer_records,
)


@login_manager.user_loader
def load_user(id):
    return db.session.get(User, int(id))


def _new_uuid():
    return str(uuid.uuid4())


def _title_en(title):
    """English display title from {en: str} or {en: {standard: str}} shapes."""
    en = (title or {}).get('en') if isinstance(title, dict) else title
    if isinstance(en, dict):
        en = en.get('standard')
    return (en or '').strip() if isinstance(en, str) else ''


# ==================== USER ====================
class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    login = db.Column(db.String(80), unique=True, nullable=False)
    full_name = db.Column(db.String(200))
    password_hash = db.Column(db.String(256))
    is_admin = db.Column(db.Boolean, default=False)
    is_active = db.Column(db.Boolean, default=True)
    last_login = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    subscriptions = db.relationship('Subscription', backref='user', lazy='dynamic', cascade='all, delete-orphan')
    notifications = db.relationship('Notification', backref='user', lazy='dynamic', cascade='all, delete-orphan')

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return bool(self.password_hash) and check_password_hash(self.password_hash, password or '')


# ==================== CATEGORY ====================
class Category(db.Model):
    """Content category – title is {en: {standard}, ka: {standard}}"""
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(120), unique=True, nullable=False)
    title = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @staticmethod
    def slugify(name):
        return '-'.join((name or '').lower().split())

    @staticmethod
    def get_or_create(name):
        """Category by display name; created with the same title in both languages."""
        slug = Category.slugify(name)
        category = Category.query.filter_by(slug=slug).first()
        if category is None:
            category = Category(slug=slug, title={
                'en': {'standard': name, 'magical': name},
                'ka': {'standard': name, 'magical': name},
            })
            db.session.add(category)
            db.session.flush()
        return category

    @property
    def name(self):
        return _title_en(self.title) or self.slug

    def to_dict(self):
        return {'id': self.id, 'slug': self.slug, 'title': self.title}


# ==================== SUBSCRIPTION / NOTIFICATION ====================
class Subscription(db.Model):
    """User subscribed to a category name (matched against Category.name)"""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    category = db.Column(db.String(200), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Notification(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False)
    type = db.Column(db.String(30), default='update')
    title = db.Column(db.String(300), nullable=False)
    message = db.Column(db.Text, nullable=False)
    link = db.Column(db.String(300))
    is_read = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'type': self.type,
            'title': self.title,
            'message': self.message,
            'link': self.link,
            'is_read': self.is_read,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


# ==================== CLINICAL CASE ====================
class ClinicalCase(db.Model):
    """Clinical case – steps stored as flag records (correct + feedback per option)"""
    __tablename__ = 'clinical_case'
    id = db.Column(db.String(36), primary_key=True, default=_new_uuid)
    category = db.Column(db.String(200), nullable=False)
    title = db.Column(db.JSON, nullable=False, default=dict)  # {en, ka}
    patient_data = db.Column(db.JSON, nullable=False, default=dict)
    steps = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def get_steps(self):
        return steps_from_flag_records(self.steps)

    def set_steps(self, steps):
        self.steps = steps_to_flag_records(steps)

    @property
    def display_title(self):
        return _title_en(self.title)

    def to_dict(self):
        return {
            'id': self.id,
            'category': self.category,
            'title': self.title,
            'patient_data': self.patient_data,
            'steps': self.steps,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


# ==================== INSCRIPTION ====================
class Inscription(db.Model):
    """Theory post – test_data stored as pointer records (correctId per step)"""
    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey('category.id'), nullable=False)
    title = db.Column(db.JSON, nullable=False, default=dict)  # {en: {standard, magical}, ka: {...}}
    content = db.Column(db.JSON, nullable=False, default=dict)
    test_data = db.Column(db.JSON, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = db.relationship('Category', backref=db.backref('inscriptions', lazy='dynamic'))

    def get_test(self):
        return steps_from_pointer_records(self.test_data)

    def set_test(self, steps):
        self.test_data = steps_to_pointer_records(steps) if steps else None

    @property
    def display_title(self):
        return _title_en(self.title)

    def to_dict(self):
        return {
            'id': self.id,
            'category_id': self.category_id,
            'category': self.category.to_dict() if self.category else None,
            'title': self.title,
            'content': self.content,
            'test_data': self.test_data,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


# ==================== LAB CASE ====================
class LabCase(db.Model):
    """Lab puzzle – lab values plus one flat option list (flag records)"""
    __tablename__ = 'lab_case'
    id = db.Column(db.String(36), primary_key=True, default=_new_uuid)
    category = db.Column(db.String(200), nullable=False)
    title = db.Column(db.JSON, nullable=False, default=dict)  # {en, ka}
    explanation = db.Column(db.JSON, nullable=False, default=dict)  # {en, ka}
    lab_values = db.Column('values', db.JSON, nullable=False, default=list)  # [{name, value, unit, ...}]
    options = db.Column(db.JSON, nullable=False, default=list)
    xp_reward = db.Column(db.Integer, nullable=False, default=25)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def get_options(self):
        return options_from_flag_records(self.options)

    def set_options(self, options):
        self.options = options_to_flag_records(options)

    @property
    def display_title(self):
        return _title_en(self.title)

    def to_dict(self):
        return {
            'id': self.id,
            'category': self.category,
            'title': self.title,
            'explanation': self.explanation,
            'values': self.lab_values,
            'options': self.options,
            'xp_reward': self.xp_reward,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
