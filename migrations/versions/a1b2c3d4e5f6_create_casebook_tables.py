"""Create casebook tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


revision = 'a1b2c3d4e5f6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    existing = sa.inspect(conn).get_table_names()

    if 'user' not in existing:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('login', sa.String(80), nullable=False),
            sa.Column('full_name', sa.String(200), nullable=True),
            sa.Column('password_hash', sa.String(256), nullable=True),
            sa.Column('is_admin', sa.Boolean(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=True),
            sa.Column('last_login', sa.DateTime(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('login'),
        )
    if 'category' not in existing:
        op.create_table(
            'category',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('slug', sa.String(120), nullable=False),
            sa.Column('title', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('slug'),
        )
    if 'subscription' not in existing:
        op.create_table(
            'subscription',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('category', sa.String(200), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_subscription_category', 'subscription', ['category'])
    if 'notification' not in existing:
        op.create_table(
            'notification',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('type', sa.String(30), nullable=True),
            sa.Column('title', sa.String(300), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('link', sa.String(300), nullable=True),
            sa.Column('is_read', sa.Boolean(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
    if 'clinical_case' not in existing:
        op.create_table(
            'clinical_case',
            sa.Column('id', sa.String(36), nullable=False),
            sa.Column('category', sa.String(200), nullable=False),
            sa.Column('title', sa.JSON(), nullable=False),
            sa.Column('patient_data', sa.JSON(), nullable=False),
            sa.Column('steps', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
    if 'inscription' not in existing:
        op.create_table(
            'inscription',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.id'), nullable=False),
            sa.Column('title', sa.JSON(), nullable=False),
            sa.Column('content', sa.JSON(), nullable=False),
            sa.Column('test_data', sa.JSON(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )


def downgrade():
    op.drop_table('inscription')
    op.drop_table('clinical_case')
    op.drop_table('notification')
    op.drop_index('ix_subscription_category', table_name='subscription')
    op.drop_table('subscription')
    op.drop_table('category')
    op.drop_table('user')
