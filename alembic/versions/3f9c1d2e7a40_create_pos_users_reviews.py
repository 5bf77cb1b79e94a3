"""create_pos_users_reviews

Revision ID: 3f9c1d2e7a40
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1d2e7a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'pos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment='Display name of the point of sale'),
        sa.Column('description', sa.Text(), nullable=True, comment='Short description shown to users'),
        sa.Column('pos_type', sa.String(length=32), nullable=False,
                  comment='cafe, espresso_stand, bakery or vending_machine'),
        sa.Column('campus', sa.String(length=32), nullable=False, comment='Campus the POS is located on'),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('house_number', sa.String(length=16), nullable=False),
        sa.Column('postal_code', sa.Integer(), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_pos_name'), 'pos', ['name'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('login_name', sa.String(length=50), nullable=False, comment='Unique login name'),
        sa.Column('email_address', sa.String(length=255), nullable=False, comment="User's email address"),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False,
                  comment='When the user registered'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False,
                  comment='When the user profile was last updated'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_login_name'), 'users', ['login_name'], unique=True)
    op.create_index(op.f('ix_users_email_address'), 'users', ['email_address'], unique=True)

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('pos_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('review', sa.Text(), nullable=False, comment='Review text content'),
        sa.Column('approval_count', sa.Integer(), nullable=False, server_default='0',
                  comment='Number of approvals from other users'),
        sa.Column('approved', sa.Boolean(), nullable=False, server_default=sa.false(),
                  comment='True once approval_count reaches the quorum'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['pos_id'], ['pos.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('pos_id', 'author_id', name='uq_review_pos_author'),
        sa.CheckConstraint('approval_count >= 0', name='ck_review_approval_count_non_negative'),
    )
    op.create_index(op.f('ix_reviews_id'), 'reviews', ['id'], unique=False)
    op.create_index(op.f('ix_reviews_pos_id'), 'reviews', ['pos_id'], unique=False)
    op.create_index(op.f('ix_reviews_author_id'), 'reviews', ['author_id'], unique=False)
    op.create_index(op.f('ix_reviews_approved'), 'reviews', ['approved'], unique=False)

    op.create_table(
        'review_approvals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('review_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['review_id'], ['reviews.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('review_id', 'user_id', name='uq_review_approval_review_user'),
    )
    op.create_index(op.f('ix_review_approvals_review_id'), 'review_approvals', ['review_id'], unique=False)
    op.create_index(op.f('ix_review_approvals_user_id'), 'review_approvals', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_review_approvals_user_id'), table_name='review_approvals')
    op.drop_index(op.f('ix_review_approvals_review_id'), table_name='review_approvals')
    op.drop_table('review_approvals')
    op.drop_index(op.f('ix_reviews_approved'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_author_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_pos_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_id'), table_name='reviews')
    op.drop_table('reviews')
    op.drop_index(op.f('ix_users_email_address'), table_name='users')
    op.drop_index(op.f('ix_users_login_name'), table_name='users')
    op.drop_table('users')
    op.drop_index(op.f('ix_pos_name'), table_name='pos')
    op.drop_table('pos')
