"""Create users and notes tables

Revision ID: 0001_create_users_and_notes
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notebox.core.models.types import GUID, StringListType


# revision identifiers, used by Alembic.
revision: str = '0001_create_users_and_notes'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('full_name', sa.Text(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_on', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('length(full_name) > 0', name='ck_users_full_name_not_empty'),
    )

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tags', StringListType(), nullable=False),
        sa.Column('is_pinned', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_on', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_notes_user_id', 'notes', ['user_id'])
    op.create_index('idx_notes_user_pinned', 'notes', ['user_id', 'is_pinned'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_user_pinned', table_name='notes')
    op.drop_index('idx_notes_user_id', table_name='notes')
    op.drop_table('notes')
    op.drop_table('users')
