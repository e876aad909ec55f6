"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('is_adult', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # Create rentals table
    op.create_table(
        'rentals',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('closed', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    )
    op.create_index('ix_rentals_user_id', 'rentals', ['user_id'])
    # One open rental per user
    op.create_index(
        'uq_rentals_user_open',
        'rentals',
        ['user_id'],
        unique=True,
        postgresql_where=sa.text('closed = false'),
    )

    # Create movies table
    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('adults_only', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('rental_id', sa.Integer(), sa.ForeignKey('rentals.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_movies_rental_id', 'movies', ['rental_id'])


def downgrade() -> None:
    op.drop_index('ix_movies_rental_id', table_name='movies')
    op.drop_table('movies')
    op.drop_index('uq_rentals_user_open', table_name='rentals')
    op.drop_index('ix_rentals_user_id', table_name='rentals')
    op.drop_table('rentals')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
