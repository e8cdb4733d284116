"""Create users, volunteer_needs and volunteer_requests tables

Revision ID: 5d2f0c7a91e4
Revises: 
Create Date: 2025-10-02 09:14:38.512904

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d2f0c7a91e4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('users',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=255), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('photo_url', sa.String(length=1024), nullable=True),
    sa.Column('is_active', sa.Integer(), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_table('volunteer_needs',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('thumbnail', sa.String(length=1024), nullable=True),
    sa.Column('post_title', sa.String(length=255), nullable=False),
    sa.Column('description', sa.Text(), nullable=False),
    sa.Column('category', sa.String(length=255), nullable=False),
    sa.Column('location', sa.String(length=255), nullable=False),
    sa.Column('volunteers_needed', sa.Integer(), nullable=False),
    sa.Column('deadline', sa.DateTime(), nullable=False),
    sa.Column('organizer_name', sa.String(length=255), nullable=False),
    sa.Column('organizer_email', sa.String(length=255), nullable=False),
    sa.Column('owner_id', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_volunteer_needs_id'), 'volunteer_needs', ['id'], unique=False)
    op.create_index(op.f('ix_volunteer_needs_deadline'), 'volunteer_needs', ['deadline'], unique=False)
    op.create_index(op.f('ix_volunteer_needs_owner_id'), 'volunteer_needs', ['owner_id'], unique=False)
    op.create_table('volunteer_requests',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('need_id', sa.Integer(), nullable=False),
    sa.Column('volunteer_name', sa.String(length=255), nullable=False),
    sa.Column('volunteer_email', sa.String(length=255), nullable=False),
    sa.Column('suggestion', sa.Text(), nullable=True),
    sa.Column('status', sa.Enum('requested', name='volunteer_request_status'), nullable=False),
    sa.Column('owner_id', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_volunteer_requests_id'), 'volunteer_requests', ['id'], unique=False)
    op.create_index(op.f('ix_volunteer_requests_need_id'), 'volunteer_requests', ['need_id'], unique=False)
    op.create_index(op.f('ix_volunteer_requests_owner_id'), 'volunteer_requests', ['owner_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_volunteer_requests_owner_id'), table_name='volunteer_requests')
    op.drop_index(op.f('ix_volunteer_requests_need_id'), table_name='volunteer_requests')
    op.drop_index(op.f('ix_volunteer_requests_id'), table_name='volunteer_requests')
    op.drop_table('volunteer_requests')
    op.drop_index(op.f('ix_volunteer_needs_owner_id'), table_name='volunteer_needs')
    op.drop_index(op.f('ix_volunteer_needs_deadline'), table_name='volunteer_needs')
    op.drop_index(op.f('ix_volunteer_needs_id'), table_name='volunteer_needs')
    op.drop_table('volunteer_needs')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
    sa.Enum(name='volunteer_request_status').drop(op.get_bind(), checkfirst=True)
