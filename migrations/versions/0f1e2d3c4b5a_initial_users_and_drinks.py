"""initial users and drinks tables

Revision ID: 0f1e2d3c4b5a
Revises:
Create Date: 2025-01-26 19:02:11.481203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0f1e2d3c4b5a'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'drinks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('type', sa.String(32), nullable=False, server_default='Beer'),
        sa.Column('amount', sa.Float(), nullable=False, server_default='0'),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
    )

    # Recent-list and totals queries both filter on owner
    op.create_index('ix_drinks_user_timestamp', 'drinks', ['user_id', 'timestamp'])


def downgrade():
    op.drop_index('ix_drinks_user_timestamp', table_name='drinks')
    op.drop_table('drinks')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
