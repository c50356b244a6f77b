"""Create content_chunks table

Revision ID: 0002_create_content_chunks
Revises: 0001_create_users_and_sessions
Create Date: 2025-06-09 09:08:40.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0002_create_content_chunks'
down_revision = '0001_create_users_and_sessions'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'content_chunks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('content_chunks')
