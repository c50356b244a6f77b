"""Create flashcards table

Revision ID: 0003_create_flashcards
Revises: 0002_create_content_chunks
Create Date: 2025-06-09 09:11:16.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0003_create_flashcards'
down_revision = '0002_create_content_chunks'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'flashcards',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('content_chunk_id', sa.Integer(), sa.ForeignKey('content_chunks.id'), nullable=False),
        sa.Column('question', sa.Text(), nullable=True),
        sa.Column('answer', sa.Text(), nullable=True),
        sa.Column('review_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_flashcards_user_id', 'flashcards', ['user_id'])
    op.create_index('ix_flashcards_content_chunk_id', 'flashcards', ['content_chunk_id'])


def downgrade():
    op.drop_index('ix_flashcards_content_chunk_id', table_name='flashcards')
    op.drop_index('ix_flashcards_user_id', table_name='flashcards')
    op.drop_table('flashcards')
