"""Create authors and books tables

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('authors',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True, comment="Author's full name"),
        sa.Column('age', sa.Integer(), nullable=True, comment="Author's age in years"),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_authors_name'), 'authors', ['name'], unique=False)
    op.create_table('books',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True, comment='Book title'),
        sa.Column('genre', sa.String(length=100), nullable=True, comment='Genre name'),
        sa.Column('author_id', sa.String(length=24), nullable=True, comment='Identifier of the author (not enforced)'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_name'), 'books', ['name'], unique=False)
    op.create_index(op.f('ix_books_author_id'), 'books', ['author_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_author_id'), table_name='books')
    op.drop_index(op.f('ix_books_name'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_name'), table_name='authors')
    op.drop_table('authors')
