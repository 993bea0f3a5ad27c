"""Chunk table - indexed chunks with pgvector embeddings.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from pgvector.sqlalchemy import Vector

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# text-embedding-004
EMBEDDING_DIMENSIONS = 768


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS vector")

    op.create_table(
        "chunk",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("source", sa.String(1024), nullable=False),
        sa.Column("document_type", sa.String(16), nullable=False),
        sa.Column("chunk_type", sa.String(16), nullable=False),
        sa.Column("chunk_method", sa.String(64), nullable=False),
        sa.Column("chunk_index", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("embedding", Vector(EMBEDDING_DIMENSIONS), nullable=False),
    )
    op.create_index("ix_chunk_source_index", "chunk", ["source", "chunk_index"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_chunk_source_index", table_name="chunk")
    op.drop_table("chunk")
    op.execute("DROP EXTENSION IF EXISTS vector")
