"""create_comments_table

Create the single table of the comment store. Replies reference their parent
by ID without a foreign key, so deleting a comment leaves its replies in
place.

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-18 10:12:44.512083

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("post_slug", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "approved", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("ip_hash", sa.String(16), nullable=False),
    )

    op.create_index(
        "idx_comments_post_slug_approved",
        "comments",
        ["post_slug", "approved", "created_at"],
    )
    op.create_index(
        "idx_comments_ip_hash_created_at", "comments", ["ip_hash", "created_at"]
    )
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_ip_hash_created_at", table_name="comments")
    op.drop_index("idx_comments_post_slug_approved", table_name="comments")
    op.drop_table("comments")
