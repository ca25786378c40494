"""add_follows

Add follow relationships between users and index posts by creation time
for the newest-first post listing.

Revision ID: 8d4b7e1f0c62
Revises: 3c1f5e2a9b7d
Create Date: 2026-10-17 14:03:27.551930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d4b7e1f0c62"
down_revision: Union[str, Sequence[str], None] = "3c1f5e2a9b7d"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "follows",
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("followee_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followee_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("follower_id", "followee_id"),
        sa.CheckConstraint("follower_id <> followee_id", name="no_self_follow"),
    )
    op.create_index("idx_follows_followee_id", "follows", ["followee_id"])

    op.create_index("idx_posts_created_at", "posts", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_index("idx_follows_followee_id", table_name="follows")
    op.drop_table("follows")
