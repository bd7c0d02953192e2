"""initial schema

Revision ID: 9c1e2a7d4b30
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "9c1e2a7d4b30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, galleries, the follow graph, interactions and comments."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("username_key", sa.Text(), nullable=False, unique=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("profile_image", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "gallery",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("owner_user_id", sa.Integer(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("visibility", sa.Text(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("visibility IN ('public', 'private')", name="ck_gallery_visibility"),
        sa.CheckConstraint("view_count >= 0", name="ck_gallery_view_count"),
    )
    op.create_index("ix_gallery_owner_user_id", "gallery", ["owner_user_id"])

    op.create_table(
        "gallery_item",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "gallery_id",
            sa.Integer(),
            sa.ForeignKey("gallery.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("owner_user_id", sa.Integer(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=False),
        sa.Column("file_type", sa.Text(), nullable=False),
        sa.Column("duration", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("file_type IN ('image', 'video')", name="ck_gallery_item_file_type"),
        sa.CheckConstraint(
            "file_type = 'video' OR duration IS NULL",
            name="ck_gallery_item_duration",
        ),
    )
    op.create_index("ix_gallery_item_gallery_id", "gallery_item", ["gallery_id"])

    op.create_table(
        "follow",
        sa.Column(
            "follower_id",
            sa.Integer(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "following_id",
            sa.Integer(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("follower_id <> following_id", name="ck_follow_not_self"),
    )
    op.create_index("ix_follow_following_id", "follow", ["following_id"])

    for table in ("gallery_like", "gallery_save"):
        op.create_table(
            table,
            sa.Column(
                "user_id",
                sa.Integer(),
                sa.ForeignKey("app_user.id", ondelete="CASCADE"),
                primary_key=True,
            ),
            sa.Column(
                "gallery_id",
                sa.Integer(),
                sa.ForeignKey("gallery.id", ondelete="CASCADE"),
                primary_key=True,
            ),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index(f"ix_{table}_gallery_id", table, ["gallery_id"])

    op.create_table(
        "comment",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "gallery_id",
            sa.Integer(),
            sa.ForeignKey("gallery.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("author_user_id", sa.Integer(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "parent_id",
            sa.Integer(),
            sa.ForeignKey("comment.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_comment_gallery_id", "comment", ["gallery_id"])
    op.create_index("ix_comment_parent_id", "comment", ["parent_id"])


def downgrade() -> None:
    """Drop every RedShare table."""
    op.drop_index("ix_comment_parent_id", table_name="comment")
    op.drop_index("ix_comment_gallery_id", table_name="comment")
    op.drop_table("comment")
    for table in ("gallery_save", "gallery_like"):
        op.drop_index(f"ix_{table}_gallery_id", table_name=table)
        op.drop_table(table)
    op.drop_index("ix_follow_following_id", table_name="follow")
    op.drop_table("follow")
    op.drop_index("ix_gallery_item_gallery_id", table_name="gallery_item")
    op.drop_table("gallery_item")
    op.drop_index("ix_gallery_owner_user_id", table_name="gallery")
    op.drop_table("gallery")
    op.drop_table("app_user")
