"""initial portfolio schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("subtitle", sa.Text, nullable=True),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("category", sa.String(length=64), nullable=False, server_default="works"),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("main_image_url", sa.String(length=1024), nullable=True),
        sa.Column("main_image_key", sa.String(length=512), nullable=True),
        sa.Column("coming_soon", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_projects_id", "projects", ["id"])
    op.create_index("ix_projects_slug", "projects", ["slug"], unique=True)
    op.create_index("idx_projects_category_order", "projects", ["category", "order_index"])

    op.create_table(
        "sections",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("project_id", sa.Integer, sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False, server_default="New Section"),
        sa.Column("columns", sa.Integer, nullable=False, server_default="1"),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_sections_id", "sections", ["id"])
    op.create_index("idx_sections_project_order", "sections", ["project_id", "order_index"])

    op.create_table(
        "section_elements",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("section_id", sa.Integer, sa.ForeignKey("sections.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("column_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        sa.Column("media_url", sa.String(length=1024), nullable=True),
        sa.Column("embed_url", sa.String(length=1024), nullable=True),
        sa.Column("embed_type", sa.String(length=32), nullable=True),
        sa.Column("alt_text", sa.String(length=512), nullable=False, server_default=""),
        sa.Column("caption", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
    )
    op.create_index("ix_section_elements_id", "section_elements", ["id"])
    op.create_index(
        "idx_elements_section_column_order", "section_elements", ["section_id", "column_index", "order_index"]
    )

    op.create_table(
        "media",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("filename", sa.String(length=255), nullable=False),
        sa.Column("original_name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=16), nullable=False),
        sa.Column("file_size", sa.BigInteger, nullable=False),
        sa.Column("mimetype", sa.String(length=128), nullable=False),
        sa.Column("url", sa.String(length=1024), nullable=False),
        sa.Column("storage_key", sa.String(length=512), nullable=False, unique=True),
        sa.Column("alt_text", sa.String(length=512), nullable=True),
        sa.Column("folder", sa.String(length=64), nullable=False, server_default="media"),
        *_timestamps(),
    )
    op.create_index("ix_media_id", "media", ["id"])
    op.create_index("idx_media_file_type_created_at", "media", ["file_type", sa.text("created_at DESC")])

    op.create_table(
        "about",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("about")
    op.drop_index("idx_media_file_type_created_at", table_name="media")
    op.drop_index("ix_media_id", table_name="media")
    op.drop_table("media")
    op.drop_index("idx_elements_section_column_order", table_name="section_elements")
    op.drop_index("ix_section_elements_id", table_name="section_elements")
    op.drop_table("section_elements")
    op.drop_index("idx_sections_project_order", table_name="sections")
    op.drop_index("ix_sections_id", table_name="sections")
    op.drop_table("sections")
    op.drop_index("idx_projects_category_order", table_name="projects")
    op.drop_index("ix_projects_slug", table_name="projects")
    op.drop_index("ix_projects_id", table_name="projects")
    op.drop_table("projects")
