"""Initial schema with PostGIS extension, roads and locations.

Revision ID: 001
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Enable PostGIS extension
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    # ── roads ─────────────────────────────────────────────────────────
    op.create_table(
        "roads",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column(
            "type",
            sa.Enum("HIGHWAY", "STREET", "PATH", "CUSTOM", name="roadtype"),
            default="CUSTOM",
            nullable=False,
        ),
        sa.Column("path", Geometry("LINESTRING", srid=4326), nullable=False),
        sa.Column("coordinates", sa.JSON, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_roads_path", "roads", ["path"], postgresql_using="gist")
    op.create_index("idx_roads_created", "roads", ["created_at"])

    # ── locations ─────────────────────────────────────────────────────
    op.create_table(
        "locations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column(
            "category",
            sa.Enum(
                "RESTAURANT",
                "HOSPITAL",
                "SCHOOL",
                "SHOPPING",
                "GAS",
                "HOTEL",
                "CUSTOM",
                name="locationcategory",
            ),
            default="CUSTOM",
            nullable=False,
        ),
        sa.Column("point", Geometry("POINT", srid=4326), nullable=False),
        sa.Column("lat", sa.Float, nullable=False),
        sa.Column("lng", sa.Float, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_locations_point", "locations", ["point"], postgresql_using="gist"
    )
    op.create_index("idx_locations_category", "locations", ["category"])
    op.create_index("idx_locations_created", "locations", ["created_at"])


def downgrade() -> None:
    op.drop_table("locations")
    op.drop_table("roads")
    op.execute("DROP TYPE IF EXISTS locationcategory")
    op.execute("DROP TYPE IF EXISTS roadtype")
