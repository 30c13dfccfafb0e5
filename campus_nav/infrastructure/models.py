"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``roads``      -- user-drawn polylines the router works over
* ``locations``  -- named campus points of interest

Indexes
-------
* **GIST** on geometry columns (``path``, ``point``) for spatial queries.
* **B-Tree** on ``created_at`` (list order) and ``category``.
"""

import uuid

from sqlalchemy import JSON, Column, DateTime, Enum, Float, Index, String, Text, func
from geoalchemy2 import Geometry

from .database import Base
from campus_nav.domain.enums import LocationCategory, RoadType


def _new_id() -> str:
    return str(uuid.uuid4())


class RoadModel(Base):
    __tablename__ = "roads"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(120), nullable=False)
    type = Column(Enum(RoadType), default=RoadType.CUSTOM, nullable=False)

    # Stored as PostGIS geometry for spatial indexing
    path = Column(Geometry("LINESTRING", srid=4326), nullable=False)

    # Also stored as a plain [[lat, lng], ...] list; this is what the router reads
    coordinates = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_roads_path", "path", postgresql_using="gist"),
        Index("idx_roads_created", "created_at"),
    )


class LocationModel(Base):
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(120), nullable=False)
    description = Column(Text, default="", nullable=False)
    category = Column(
        Enum(LocationCategory), default=LocationCategory.CUSTOM, nullable=False
    )

    point = Column(Geometry("POINT", srid=4326), nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_locations_point", "point", postgresql_using="gist"),
        Index("idx_locations_category", "category"),
        Index("idx_locations_created", "created_at"),
    )
