"""SQLAlchemy declarative base shared by the activity models."""
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Matches the index names used by the Alembic revisions.
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
