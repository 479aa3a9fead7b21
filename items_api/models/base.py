"""SQLAlchemy declarative base shared by the ORM models and create_all."""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
