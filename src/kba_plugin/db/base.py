"""
kba_plugin.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide a shared DeclarativeBase for all plugin ORM models.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Table creation goes through migration steps, not `Base.metadata.create_all`.
