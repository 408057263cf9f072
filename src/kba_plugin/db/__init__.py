"""
kba_plugin.db

Persistence package (SQLAlchemy).

Responsibilities:
- Provide ORM models, column types, engine/session setup, and repositories.
"""

# Package marker.
