"""Database Package — declarative Base and custom column types.

Invariants:
    - Single DeclarativeBase shared by every ORM model

Design Decisions:
    - Kept apart from infrastructure/database.py so Alembic and test fixtures
      can import Base without building the pooled engine
"""
