"""Database Package — SQLAlchemy declarative base shared by all ORM models.

Invariants:
    - Single Base for all tables; sessions come from infrastructure/database.py
"""
