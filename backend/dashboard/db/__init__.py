"""Database Package — declarative base shared by every ORM model.

Invariants:
    - All sessions are async (AsyncSession)
"""
