"""
Feature modules for Tracklog.

Each feature is a self-contained module with:
- models.py - SQLAlchemy models (optional)
- schemas.py - Pydantic schemas (optional)
- repository.py / client.py - Data access
"""
