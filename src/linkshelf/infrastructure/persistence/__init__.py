"""Persistence layer: SQLAlchemy models, repositories and session management."""
