"""SQLAlchemy ORM models."""

from .holding import Holding, generate_uuid

__all__ = ["Holding", "generate_uuid"]
