"""
SQLAlchemy ORM Models for the Flashcard Store

A single key-value table; values are JSON text.
"""

from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class KeyValue(Base):
    """One stored value (categories list, a deck, the streak, ...)."""
    __tablename__ = 'kv_store'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<KeyValue({self.key})>"
