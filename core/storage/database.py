"""
Database - Key-Value Store I/O

Opaque string keys mapped to JSON values, on SQLAlchemy.
SQLite by default; any SQLAlchemy URL works (see core.config).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from core.config import get_database_url
from core.storage.models import Base, KeyValue

logger = logging.getLogger(__name__)

_engines: dict[str, Engine] = {}


def get_engine() -> Engine:
    """
    Get SQLAlchemy engine for the configured database.

    Engines are cached per URL. Server databases get connection pooling;
    SQLite uses SQLAlchemy's defaults.
    """
    db_url = get_database_url()
    engine = _engines.get(db_url)
    if engine is None:
        if db_url.startswith("sqlite"):
            engine = create_engine(db_url, echo=False)
        else:
            engine = create_engine(
                db_url,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
                echo=False
            )
        _engines[db_url] = engine
    return engine


def get_session() -> Session:
    SessionLocal = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return SessionLocal()


def dispose_engines() -> None:
    """Close every cached engine (used by tests and maintenance scripts)."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


def init_db():
    """
    Create the key-value table if it does not exist.

    Safe to call multiple times.
    """
    engine = get_engine()
    if 'kv_store' not in inspect(engine).get_table_names():
        Base.metadata.create_all(engine)
        logger.debug("Created kv_store table at %s", engine.url)


def reset_db():
    """
    DANGEROUS: Delete all stored data and recreate the table.
    """
    engine = get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("Dropped kv_store table at %s", engine.url)
    init_db()


def get_value(key: str, default: Any = None) -> Any:
    """
    Load a stored value.

    Returns:
        The decoded JSON value, or `default` if the key is missing or the
        stored text is not valid JSON
    """
    session = get_session()
    try:
        row = session.get(KeyValue, key)
        if row is None:
            return default
        try:
            return json.loads(row.value)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt value for key %s", key)
            return default
    finally:
        session.close()


def set_value(key: str, value: Any):
    """Insert or replace a value (must be JSON-serializable)."""
    set_values({key: value})


def set_values(values: dict[str, Any]):
    """Write several keys in a single transaction."""
    if not values:
        return

    session = get_session()
    try:
        for key, value in values.items():
            encoded = json.dumps(value)
            row = session.get(KeyValue, key)
            if row is None:
                session.add(KeyValue(key=key, value=encoded))
            else:
                row.value = encoded
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def delete_value(key: str) -> bool:
    """Remove a key. Returns True if it existed."""
    session = get_session()
    try:
        row = session.get(KeyValue, key)
        if row is None:
            return False
        session.delete(row)
        session.commit()
        return True
    finally:
        session.close()


def list_keys(prefix: Optional[str] = None) -> list[str]:
    session = get_session()
    try:
        query = session.query(KeyValue.key)
        if prefix:
            query = query.filter(KeyValue.key.startswith(prefix, autoescape=True))
        return [key for (key,) in query.order_by(KeyValue.key).all()]
    finally:
        session.close()
