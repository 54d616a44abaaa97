"""
Storage - key-value persistence for the card library
"""

from core.storage.database import (
    delete_value,
    dispose_engines,
    get_engine,
    get_session,
    get_value,
    init_db,
    list_keys,
    reset_db,
    set_value,
    set_values,
)
from core.storage.repository import (
    load_library,
    save_library,
)


__all__ = [
    "delete_value",
    "dispose_engines",
    "get_engine",
    "get_session",
    "get_value",
    "init_db",
    "list_keys",
    "reset_db",
    "set_value",
    "set_values",
    "load_library",
    "save_library",
]
