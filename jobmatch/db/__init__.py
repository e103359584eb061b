"""Database package."""

from jobmatch.db.base import Base, get_db, init_db, reset_engine
from jobmatch.db.tables import SavedResumeRecord

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "reset_engine",
    "SavedResumeRecord",
]
