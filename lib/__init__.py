# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: SQLite database handle and schema
# - local_storage.py: File-backed key-value storage for the local CMS
# - utils.py: Shared utilities (error base class, ids, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, DatabaseError
from lib.local_storage import KeyValueStorage
from lib.utils import ApplicationError, timestamp_id, utc_now_iso

__all__ = [
    # Database
    "Database",
    "DatabaseError",
    # Local storage
    "KeyValueStorage",
    # Utils
    "ApplicationError",
    "timestamp_id",
    "utc_now_iso",
]
