# ==============================================
# TOPIC 3: PERSISTENCE
# ==============================================
#
# This package holds tables between load and save and talks
# to the backing resource.
#
# Modules:
# --------
# - backend.py     → Whole-file read/write capability (file or memory)
# - table_store.py → Consume-once table mapping
# - preferences.py → Host-facing facade: load / read / write / save
#
# ==============================================

from .backend import FileBackend, MemoryBackend, TextBackend
from .table_store import TableStore
from .preferences import Preferences

__all__ = ["FileBackend", "MemoryBackend", "TextBackend", "TableStore", "Preferences"]
