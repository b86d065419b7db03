# ==============================================
# Preference Store
# ==============================================
#
# Package Structure (3 Topics + Facade):
#
# prefstore/
# ├── format/          # Topic 1: Tokenize, parse and render the text format
# ├── mapping/         # Topic 2: Project typed records into/out of tables
# ├── persistence/     # Topic 3: Table store, backing file, Preferences facade
# ├── diagnostics.py   # Diagnostic records and sinks
# └── config.py        # Configuration management
#
# ==============================================

from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticCollector
from .errors import PrefStoreError, RecordTypeError, BackendError
from .mapping import project_into, project_from
from .persistence import Preferences, TableStore, FileBackend, MemoryBackend

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticCollector",
    "PrefStoreError",
    "RecordTypeError",
    "BackendError",
    "project_into",
    "project_from",
    "Preferences",
    "TableStore",
    "FileBackend",
    "MemoryBackend",
]
