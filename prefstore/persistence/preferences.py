# ==============================================
# Preferences
# ==============================================
#
# PURPOSE:
#   The object a host application holds on to. It ties a backing
#   file, a TableStore and the field projector together:
#
#     prefs = Preferences("example.save")
#     prefs.load()                            # whole file → tables
#     player = prefs.read_table(PlayerData()) # table "PlayerData" → fields
#     world = prefs.read_table(WorldData(), "World")
#     ...
#     prefs.write_table(player)               # fields → queued table
#     prefs.write_table(world, "World")
#     prefs.save()                            # tables → whole file, then drain
#
#   A table can be read once per load. Each table has to be written
#   again before every save, since save drains the store.
#
# CLASS: Preferences
# ------------------
#   Constructor:
#   ------------
#   - __init__(path=None, *, backend=None, sink=None)
#       path falls back to PREFSTORE_PATH from config.
#
#   Methods:
#   --------
#   - load() -> list[Diagnostic]
#   - save() -> None
#   - read_table(record, name=None) -> record
#   - write_table(record, name=None) -> None
#   - diagnostics -> list[Diagnostic]   (everything reported so far)
#
# ==============================================

from pathlib import Path
from typing import Any, List, Optional, Union

from .backend import FileBackend, TextBackend
from .table_store import TableStore
from ..config import get_config
from ..diagnostics import Diagnostic, DiagnosticCollector, Sink, default_sink
from ..mapping.fields import record_fields, record_type_name
from ..mapping.projector import project_from, project_into


class Preferences:
    """
    Load-once / save-once key/value tables projected onto records.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        backend: Optional[TextBackend] = None,
        sink: Optional[Sink] = None
    ):
        """
        Initialize the preferences store.

        Args:
            path: Backing file; ignored when backend is given
            backend: Custom read/write-all-text capability
            sink: Where diagnostics go (default: console, per config)
        """
        config = get_config()
        self.echo = config.echo_diagnostics

        if backend is None:
            backend = FileBackend(path or config.default_path, encoding=config.encoding)
        self.backend = backend

        self._collector = DiagnosticCollector(forward=sink if sink is not None else default_sink())
        self.store = TableStore(sink=self._collector, source=self.backend.source)

    @property
    def source(self) -> str:
        return self.backend.source

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._collector)

    def _info(self, message: str) -> None:
        if self.echo:
            print(message)

    def load(self) -> List[Diagnostic]:
        """
        Read the backing file and replace all tables.

        Returns:
            Diagnostics produced by this load. A missing file is not an
            error: the store is simply left empty.
        """
        text = self.backend.read_text()
        if text is None:
            self.store.drain()
            self._info(f"No preferences file found at {self.source}")
            return []

        diagnostics = self.store.load(text, self.source)
        self._info(f"Loaded {len(self.store)} tables from {self.source}")
        return diagnostics

    def save(self) -> None:
        """
        Write every queued table to the backing file, then drain the store.
        """
        count = len(self.store)
        self.backend.write_text(self.store.serialize())
        self.store.drain()
        self._info(f"Saved {count} tables to {self.source}")

    def read_table(self, record: Any, name: Optional[str] = None) -> Any:
        """
        Fill a record from the table of the same name and consume the table.

        Args:
            record: Record whose fields are populated
            name: Table name (defaults to the record's type name)

        Returns:
            The populated record, or the record untouched when the table
            is missing (reported as a LOOKUP diagnostic)

        Raises:
            RecordTypeError: if record declares no fields
        """
        record_fields(record)
        table = self.store.extract(name if name is not None else record_type_name(record))
        if table is None:
            return record
        return project_into(record, table, sink=self._collector, source=self.source)

    def write_table(self, record: Any, name: Optional[str] = None) -> None:
        """
        Queue a record's fields as a table; nothing is written until save().

        Args:
            record: Record to store
            name: Table name (defaults to the record's type name)
        """
        table = project_from(record, name, sink=self._collector, source=self.source)
        self.store.upsert(table.name, table)
