# ==============================================
# TableStore
# ==============================================
#
# PURPOSE:
#   Own the loaded tables between load and save.
#
# LIFECYCLE:
#   load     → replace everything with the parsed document
#   extract  → remove and return one table (a table can be read once)
#   upsert   → insert or replace one table (replacing is allowed but
#              reported: the earlier write was wasted work)
#   serialize→ render every table, in insertion order
#   drain    → drop everything (after a successful save)
#
# CLASS: TableStore
# -----------------
#   Constructor:
#   ------------
#   - __init__(sink: Sink | None = None, source: str = "<string>")
#       source names the document in every diagnostic; load() updates it.
#
#   Methods:
#   --------
#   - load(text, source="<string>") -> list[Diagnostic]
#   - extract(name) -> Table | None
#   - upsert(name, table) -> None
#   - serialize() -> str
#   - drain() -> None
#   - get(name) -> Table | None      (peek, does not consume)
#   - names() -> list[str]
#
# ==============================================

from typing import Dict, List, Optional

from ..diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind, Sink, default_sink
from ..format.parser import parse_document
from ..format.serializer import serialize
from ..format.tables import Table


class TableStore:
    """
    Mapping of table name to Table with consume-once reads.

    Not thread-safe: one store per owner, or lock around every call.
    """

    def __init__(self, sink: Optional[Sink] = None, source: str = "<string>"):
        self.sink = sink if sink is not None else default_sink()
        self.source = source
        self.tables: Dict[str, Table] = {}

    def load(self, text: str, source: Optional[str] = None) -> List[Diagnostic]:
        """
        Replace the store's content with the tables parsed from text.

        Args:
            text: Whole document
            source: Name used in diagnostics (keeps the current one if None)

        Returns:
            Diagnostics produced while parsing (also sent to the sink)
        """
        if source is not None:
            self.source = source
        collector = DiagnosticCollector(forward=self.sink)
        self.tables = parse_document(text, self.source, collector)
        return list(collector)

    def extract(self, name: str) -> Optional[Table]:
        """
        Remove and return a table.

        Returns:
            The Table, or None (reported as a LOOKUP diagnostic) when no
            table by that name exists or it was already extracted
        """
        table = self.tables.pop(name, None)
        if table is None:
            self.sink(Diagnostic(
                DiagnosticKind.LOOKUP,
                f"No table named {name}, perhaps it has already been loaded and destroyed",
                self.source
            ))
        return table

    def upsert(self, name: str, table: Table) -> None:
        if name in self.tables:
            self.sink(Diagnostic(
                DiagnosticKind.WARNING,
                f"Performance: Table {name} is already queued, call save before re-writing table data",
                self.source
            ))
        if table.name != name:
            table = Table(name=name, pairs=table.pairs, line_number=table.line_number)
        self.tables[name] = table

    def serialize(self) -> str:
        return serialize(self.tables)

    def drain(self) -> None:
        self.tables.clear()

    def get(self, name: str) -> Optional[Table]:
        return self.tables.get(name)

    def names(self) -> List[str]:
        return list(self.tables)

    def __contains__(self, name: object) -> bool:
        return name in self.tables

    def __len__(self) -> int:
        return len(self.tables)
