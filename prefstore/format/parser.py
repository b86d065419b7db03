# ==============================================
# Document Parser
# ==============================================
#
# PURPOSE:
#   Consume tokenized lines and build the table mapping of a document.
#   Errors never abort the pass: each one is reported to the sink with
#   its line number and the parser moves on to the next line.
#
# STATE:
# ------
#   NoTableOpen → no header seen yet; key/value lines are errors
#   TableOpen(name) → key/value lines append to tables[name]
#
# DUPLICATE HEADERS:
# ------------------
#   A header naming a table that already exists is reported and the
#   existing table is kept. The open table still switches to that name,
#   so the lines that follow are appended to the existing table.
#
#     :A          → A = []
#     x 1         → A = [x]
#     :A          → "Duplicate table 'A'", A kept
#     y 2         → A = [x, y]
#
# FUNCTIONS:
# ----------
# - split_pair(text) -> (key, value) | None
# - parse_document(text, source, sink) -> dict[str, Table]
#
# ==============================================

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .tables import Table
from .tokenizer import LineKind, tokenize
from ..diagnostics import Diagnostic, DiagnosticKind, Sink

PAIR_SEPARATOR = " "


@dataclass(frozen=True)
class NoTableOpen:
    pass


@dataclass(frozen=True)
class TableOpen:
    name: str


ParserState = Union[NoTableOpen, TableOpen]


def split_pair(text: str) -> Optional[Tuple[str, str]]:
    """
    Split a key/value line at its first space.

    Returns:
        (key, trimmed value), or None when the line has no space
    """
    space = text.find(PAIR_SEPARATOR)
    if space < 0:
        return None
    return text[:space], text[space:].strip()


def parse_document(text: str, source: str, sink: Sink) -> Dict[str, Table]:
    """
    Parse a whole document.

    Args:
        text: Full document text
        source: Name used in diagnostics (usually the backing file path)
        sink: Receives one Diagnostic per problem found

    Returns:
        Mapping of table name to Table, in header order
    """
    tables: Dict[str, Table] = {}
    state: ParserState = NoTableOpen()

    def error(line_number: int, message: str) -> None:
        sink(Diagnostic(DiagnosticKind.PARSE, message, source, line_number))

    for line in tokenize(text):
        if line.kind is LineKind.BLANK:
            continue

        if line.kind is LineKind.TABLE_HEADER:
            name = line.name
            state = TableOpen(name)
            if name in tables:
                error(line.line_number, f"Duplicate table '{name}'")
                continue
            tables[name] = Table(name=name, line_number=line.line_number)
            continue

        if isinstance(state, NoTableOpen):
            error(line.line_number, "Key value pair defined outside of a table definition")
            continue

        pair = split_pair(line.text)
        if pair is None:
            error(line.line_number, "Key without a value")
            continue

        key, value = pair
        tables[state.name].add(key, value, line.line_number)

    return tables
