# ==============================================
# Store Serializer
# ==============================================
#
# PURPOSE:
#   Render tables back to the line-oriented text format:
#
#     :<name>
#     <key> <value>
#
#   Tables in mapping iteration order, pairs in stored order.
#   No escaping is applied: a value containing "#" is truncated on
#   reload, and a line break inside a value splits the line.
#
# ==============================================

from typing import Iterable, List, Mapping

from .tables import Table
from .tokenizer import TABLE_MARKER
from .parser import PAIR_SEPARATOR


def render_table(table: Table) -> List[str]:
    lines = [f"{TABLE_MARKER}{table.name}"]
    for pair in table.pairs:
        lines.append(f"{pair.key}{PAIR_SEPARATOR}{pair.value}")
    return lines


def render_tables(tables: Iterable[Table]) -> str:
    """Render tables to document text; an empty iterable gives ""."""
    buffer: List[str] = []
    for table in tables:
        for line in render_table(table):
            buffer.append(line + "\n")
    return "".join(buffer)


def serialize(tables: Mapping[str, Table]) -> str:
    """Render a name → Table mapping; names come from the mapping keys."""
    buffer: List[str] = []
    for name, table in tables.items():
        if table.name != name:
            table = Table(name=name, pairs=table.pairs, line_number=table.line_number)
        buffer.append(render_tables([table]))
    return "".join(buffer)
