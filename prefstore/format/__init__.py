# ==============================================
# TOPIC 1: FORMAT
# ==============================================
#
# This package reads and writes the text format itself:
#
#   :<table-name>
#   <key> <value>      # inline comments allowed
#
# Modules:
# --------
# - tokenizer.py  → Strip comments/whitespace, classify lines
# - tables.py     → VariablePair / Table data classes
# - parser.py     → Build tables from lines, reporting errors
# - serializer.py → Render tables back to text
#
# ==============================================

from .tables import VariablePair, Table
from .tokenizer import LineKind, LogicalLine, tokenize, tokenize_line
from .parser import parse_document, split_pair
from .serializer import serialize, render_tables

__all__ = [
    "VariablePair",
    "Table",
    "LineKind",
    "LogicalLine",
    "tokenize",
    "tokenize_line",
    "parse_document",
    "split_pair",
    "serialize",
    "render_tables",
]
