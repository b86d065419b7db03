# ==============================================
# Line Tokenizer
# ==============================================
#
# PURPOSE:
#   Turn one raw line of a document into a classified logical line.
#   Comments ("#" to end of line, anywhere on the line) and surrounding
#   whitespace are removed before classification.
#
# ENUMS:
# ------
# - LineKind(Enum): BLANK, TABLE_HEADER, KEY_VALUE
#
# CLASSES:
# --------
# - LogicalLine (frozen dataclass)
#     kind, text (trimmed, comment-free), line_number
#     name  → table name for TABLE_HEADER lines
#
# FUNCTIONS:
# ----------
# - strip_comment(raw) -> str
# - tokenize_line(raw, line_number) -> LogicalLine
# - tokenize(text) -> Iterator[LogicalLine]   (1-based line numbers)
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Iterator

COMMENT_CHAR = "#"
TABLE_MARKER = ":"


class LineKind(Enum):
    BLANK = "blank"
    TABLE_HEADER = "table_header"
    KEY_VALUE = "key_value"


@dataclass(frozen=True)
class LogicalLine:
    kind: LineKind
    text: str
    line_number: int

    @property
    def name(self) -> str:
        """Table name of a header line (text after the marker, trimmed)."""
        return self.text[len(TABLE_MARKER):].strip()


def strip_comment(raw: str) -> str:
    comment = raw.find(COMMENT_CHAR)
    if comment >= 0:
        return raw[:comment]
    return raw


def tokenize_line(raw: str, line_number: int) -> LogicalLine:
    """
    Classify a single raw line.

    Args:
        raw: Line as read from the document, without its line break
        line_number: 1-based position in the document

    Returns:
        LogicalLine with comment and surrounding whitespace removed
    """
    text = strip_comment(raw).strip()

    if not text:
        return LogicalLine(LineKind.BLANK, "", line_number)

    if text.startswith(TABLE_MARKER):
        return LogicalLine(LineKind.TABLE_HEADER, text, line_number)

    # Only valid inside a table; the parser decides
    return LogicalLine(LineKind.KEY_VALUE, text, line_number)


def tokenize(text: str) -> Iterator[LogicalLine]:
    # \n, \r\n and \r only; splitlines() would also break on form feeds etc.
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for index, raw in enumerate(lines, start=1):
        yield tokenize_line(raw, index)
