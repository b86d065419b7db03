# ==============================================
# Diagnostics
# ==============================================
#
# PURPOSE:
#   Every recoverable problem (parse errors, missing tables, unknown
#   fields, re-queued tables) is reported here instead of raised.
#   The operation that found the problem keeps going and the caller
#   observes a partially filled result plus a stream of diagnostics.
#
# ENUMS:
# ------
# - DiagnosticKind(Enum): PARSE, LOOKUP, SCHEMA, WARNING
#
# CLASSES:
# --------
# - Diagnostic (frozen dataclass)
#     kind, message, source, line_number (optional)
#
# - DiagnosticCollector
#     List-backed sink; optionally forwards to another sink.
#
# FUNCTIONS:
# ----------
# - print_diagnostic(diagnostic) -> None     → console sink
# - default_sink() -> Sink                   → print or silent, from config
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .config import get_config


class DiagnosticKind(Enum):
    """
    Category of a reported problem.

    - PARSE: malformed line or value (duplicate table, key without value,
             pair outside a table, unparsable primitive, unsupported type)
    - LOOKUP: table requested on read does not exist (or was consumed)
    - SCHEMA: a pair names a field the record does not declare
    - WARNING: not an error, but worth knowing (re-queued table, lossy value)
    """
    PARSE = "parse"
    LOOKUP = "lookup"
    SCHEMA = "schema"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem with its location."""
    kind: DiagnosticKind
    message: str
    source: str = "<string>"
    line_number: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.kind is not DiagnosticKind.WARNING

    def __str__(self) -> str:
        if self.kind is DiagnosticKind.WARNING:
            return f"Warning: {self.message}."
        if self.line_number is None:
            return f"Error: {self.message}."
        return f"Error: {self.message} in '{self.source}' at line {self.line_number}."


Sink = Callable[[Diagnostic], None]


def print_diagnostic(diagnostic: Diagnostic) -> None:
    print(diagnostic)


def _discard(diagnostic: Diagnostic) -> None:
    return None


def default_sink() -> Sink:
    """
    Pick the sink used when the caller does not supply one.

    Returns:
        print_diagnostic, or a silent sink when echo is disabled in config
    """
    if get_config().echo_diagnostics:
        return print_diagnostic
    return _discard


class DiagnosticCollector:
    """
    Sink that keeps every diagnostic it receives.

    Pass ``forward`` to also hand each diagnostic on (e.g. to the console).
    """

    def __init__(self, forward: Optional[Sink] = None):
        self.forward = forward
        self.items: List[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if self.forward is not None:
            self.forward(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self.items if d.kind is kind]

    def clear(self) -> None:
        self.items.clear()
