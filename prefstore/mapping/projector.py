# ==============================================
# Field Projector
# ==============================================
#
# PURPOSE:
#   Move data between a record's named fields and a table's pairs.
#   The field name is the key; the field's declared type decides
#   how the raw text is parsed (read) or rendered (write).
#
# READ RULES (project_into):
# --------------------------
#   int   → optional sign + decimal digits
#   float → decimal / exponential literal, or inf / infinity / nan
#   bool  → first character only, case-insensitive: t → True, f → False
#   str   → the (already trimmed) raw value
#   other → "not supported" error
#
#   A value that fails to parse leaves the field untouched and is
#   reported with the pair's line number. Pairs naming a field the
#   record does not declare are reported as SCHEMA errors and skipped.
#   Fields without a pair keep their current value. Fields that cannot
#   be assigned (init=False on a frozen dataclass, read-only attributes)
#   are reported as SCHEMA errors and keep their value.
#
# WRITE RULES (project_from):
# ---------------------------
#   Every declared field becomes one pair, in declaration order, except
#   fields holding None: those are skipped with a WARNING so the
#   record's default is what reads back.
#   bool → "True"/"False", numbers → decimal text, str → verbatim.
#
# CLASSES:
# --------
# - ValueCoercer
#     parse(field_type, raw) -> (value, success)
#     render(field_type, value) -> str
#
# FUNCTIONS:
# ----------
# - project_into(record, table, sink, source) -> record
# - project_from(record, name, sink, source) -> Table
#
# ==============================================

import dataclasses
import re
from typing import Any, Dict, Optional, Tuple

from .fields import (
    FieldSpec,
    FieldType,
    is_frozen,
    is_immutable,
    non_init_fields,
    record_fields,
    record_type_name,
)
from ..diagnostics import Diagnostic, DiagnosticKind, Sink, default_sink
from ..format.tables import Table


class ValueCoercer:
    INT_PATTERN = re.compile(r"[+-]?[0-9]+")
    FLOAT_PATTERN = re.compile(
        r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
        r"|[+-]?(?:inf|infinity|nan)",
        re.IGNORECASE
    )
    BOOL_TRUE_INITIALS = {"t"}
    BOOL_FALSE_INITIALS = {"f"}

    # Message used when a value does not parse as its field's type
    EXPECTED = {
        FieldType.INT: "Expected an int value",
        FieldType.FLOAT: "Expected a float value",
        FieldType.BOOL: "Expected a bool value",
    }

    @classmethod
    def parse(cls, field_type: FieldType, raw: str) -> Tuple[Any, bool]:
        """
        Parse raw text as the given primitive.

        Returns:
            (parsed value, True) on success, (raw, False) otherwise
        """
        if field_type is FieldType.INT:
            if cls.INT_PATTERN.fullmatch(raw):
                return int(raw), True
            return raw, False

        if field_type is FieldType.FLOAT:
            if cls.FLOAT_PATTERN.fullmatch(raw):
                return float(raw), True
            return raw, False

        if field_type is FieldType.BOOL:
            # Only the first letter matters: "T", "true", "tomato" are all True
            initial = raw[:1].lower()
            if initial in cls.BOOL_TRUE_INITIALS:
                return True, True
            if initial in cls.BOOL_FALSE_INITIALS:
                return False, True
            return raw, False

        if field_type is FieldType.TEXT:
            return raw, True

        return raw, False

    @classmethod
    def render(cls, field_type: FieldType, value: Any) -> str:
        if field_type is FieldType.BOOL:
            return "True" if value else "False"
        if field_type is FieldType.FLOAT and isinstance(value, (int, float)):
            return repr(float(value))
        return str(value)

    @classmethod
    def survives_reload(cls, text: str) -> bool:
        """Whether text would read back unchanged as a pair value."""
        if not text or text != text.strip():
            return False
        return "#" not in text and "\n" not in text and "\r" not in text


def _unsupported_message(spec: FieldSpec) -> str:
    return f"The type '{spec.type_name}' is not supported by preferences"


def _rebuild(record: Any, updates: Dict[str, Any]) -> Any:
    """New instance of an immutable record with updates applied."""
    if is_frozen(record):
        return dataclasses.replace(record, **updates)
    return record._replace(**updates)


def project_into(
    record: Any,
    table: Table,
    sink: Optional[Sink] = None,
    source: str = "<string>"
) -> Any:
    """
    Assign the values of a table's pairs to same-named record fields.

    Args:
        record: Record to populate (caller-owned)
        table: Table whose pairs supply the values
        sink: Diagnostic sink (defaults to the configured console sink)
        source: Name used in diagnostics

    Returns:
        The record: the same instance for mutable records, a new
        instance for frozen dataclasses and NamedTuples
    """
    if sink is None:
        sink = default_sink()
    specs = {spec.name: spec for spec in record_fields(record)}
    immutable = is_immutable(record)
    fixed = non_init_fields(record) if immutable else set()
    updates: Dict[str, Any] = {}
    lines: Dict[str, int] = {}

    def report(kind: DiagnosticKind, message: str, line_number: int) -> None:
        sink(Diagnostic(kind, message, source, line_number))

    def unassignable(field_name: str, line_number: int) -> None:
        report(
            DiagnosticKind.SCHEMA,
            f"Field '{field_name}' on type '{record_type_name(record)}' cannot be assigned",
            line_number
        )

    for pair in table.pairs:
        spec = specs.get(pair.key)
        if spec is None:
            report(
                DiagnosticKind.SCHEMA,
                f"No field named '{pair.key}' on type '{record_type_name(record)}'",
                pair.line_number
            )
            continue

        if spec.name in fixed:
            unassignable(spec.name, pair.line_number)
            continue

        if spec.field_type is FieldType.UNSUPPORTED:
            report(DiagnosticKind.PARSE, _unsupported_message(spec), pair.line_number)
            continue

        value, success = ValueCoercer.parse(spec.field_type, pair.value)
        if not success:
            report(DiagnosticKind.PARSE, ValueCoercer.EXPECTED[spec.field_type], pair.line_number)
            continue

        updates[spec.name] = value
        lines[spec.name] = pair.line_number

    if not updates:
        return record

    if immutable:
        return _rebuild(record, updates)

    for name, value in updates.items():
        try:
            setattr(record, name, value)
        except AttributeError:
            # Read-only property, __slots__ without the name, ...
            unassignable(name, lines[name])
    return record


def project_from(
    record: Any,
    name: Optional[str] = None,
    sink: Optional[Sink] = None,
    source: str = "<string>"
) -> Table:
    """
    Build a table holding one pair per declared field of a record.

    Args:
        record: Record to read from
        name: Table name (defaults to the record's type name)
        sink: Diagnostic sink for unsupported types and lossy values
        source: Name used in diagnostics

    Returns:
        A new Table with line numbers of 0
    """
    if sink is None:
        sink = default_sink()
    table = Table(name=name if name is not None else record_type_name(record))

    def report(kind: DiagnosticKind, message: str) -> None:
        sink(Diagnostic(kind, message, source))

    for spec in record_fields(record):
        if not hasattr(record, spec.name):
            report(
                DiagnosticKind.SCHEMA,
                f"Field '{spec.name}' of type '{record_type_name(record)}' has no value to write"
            )
            continue

        value = getattr(record, spec.name)
        if value is None:
            # "None" would read back as text or fail to parse
            report(
                DiagnosticKind.WARNING,
                f"Field '{spec.name}' in table '{table.name}' is None and was not written"
            )
            continue

        if spec.field_type is FieldType.UNSUPPORTED:
            report(DiagnosticKind.PARSE, _unsupported_message(spec))

        text = ValueCoercer.render(spec.field_type, value)
        if not ValueCoercer.survives_reload(text):
            report(
                DiagnosticKind.WARNING,
                f"Value of '{spec.name}' in table '{table.name}' will not read back unchanged"
            )
        table.add(spec.name, text)

    return table
