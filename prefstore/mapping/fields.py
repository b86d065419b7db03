# ==============================================
# Record Fields
# ==============================================
#
# PURPOSE:
#   Work out which named, typed fields a record declares, in
#   declaration order. Field names are the serialization keys and
#   the declared type decides how a value is parsed and rendered.
#
# WHAT COUNTS AS A RECORD:
#   - dataclass instances (dataclasses.fields order)
#   - typing.NamedTuple instances (updated with _replace)
#   - plain class instances with class-level annotations
#     (annotation order, base classes first; ClassVar ignored)
#
# ENUMS:
# ------
# - FieldType(Enum): INT, FLOAT, BOOL, TEXT, UNSUPPORTED
#
# CLASSES:
# --------
# - FieldSpec (frozen dataclass)
#     name: str, annotation: Any, field_type: FieldType
#
# FUNCTIONS:
# ----------
# - classify_annotation(annotation) -> FieldType
# - record_fields(record) -> list[FieldSpec]   (cached per type)
# - record_type_name(record) -> str
# - is_frozen(record) -> bool
# - is_named_tuple(record) -> bool
# - is_immutable(record) -> bool         → frozen dataclass or NamedTuple
# - non_init_fields(record) -> set[str]  → fields replace() cannot set
#
# ==============================================

import dataclasses
import types
import typing
from enum import Enum
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Set, Union

from ..errors import RecordTypeError


class FieldType(Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TEXT = "str"
    UNSUPPORTED = "unsupported"


PRIMITIVES = {
    int: FieldType.INT,
    float: FieldType.FLOAT,
    bool: FieldType.BOOL,
    str: FieldType.TEXT,
}

# Unresolvable string annotations are matched by name
PRIMITIVE_NAMES = {
    "int": FieldType.INT,
    "float": FieldType.FLOAT,
    "bool": FieldType.BOOL,
    "str": FieldType.TEXT,
}


# typing.Union and, on 3.10+, the "X | None" form
UNION_ORIGINS = {Union, getattr(types, "UnionType", Union)}

@dataclass(frozen=True)
class FieldSpec:
    name: str
    annotation: Any
    field_type: FieldType

    @property
    def type_name(self) -> str:
        return getattr(self.annotation, "__name__", None) or str(self.annotation)


_FIELD_CACHE: Dict[type, List[FieldSpec]] = {}


def classify_annotation(annotation: Any) -> FieldType:
    """
    Map a declared type to the primitive it is parsed as.

    Optional[T] counts as T; anything else outside the four
    primitives is UNSUPPORTED.
    """
    if isinstance(annotation, str):
        return PRIMITIVE_NAMES.get(annotation.strip(), FieldType.UNSUPPORTED)

    if typing.get_origin(annotation) in UNION_ORIGINS:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return classify_annotation(args[0])
        return FieldType.UNSUPPORTED

    # Exact match: bool is an int subclass but must not parse as one
    for primitive, field_type in PRIMITIVES.items():
        if annotation is primitive:
            return field_type
    return FieldType.UNSUPPORTED


def _is_class_var(annotation: Any) -> bool:
    if annotation is ClassVar or typing.get_origin(annotation) is ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar"))


def _annotations(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Forward references we cannot resolve; keep the raw strings
        raw: Dict[str, Any] = {}
        for base in reversed(cls.__mro__):
            raw.update(getattr(base, "__annotations__", {}))
        return raw


def _collect(cls: type) -> List[FieldSpec]:
    hints = _annotations(cls)

    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    else:
        names = [name for name, annotation in hints.items() if not _is_class_var(annotation)]

    specs = []
    for name in names:
        annotation = hints.get(name, Any)
        specs.append(FieldSpec(name, annotation, classify_annotation(annotation)))
    return specs


def record_fields(record: Any) -> List[FieldSpec]:
    """
    Return the declared fields of a record, in declaration order.

    Args:
        record: Dataclass instance or annotated plain-class instance

    Returns:
        List of FieldSpec

    Raises:
        RecordTypeError: if the record's type declares no fields
    """
    cls = type(record)
    specs = _FIELD_CACHE.get(cls)
    if specs is None:
        specs = _collect(cls)
        if not specs:
            raise RecordTypeError(f"Type '{cls.__name__}' declares no fields and cannot be used as a record")
        _FIELD_CACHE[cls] = specs
    return specs


def record_type_name(record: Any) -> str:
    """Default table name for a record: its type's name."""
    return type(record).__name__


def is_frozen(record: Any) -> bool:
    params = getattr(type(record), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def is_named_tuple(record: Any) -> bool:
    return isinstance(record, tuple) and hasattr(type(record), "_fields")


def is_immutable(record: Any) -> bool:
    """Records updated by building a new instance instead of setattr."""
    return is_frozen(record) or is_named_tuple(record)


def non_init_fields(record: Any) -> Set[str]:
    """Names of dataclass fields that dataclasses.replace() cannot set."""
    if not dataclasses.is_dataclass(record):
        return set()
    return {f.name for f in dataclasses.fields(record) if not f.init}
