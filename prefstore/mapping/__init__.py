# ==============================================
# TOPIC 2: MAPPING
# ==============================================
#
# This package projects caller-owned records into and out of
# tables, matching record fields to pairs by name.
#
# Modules:
# --------
# - fields.py    → Discover a record's declared fields and their types
# - projector.py → Parse pairs into fields / render fields into pairs
#
# ==============================================

from .fields import FieldSpec, FieldType, record_fields, record_type_name
from .projector import ValueCoercer, project_into, project_from

__all__ = [
    "FieldSpec",
    "FieldType",
    "record_fields",
    "record_type_name",
    "ValueCoercer",
    "project_into",
    "project_from",
]
