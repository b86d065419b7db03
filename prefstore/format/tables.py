# ==============================================
# Tables (Data Classes)
# ==============================================
#
# PURPOSE:
#   The in-memory shape of a parsed document. The parser produces
#   these, the store owns them, the projector reads and builds them,
#   and the serializer renders them back to text.
#
# CLASSES:
# --------
# - VariablePair (frozen dataclass)
#     key: str, value: str (raw text), line_number: int
#
# - Table (dataclass)
#     name: str, pairs: list[VariablePair], line_number: int
#
# ==============================================

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class VariablePair:
    """One ``key value`` entry. ``line_number`` is only used in diagnostics."""
    key: str
    value: str
    line_number: int = 0


@dataclass
class Table:
    """
    A named, ordered group of pairs.

    Pair order is kept so re-serialization is stable; lookups go by key
    and the last pair with a given key wins.
    """
    name: str
    pairs: List[VariablePair] = field(default_factory=list)
    line_number: int = 0  # Header location, 0 when built in memory

    def add(self, key: str, value: str, line_number: int = 0) -> VariablePair:
        pair = VariablePair(key=key, value=value, line_number=line_number)
        self.pairs.append(pair)
        return pair

    def get(self, key: str) -> Optional[str]:
        """Return the raw value of the last pair named ``key``."""
        found = None
        for pair in self.pairs:
            if pair.key == key:
                found = pair.value
        return found

    def to_dict(self) -> Dict[str, str]:
        """Collapse pairs into a dict (last write wins)."""
        return {pair.key: pair.value for pair in self.pairs}

    def __len__(self) -> int:
        return len(self.pairs)
