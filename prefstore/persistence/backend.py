# ==============================================
# Backing Resource
# ==============================================
#
# PURPOSE:
#   The store never touches the file system directly. It is handed a
#   backend that can read or write the whole document at once. The
#   file is only open for the duration of a single read or write.
#
# CLASSES:
# --------
# - TextBackend (Protocol)
#     source: str
#     read_text() -> str | None      (None when nothing exists yet)
#     write_text(text) -> None
#
# - FileBackend(path, encoding="utf-8")
# - MemoryBackend(text=None)         → for tests and embedding
#
# ==============================================

from pathlib import Path
from typing import Optional, Protocol, Union

from ..errors import BackendError


class TextBackend(Protocol):
    source: str

    def read_text(self) -> Optional[str]:
        ...

    def write_text(self, text: str) -> None:
        ...


class FileBackend:
    """Reads and writes a single text file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Args:
            path: Location of the backing file (need not exist yet)
            encoding: Text encoding used for both read and write
        """
        self.path = Path(path)
        self.encoding = encoding

    @property
    def source(self) -> str:
        return str(self.path)

    def read_text(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                return f.read()
        except OSError as exc:
            raise BackendError(f"Could not read {self.path}: {exc}") from exc

    def write_text(self, text: str) -> None:
        try:
            if self.path.parent != Path(""):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding=self.encoding) as f:
                f.write(text)
        except OSError as exc:
            raise BackendError(f"Could not write {self.path}: {exc}") from exc


class MemoryBackend:
    """Keeps the document in memory; ``text`` is None until written."""

    source = "<memory>"

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.writes = 0

    def read_text(self) -> Optional[str]:
        return self.text

    def write_text(self, text: str) -> None:
        self.text = text
        self.writes += 1
