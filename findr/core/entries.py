# findr/core/entries.py
import os
import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import structlog

log = structlog.get_logger(__name__)

class EntryType(Enum):
    # classification of a filesystem entry, fixed when the entry is produced.
    DIRECTORY = "d"
    FILE = "f"
    LINK = "l"
    OTHER = "other"

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional["EntryType"]:
        # parses a user-facing type tag; OTHER is never selectable.
        if not s:
            return None
        aliases = {"d": cls.DIRECTORY, "dir": cls.DIRECTORY, "f": cls.FILE, "file": cls.FILE, "l": cls.LINK, "link": cls.LINK}
        parsed = aliases.get(s.strip().lower())
        if parsed is None:
            log.warning("invalid_entry_type_string", input_string=s)
        return parsed

    @classmethod
    def from_mode(cls, mode: int) -> "EntryType":
        # maps an lstat st_mode to a classification.
        if stat.S_ISLNK(mode):
            return cls.LINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


def base_name(path: str) -> str:
    # last path component, ignoring trailing separators; "/" and "." stay as they are.
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    if not stripped:
        return path
    return os.path.basename(stripped)


@dataclass(frozen=True)
class Entry:
    """One filesystem object discovered during a walk.

    ``path`` is the display path (the root as supplied, joined with the
    child names below it) and ``name`` its base name component.
    """
    path: str
    name: str
    entry_type: EntryType

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_symlink(self) -> bool:
        return self.entry_type is EntryType.LINK


@dataclass(frozen=True)
class TraversalError:
    # a recoverable failure to stat or list one path during a walk.
    path: str
    cause: OSError

    @property
    def message(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"{self.path}: {reason}"
