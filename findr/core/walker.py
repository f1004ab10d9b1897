# findr/core/walker.py
import os
from typing import Iterator, List, Union
import structlog

from findr.core.entries import Entry, EntryType, TraversalError, base_name

log = structlog.get_logger(__name__)

WalkItem = Union[Entry, TraversalError]


def _classify(dir_entry: os.DirEntry) -> EntryType:
    # uses the type information cached by scandir; links are never resolved.
    if dir_entry.is_symlink():
        return EntryType.LINK
    if dir_entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    if dir_entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return EntryType.OTHER


def _list_children(dir_path: str, sort_entries: bool) -> Iterator[os.DirEntry]:
    # reads one directory level; the handle is closed before any child is visited.
    with os.scandir(dir_path) as scan_it:
        children: List[os.DirEntry] = list(scan_it)
    if sort_entries:
        children.sort(key=lambda d: d.name)
    return iter(children)


def walk(root: str, sort_entries: bool = True) -> Iterator[WalkItem]:
    """
    Lazily walks ``root`` depth-first, yielding each entry before its descendants.

    The root itself comes first. A root that cannot be stat-ed yields a single
    TraversalError and nothing else; a root that is not a directory yields
    only its own Entry. Symbolic links are reported as LINK entries and never
    descended into. A directory that cannot be listed yields one
    TraversalError after its own Entry and the walk carries on with its
    siblings.

    Each call starts a fresh traversal. Only the child lists of the
    directories on the current path are held in memory.
    """
    log.debug("walk_started", root=root, sorted=sort_entries)
    try:
        root_stat = os.lstat(root)
    except OSError as e:
        log.debug("root_stat_failed", root=root, error=str(e))
        yield TraversalError(root, e)
        return

    root_entry = Entry(root, base_name(root), EntryType.from_mode(root_stat.st_mode))
    yield root_entry
    if not root_entry.is_dir:
        return

    stack: List[Iterator[os.DirEntry]] = []
    try:
        stack.append(_list_children(root, sort_entries))
    except OSError as e:
        log.debug("directory_read_failed", path=root, error=str(e))
        yield TraversalError(root, e)
        return

    while stack:
        dir_entry = next(stack[-1], None)
        if dir_entry is None:
            stack.pop()
            continue

        try:
            entry_type = _classify(dir_entry)
        except OSError as e:
            log.debug("entry_classification_failed", path=dir_entry.path, error=str(e))
            yield TraversalError(dir_entry.path, e)
            continue

        yield Entry(dir_entry.path, dir_entry.name, entry_type)

        if entry_type is EntryType.DIRECTORY:
            try:
                stack.append(_list_children(dir_entry.path, sort_entries))
            except OSError as e:
                log.debug("directory_read_failed", path=dir_entry.path, error=str(e))
                yield TraversalError(dir_entry.path, e)
