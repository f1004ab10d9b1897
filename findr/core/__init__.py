"""
Core traversal and filtering engine for findr.

The walker produces entries lazily, the filter chain decides which of them
match, and the finder drives both for a list of root paths.
"""
from .entries import Entry, EntryType, TraversalError
from .filters import FilterChain, build_filter_chain, matches
from .finder import FindResult, PathFinder, find_paths
from .walker import walk

__all__ = [
    "Entry",
    "EntryType",
    "TraversalError",
    "FilterChain",
    "build_filter_chain",
    "matches",
    "FindResult",
    "PathFinder",
    "find_paths",
    "walk",
]
