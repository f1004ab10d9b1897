from dataclasses import dataclass, field
from typing import List
import structlog

from findr.core.entries import EntryType
from findr.core.filters import FilterChain, build_filter_chain

log = structlog.get_logger(__name__)

DEFAULT_SEARCH_PATH = "."

@dataclass
class FindConfig:
    # holds all configuration parameters for a single run.
    paths: List[str] = field(default_factory=lambda: [DEFAULT_SEARCH_PATH])
    entry_types: List[EntryType] = field(default_factory=list)
    name_patterns: List[str] = field(default_factory=list)
    sort_entries: bool = True
    show_summary: bool = False

    def __post_init__(self):
        # an empty path list means "search the current directory", as find does.
        if not self.paths:
            log.debug("no_search_paths_given_using_default", path=DEFAULT_SEARCH_PATH)
            self.paths = [DEFAULT_SEARCH_PATH]

    def build_filter_chain(self) -> FilterChain:
        # raises ConfigError for a pattern that does not compile.
        return build_filter_chain(self.entry_types, self.name_patterns)
