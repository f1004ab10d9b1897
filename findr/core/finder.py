# findr/core/finder.py
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence
import structlog

from findr.core.entries import Entry, TraversalError
from findr.core.filters import FilterChain
from findr.core.output import write_error, write_match
from findr.core.walker import walk

log = structlog.get_logger(__name__)

MatchSink = Callable[[str], None]
ErrorSink = Callable[[TraversalError], None]


@dataclass
class FindResult:
    # counters for one run; had_errors lets the caller pick an exit status.
    visited: int = 0
    matched: int = 0
    errors: int = 0

    @property
    def had_errors(self) -> bool:
        return self.errors > 0


class PathFinder:
    # drives the walker and the filter chain over each root path, in order.
    def __init__(
        self,
        roots: Sequence[str],
        chain: FilterChain,
        on_match: MatchSink = write_match,
        on_error: ErrorSink = write_error,
        sort_entries: bool = True,
    ):
        self.roots: List[str] = list(roots)
        self.chain = chain
        self.on_match = on_match
        self.on_error = on_error
        self.sort_entries = sort_entries
        self.log = structlog.get_logger(f"{__name__}.{self.__class__.__name__}")

    def run(self) -> FindResult:
        """
        Walks every root and streams matches and errors to the sinks.

        Nothing is buffered: each item is forwarded as soon as the walker
        produces it, and a traversal error only ends the subtree it names.
        """
        result = FindResult()
        self.log.info("find_run_started", roots=self.roots)

        for root in self.roots:
            root_matches, root_errors = result.matched, result.errors
            for item in walk(root, sort_entries=self.sort_entries):
                if isinstance(item, TraversalError):
                    result.errors += 1
                    self.on_error(item)
                    continue
                result.visited += 1
                if self.chain.matches(item):
                    result.matched += 1
                    self.on_match(item.path)
            self.log.info(
                "root_walk_finished",
                root=root,
                matched=result.matched - root_matches,
                errors=result.errors - root_errors,
            )

        self.log.info("find_run_finished", visited=result.visited, matched=result.matched, errors=result.errors)
        return result


def find_paths(
    roots: Sequence[str],
    chain: FilterChain,
    on_error: Optional[ErrorSink] = None,
    sort_entries: bool = True,
) -> Iterator[str]:
    # generator form of PathFinder.run for library callers: yields matched display paths.
    for root in roots:
        for item in walk(root, sort_entries=sort_entries):
            if isinstance(item, Entry):
                if chain.matches(item):
                    yield item.path
            elif on_error is not None:
                on_error(item)
            else:
                log.warning("traversal_error_unhandled", path=item.path, error=str(item.cause))
