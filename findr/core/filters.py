# findr/core/filters.py
import re
from dataclasses import dataclass
from typing import Iterable, Tuple
import structlog

from findr.core.entries import Entry, EntryType
from findr.exceptions import ConfigError

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class TypePredicate:
    tag: EntryType

    def test(self, entry: Entry) -> bool:
        return entry.entry_type is self.tag


@dataclass(frozen=True)
class NamePredicate:
    # unanchored search against the base name, never the full path.
    pattern: re.Pattern[str]

    def test(self, entry: Entry) -> bool:
        return self.pattern.search(entry.name) is not None


@dataclass(frozen=True)
class FilterChain:
    """
    Type and name predicates applied to each entry.

    Predicates are OR-ed within a category and the two categories are AND-ed.
    An empty category passes everything, so an empty chain matches every entry.
    """
    type_predicates: Tuple[TypePredicate, ...] = ()
    name_predicates: Tuple[NamePredicate, ...] = ()

    def matches(self, entry: Entry) -> bool:
        type_ok = not self.type_predicates or any(p.test(entry) for p in self.type_predicates)
        if not type_ok:
            return False
        return not self.name_predicates or any(p.test(entry) for p in self.name_predicates)


def compile_name_pattern(pattern: str) -> re.Pattern[str]:
    # compiles one regular expression, turning a syntax error into a ConfigError.
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"invalid name pattern '{pattern}': {e}")


def build_filter_chain(
    entry_types: Iterable[EntryType] = (),
    name_patterns: Iterable[str] = (),
) -> FilterChain:
    # builds the chain once, before any traversal starts.
    type_predicates: Tuple[TypePredicate, ...] = ()
    for tag in entry_types:
        if tag is EntryType.OTHER:
            raise ConfigError("entry type 'other' cannot be used as a type filter")
        if all(p.tag is not tag for p in type_predicates):
            type_predicates += (TypePredicate(tag),)

    name_predicates = tuple(NamePredicate(compile_name_pattern(p)) for p in name_patterns)

    log.debug(
        "filter_chain_built",
        types=[p.tag.value for p in type_predicates],
        names=[p.pattern.pattern for p in name_predicates],
    )
    return FilterChain(type_predicates=type_predicates, name_predicates=name_predicates)


def matches(chain: FilterChain, entry: Entry) -> bool:
    return chain.matches(entry)
