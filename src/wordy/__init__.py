"""
wordy — Lookup access to WordNet index files.

Two independent access paths over the same sorted, line-oriented format:
  - Index: parse whole index files into per-part-of-speech tables
  - search: binary-search a single headword straight from disk
"""

from wordy.errors import (
    GrammarError,
    LineTooLongError,
    UnknownPartOfSpeechError,
    UnknownPointerError,
    WordyError,
)
from wordy.index import Index, IndexRecord, LemmaLookupResult, parse_index_line
from wordy.line_index import LineOffsetIndex
from wordy.pointer import PartOfSpeech, PointerSymbol
from wordy.search import MAX_LINE_LENGTH, locate_line, search

__version__ = "0.1.0"

__all__ = [
    "GrammarError",
    "Index",
    "IndexRecord",
    "LemmaLookupResult",
    "LineOffsetIndex",
    "LineTooLongError",
    "MAX_LINE_LENGTH",
    "PartOfSpeech",
    "PointerSymbol",
    "UnknownPartOfSpeechError",
    "UnknownPointerError",
    "WordyError",
    "locate_line",
    "parse_index_line",
    "search",
]
