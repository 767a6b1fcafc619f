"""
line_index.py — Line-offset table for repeated searches against one file.

wordy.search seeks to raw byte midpoints and needs no setup. When many lookups
hit the same file, one linear pass recording where each line starts makes
every later search a true binary search over line numbers, at the cost of
one integer per line in memory.

Usage:
    with open('dict/index.noun', 'rb') as f:
        offsets = LineOffsetIndex.build(f)
        offsets.search('dog')
        offsets.search('cat')
"""

import logging
from typing import IO, List, Optional

from wordy.search import binary_view, line_key


logger = logging.getLogger(__name__)


class LineOffsetIndex:
    """Start offsets of every line in a sorted file, bound to an open handle."""

    def __init__(self, file: IO, starts: List[int]):
        self._file = file
        self._starts = starts

    @classmethod
    def build(cls, file: IO) -> 'LineOffsetIndex':
        """Scan file once from the beginning, recording each line start."""
        starts = []
        pos = 0
        with binary_view(file) as f:
            f.seek(0)
            for line in iter(f.readline, b''):
                starts.append(pos)
                pos += len(line)
        logger.debug(f"Indexed {len(starts):,} lines ({pos:,} bytes)")
        return cls(file, starts)

    def __len__(self) -> int:
        return len(self._starts)

    def _raw_line(self, n: int) -> bytes:
        with binary_view(self._file) as f:
            f.seek(self._starts[n])
            return f.readline().rstrip(b'\n')

    def line(self, n: int) -> str:
        """Text of line n (0-based), without its newline."""
        return self._raw_line(n).decode('utf-8', errors='replace')

    def search(self, key: str) -> Optional[str]:
        """Same contract and comparison rules as wordy.search.search."""
        target = key.encode('utf-8')
        if not target or target.split() != [target]:
            return None

        lo = 0
        hi = len(self._starts) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            raw = self._raw_line(mid)
            candidate = line_key(raw)
            if candidate == target:
                return raw.decode('utf-8', errors='replace')
            if target > candidate:
                lo = mid + 1
            else:
                hi = mid - 1
        return None
