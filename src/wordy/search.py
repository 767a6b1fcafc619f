"""
search.py — Binary search over a sorted index file on disk.

Nothing is loaded or pre-indexed: each step seeks to a byte offset,
rebuilds the line around it and compares that line's first field with the
key. A lookup in a 15 MB index.noun takes about two dozen steps.

Caller obligations, not checked up front:
  - lines are sorted byte-wise by their first field
  - no line is longer than max_line_length bytes (LineTooLongError is raised
    when a step cannot find a line boundary inside that bound)

Searching moves the handle's position, so one handle must not be shared between
threads. See wordy.line_index for the precomputed-offsets alternative.

Usage:
    from wordy.search import search

    with open('dict/index.noun', 'rb') as f:
        line = search(f, 'cellophane')
"""

import io
import logging
import os
from contextlib import contextmanager
from typing import BinaryIO, IO, Iterator, Optional, Tuple

from wordy.errors import LineTooLongError


logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 25_000
_CHUNK_SIZE = 4096


@contextmanager
def binary_view(file: IO) -> Iterator[BinaryIO]:
    """
    Byte-addressable view of file.

    Text handles are read through their underlying buffer, and their text
    position is put back on exit so later reads carry on where they left off.

    Raises:
        TypeError: file is a text stream with no byte buffer (e.g. io.StringIO)
    """
    if not isinstance(file, io.TextIOBase):
        yield file
        return

    buffer = getattr(file, 'buffer', None)
    if buffer is None:
        raise TypeError(
            f"{type(file).__name__} has no byte buffer; open the index file in binary mode ('rb')"
        )
    cookie = file.tell()
    try:
        yield buffer
    finally:
        file.seek(cookie)


def _file_length(f: BinaryIO) -> int:
    return f.seek(0, os.SEEK_END)


def line_key(line: bytes) -> bytes:
    """
    Comparison key of a raw line: its first whitespace-delimited field.

    Header lines (leading space) and blank lines get b'', which sorts before
    every headword, matching where they sit in a byte-wise sorted file.
    """
    if line.startswith(b' '):
        return b''
    fields = line.split(None, 1)
    return fields[0] if fields else b''


def _line_bounds(
    f: BinaryIO, offset: int, file_length: int, max_line_length: int
) -> Tuple[int, int]:
    """
    Start (inclusive) and end (exclusive) of the line holding offset.

    A line's terminating newline belongs to it, so the start is one past the
    last newline strictly before offset and the end is the first newline at
    or after offset (or end of file).
    """
    if not 0 <= offset < file_length:
        raise ValueError(f"Offset {offset} outside file of {file_length} bytes")

    # The newline ending the previous line is at most max_line_length + 1 bytes back
    window_start = max(0, offset - max_line_length - 1)
    f.seek(window_start)
    window = f.read(offset - window_start)
    newline = window.rfind(b'\n')
    if newline >= 0:
        start = window_start + newline + 1
    elif window_start == 0:
        start = 0
    else:
        raise LineTooLongError(offset, max_line_length)

    limit = start + max_line_length
    pos = offset
    f.seek(pos)
    while pos <= limit:
        chunk = f.read(min(_CHUNK_SIZE, limit - pos + 1))
        if not chunk:
            return start, pos
        found = chunk.find(b'\n')
        if found >= 0:
            return start, pos + found
        pos += len(chunk)

    raise LineTooLongError(offset, max_line_length)


def _read_line(
    f: BinaryIO, offset: int, file_length: int, max_line_length: int
) -> Tuple[int, int, bytes]:
    start, end = _line_bounds(f, offset, file_length, max_line_length)
    f.seek(start)
    return start, end, f.read(end - start)


def locate_line(file: IO, offset: int, *, max_line_length: int = MAX_LINE_LENGTH) -> str:
    """
    Return the full line containing byte offset, without its newline.

    Any offset inside a line, including the offset of its newline, yields
    the same text.

    Raises:
        ValueError: offset is outside the file
        LineTooLongError: no line boundary within max_line_length bytes
        TypeError: file is a text stream with no byte buffer
    """
    with binary_view(file) as f:
        _, _, line = _read_line(f, offset, _file_length(f), max_line_length)
    return line.decode('utf-8', errors='replace')


def search(file: IO, key: str, *, max_line_length: int = MAX_LINE_LENGTH) -> Optional[str]:
    """
    Find the line whose first field equals key.

    Args:
        file: Open, seekable handle on a sorted index file (binary preferred)
        key: Headword to look for, compared byte-wise as UTF-8
        max_line_length: Longest line the file may contain

    Returns:
        The matching line without its newline, or None if key is absent
    """
    target = key.encode('utf-8')
    # line_key splits on ASCII whitespace only, so the key is checked the same way
    if not target or target.split() != [target]:
        return None

    with binary_view(file) as f:
        file_length = _file_length(f)

        left = 0
        right = file_length - 1
        steps = 0
        while left <= right:
            middle = (left + right) // 2
            start, end, line = _read_line(f, middle, file_length, max_line_length)
            candidate = line_key(line)
            steps += 1

            if candidate == target:
                logger.debug(f"Found {key!r} at byte {start:,} after {steps} steps")
                return line.decode('utf-8', errors='replace')
            if target > candidate:
                left = end + 1
            else:
                # right drops below zero at the first line; the loop then ends
                right = start - 1

    logger.debug(f"{key!r} not found after {steps} steps")
    return None
