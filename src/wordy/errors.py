"""
errors.py — Exceptions raised while parsing and searching index files.

I/O failures are not wrapped: FileNotFoundError and friends reach the caller
unchanged so "file missing" stays distinguishable from "file corrupt".
"""

from pathlib import Path
from typing import Optional, Union


class WordyError(Exception):
    """Base class for wordy errors."""


class GrammarError(WordyError, ValueError):
    """
    A record line does not follow the index grammar.

    Raised for missing or extra fields, non-numeric counts, an unknown part
    of speech, an unknown pointer code, or bytes that do not decode. Fatal for
    the file being parsed.
    """

    def __init__(
        self,
        reason: str,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.reason = reason
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.path is not None:
            where.append(str(self.path))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if where:
            return f"{':'.join(where)}: {self.reason}"
        return self.reason

    def locate(self, path: Union[str, Path], line_number: int, line: str) -> "GrammarError":
        """Return a copy of this error carrying file and line information."""
        return type(self)(self.reason, path=path, line_number=line_number, line=line)


class UnknownPartOfSpeechError(GrammarError):
    """The part-of-speech field is not one of n, v, a, r."""


class UnknownPointerError(GrammarError):
    """A pointer code is not in the fixed pointer symbol table."""


class LineTooLongError(WordyError):
    """
    A line boundary was not found within the maximum line length.

    The on-disk search assumes no line exceeds its max_line_length bound;
    this is raised instead of reconstructing a truncated line.
    """

    def __init__(self, offset: int, max_line_length: int):
        self.offset = offset
        self.max_line_length = max_line_length
        super().__init__(
            f"No line boundary within {max_line_length:,} bytes of offset {offset:,}"
        )
