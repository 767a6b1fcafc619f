"""
index.py — Parse WordNet index files into an in-memory lookup table.

Each non-comment line of an index file describes one headword in one part
of speech:

    lemma pos synset_cnt p_cnt [ptr_symbol...] sense_cnt tagsense_cnt synset_offset [synset_offset...]

e.g.

    dog n 7 5 @ ~ #m #p %p 7 1 02084071 10114209 10023039 09886220 07676602 03907626 02712903

Lines starting with a space are the license header and are skipped.
sense_cnt repeats synset_cnt and is discarded. Synset offsets are byte
offsets into the matching data file; they are kept but not followed here.

Usage:
    from wordy.index import Index

    index = Index.from_files('dict/index.noun', 'dict/index.verb')
    index.lookup('dog', 'n').synset_offsets
    index.lookup_all('run').found()
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import orjson

from wordy.errors import GrammarError, UnknownPartOfSpeechError
from wordy.pointer import PartOfSpeech, PointerSymbol
from wordy.progress_display import ProgressDisplay


logger = logging.getLogger(__name__)

PosLike = Union[PartOfSpeech, str]

_POS_CODES = {pos.code: pos for pos in PartOfSpeech}


@dataclass(frozen=True)
class IndexRecord:
    """One parsed index line. Immutable, so handing it out never aliases index state."""

    lemma: str
    pos: PartOfSpeech
    sense_count: int
    pointer_count: int
    pointer_symbols: Tuple[PointerSymbol, ...]
    tagged_sense_count: int
    synset_offsets: Tuple[int, ...]

    def to_dict(self) -> Dict:
        return {
            'lemma': self.lemma,
            'pos': self.pos.code,
            'sense_count': self.sense_count,
            'pointer_count': self.pointer_count,
            'pointer_symbols': [p.code for p in self.pointer_symbols],
            'tagged_sense_count': self.tagged_sense_count,
            'synset_offsets': list(self.synset_offsets),
        }


@dataclass(frozen=True)
class LemmaLookupResult:
    """Every part-of-speech record for one headword."""

    lemma: str
    noun: Optional[IndexRecord] = None
    verb: Optional[IndexRecord] = None
    adjective: Optional[IndexRecord] = None
    adverb: Optional[IndexRecord] = None

    def get(self, pos: PosLike) -> Optional[IndexRecord]:
        return getattr(self, PartOfSpeech.from_code(pos).label)

    def found(self) -> List[IndexRecord]:
        """Present records, in noun, verb, adjective, adverb order."""
        return [r for r in (self.noun, self.verb, self.adjective, self.adverb) if r is not None]

    def __bool__(self) -> bool:
        return bool(self.found())


def _parse_count(token: Optional[str], field: str) -> int:
    if token is None:
        raise GrammarError(f"Missing {field}")
    if not (token.isascii() and token.isdigit()):
        raise GrammarError(f"{field} is not a non-negative integer: {token!r}")
    return int(token)


def _decode_line(raw: bytes, encoding: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise GrammarError(
            f"Line is not valid {encoding}: {e.reason} at byte {e.start}"
        ) from None


def parse_index_line(line: str) -> IndexRecord:
    """
    Parse one record line.

    Fields may be separated by any run of whitespace. Raises GrammarError
    (or a subclass) without location info; Index.parse_file adds it.
    """
    fields = line.split()
    it = iter(fields)

    lemma = next(it, None)
    if lemma is None:
        raise GrammarError("Empty record line")
    pos_code = next(it, None)
    if pos_code is None:
        raise GrammarError("Missing part of speech")
    # Only the one-letter codes are valid in a file, not the full names
    pos = _POS_CODES.get(pos_code)
    if pos is None:
        raise UnknownPartOfSpeechError(f"Unknown part of speech: {pos_code!r}")

    sense_count = _parse_count(next(it, None), "synset_cnt")
    pointer_count = _parse_count(next(it, None), "p_cnt")

    pointer_symbols = []
    for i in range(pointer_count):
        code = next(it, None)
        if code is None:
            raise GrammarError(f"Expected {pointer_count} pointer symbols, found {i}")
        pointer_symbols.append(PointerSymbol.from_code(code))

    if next(it, None) is None:
        raise GrammarError("Missing sense_cnt")
    tagged_sense_count = _parse_count(next(it, None), "tagsense_cnt")

    synset_offsets = [
        _parse_count(next(it, None), f"synset_offset {i + 1} of {sense_count}")
        for i in range(sense_count)
    ]

    extra = list(it)
    if extra:
        raise GrammarError(f"{len(extra)} unexpected trailing field(s): {' '.join(extra)!r}")

    return IndexRecord(
        lemma=lemma,
        pos=pos,
        sense_count=sense_count,
        pointer_count=pointer_count,
        pointer_symbols=tuple(pointer_symbols),
        tagged_sense_count=tagged_sense_count,
        synset_offsets=tuple(synset_offsets),
    )


class Index:
    """
    Headword -> IndexRecord tables, one per part of speech.

    A headword may appear under several parts of speech; those entries are
    independent. Populate with parse_file (repeatable, accumulating across
    files), then query. Not safe for concurrent mutation.
    """

    def __init__(self):
        self._tables: Dict[PartOfSpeech, Dict[str, IndexRecord]] = {
            pos: {} for pos in PartOfSpeech
        }

    @classmethod
    def from_files(cls, *paths: Union[str, Path], **kwargs) -> 'Index':
        """Build an index from several files; kwargs go to parse_file."""
        index = cls()
        for path in paths:
            index.parse_file(path, **kwargs)
        return index

    def add(self, record: IndexRecord):
        """Insert a record, replacing any earlier one for the same (pos, lemma)."""
        self._tables[record.pos][record.lemma] = record

    def parse_file(
        self,
        path: Union[str, Path],
        *,
        strict: bool = True,
        encoding: str = 'utf-8',
        show_progress: bool = False,
    ) -> int:
        """
        Parse an index file into this index.

        The file may hold one part of speech (index.noun) or several; each
        line's pos field picks its table.

        Args:
            path: Index file to read
            strict: Raise on the first malformed line (default). When False,
                malformed lines are logged and skipped.
            encoding: Text encoding of the file (ASCII-compatible)
            show_progress: Show a live rich progress panel

        Returns:
            Number of records parsed from this file

        Raises:
            OSError: The file cannot be opened or read
            GrammarError: A line is malformed or not valid in encoding (strict mode only)
        """
        path = Path(path)
        logger.info(f"Parsing {path}")

        parsed = 0
        skipped = 0
        with open(path, 'rb') as f:
            with ProgressDisplay(f"Parsing {path.name}", enabled=show_progress) as progress:
                for line_num, raw in enumerate(f, 1):
                    raw = raw.rstrip(b'\r\n')
                    if raw.startswith(b' ') or not raw.strip():
                        continue

                    try:
                        record = parse_index_line(_decode_line(raw, encoding))
                    except GrammarError as e:
                        shown = raw.decode(encoding, errors='replace')
                        located = e.locate(path, line_num, shown)
                        if strict:
                            raise located from None
                        logger.warning(f"Skipping {located}")
                        skipped += 1
                        continue

                    self.add(record)
                    parsed += 1
                    progress.update(Lines=line_num, Records=parsed, Skipped=skipped)

        logger.info(f"  -> {parsed:,} records from {path.name}")
        if skipped:
            logger.warning(f"  -> {skipped:,} malformed lines skipped in {path.name}")
        return parsed

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    def is_empty(self) -> bool:
        return all(not table for table in self._tables.values())

    def __bool__(self) -> bool:
        return not self.is_empty()

    def count(self, pos: PosLike) -> int:
        """Number of headwords for one part of speech."""
        return len(self._tables[PartOfSpeech.from_code(pos)])

    def contains(self, word: str) -> bool:
        """True if word is a headword under any part of speech."""
        return any(word in table for table in self._tables.values())

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def lookup(self, word: str, pos: PosLike) -> Optional[IndexRecord]:
        """Record for word under pos, or None."""
        return self._tables[PartOfSpeech.from_code(pos)].get(word)

    def lookup_all(self, word: str) -> LemmaLookupResult:
        """Records for word under every part of speech."""
        return LemmaLookupResult(
            lemma=word,
            noun=self.lookup(word, PartOfSpeech.NOUN),
            verb=self.lookup(word, PartOfSpeech.VERB),
            adjective=self.lookup(word, PartOfSpeech.ADJECTIVE),
            adverb=self.lookup(word, PartOfSpeech.ADVERB),
        )

    def words(self, pos: PosLike) -> Iterator[str]:
        """Headwords of one part of speech, sorted."""
        return iter(sorted(self._tables[PartOfSpeech.from_code(pos)]))

    def records(self) -> Iterator[IndexRecord]:
        """Every record, grouped by part of speech, each group sorted by lemma."""
        for pos in PartOfSpeech:
            table = self._tables[pos]
            for lemma in sorted(table):
                yield table[lemma]

    def write_jsonl(self, output_path: Union[str, Path]) -> int:
        """Write every record as one JSON object per line. Returns the count written."""
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"Writing index records to {output_file}")

        count = 0
        with open(output_file, 'wb') as f:
            for record in self.records():
                f.write(orjson.dumps(record.to_dict()) + b'\n')
                count += 1

        logger.info(f"  Wrote {count:,} records")
        return count
