#!/usr/bin/env python3
"""
wordy — Command-line access to WordNet index files.

Usage:
    wordy search dict/index.noun cellophane
    wordy lookup run dict/index.noun dict/index.verb [--json]
    wordy export dict/index.* --output data/index.jsonl

Exit status: 0 found/done, 1 not found, 2 unreadable or malformed file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from wordy.errors import WordyError
from wordy.index import Index, IndexRecord
from wordy.search import MAX_LINE_LENGTH, search


logger = logging.getLogger(__name__)


def format_record(record: IndexRecord) -> str:
    """One-line human summary of a record."""
    pointers = ' '.join(p.code for p in record.pointer_symbols) or '-'
    offsets = ' '.join(f"{o:08d}" for o in record.synset_offsets)
    return (
        f"{record.lemma} ({record.pos.label}): {record.sense_count} senses, "
        f"{record.tagged_sense_count} tagged, pointers [{pointers}], offsets {offsets}"
    )


def _load_index(args) -> Index:
    return Index.from_files(*args.files, strict=not args.lenient, show_progress=args.progress)


def cmd_search(args) -> int:
    with open(args.file, 'rb') as f:
        line = search(f, args.key, max_line_length=args.max_line_length)
    if line is None:
        logger.error(f"{args.key!r} not found in {args.file}")
        return 1
    print(line)
    return 0


def cmd_lookup(args) -> int:
    index = _load_index(args)
    result = index.lookup_all(args.word)
    if not result:
        logger.error(f"{args.word!r} not found")
        return 1

    for record in result.found():
        if args.json:
            print(orjson.dumps(record.to_dict()).decode())
        else:
            print(format_record(record))
    return 0


def cmd_export(args) -> int:
    index = _load_index(args)
    index.write_jsonl(args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordy',
        description='Look up headwords in WordNet index files',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p_search = subparsers.add_parser('search', help='Binary-search a sorted index file on disk')
    p_search.add_argument('file', type=Path, help='Sorted index file')
    p_search.add_argument('key', help='Headword to find')
    p_search.add_argument('--max-line-length', type=int, default=MAX_LINE_LENGTH,
                          help=f'Longest line in the file (default: {MAX_LINE_LENGTH:,})')
    p_search.set_defaults(func=cmd_search)

    p_lookup = subparsers.add_parser('lookup', help='Parse index files and show every record for a headword')
    p_lookup.add_argument('word', help='Headword to look up')
    _add_parse_arguments(p_lookup)
    p_lookup.add_argument('--json', action='store_true', help='Print records as JSON')
    p_lookup.set_defaults(func=cmd_lookup)

    p_export = subparsers.add_parser('export', help='Parse index files and write records as JSONL')
    _add_parse_arguments(p_export)
    p_export.add_argument('-o', '--output', type=Path, required=True, help='Output JSONL file')
    p_export.set_defaults(func=cmd_export)

    return parser


def _add_parse_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('files', type=Path, nargs='+', help='Index files to parse')
    parser.add_argument('--lenient', action='store_true',
                        help='Skip malformed lines instead of stopping')
    parser.add_argument('--progress', action='store_true',
                        help='Show a live progress panel while parsing')


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        return args.func(args)
    except (OSError, WordyError) as e:
        logger.error(str(e))
        return 2


if __name__ == '__main__':
    sys.exit(main())
