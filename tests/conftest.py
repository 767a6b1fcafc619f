"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


# License header as it appears at the top of every WordNet index file
HEADER_LINES = [
    "  1 This software and database is being provided to you, the LICENSEE, by  ",
    "  2 Princeton University under the following license.  By obtaining, using  ",
    "  3 and/or copying this software and database, you agree that you have  ",
]

NOUN_LINES = [
    "apple n 2 3 @ ~ %p 2 1 07739125 12633994  ",
    "bank n 3 4 @ ~ #m + 3 2 09213565 08420278 09213434  ",
    "cellophane n 1 2 @ + 1 0 14937713  ",
    "dog n 7 5 @ ~ #m #p %p 7 1 02084071 10114209 10023039 09886220 07676602 03907626 02712903  ",
    "hot_dog n 2 2 @ ~ 2 0 07697537 10187710  ",
    "run n 3 3 @ ~ + 3 1 00189565 07461050 00795720  ",
    "zebra n 1 3 @ ~ %m 1 0 02391049  ",
]

VERB_LINES = [
    "bank v 2 2 @ + 2 0 02343056 01353225  ",
    "dog v 2 2 @ ~ 2 0 02001858 01927653  ",
    "run v 3 4 @ ~ * $ 3 3 01926311 02075049 01930374  ",
]

ADJ_LINES = [
    "fast a 2 2 ! & 2 1 00976508 00979366  ",
    "happy a 2 4 ! & + = 2 2 01148283 01048762  ",
]

ADV_LINES = [
    "fast r 2 1 ! 2 1 00086000 00086208  ",
    "happily r 1 2 ! \\ 1 1 00198631  ",
]


def write_lines(path: Path, lines, header=True) -> Path:
    """Write an index file: optional license header, then one record per line."""
    body = (HEADER_LINES if header else []) + list(lines)
    path.write_bytes(("\n".join(body) + "\n").encode("utf-8"))
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def noun_file(temp_dir):
    """index.noun-style file with license header."""
    return write_lines(temp_dir / "index.noun", NOUN_LINES)


@pytest.fixture
def index_files(temp_dir):
    """One index file per part of speech."""
    return [
        write_lines(temp_dir / "index.noun", NOUN_LINES),
        write_lines(temp_dir / "index.verb", VERB_LINES),
        write_lines(temp_dir / "index.adj", ADJ_LINES),
        write_lines(temp_dir / "index.adv", ADV_LINES),
    ]


@pytest.fixture
def combined_file(temp_dir):
    """Single file tagging each line's part of speech inline."""
    lines = sorted(NOUN_LINES + VERB_LINES + ADJ_LINES + ADV_LINES)
    return write_lines(temp_dir / "index.all", lines)
