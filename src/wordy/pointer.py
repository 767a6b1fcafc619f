"""
pointer.py — Part-of-speech and pointer symbol codes of WordNet index files.

Both code sets are fixed by the file format. Decoding is total over the
documented codes and raises on anything else; there is no fallback value.

Usage:
    from wordy.pointer import PartOfSpeech, PointerSymbol

    PartOfSpeech.from_code('n')      # PartOfSpeech.NOUN
    PointerSymbol.from_code('@')     # PointerSymbol.HYPERNYM
    PointerSymbol.HYPONYM.code       # '~'
"""

from enum import Enum
from typing import Dict

from wordy.errors import UnknownPartOfSpeechError, UnknownPointerError


class PartOfSpeech(Enum):
    """Syntactic category of an index line (second field)."""

    NOUN = 'n'
    VERB = 'v'
    ADJECTIVE = 'a'
    ADVERB = 'r'

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_code(cls, code: str) -> 'PartOfSpeech':
        """
        Decode a part of speech.

        Accepts the one-letter file code ('n', 'v', 'a', 'r') or the full
        name ('noun', 'Verb', ...).
        """
        if isinstance(code, cls):
            return code
        try:
            return _POS_BY_NAME[code.lower()]
        except (KeyError, AttributeError):
            raise UnknownPartOfSpeechError(f"Unknown part of speech: {code!r}") from None


_POS_BY_NAME: Dict[str, PartOfSpeech] = {}
for _pos in PartOfSpeech:
    _POS_BY_NAME[_pos.code] = _pos
    _POS_BY_NAME[_pos.label] = _pos
del _pos


class PointerSymbol(Enum):
    """Semantic or lexical relation type, keyed by its index-file code."""

    ANTONYM = '!'
    HYPERNYM = '@'
    INSTANCE_HYPERNYM = '@i'
    HYPONYM = '~'
    INSTANCE_HYPONYM = '~i'
    MEMBER_HOLONYM = '#m'
    SUBSTANCE_HOLONYM = '#s'
    PART_HOLONYM = '#p'
    MEMBER_MERONYM = '%m'
    SUBSTANCE_MERONYM = '%s'
    PART_MERONYM = '%p'
    ATTRIBUTE = '='
    DERIVATIONALLY_RELATED_FORM = '+'
    DOMAIN_OF_SYNSET = ';'
    MEMBER_OF_THIS_DOMAIN = '-'
    DOMAIN_OF_SYNSET_TOPIC = ';c'
    MEMBER_OF_DOMAIN_TOPIC = '-c'
    DOMAIN_OF_SYNSET_REGION = ';r'
    MEMBER_OF_DOMAIN_REGION = '-r'
    DOMAIN_OF_SYNSET_USAGE = ';u'
    MEMBER_OF_DOMAIN_USAGE = '-u'

    # Verbs
    ENTAILMENT = '*'
    CAUSE = '>'
    ALSO_SEE = '^'
    VERB_GROUP = '$'

    # Adjectives / adverbs
    PARTICIPLE_OF_VERB = '<'
    PERTAINYM = '\\'  # "derived from adjective" on adverbs
    SIMILAR_TO = '&'

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> 'PointerSymbol':
        """Decode a pointer code, raising UnknownPointerError if it is not in the table."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownPointerError(f"Unknown pointer symbol: {code!r}") from None
