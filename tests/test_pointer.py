"""Tests for part-of-speech and pointer symbol decoding."""
import pytest

from wordy.errors import GrammarError, UnknownPartOfSpeechError, UnknownPointerError
from wordy.pointer import PartOfSpeech, PointerSymbol


# Pointer codes as documented for WordNet index/data files
DOCUMENTED_CODES = {
    "!": PointerSymbol.ANTONYM,
    "@": PointerSymbol.HYPERNYM,
    "@i": PointerSymbol.INSTANCE_HYPERNYM,
    "~": PointerSymbol.HYPONYM,
    "~i": PointerSymbol.INSTANCE_HYPONYM,
    "#m": PointerSymbol.MEMBER_HOLONYM,
    "#s": PointerSymbol.SUBSTANCE_HOLONYM,
    "#p": PointerSymbol.PART_HOLONYM,
    "%m": PointerSymbol.MEMBER_MERONYM,
    "%s": PointerSymbol.SUBSTANCE_MERONYM,
    "%p": PointerSymbol.PART_MERONYM,
    "=": PointerSymbol.ATTRIBUTE,
    "+": PointerSymbol.DERIVATIONALLY_RELATED_FORM,
    ";": PointerSymbol.DOMAIN_OF_SYNSET,
    "-": PointerSymbol.MEMBER_OF_THIS_DOMAIN,
    ";c": PointerSymbol.DOMAIN_OF_SYNSET_TOPIC,
    "-c": PointerSymbol.MEMBER_OF_DOMAIN_TOPIC,
    ";r": PointerSymbol.DOMAIN_OF_SYNSET_REGION,
    "-r": PointerSymbol.MEMBER_OF_DOMAIN_REGION,
    ";u": PointerSymbol.DOMAIN_OF_SYNSET_USAGE,
    "-u": PointerSymbol.MEMBER_OF_DOMAIN_USAGE,
    "*": PointerSymbol.ENTAILMENT,
    ">": PointerSymbol.CAUSE,
    "^": PointerSymbol.ALSO_SEE,
    "$": PointerSymbol.VERB_GROUP,
    "<": PointerSymbol.PARTICIPLE_OF_VERB,
    "\\": PointerSymbol.PERTAINYM,
    "&": PointerSymbol.SIMILAR_TO,
}


# =============================================================================
# Pointer symbols
# =============================================================================

class TestPointerSymbol:
    """Decoding and encoding of pointer codes."""

    @pytest.mark.parametrize("code,expected", sorted(DOCUMENTED_CODES.items()))
    def test_decode_documented_code(self, code, expected):
        assert PointerSymbol.from_code(code) is expected

    @pytest.mark.parametrize("symbol", list(PointerSymbol))
    def test_code_round_trips(self, symbol):
        assert PointerSymbol.from_code(symbol.code) is symbol

    def test_table_is_exactly_the_documented_set(self):
        assert {s.code for s in PointerSymbol} == set(DOCUMENTED_CODES)
        assert len(PointerSymbol) == len(DOCUMENTED_CODES)

    @pytest.mark.parametrize("code", ["?", "", "@@", "#x", "%", "#", "hypernym", "@ "])
    def test_unknown_code_rejected(self, code):
        with pytest.raises(UnknownPointerError) as exc_info:
            PointerSymbol.from_code(code)
        assert repr(code) in str(exc_info.value)

    def test_unknown_code_is_a_grammar_error(self):
        """Callers catching GrammarError also see pointer failures."""
        with pytest.raises(GrammarError):
            PointerSymbol.from_code("??")


# =============================================================================
# Parts of speech
# =============================================================================

class TestPartOfSpeech:
    """Decoding of the pos field and of user-supplied pos names."""

    @pytest.mark.parametrize("code,expected", [
        ("n", PartOfSpeech.NOUN),
        ("v", PartOfSpeech.VERB),
        ("a", PartOfSpeech.ADJECTIVE),
        ("r", PartOfSpeech.ADVERB),
    ])
    def test_file_codes(self, code, expected):
        assert PartOfSpeech.from_code(code) is expected
        assert expected.code == code

    @pytest.mark.parametrize("name,expected", [
        ("noun", PartOfSpeech.NOUN),
        ("Verb", PartOfSpeech.VERB),
        ("ADJECTIVE", PartOfSpeech.ADJECTIVE),
        ("adverb", PartOfSpeech.ADVERB),
    ])
    def test_full_names(self, name, expected):
        assert PartOfSpeech.from_code(name) is expected

    def test_member_passes_through(self):
        assert PartOfSpeech.from_code(PartOfSpeech.VERB) is PartOfSpeech.VERB

    def test_label(self):
        assert [p.label for p in PartOfSpeech] == ["noun", "verb", "adjective", "adverb"]

    @pytest.mark.parametrize("code", ["s", "x", "", "nn", None])
    def test_unknown_rejected(self, code):
        with pytest.raises(UnknownPartOfSpeechError):
            PartOfSpeech.from_code(code)
