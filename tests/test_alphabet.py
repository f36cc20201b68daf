import string

from core.domain.alphabet import ALPHABET, ALPHABET_BYTES, filter_to_alphabet


def test_alphabet_has_93_distinct_printable_characters():
    assert len(ALPHABET) == 93
    assert len(set(ALPHABET)) == 93
    assert all(ch in string.printable and not ch.isspace() for ch in ALPHABET)


def test_alphabet_covers_digits_and_letters():
    for ch in string.digits + string.ascii_letters:
        assert ch in ALPHABET


def test_single_quote_is_the_only_excluded_symbol():
    excluded = set(string.punctuation) - set(ALPHABET)
    assert excluded == {"'"}


def test_filter_keeps_exact_members_in_order():
    raw = b"\x00A\xffb'7\x80~ \n"
    assert filter_to_alphabet(raw) == "Ab7~"


def test_filter_never_keeps_high_bytes():
    assert filter_to_alphabet(bytes(range(128, 256))) == ""


def test_filter_over_every_byte_value_yields_alphabet_once():
    survivors = filter_to_alphabet(bytes(range(256)))
    assert len(survivors) == 93
    assert sorted(survivors) == sorted(ALPHABET)
    assert len(ALPHABET_BYTES) == 93


def test_filter_empty_input():
    assert filter_to_alphabet(b"") == ""
