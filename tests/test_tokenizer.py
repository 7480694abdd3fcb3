"""Tests for instruction tokenizing."""

from payinstruct.instruction.tokenizer import WHITESPACE_CHARACTERS, tokenize


def test_splits_on_plain_spaces():
    assert tokenize("DEBIT 500 USD") == ["DEBIT", "500", "USD"]


def test_collapses_runs_and_trims_edges():
    assert tokenize("   DEBIT    500\t\tUSD  ") == ["DEBIT", "500", "USD"]


def test_every_listed_whitespace_character_separates_tokens():
    for ch in WHITESPACE_CHARACTERS:
        assert tokenize(f"a{ch}b") == ["a", "b"], repr(ch)


def test_unicode_spaces_and_ethiopic_wordspace():
    text = "DEBIT\N{NO-BREAK SPACE}500\N{IDEOGRAPHIC SPACE}USD\N{ETHIOPIC WORDSPACE}FROM\r\nACCOUNT"
    assert tokenize(text) == ["DEBIT", "500", "USD", "FROM", "ACCOUNT"]


def test_characters_outside_the_set_stay_in_tokens():
    # U+0085 and U+2028 are whitespace to str.split() but not to the tokenizer
    assert tokenize("a\x85b c\N{LINE SEPARATOR}d") == [
        "a\x85b",
        "c\N{LINE SEPARATOR}d",
    ]


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize(" \t\n ") == []


def test_retokenizing_normalized_text_is_a_no_op():
    tokens = tokenize("CREDIT\t300  NGN\N{THIN SPACE}TO ACCOUNT acc-002")
    assert tokenize(" ".join(tokens)) == tokens
