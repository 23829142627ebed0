# topmark:header:start
#
#   project      : oneconf
#   file         : test_tokenizer_property.py
#   file_relpath : tests/args/test_tokenizer_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the tokenizer."""

from __future__ import annotations

from hypothesis import given, settings

from oneconf.args import tokenize
from tests.conftest import mark_hypothesis_slow
from tests.strategies_oneconf import s_argv, s_word


@settings(max_examples=200)
@given(words=s_argv())
def test_every_token_is_accounted_for(words: list[str]) -> None:
    """No option is both boolean and valued; positionals come from argv."""
    parsed = tokenize(words)

    assert not (parsed.booleans & set(parsed.values))
    for positional in parsed.positionals:
        assert positional in words


@given(words=s_argv(), tail=s_argv())
def test_everything_after_terminator_is_positional(words: list[str], tail: list[str]) -> None:
    """Tokens after the first ``--`` end up verbatim at the end of positionals."""
    argv: list[str] = [w for w in words if w != "--"] + ["--", *tail]
    parsed = tokenize(argv)

    assert parsed.positionals[len(parsed.positionals) - len(tail) :] == tuple(tail)


@given(words=s_argv().map(lambda ws: [w for w in ws if not w.startswith("-")]))
def test_plain_words_are_positional(words: list[str]) -> None:
    """Without options, argv is returned unchanged as positionals."""
    parsed = tokenize(words)

    assert parsed.positionals == tuple(words)
    assert not parsed.booleans and not parsed.values


@given(value=s_word())
def test_long_option_takes_following_word(value: str) -> None:
    """``--opt WORD`` always pairs the option with the word."""
    assert tokenize(["--opt", value]).values == {"opt": value}


@mark_hypothesis_slow
@settings(max_examples=5000, deadline=None)
@given(words=s_argv())
def test_tokenize_is_deterministic_and_total(words: list[str]) -> None:
    """Tokenizing never fails and is repeatable on any mix of options and words."""
    assert tokenize(words) == tokenize(words)
