# topmark:header:start
#
#   project      : oneconf
#   file         : strategies_oneconf.py
#   file_relpath : tests/strategies_oneconf.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for argument vectors and numeric literals."""

from __future__ import annotations

from hypothesis import strategies as st

# Characters allowed in option names and plain words.
NAME_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz0123456789_"


def s_word() -> st.SearchStrategy[str]:
    """Tokens that never start with a dash (values and positionals)."""
    return st.text(alphabet=NAME_ALPHABET + ".:/", min_size=1, max_size=8)


def s_long_option() -> st.SearchStrategy[str]:
    """Long option tokens such as ``--port``."""
    return st.text(alphabet=NAME_ALPHABET, min_size=2, max_size=8).map(lambda s: f"--{s}")


def s_short_cluster() -> st.SearchStrategy[str]:
    """Short option clusters such as ``-v`` or ``-abc``."""
    return st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=4).map(
        lambda s: f"-{s}"
    )


def s_argv() -> st.SearchStrategy[list[str]]:
    """Arbitrary mixes of options, words and the ``--`` terminator."""
    return st.lists(
        st.one_of(s_word(), s_long_option(), s_short_cluster(), st.just("--")),
        max_size=12,
    )


def s_uint_literal(bits: int = 64) -> st.SearchStrategy[tuple[int, str]]:
    """Pairs of an unsigned value and one of its accepted spellings."""

    def spell(value: int) -> st.SearchStrategy[tuple[int, str]]:
        return st.sampled_from(
            [
                (value, str(value)),
                (value, f"0x{value:x}"),
                (value, f"0x{value:X}"),
                (value, f"0o{value:o}"),
                (value, f"0b{value:b}"),
            ]
        )

    return st.integers(min_value=0, max_value=(1 << bits) - 1).flatmap(spell)
