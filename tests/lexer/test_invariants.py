"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from minilex.config import ScanConfig, UnrecognizedPolicy
from minilex.lexer import Scanner
from minilex.tokens import RESERVED_KINDS, TokenKind

# Characters every rule understands, plus skipped whitespace
KNOWN_ALPHABET = "abcxyz019+-*/=():<>\n \t\r"


class TestTermination:
    """Every input produces a finite stream with one terminator."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_single_end_of_input(self, source: str) -> None:
        tokens = Scanner(source).tokenize()

        assert len(tokens) >= 1, "Must have at least END_OF_INPUT"
        assert tokens[-1].kind is TokenKind.END_OF_INPUT
        end_count = sum(1 for t in tokens if t.kind is TokenKind.END_OF_INPUT)
        assert end_count == 1, "Must have exactly one END_OF_INPUT token"

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_bounded_number_of_productions(self, source: str) -> None:
        tokens = Scanner(source).tokenize()
        assert len(tokens) <= len(source) + 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_skip_policy_still_terminates(self, source: str) -> None:
        config = ScanConfig(on_unrecognized=UnrecognizedPolicy.SKIP)
        tokens = Scanner(source, config=config).tokenize()

        assert tokens[-1].kind is TokenKind.END_OF_INPUT
        assert len(tokens) <= len(source) + 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_reserved_kinds_never_produced(self, source: str) -> None:
        kinds = {t.kind for t in Scanner(source).tokenize()}
        assert not kinds & RESERVED_KINDS


class TestTextFidelity:
    """Token text is always a verbatim slice of the source."""

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_text_is_source_slice(self, source: str) -> None:
        for token in Scanner(source).tokenize():
            assert source[token._start_offset : token._end_offset] == token.text

    @given(st.text(alphabet=KNOWN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_concatenation_reproduces_source_without_whitespace(self, source: str) -> None:
        tokens = Scanner(source).tokenize()
        combined = "".join(t.text for t in tokens if t.kind is not TokenKind.END_OF_INPUT)

        expected = "".join(c for c in source if c not in " \t\r")
        assert combined == expected

    @given(st.text(alphabet=KNOWN_ALPHABET, max_size=300))
    @settings(max_examples=50)
    def test_only_end_has_empty_text(self, source: str) -> None:
        for token in Scanner(source).tokenize():
            if token.kind is TokenKind.END_OF_INPUT:
                assert token.text == ""
            else:
                assert token.text != ""


class TestCursor:
    """The cursor only moves forward."""

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_cursor_monotonic(self, source: str) -> None:
        scanner = Scanner(source)
        last = scanner.position
        while True:
            token = scanner.next_token()
            assert scanner.position >= last
            assert scanner.position <= len(source)
            last = scanner.position
            if token.kind is TokenKind.END_OF_INPUT:
                break

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_tokens_do_not_overlap(self, source: str) -> None:
        tokens = Scanner(source).tokenize()
        for previous, current in zip(tokens, tokens[1:]):
            assert previous._end_offset <= current._start_offset


class TestDeterminism:
    """Tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first_result = [(t.kind, t.text) for t in Scanner(source).tokenize()]
        second_result = [(t.kind, t.text) for t in Scanner(source).tokenize()]

        assert first_result == second_result

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_iteration_matches_tokenize(self, source: str) -> None:
        assert list(Scanner(source)) == Scanner(source).tokenize()


class TestBoundaryConditions:
    """Test boundary conditions and edge cases."""

    @pytest.mark.parametrize("length", [0, 1, 2, 10, 100, 1000])
    def test_various_identifier_lengths(self, length: int) -> None:
        source = "a" * length
        tokens = Scanner(source).tokenize()

        assert tokens[-1].kind is TokenKind.END_OF_INPUT
        if length:
            assert [(t.kind, t.text) for t in tokens[:-1]] == [(TokenKind.IDENTIFIER, source)]

    @pytest.mark.parametrize("newlines", [0, 1, 10, 100])
    def test_various_newline_counts(self, newlines: int) -> None:
        tokens = Scanner("\n" * newlines).tokenize()

        newline_count = sum(1 for t in tokens if t.kind is TokenKind.NEWLINE)
        assert newline_count == newlines

    @given(st.text(alphabet=st.characters(categories=("Lu", "Ll")), min_size=1, max_size=50))
    @settings(max_examples=50)
    def test_letter_runs_are_single_word(self, source: str) -> None:
        tokens = Scanner(source).tokenize()
        assert len(tokens) == 2
        assert tokens[0].text == source
        assert tokens[0].kind in {
            TokenKind.IDENTIFIER,
            TokenKind.FOR,
            TokenKind.IN,
            TokenKind.RANGE,
            TokenKind.IF,
            TokenKind.ELSE,
            TokenKind.PRINT,
        }
