"""
Property-based tests for lexer invariants using Hypothesis.

These hold for any input, so they run over generated sources rather
than hand-picked examples.

Author: Prakhar Nagpal
"""

import re
import string
import unittest
import sys
import os

from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monk.lexer import scan, TokenType
from monk.lexer.errors import DiagnosticKind

# Characters some scanning rule accepts; quotes may still leave a string open.
VALID_ALPHABET = "abcfilnrtxyz_019 \n\t\r(){},.-+;*/!=<>\"'"

DISCARDED = re.compile(r"(?: |\n|//[^\n]*)*")


class TestBasicInvariants(unittest.TestCase):
    """Invariants that hold for every source string."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_single_eof(self, source):
        tokens, _ = scan(source)
        self.assertEqual(tokens[-1].type, TokenType.EOF)
        self.assertEqual(tokens[-1].lexeme, "")
        self.assertEqual(sum(1 for t in tokens if t.type == TokenType.EOF), 1)

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_spans_are_ordered_and_disjoint(self, source):
        tokens, _ = scan(source)
        previous_end = 0
        for token in tokens:
            start, end = token.span
            self.assertGreaterEqual(start, previous_end)
            self.assertGreaterEqual(end, start)
            previous_end = end
        self.assertEqual(tokens[-1].span, (len(source), len(source)))

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_lines_never_decrease(self, source):
        tokens, diagnostics = scan(source)
        lines = [t.line for t in tokens]
        self.assertEqual(lines, sorted(lines))
        self.assertEqual(tokens[-1].line, source.count("\n") + 1)
        for diagnostic in diagnostics:
            self.assertGreaterEqual(diagnostic.line, 1)
            self.assertGreaterEqual(diagnostic.column, 1)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_lexeme_matches_source(self, source):
        tokens, _ = scan(source)
        for token in tokens:
            start, end = token.span
            if token.type == TokenType.STRING:
                self.assertEqual(token.lexeme, source[start + 1:end - 1])
                self.assertIn(source[start], "\"'")
                self.assertEqual(source[start], source[end - 1])
            else:
                self.assertEqual(token.lexeme, source[start:end])


class TestReconstruction(unittest.TestCase):
    """Token spans plus discarded spans rebuild the input."""

    @given(st.text(alphabet=VALID_ALPHABET, max_size=300))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.filter_too_much])
    def test_gaps_are_whitespace_or_comments(self, source):
        tokens, diagnostics = scan(source)
        assume(not diagnostics)

        rebuilt = []
        cursor = 0
        for token in tokens:
            start, end = token.span
            gap = source[cursor:start]
            self.assertIsNotNone(DISCARDED.fullmatch(gap), repr(gap))
            rebuilt.append(gap)
            rebuilt.append(source[start:end])
            cursor = end
        self.assertEqual("".join(rebuilt), source)

    @given(st.lists(st.sampled_from(["let", "lets", "fn", "fnord", "x", "_", "if", "iffy"]), max_size=20))
    def test_keywords_only_on_exact_spelling(self, words):
        tokens, _ = scan(" ".join(words))
        self.assertEqual([t.lexeme for t in tokens[:-1]], words)
        for token in tokens[:-1]:
            self.assertEqual(token.is_keyword, token.lexeme in ("let", "fn", "if"))


def _diagnostic_extent(source, diagnostic):
    """Offsets a diagnostic accounts for, starting at its location."""
    start = diagnostic.location.offset
    if diagnostic.kind == DiagnosticKind.UNTERMINATED_LITERAL:
        return range(start, len(source))
    if diagnostic.kind == DiagnosticKind.NUMERIC_OVERFLOW:
        end = start
        while end < len(source) and source[end] in string.digits:
            end += 1
        return range(start, end)
    return range(start, start + 1)


class TestCoverage(unittest.TestCase):
    """Every character ends up in one token, one diagnostic, or discarded input."""

    @given(st.text(max_size=300))
    @settings(max_examples=300)
    def test_every_character_accounted_for(self, source):
        self._check_coverage(source)

    @given(st.text(alphabet=VALID_ALPHABET + "\"'@#", max_size=300))
    @settings(max_examples=300)
    def test_every_character_accounted_for_in_program_text(self, source):
        self._check_coverage(source)

    def _check_coverage(self, source):
        tokens, diagnostics = scan(source)

        owners = [0] * len(source)
        for token in tokens:
            start, end = token.span
            for offset in range(start, end):
                owners[offset] += 1
        for diagnostic in diagnostics:
            extent = _diagnostic_extent(source, diagnostic)
            self.assertGreater(len(extent), 0, str(diagnostic))
            for offset in extent:
                owners[offset] += 1
        self.assertLessEqual(max(owners, default=0), 1)

        index = 0
        while index < len(source):
            if owners[index]:
                index += 1
            elif source[index] in " \n":
                index += 1
            elif source.startswith("//", index):
                newline = source.find("\n", index)
                index = len(source) if newline == -1 else newline
            else:
                self.fail(f"character {source[index]!r} at {index} was dropped")


if __name__ == '__main__':
    unittest.main()
