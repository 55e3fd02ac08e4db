#!/usr/bin/env python3
"""
Unit tests for wf_hints/matcher.py
"""

import sys
import pytest

sys.path.insert(0, '.')
from wf_hints.matcher import (
    canonicalize,
    resolve_exact,
    fuzzy_match,
    best_suggestion,
    format_suggestion,
)


class TestCanonicalize:
    """Tests for canonicalize function."""

    def test_strips_hyphens(self):
        assert canonicalize("5-approaches") == "5approaches"

    def test_strips_underscores(self):
        assert canonicalize("commit_review") == "commitreview"

    def test_lowercases(self):
        assert canonicalize("5Approaches") == "5approaches"

    def test_mixed_delimiters_and_case(self):
        assert canonicalize("My_Cool-Workflow") == "mycoolworkflow"

    def test_already_clean(self):
        assert canonicalize("cr") == "cr"

    def test_empty_string(self):
        assert canonicalize("") == ""

    @pytest.mark.parametrize("name", ["A-b_C", "--__", "x", "Release_Notes-v2"])
    def test_idempotent(self, name):
        assert canonicalize(canonicalize(name)) == canonicalize(name)


class TestResolveExact:
    """Tests for resolve_exact function."""

    KEYS = ["5-approaches", "commit_review", "cr", "linus-torvalds"]

    def test_exact_name(self):
        assert resolve_exact("5-approaches", self.KEYS) == "5-approaches"

    def test_exact_alias(self):
        assert resolve_exact("cr", self.KEYS) == "cr"

    def test_canonical_without_delimiter(self):
        assert resolve_exact("5approaches", self.KEYS) == "5-approaches"

    def test_canonical_case(self):
        assert resolve_exact("5Approaches", self.KEYS) == "5-approaches"
        assert resolve_exact("CommitReview", self.KEYS) == "commit_review"

    def test_canonical_swapped_delimiter(self):
        assert resolve_exact("linus_torvalds", self.KEYS) == "linus-torvalds"

    def test_prefix_does_not_resolve(self):
        """A partially typed name must never resolve."""
        assert resolve_exact("5app", self.KEYS) is None
        assert resolve_exact("commit", self.KEYS) is None

    def test_unknown_returns_none(self):
        assert resolve_exact("xyz", self.KEYS) is None

    def test_empty_candidates(self):
        assert resolve_exact("cr", []) is None

    def test_empty_input_returns_none(self):
        assert resolve_exact("", self.KEYS) is None

    def test_delimiters_only_input_returns_none(self):
        assert resolve_exact("--", ["a", "b"]) is None

    def test_exact_match_beats_earlier_canonical_match(self):
        assert resolve_exact("Foo", ["foo", "Foo"]) == "Foo"

    def test_earliest_canonical_match_wins(self):
        assert resolve_exact("FOO", ["f-oo", "fo_o", "foo"]) == "f-oo"


class TestFuzzyMatch:
    """Tests for fuzzy_match function."""

    def test_exact_excludes_prefix_matches(self):
        assert fuzzy_match("cr", ["cr", "crab", "create"]) == ["cr"]

    def test_prefix_when_no_exact(self):
        assert fuzzy_match("cra", ["cr", "crab", "create"]) == ["crab"]

    def test_prefix_sorted_by_canonical_length(self):
        result = fuzzy_match("r", ["review-calls", "rc", "run-tests"])
        assert result == ["rc", "run-tests", "review-calls"]

    def test_sort_uses_canonical_length(self):
        # "a-b-c-d" is 7 chars but canonical "abcd" is shorter than "abcde"
        assert fuzzy_match("a", ["abcde", "a-b-c-d"]) == ["a-b-c-d", "abcde"]

    def test_equal_lengths_keep_candidate_order(self):
        assert fuzzy_match("a", ["a2", "a1", "a3"]) == ["a2", "a1", "a3"]

    def test_default_limit_is_3(self):
        assert len(fuzzy_match("a", ["a1", "a2", "a3", "a4", "a5"])) == 3

    def test_custom_limit(self):
        assert len(fuzzy_match("a", ["a1", "a2", "a3", "a4", "a5"], 2)) == 2

    def test_exact_matches_capped_at_limit(self):
        result = fuzzy_match("ab", ["a-b", "a_b", "AB", "ab"], limit=2)
        assert result == ["a-b", "a_b"]

    def test_query_is_canonicalized(self):
        assert fuzzy_match("5_App", ["5-approaches"]) == ["5-approaches"]

    def test_empty_query(self):
        assert fuzzy_match("", ["a", "b"]) == []

    def test_delimiter_only_query(self):
        assert fuzzy_match("-_", ["a", "b"]) == []

    def test_non_prefix_substring_not_matched(self):
        assert fuzzy_match("pproaches", ["5-approaches"]) == []

    def test_no_matches(self):
        assert fuzzy_match("xyz", ["foo", "bar"]) == []


class TestBestSuggestion:
    """Tests for best_suggestion function."""

    CANDIDATES = ["5-approaches", "commit_review", "cr", "linus-torvalds", "quick-fix"]

    def test_canonical_match(self):
        assert best_suggestion("5approaches", self.CANDIDATES) == "5-approaches"
        assert best_suggestion("CR", self.CANDIDATES) == "cr"

    def test_prefix_match(self):
        assert best_suggestion("5app", self.CANDIDATES) == "5-approaches"
        assert best_suggestion("commit", self.CANDIDATES) == "commit_review"
        assert best_suggestion("lin", self.CANDIDATES) == "linus-torvalds"
        assert best_suggestion("q", self.CANDIDATES) == "quick-fix"

    def test_exact_preferred_over_longer_prefix(self):
        assert best_suggestion("cr", self.CANDIDATES) == "cr"

    def test_shortest_prefix_first(self):
        assert best_suggestion("c", self.CANDIDATES) == "cr"

    def test_no_match(self):
        assert best_suggestion("xyz", self.CANDIDATES) is None

    def test_empty_query(self):
        assert best_suggestion("", self.CANDIDATES) is None

    def test_empty_candidates(self):
        assert best_suggestion("anything", []) is None


class TestFormatSuggestion:
    """Tests for format_suggestion function."""

    def test_name_only_without_aliases(self):
        assert format_suggestion("commit-review", []) == "commit-review"

    def test_single_alias(self):
        assert format_suggestion("commit-review", ["cr"]) == "commit-review (cr)"

    def test_aliases_joined_with_pipe(self):
        assert format_suggestion("commit-review", ["cr", "review"]) == "commit-review (cr | review)"

    def test_default_max_aliases_is_3(self):
        assert format_suggestion("wf", ["a", "b", "c", "d"]) == "wf (a | b | c)"

    def test_custom_max_aliases(self):
        assert format_suggestion("wf", ["a", "b", "c", "d", "e"], 2) == "wf (a | b)"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
