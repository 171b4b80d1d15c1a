"""Tests for Jaro and Jaro-Winkler."""

import pytest

from git_distance.metrics.jaro import (
    jaro_similarity,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)


class TestJaroSimilarity:
    def test_martha(self):
        assert jaro_similarity("MARTHA", "MARHTA") == pytest.approx(17 / 18)

    def test_dixon(self):
        assert jaro_similarity("DIXON", "DICKSONX") == pytest.approx(0.76667, abs=1e-4)

    def test_crate_trace(self):
        assert jaro_similarity("CRATE", "TRACE") == pytest.approx(0.73333, abs=1e-4)

    def test_no_matches(self):
        assert jaro_similarity("abc", "xyz") == 0.0


class TestJaroWinkler:
    def test_martha_distance(self):
        distance = jaro_winkler_distance("MARTHA", "MARHTA")
        assert round(distance, 3) == 0.039

    def test_dixon_prefix_bonus(self):
        assert jaro_winkler_similarity("DIXON", "DICKSONX") == pytest.approx(0.81333, abs=1e-4)

    def test_no_bonus_without_common_prefix(self):
        assert jaro_winkler_similarity("CRATE", "TRACE") == jaro_similarity("CRATE", "TRACE")

    def test_prefix_capped_at_four(self):
        a, b = "abcdefgh", "abcdefxy"
        jaro = jaro_similarity(a, b)
        assert jaro_winkler_similarity(a, b) == pytest.approx(jaro + 0.4 * (1 - jaro))

    def test_both_empty(self):
        assert jaro_winkler_distance("", "") == 0

    def test_one_empty(self):
        assert jaro_winkler_distance("x", "") == 1
        assert jaro_winkler_distance("", "x") == 1

    def test_no_matches_is_one(self):
        assert jaro_winkler_distance("abc", "xyz") == 1.0

    def test_identical(self):
        assert jaro_winkler_distance("hello\n", "hello\n") == 0.0

    @pytest.mark.parametrize(
        "a,b",
        [("MARTHA", "MARHTA"), ("DIXON", "DICKSONX"), ("abc", ""), ("line1\n", "line2\n")],
    )
    def test_symmetric(self, a, b):
        assert jaro_winkler_distance(a, b) == pytest.approx(jaro_winkler_distance(b, a))

    @pytest.mark.parametrize("a,b", [("a", "b"), ("ab", "abc"), ("kitten", "sitting")])
    def test_in_unit_interval(self, a, b):
        assert 0.0 <= jaro_winkler_distance(a, b) <= 1.0
