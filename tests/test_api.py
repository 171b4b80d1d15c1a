"""Tests for the compare_refs entry point."""

import pytest

from git_distance import compare_refs
from git_distance.config import DistanceConfig
from git_distance.exceptions import AmbiguousMetricError, UnknownMetricError


class TestCompareRefs:
    def test_default_metric(self, git_repo):
        report = compare_refs("main", "feature", repo_path=str(git_repo), config=DistanceConfig())
        assert report.metric == "levenshtein"
        assert [(r.identifier, r.value) for r in report.rows] == [
            ("a.txt", 6),
            ("b.txt", 6),
            ("gone.txt", 3),
            ("new.txt", 5),
        ]
        assert report.total == 20

    def test_named_metric(self, git_repo):
        report = compare_refs("main", "feature", metric="additions", repo_path=str(git_repo))
        assert [r.value for r in report.rows] == [6, 6, -3, 5]
        assert report.total == 14

    def test_metric_from_config(self, git_repo):
        config = DistanceConfig(metric="lines")
        report = compare_refs("main", "feature", repo_path=str(git_repo), config=config)
        assert report.total == 1

    def test_single_ref_compares_current_branch(self, git_repo):
        # current branch is feature, so this measures feature -> main
        report = compare_refs("main", metric="additions", repo_path=str(git_repo))
        assert report.total == -14

    def test_restrict_files(self, git_repo):
        report = compare_refs("main", "feature", repo_path=str(git_repo), files=["gone.txt"])
        assert report.total == 3

    def test_observer(self, git_repo):
        seen = []
        compare_refs("main", "feature", repo_path=str(git_repo), observer=seen.append)
        assert [r.identifier for r in seen] == ["a.txt", "b.txt", "gone.txt", "new.txt"]

    def test_ambiguous_metric_fails_before_git(self, tmp_path):
        with pytest.raises(AmbiguousMetricError):
            compare_refs(
                "main",
                "feature",
                metric=["hamming", "lines"],
                repo_path=str(tmp_path / "does-not-exist"),
                config=DistanceConfig(),
            )

    def test_unknown_metric(self, tmp_path):
        with pytest.raises(UnknownMetricError):
            compare_refs("main", "feature", metric="cosine", repo_path=str(tmp_path), config=DistanceConfig())

    def test_empty_metric_list_falls_back_to_config(self, git_repo):
        config = DistanceConfig(metric="additions")
        report = compare_refs("main", "feature", metric=[], repo_path=str(git_repo), config=config)
        assert report.metric == "additions"
        assert report.total == 14
