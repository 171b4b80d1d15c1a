"""Tests for configuration loading."""

import pytest

from git_distance.config import DistanceConfig, load_config
from git_distance.exceptions import ConfigurationError, InvalidConfigError


class TestDistanceConfig:
    def test_defaults(self):
        config = DistanceConfig()
        assert config.metric == "levenshtein"
        assert config.list_files is False
        assert config.output_format == "text"
        assert config.verbosity == "normal"
        assert config.git_timeout_seconds == 30

    def test_rejects_bad_timeout(self):
        with pytest.raises(ValueError, match="git_timeout_seconds"):
            DistanceConfig(git_timeout_seconds=0)

    def test_rejects_bad_format(self):
        with pytest.raises(ValueError, match="output_format"):
            DistanceConfig(output_format="xml")  # type: ignore[arg-type]

    def test_verbosity_properties(self):
        assert DistanceConfig(verbosity="verbose").verbose
        assert DistanceConfig(verbosity="quiet").quiet


class TestLoadConfig:
    def test_defaults_without_sources(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == DistanceConfig()

    def test_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config(metric="hamming", list_files=True)
        assert config.metric == "hamming"
        assert config.list_files is True

    def test_none_overrides_are_ignored(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config(metric=None).metric == "levenshtein"

    def test_verbose_flag_maps_to_verbosity(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "git-distance.toml").write_text('metric = "lines"\nlist_files = true\n')
        config = load_config()
        assert config.metric == "lines"
        assert config.list_files is True

    def test_section_table(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "custom.toml"
        path.write_text('[git-distance]\noutput_format = "json"\n')
        assert load_config(config_file=path).output_format == "json"

    def test_explicit_file_beats_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "git-distance.toml").write_text('metric = "lines"\n')
        explicit = tmp_path / "explicit.toml"
        explicit.write_text('metric = "words"\n')
        assert load_config(config_file=explicit).metric == "words"

    def test_env_beats_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "git-distance.toml").write_text('metric = "lines"\n')
        monkeypatch.setenv("GIT_DISTANCE_METRIC", "hamming")
        monkeypatch.setenv("GIT_DISTANCE_LIST_FILES", "yes")
        monkeypatch.setenv("GIT_DISTANCE_GIT_TIMEOUT_SECONDS", "5")
        config = load_config()
        assert config.metric == "hamming"
        assert config.list_files is True
        assert config.git_timeout_seconds == 5

    def test_cli_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GIT_DISTANCE_METRIC", "hamming")
        assert load_config(metric="lcs").metric == "lcs"

    def test_invalid_env_bool(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GIT_DISTANCE_LIST_FILES", "maybe")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "GIT_DISTANCE_LIST_FILES"

    def test_invalid_value(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(git_timeout_seconds=0)
        assert exc_info.value.key == "git_timeout_seconds"

    def test_unknown_key(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "git-distance.toml").write_text("colour = true\n")
        with pytest.raises(InvalidConfigError, match="colour"):
            load_config()

    def test_missing_explicit_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "absent.toml")

    def test_malformed_toml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "git-distance.toml").write_text("metric = \n")
        with pytest.raises(ConfigurationError, match="Invalid project config"):
            load_config()
