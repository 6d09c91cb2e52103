from __future__ import annotations

from pathlib import Path

import pytest

from mobilizer.config import DEFAULT_SAVE_PATH, MobilizerConfig
from mobilizer.tools.artifacts_fs import ArtifactScopeError, RunArtifacts


class TestMobilizerConfig:
    def test_defaults(self):
        config = MobilizerConfig.from_env({})

        assert config.backend_url is None
        assert config.backend_save_path == DEFAULT_SAVE_PATH
        assert config.max_sections == 8
        assert config.goeye_override
        assert config.runs_dir == Path("runs")

    def test_reads_environment(self):
        config = MobilizerConfig.from_env(
            {
                "MOBILIZER_BACKEND_URL": "https://builder.example.com",
                "MOBILIZER_BACKEND_TOKEN": "t0k",
                "MOBILIZER_BACKEND_TIMEOUT_SEC": "5",
                "MOBILIZER_BACKEND_MAX_RETRIES": "3",
                "MOBILIZER_MAX_SECTIONS": "4",
                "MOBILIZER_DISABLE_GOEYE": "yes",
                "MOBILIZER_RUNS_DIR": "/tmp/mobilizer-runs",
            }
        )

        assert config.backend_url == "https://builder.example.com"
        assert config.backend_token == "t0k"
        assert config.backend_timeout_sec == 5.0
        assert config.backend_max_retries == 3
        assert config.max_sections == 4
        assert not config.goeye_override
        assert config.runs_dir == Path("/tmp/mobilizer-runs")

    def test_empty_url_is_unset(self):
        assert MobilizerConfig.from_env({"MOBILIZER_BACKEND_URL": ""}).backend_url is None

    def test_with_overrides_skips_none(self):
        config = MobilizerConfig(max_sections=6).with_overrides(max_sections=None, backend_url="http://x")

        assert config.max_sections == 6
        assert config.backend_url == "http://x"


class TestRunArtifacts:
    def test_for_run_slugs_theme_name(self, tmp_path):
        artifacts = RunArtifacts.for_run(tmp_path, "Dawn Theme v15", run_id="r1")

        assert artifacts.root == (tmp_path / "r1-dawn-theme-v15").resolve()
        assert artifacts.root.is_dir()

    def test_write_json_nested(self, tmp_path):
        artifacts = RunArtifacts(root=tmp_path)
        path = artifacts.write_json("out/data.json", {"a": 1})

        assert path.read_text(encoding="utf-8") == '{\n  "a": 1\n}\n'

    @pytest.mark.parametrize("rel", ["../escape.txt", "a/../../escape.txt"])
    def test_traversal_rejected(self, tmp_path, rel):
        artifacts = RunArtifacts(root=tmp_path / "run")
        with pytest.raises(ArtifactScopeError):
            artifacts.write_text(rel, "x")
