"""Tests for deployment detection and settings resolution."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from magazine_search.core.exceptions import ConfigurationError
from magazine_search.infrastructure import DeploymentEnvironment, Settings
from magazine_search.infrastructure.environment import (
    DEFAULT_MCP_PATH,
    DEFAULT_PORT,
    MANAGED_ROOT,
    REPO_ROOT,
)


class TestDeploymentEnvironment:
    def test_local_by_default(self):
        assert DeploymentEnvironment.detect({}) is DeploymentEnvironment.LOCAL

    def test_managed_when_vercel(self):
        assert DeploymentEnvironment.detect({"VERCEL": "1"}) is DeploymentEnvironment.MANAGED

    def test_explicit_wins(self):
        env = {"VERCEL": "1", "DEPLOYMENT_ENV": "LOCAL"}
        assert DeploymentEnvironment.detect(env) is DeploymentEnvironment.LOCAL

    def test_unknown_explicit(self):
        with pytest.raises(ConfigurationError, match="Unknown DEPLOYMENT_ENV: cloud"):
            DeploymentEnvironment.detect({"DEPLOYMENT_ENV": "cloud"})

    def test_managed_candidates(self, temp_dir):
        roots = DeploymentEnvironment.MANAGED.candidate_roots(temp_dir)
        assert roots == [MANAGED_ROOT, temp_dir, REPO_ROOT]

    def test_managed_resolves_from_cwd(self, temp_dir):
        (temp_dir / "blogposts.en.json").write_text("[]", encoding="utf-8")
        resolved = DeploymentEnvironment.MANAGED.resolve("blogposts.en.json", cwd=temp_dir)
        if not (MANAGED_ROOT / "blogposts.en.json").exists():
            assert resolved == temp_dir / "blogposts.en.json"

    def test_local_uses_repo_root(self):
        assert DeploymentEnvironment.LOCAL.resolve("nothing-here.json") == REPO_ROOT / "nothing-here.json"


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.port == DEFAULT_PORT
        assert settings.mcp_path == DEFAULT_MCP_PATH
        assert settings.blog_data_path == REPO_ROOT / "blogposts.en.json"
        assert settings.ui_assets_dir == REPO_ROOT / "ui-sdk" / "dist"
        assert settings.widget_prebuilt_dir == settings.ui_assets_dir
        assert settings.production is False
        assert settings.allowed_origins == ()

    def test_explicit_paths_win(self):
        settings = Settings.from_env(
            {
                "VERCEL": "1",
                "BLOG_DATA_PATH": "/data/posts.json",
                "UI_ASSETS_DIR": "/assets",
                "WIDGET_PREBUILT_DIR": "/prebuilt",
            }
        )
        assert settings.deployment is DeploymentEnvironment.MANAGED
        assert settings.blog_data_path == Path("/data/posts.json")
        assert settings.ui_assets_dir == Path("/assets")
        assert settings.widget_prebuilt_dir == Path("/prebuilt")

    def test_production_cors(self):
        settings = Settings.from_env(
            {"APP_ENV": "Production", "ALLOWED_ORIGIN": "https://a.example, https://b.example,"}
        )
        assert settings.production is True
        assert settings.allowed_origins == ("https://a.example", "https://b.example")

    def test_bad_port_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            settings = Settings.from_env({"PORT": "eighty"})
        assert settings.port == DEFAULT_PORT
        assert "PORT" in caplog.text

    def test_port_and_path(self):
        settings = Settings.from_env({"PORT": "9000", "MCP_PATH": "rpc/"})
        assert settings.port == 9000
        assert settings.mcp_path == "/rpc"

    def test_listed_resources_must_be_positive(self):
        assert Settings.from_env({"MAX_LISTED_ARTICLE_RESOURCES": "0"}).max_listed_resources == 50
        assert Settings.from_env({"MAX_LISTED_ARTICLE_RESOURCES": "7"}).max_listed_resources == 7

    def test_to_config_is_plain(self):
        config = Settings.from_env({"ALLOWED_ORIGIN": "https://a.example"}).to_config()
        assert isinstance(config["blog_data_path"], str)
        assert config["allowed_origins"] == ["https://a.example"]
        assert config["deployment"] == "local"
