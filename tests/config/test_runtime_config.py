#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for environment-backed runtime configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from fxbuild.config import FxBuildRuntimeConfig
from fxbuild.config.defaults import DEFAULT_MIRROR_REPOS, DEFAULT_REPOSITORY
from fxbuild.exceptions import ConfigError


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self) -> None:
        config = FxBuildRuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.toolkit_version == "17"
        assert config.repository == DEFAULT_REPOSITORY
        assert config.mirror_repos == DEFAULT_MIRROR_REPOS
        assert config.fetch_timeout == 30.0
        assert config.gate_locale == "zh_CN"
        assert config.other_locales == ("zh",)
        assert config.lang_dir == Path("HMCL/src/main/resources/assets/lang")

    def test_manifest_path(self) -> None:
        config = FxBuildRuntimeConfig(build_dir="/tmp/out")
        assert config.manifest_path == Path("/tmp/out/openjfx-dependencies.json")

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_without_variables(self) -> None:
        assert FxBuildRuntimeConfig.from_env() == FxBuildRuntimeConfig()


class TestFromEnv:
    """Test loading from environment variables."""

    @patch.dict(
        os.environ,
        {
            "FXBUILD_LOG_LEVEL": "debug",
            "FXBUILD_BUILD_DIR": "/custom/build",
            "FXBUILD_TOOLKIT_VERSION": "21.0.1",
            "FXBUILD_REPOSITORY": "https://repo.example/maven2/",
            "FXBUILD_MIRROR_REPOS": "https://a.example/, https://b.example ,",
            "FXBUILD_FETCH_TIMEOUT": "2.5",
            "FXBUILD_GATE_LOCALE": "ja",
            "FXBUILD_OTHER_LOCALES": "zh,zh_CN",
        },
    )
    def test_all_variables(self) -> None:
        config = FxBuildRuntimeConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.build_dir == Path("/custom/build")
        assert config.toolkit_version == "21.0.1"
        assert config.repository == "https://repo.example/maven2"
        assert config.mirror_repos == ("https://a.example", "https://b.example")
        assert config.fetch_timeout == 2.5
        assert config.gate_locale == "ja"
        assert config.other_locales == ("zh", "zh_CN")

    @patch.dict(os.environ, {"FXBUILD_LANG_BASE": "Messages"})
    def test_lang_base_name(self) -> None:
        config = FxBuildRuntimeConfig.from_env()
        assert config.lang_base_name == "Messages"

    @patch.dict(os.environ, {"FXBUILD_TOOLKIT_VERSION": "  "})
    def test_blank_version_is_rejected(self) -> None:
        with pytest.raises(ConfigError, match="must not be empty"):
            FxBuildRuntimeConfig.from_env()

    @pytest.mark.parametrize("value", ["", ","])
    def test_empty_mirror_list_disables_warming(self, value: str) -> None:
        with patch.dict(os.environ, {"FXBUILD_MIRROR_REPOS": value}):
            config = FxBuildRuntimeConfig.from_env()
        assert config.mirror_repos == ()

    @pytest.mark.parametrize(
        ("variable", "value", "message"),
        [
            ("FXBUILD_LOG_LEVEL", "loud", "Invalid log level"),
            ("FXBUILD_FETCH_TIMEOUT", "soon", "Invalid configuration"),
            ("FXBUILD_FETCH_TIMEOUT", "0", "must be positive"),
        ],
    )
    def test_invalid_values(self, variable: str, value: str, message: str) -> None:
        with patch.dict(os.environ, {variable: value}), pytest.raises(ConfigError, match=message):
            FxBuildRuntimeConfig.from_env()

    @patch.dict(os.environ, {"FXBUILD_BUILD_DIR": "/custom/build"})
    def test_records_environment_source(self) -> None:
        config = FxBuildRuntimeConfig.from_env()
        assert config.get_source("build_dir") is not None
        assert config.get_source("log_level") is None


# 🌶️📦🔚
