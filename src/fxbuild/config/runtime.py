#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""fxbuild runtime configuration for CLI startup."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Self

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from fxbuild.config.defaults import (
    DEFAULT_BUILD_DIR,
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_GATE_LOCALE,
    DEFAULT_LANG_BASE_NAME,
    DEFAULT_LANG_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MIRROR_REPOS,
    DEFAULT_OTHER_LOCALES,
    DEFAULT_REPOSITORY,
    DEFAULT_TOOLKIT_VERSION,
    MANIFEST_FILENAME,
    VALID_LOG_LEVELS,
)
from fxbuild.exceptions import ConfigError


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {value}")
    return normalized


def parse_list(value: str | Iterable[str]) -> tuple[str, ...]:
    """Split comma separated values, dropping blanks."""
    items = value.split(",") if isinstance(value, str) else value
    return tuple(item.strip() for item in items if item.strip())


def parse_timeout(value: str | float) -> float:
    """Parse a positive timeout in seconds."""
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid fetch timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Fetch timeout must be positive, got: {value!r}")
    return timeout


def parse_required(value: str) -> str:
    """Reject blank values."""
    stripped = str(value).strip()
    if not stripped:
        raise ConfigError("Value must not be empty")
    return stripped


def parse_repository(value: str) -> str:
    """Normalize a repository base URL by dropping trailing slashes."""
    return parse_required(value).rstrip("/")


@define
class FxBuildRuntimeConfig(RuntimeConfig):
    """fxbuild runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="FXBUILD_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    build_dir: Path = field(
        default=DEFAULT_BUILD_DIR,
        env_var="FXBUILD_BUILD_DIR",
        converter=Path,
        metadata={"help": "Build output directory that receives the dependency manifest"},
    )

    toolkit_version: str = field(
        default=DEFAULT_TOOLKIT_VERSION,
        env_var="FXBUILD_TOOLKIT_VERSION",
        converter=parse_required,
        metadata={"help": "UI toolkit artifact version"},
    )

    repository: str = field(
        default=DEFAULT_REPOSITORY,
        env_var="FXBUILD_REPOSITORY",
        converter=parse_repository,
        metadata={"help": "Repository base URL used for digest lookups"},
    )

    mirror_repos: tuple[str, ...] = field(
        default=DEFAULT_MIRROR_REPOS,
        env_var="FXBUILD_MIRROR_REPOS",
        converter=lambda value: tuple(repo.rstrip("/") for repo in parse_list(value)),
        metadata={"help": "Comma separated mirror repositories to warm"},
    )

    fetch_timeout: float = field(
        default=DEFAULT_FETCH_TIMEOUT,
        env_var="FXBUILD_FETCH_TIMEOUT",
        converter=parse_timeout,
        metadata={"help": "Timeout in seconds for each remote fetch"},
    )

    lang_dir: Path = field(
        default=DEFAULT_LANG_DIR,
        env_var="FXBUILD_LANG_DIR",
        converter=Path,
        metadata={"help": "Directory holding the localized .properties files"},
    )

    lang_base_name: str = field(
        default=DEFAULT_LANG_BASE_NAME,
        env_var="FXBUILD_LANG_BASE",
        converter=parse_required,
        metadata={"help": "Base name of the localized resource files"},
    )

    gate_locale: str = field(
        default=DEFAULT_GATE_LOCALE,
        env_var="FXBUILD_GATE_LOCALE",
        converter=parse_required,
        metadata={"help": "Locale whose keys every other locale must provide"},
    )

    other_locales: tuple[str, ...] = field(
        default=DEFAULT_OTHER_LOCALES,
        env_var="FXBUILD_OTHER_LOCALES",
        converter=parse_list,
        metadata={"help": "Comma separated locales checked against the gate"},
    )

    @classmethod
    def from_env(cls, *args: Any, **kwargs: Any) -> Self:
        """Load from the environment, reporting bad values as ``ConfigError``.

        A variable that is set, even to an empty string, overrides the default.
        """
        try:
            return super().from_env(*args, **kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @property
    def manifest_path(self) -> Path:
        """Location of the generated dependency manifest."""
        return self.build_dir / MANIFEST_FILENAME


# 🌶️📦🔚
