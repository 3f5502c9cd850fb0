#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for fxbuild tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from fxbuild.catalog import PlatformCatalog, PlatformDescriptor
from fxbuild.exceptions import FetchError


class StubFetcher:
    """Deterministic stand-in for network access.

    Returns ``digest_for(url)`` for text fetches and raises ``FetchError`` for
    any URL listed in ``fail_on``. Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        digest_for: Callable[[str], str] | None = None,
        fail_on: set[str] | None = None,
    ) -> None:
        self.digest_for = digest_for or (lambda url: "0123456789abcdef0123456789abcdef01234567")
        self.fail_on = fail_on or set()
        self.calls: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.calls.append(url)
        if url in self.fail_on:
            raise FetchError(url, "HTTP 404 Not Found")
        return self.digest_for(url)

    def fetch_bytes(self, url: str) -> bytes:
        self.calls.append(url)
        if url in self.fail_on:
            raise FetchError(url, "connection refused")
        return b"PK\x03\x04"


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def stub_fetcher() -> StubFetcher:
    return StubFetcher()


@pytest.fixture
def make_fetcher() -> type[StubFetcher]:
    """Factory for fetchers with custom digests or failing URLs."""
    return StubFetcher


@pytest.fixture
def tiny_catalog() -> PlatformCatalog:
    """One platform, one module."""
    return PlatformCatalog(
        modules=("base",),
        platforms=(PlatformDescriptor("linux-x86_64", "linux"),),
    )


@pytest.fixture
def two_platform_catalog() -> PlatformCatalog:
    return PlatformCatalog(
        modules=("base", "graphics", "media"),
        platforms=(
            PlatformDescriptor("linux-x86_64", "linux"),
            PlatformDescriptor("linux-arm32", "linux-arm32-monocle", excluded_modules={"media"}),
        ),
    )


@pytest.fixture
def lang_dir(tmp_path: Path) -> Path:
    """Directory with a complete reference, gate and secondary locale."""
    directory = tmp_path / "lang"
    directory.mkdir()
    (directory / "I18N.properties").write_text(
        "# English\nlaunch=Launch\nsettings=Settings\nlegacy.only=Old\n",
        encoding="utf-8",
    )
    (directory / "I18N_zh.properties").write_text(
        "launch=啟動\nsettings=設定\n",
        encoding="utf-8",
    )
    (directory / "I18N_zh_CN.properties").write_text(
        "launch=启动\nsettings=设置\n",
        encoding="utf-8",
    )
    return directory


# 🌶️📦🔚
