#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for fxbuild."""

from __future__ import annotations

from typing import TYPE_CHECKING

from provide.foundation.errors import FoundationError

if TYPE_CHECKING:
    from fxbuild.i18n.verifier import VerificationReport


class FxBuildError(FoundationError):
    """Base exception for all fxbuild errors."""

    pass


class ConfigError(FxBuildError):
    """Raised when runtime configuration is invalid."""

    pass


class CatalogError(FxBuildError):
    """Raised when a platform catalog is malformed or a lookup fails."""

    pass


class FetchError(FxBuildError):
    """Raised when a remote artifact cannot be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}", url=url, reason=reason)
        self.url = url
        self.reason = reason


class ManifestError(FxBuildError):
    """Raised when a dependency manifest cannot be read or written."""

    pass


class PropertiesError(FxBuildError):
    """Raised when a localized resource file cannot be read or parsed."""

    pass


class TranslationError(FxBuildError):
    """Raised when one or more locales are missing translation keys."""

    def __init__(self, message: str, report: VerificationReport) -> None:
        super().__init__(message, missing=len(report))
        self.report = report


# 🌶️📦🔚
