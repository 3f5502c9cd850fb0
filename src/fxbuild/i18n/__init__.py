#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Localized resource loading and translation completeness checks."""

from __future__ import annotations

from fxbuild.i18n.properties import load_properties, parse_properties
from fxbuild.i18n.verifier import (
    LocaleResourceSet,
    MissingKey,
    VerificationReport,
    check_translations,
    load_locale,
    locale_file_name,
    verify_translations,
)

__all__ = [
    "LocaleResourceSet",
    "MissingKey",
    "VerificationReport",
    "check_translations",
    "load_locale",
    "load_properties",
    "locale_file_name",
    "parse_properties",
    "verify_translations",
]

# 🌶️📦🔚
