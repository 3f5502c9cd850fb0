#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for fxbuild configuration."""

from __future__ import annotations

# =================================
# Toolkit artifact defaults
# =================================
TOOLKIT_NAME = "openjfx"
TOOLKIT_ARTIFACT_PREFIX = "javafx"
TOOLKIT_MODULE_PREFIX = "javafx."
DEFAULT_GROUP_ID = "org.openjfx"
DEFAULT_TOOLKIT_VERSION = "17"
DEFAULT_MODULES = ("base", "graphics", "controls", "fxml", "media", "web")

# =================================
# Repository defaults
# =================================
DEFAULT_REPOSITORY = "https://repo1.maven.org/maven2"
DEFAULT_MIRROR_REPOS = ("https://maven.aliyun.com/repository/central",)
ARTIFACT_EXTENSION = "jar"
DIGEST_EXTENSION = "jar.sha1"
DIGEST_FIELD = "sha1"

# =================================
# Network defaults
# =================================
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "fxbuild/1.0"
SUPPORTED_URL_SCHEMES = frozenset({"http", "https"})

# =================================
# Output defaults
# =================================
DEFAULT_BUILD_DIR = "HMCL/build"
MANIFEST_FILENAME = f"{TOOLKIT_NAME}-dependencies.json"
MANIFEST_INDENT = 2

# =================================
# Translation defaults
# =================================
DEFAULT_LANG_DIR = "HMCL/src/main/resources/assets/lang"
DEFAULT_LANG_BASE_NAME = "I18N"
DEFAULT_GATE_LOCALE = "zh_CN"
DEFAULT_OTHER_LOCALES = ("zh",)
PROPERTIES_SUFFIX = ".properties"

# =================================
# Logging defaults
# =================================
SERVICE_NAME = "fxbuild"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# 🌶️📦🔚
