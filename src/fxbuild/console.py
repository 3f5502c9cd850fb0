#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logger helpers shared by fxbuild commands."""

from __future__ import annotations

from typing import Any

from attrs import evolve
from provide.foundation import TelemetryConfig, get_hub, get_logger

from fxbuild.config.defaults import DEFAULT_LOG_LEVEL, SERVICE_NAME


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Initialize Foundation telemetry with fxbuild's service name and level."""
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name=SERVICE_NAME,
        logging=evolve(base_telemetry.logging, default_level=level),  # type: ignore[arg-type]
    )
    get_hub().initialize_foundation(telemetry_config)


def get_command_logger(command: str) -> Any:
    """Return a structured logger named after the given CLI command."""
    return get_logger(f"{SERVICE_NAME}.commands.{command}")


# 🌶️📦🔚
