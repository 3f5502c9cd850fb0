#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""fxbuild command-line interface entrypoint."""

from __future__ import annotations

import click

# Import all commands at module level
from fxbuild import __version__
from fxbuild.commands._context import load_config
from fxbuild.commands.host import deps_command, detect_command
from fxbuild.commands.manifest import generate_command
from fxbuild.commands.translations import check_translations_command
from fxbuild.commands.warm import warm_command
from fxbuild.console import get_command_logger, setup_logging


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="fxbuild",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Release tooling for the launcher's UI toolkit dependencies and translations.

    Configure via environment variables:
    - FXBUILD_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - FXBUILD_BUILD_DIR: Where the dependency manifest is written
    - FXBUILD_TOOLKIT_VERSION: Toolkit artifact version
    - FXBUILD_REPOSITORY / FXBUILD_MIRROR_REPOS: Repositories to read and warm
    - FXBUILD_LANG_DIR, FXBUILD_GATE_LOCALE, FXBUILD_OTHER_LOCALES: Translation check inputs
    """
    ctx.ensure_object(dict)

    config = load_config()
    setup_logging(config.log_level)

    ctx.obj["config"] = config
    ctx.obj["log"] = get_command_logger("cli")


# Register batch jobs
cli.add_command(generate_command, name="generate")
cli.add_command(warm_command, name="warm")
cli.add_command(check_translations_command, name="check-translations")

# Register host lookups
cli.add_command(detect_command, name="detect")
cli.add_command(deps_command, name="deps")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
