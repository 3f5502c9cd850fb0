#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Translation completeness command for the fxbuild CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from fxbuild.commands._context import get_config
from fxbuild.console import get_command_logger
from fxbuild.exceptions import FxBuildError, TranslationError
from fxbuild.i18n import check_translations, load_locale

# Get structured logger for this command
log = get_command_logger("check-translations")


@click.command("check-translations")
@click.pass_context
def check_translations_command(ctx: click.Context) -> None:
    """Fail when a locale lacks keys present in the gate locale."""
    config = get_config(ctx)
    lang_dir = config.lang_dir
    log.debug(
        "Checking translations",
        lang_dir=str(lang_dir),
        gate=config.gate_locale,
        others=list(config.other_locales),
    )

    try:
        reference = load_locale(lang_dir, config.lang_base_name)
        gate = load_locale(lang_dir, config.lang_base_name, config.gate_locale)
        others = [load_locale(lang_dir, config.lang_base_name, locale) for locale in config.other_locales]
        check_translations(reference, gate, others)
    except TranslationError as e:
        for locale, keys in e.report.by_locale().items():
            perr(f"{locale} missing {len(keys)} keys: {', '.join(keys)}")
        log.error("Translation check failed", missing=len(e.report))
        perr(f"❌ {e}")
        raise click.Abort() from e
    except FxBuildError as e:
        log.error("Translation check failed", error=str(e))
        perr(f"❌ Translation check failed: {e}")
        raise click.Abort() from e

    pout(f"✅ All {len(gate)} keys of '{gate.name}' are translated")


# 🌶️📦🔚
