#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Translation completeness checks against a gate locale."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import NamedTuple

from attrs import field, frozen
from provide.foundation import logger

from fxbuild.config.defaults import PROPERTIES_SUFFIX
from fxbuild.exceptions import TranslationError
from fxbuild.i18n.properties import load_properties


@frozen
class LocaleResourceSet:
    """Key/value strings of one locale, named after their source."""

    name: str
    entries: Mapping[str, str] = field(factory=dict, converter=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class MissingKey(NamedTuple):
    locale: str
    key: str


@frozen
class VerificationReport:
    """Missing (locale, key) pairs in the order they were found."""

    missing: tuple[MissingKey, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing

    def __iter__(self) -> Iterator[MissingKey]:
        return iter(self.missing)

    def __len__(self) -> int:
        return len(self.missing)

    def __contains__(self, item: object) -> bool:
        return item in self.missing

    def as_set(self) -> frozenset[MissingKey]:
        return frozenset(self.missing)

    def by_locale(self) -> dict[str, list[str]]:
        """Group missing keys per locale, keeping discovery order."""
        grouped: dict[str, list[str]] = {}
        for entry in self.missing:
            grouped.setdefault(entry.locale, []).append(entry.key)
        return grouped


def verify_translations(
    reference: LocaleResourceSet,
    gate: LocaleResourceSet,
    others: Sequence[LocaleResourceSet] = (),
) -> VerificationReport:
    """Report every gate key that the reference or another locale lacks.

    Only the gate's keys are required; extra keys elsewhere are ignored.
    """
    found: dict[MissingKey, None] = {}
    for key in gate:
        for locale in (reference, *others):
            if key not in locale:
                found.setdefault(MissingKey(locale.name, key), None)
    return VerificationReport(tuple(found))


def check_translations(
    reference: LocaleResourceSet,
    gate: LocaleResourceSet,
    others: Sequence[LocaleResourceSet] = (),
) -> VerificationReport:
    """Verify translations, warn about each gap, then fail once if any exist.

    Raises:
        TranslationError: After the full scan, when at least one key is missing
    """
    report = verify_translations(reference, gate, others)
    for entry in report:
        logger.warning(f"{entry.locale} missing key '{entry.key}'", locale=entry.locale, key=entry.key)

    if not report.ok:
        raise TranslationError("Part of the translation is missing", report)

    logger.info(
        "Translations complete",
        gate=gate.name,
        keys=len(gate),
        locales=[reference.name, *(other.name for other in others)],
    )
    return report


def locale_file_name(base_name: str, locale: str = "") -> str:
    """``I18N.properties`` for the reference locale, ``I18N_zh.properties`` otherwise."""
    suffix = f"_{locale}" if locale else ""
    return f"{base_name}{suffix}{PROPERTIES_SUFFIX}"


def load_locale(lang_dir: Path, base_name: str, locale: str = "") -> LocaleResourceSet:
    """Load one locale's resource file from ``lang_dir``."""
    file_name = locale_file_name(base_name, locale)
    entries = load_properties(lang_dir / file_name)
    logger.debug("Loaded locale resources", file=file_name, keys=len(entries))
    return LocaleResourceSet(name=file_name, entries=entries)


# 🌶️📦🔚
