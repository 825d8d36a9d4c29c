"""Resolve the final desktop entry fields for every package of a scan.

Each field falls back through a fixed chain, so a package always comes out
fully populated:

  Description   pkgdesc      -> package name
  Executable    _exec        -> package name
  DisplayName   _name        -> capitalized package name
  GenericName   _genericname -> ""
  Comment       _comment     -> Description
  MimeTypes     _mimetype    -> ""
  CustomAppend  _custom      -> ""
  Categories    _categories  -> guessed from Description -> "Application"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from gendesk.core.categories import DEFAULT_CATEGORY, classify
from gendesk.core.logger import get_logger
from gendesk.core.pkgbuild_parser import FieldKind, PkgbuildScan, Registry

_log = get_logger("resolver")

# Headless and command-line split packages get no desktop entry. Matched
# anywhere in the name, so "foo-client" is skipped too.
SKIPPED_MARKERS = ("-nox", "-cli")


@dataclass
class ResolvedFieldSet:
    """Every desktop entry field for one package, plus the shared icon URL."""
    pkgname: str
    description: str
    exec_cmd: str
    name: str
    generic_name: str
    comment: str
    categories: str
    mime_types: str
    custom: str
    icon_url: str | None = None


def capitalize(s: str) -> str:
    """Upper-case the first character, leaving strings under two characters alone."""
    if len(s) >= 2:
        return s[0].upper() + s[1:]
    return s


def is_skipped(pkgname: str) -> bool:
    return any(marker in pkgname for marker in SKIPPED_MARKERS)


def resolve_package(
    pkgname: str,
    values: Mapping[FieldKind, str],
    icon_url: str | None = None,
) -> ResolvedFieldSet:
    """Apply the fallback chain to the declared values of one package."""
    description = values.get(FieldKind.DESCRIPTION) or pkgname
    categories = (
        values.get(FieldKind.CATEGORIES)
        or classify(description)
        or DEFAULT_CATEGORY
    )
    return ResolvedFieldSet(
        pkgname=pkgname,
        description=description,
        exec_cmd=values.get(FieldKind.EXECUTABLE) or pkgname,
        name=values.get(FieldKind.DISPLAY_NAME) or capitalize(pkgname),
        generic_name=values.get(FieldKind.GENERIC_NAME) or "",
        comment=values.get(FieldKind.COMMENT) or description,
        categories=categories,
        mime_types=values.get(FieldKind.MIME_TYPES) or "",
        custom=values.get(FieldKind.CUSTOM_APPEND) or "",
        icon_url=icon_url,
    )


def resolve_all(scan: PkgbuildScan) -> list[ResolvedFieldSet]:
    """Resolve every package in registry order, skipping -nox and -cli packages."""
    resolved: list[ResolvedFieldSet] = []
    registry = scan.registry
    for pkgname in registry.pkgnames:
        if is_skipped(pkgname):
            _log.info("Skipping %s (no desktop entry for -nox/-cli packages)", pkgname)
            continue
        values = {kind: registry.get(pkgname, kind) for kind in FieldKind}
        resolved.append(resolve_package(pkgname, values, scan.icon_url))
    return resolved


def resolve_overrides(pkgname: str, overrides: Mapping[FieldKind, str | None]) -> list[ResolvedFieldSet]:
    """Resolve a single package from explicitly supplied values, without a PKGBUILD."""
    return resolve_all(PkgbuildScan(registry=Registry.from_overrides(pkgname, overrides)))
