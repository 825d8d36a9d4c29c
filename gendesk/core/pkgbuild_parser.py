"""PKGBUILD scanner — extracts per-package desktop entry fields and the icon URL.

This is a line-oriented keyword scan, not a shell parser. A line declares a
field when it starts with the field's keyword (``pkgdesc``, ``_exec``,
``_name``, ...), and the value is whatever sits between quotes or after a
lone ``=``. Field lines belong to the most recently seen package: the first
name of a ``pkgname`` line, or the ``<name>`` of a ``package_<name>()``
function in split PKGBUILDs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping

from gendesk.core.errors import DescriptorNotFoundError
from gendesk.core.logger import get_logger

_log = get_logger("pkgbuild_parser")

PKGNAME_KEYWORD = "pkgname"
PACKAGE_FUNC_KEYWORD = "package_"


class FieldKind(Enum):
    """Desktop entry fields, valued by the PKGBUILD keyword that declares them.

    Definition order is the order keywords are tried against a line.
    """
    DESCRIPTION = "pkgdesc"
    EXECUTABLE = "_exec"
    DISPLAY_NAME = "_name"
    GENERIC_NAME = "_genericname"
    MIME_TYPES = "_mimetype"
    COMMENT = "_comment"
    CATEGORIES = "_categories"
    CUSTOM_APPEND = "_custom"


def starts_with(line: str, keyword: str) -> bool:
    """True if the line, without leading whitespace, begins with keyword."""
    return line.lstrip().startswith(keyword)


def between(orig: str, a: str, b: str) -> str:
    """Return the text after the first ``a`` and before the last ``b``."""
    if a in orig and b in orig:
        start = orig.index(a) + len(a)
        end = orig.rindex(b)
        return orig[start:end]
    return ""


def between_quotes(orig: str) -> str:
    """Return the text between double quotes, else single quotes, else ""."""
    for quote in ('"', "'"):
        s = between(orig, quote, quote)
        if s:
            return s
    return ""


def between_quotes_or_after_equals(orig: str) -> str:
    """Return the quoted value of a line, or the text after a single ``=``."""
    s = between_quotes(orig)
    if not s and orig.count("=") == 1:
        s = orig.split("=")[1].strip()
    return s


def pkg_list(declared: str) -> list[str]:
    """Return the package names of a ``pkgname`` value.

    ``(one two three)`` and ``'one' 'two'`` give several names, anything
    without a space gives a single one.
    """
    if "(" in declared and ")" in declared:
        center = between(declared, "(", ")")
    else:
        center = declared
    if " " in center:
        unquoted = center.replace('"', "").replace("'", "")
        return [name for name in unquoted.split(" ") if name]
    center = center.replace('"', "").replace("'", "").strip()
    return [center] if center else []


@dataclass
class Registry:
    """Package names in discovery order and their per-package field values."""
    pkgnames: list[str] = field(default_factory=list)
    fields: dict[str, dict[FieldKind, str]] = field(default_factory=dict)

    def set_pkgnames(self, names: list[str]) -> None:
        self.pkgnames = list(dict.fromkeys(names))

    def set_field(self, pkgname: str, kind: FieldKind, value: str) -> None:
        self.fields.setdefault(pkgname, {})[kind] = value

    def get(self, pkgname: str, kind: FieldKind) -> str:
        return self.fields.get(pkgname, {}).get(kind, "")

    @classmethod
    def from_overrides(cls, pkgname: str, overrides: Mapping[FieldKind, str | None]) -> "Registry":
        """Build a single-package registry from explicitly supplied values."""
        registry = cls()
        registry.set_pkgnames([pkgname])
        for kind, value in overrides.items():
            if value:
                registry.set_field(pkgname, kind, value)
        return registry


@dataclass
class PkgbuildScan:
    """Result of one scan: the registry and the shared icon URL, if any."""
    registry: Registry = field(default_factory=Registry)
    icon_url: str | None = None


def extract_icon_url(line: str, pkgname: str) -> str | None:
    """Return the .png URL of a line, with $pkgname filled in, or None.

    A URL still holding an unresolved ``$`` variable is discarded.
    """
    if "http://" not in line or ".png" not in line:
        return None
    url = "h" + between(line, "h", "g") + "g"
    url = url.replace("${pkgname}", pkgname).replace("$pkgname", pkgname)
    if "$" in url:
        _log.debug("Discarding icon URL with unresolved variable: %s", url)
        return None
    return url


class _ScannerState:
    """Cursor state threaded through a single forward scan."""

    def __init__(self) -> None:
        self.current = ""
        self.result = PkgbuildScan()

    def feed(self, line: str) -> None:
        registry = self.result.registry

        if starts_with(line, PKGNAME_KEYWORD):
            names = pkg_list(between_quotes_or_after_equals(line))
            registry.set_pkgnames(names)
            self.current = names[0] if names else ""
            return

        if starts_with(line, PACKAGE_FUNC_KEYWORD):
            self.current = between(line, "_", "(")
            return

        for kind in FieldKind:
            if starts_with(line, kind.value):
                if self.current:
                    registry.set_field(self.current, kind, between_quotes_or_after_equals(line))
                return

        if self.result.icon_url is None:
            self.result.icon_url = extract_icon_url(line, self.current)


def scan_pkgbuild(text: str) -> PkgbuildScan:
    """Scan PKGBUILD text once, top to bottom. Never raises."""
    state = _ScannerState()
    for line in text.split("\n"):
        state.feed(line)
    scan = state.result
    _log.debug(
        "Scanned PKGBUILD: packages=%s icon_url=%s",
        scan.registry.pkgnames, scan.icon_url,
    )
    return scan


def read_pkgbuild(path: str | Path) -> str:
    """Return the text of a PKGBUILD, raising DescriptorNotFoundError if unreadable."""
    try:
        with open(path, "r", errors="replace") as f:
            return f.read()
    except OSError as e:
        _log.error("Could not read %s: %s", path, e)
        raise DescriptorNotFoundError(str(path)) from e
