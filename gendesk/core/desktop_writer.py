""".desktop file writer — renders resolved package fields as a [Desktop Entry]."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gendesk.core.errors import GendeskError
from gendesk.core.logger import get_logger
from gendesk.core.resolver import ResolvedFieldSet

_log = get_logger("desktop_writer")


@dataclass
class DesktopEntry:
    """Fields written to a .desktop file."""
    name: str = ""
    generic_name: str = ""
    comment: str = ""
    icon: str = ""
    exec_cmd: str = ""
    categories: str = "Application"
    mime_types: str = ""
    custom: str = ""
    terminal: bool = False
    startup_notify: bool = False
    type: str = "Application"

    @classmethod
    def from_fields(
        cls,
        fields: ResolvedFieldSet,
        terminal: bool = False,
        startup_notify: bool = False,
    ) -> "DesktopEntry":
        # The PKGBUILD installs the icon as /usr/share/pixmaps/$pkgname.png
        return cls(
            name=fields.name,
            generic_name=fields.generic_name,
            comment=fields.comment,
            icon=fields.pkgname,
            exec_cmd=fields.exec_cmd,
            categories=fields.categories,
            mime_types=fields.mime_types,
            custom=fields.custom,
            terminal=terminal,
            startup_notify=startup_notify,
        )

    def render(self) -> str:
        lines = [
            "[Desktop Entry]",
            f"Type={self.type}",
            f"Name={self.name}",
        ]
        if self.generic_name:
            lines.append(f"GenericName={self.generic_name}")
        lines += [
            f"Comment={self.comment}",
            f"Exec={self.exec_cmd}",
            f"Icon={self.icon}",
            f"Terminal={_bool(self.terminal)}",
            f"StartupNotify={_bool(self.startup_notify)}",
            f"Categories={_list_value(self.categories)}",
        ]
        if self.mime_types:
            lines.append(f"MimeType={_list_value(self.mime_types)}")
        if self.custom:
            lines.append(self.custom)
        return "\n".join(lines) + "\n"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _list_value(value: str) -> str:
    """Normalize a ;-separated list so it ends with exactly one ';'."""
    items = [item for item in value.split(";") if item]
    return ";".join(items) + ";"


def desktop_file_path(pkgname: str, output_dir: str | Path = ".") -> Path:
    return Path(output_dir) / f"{pkgname}.desktop"


def write_desktop_file(
    fields: ResolvedFieldSet,
    output_dir: str | Path = ".",
    force: bool = False,
    terminal: bool = False,
    startup_notify: bool = False,
) -> Path | None:
    """Write <pkgname>.desktop and return its path.

    Returns None without touching the file when it already exists and
    ``force`` is not set.
    """
    path = desktop_file_path(fields.pkgname, output_dir)
    if path.exists() and not force:
        _log.info("Desktop file %s exists, not overwriting", path)
        return None

    entry = DesktopEntry.from_fields(fields, terminal=terminal, startup_notify=startup_notify)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(entry.render(), encoding="utf-8")
    except OSError as e:
        _log.exception("Could not write %s", path)
        raise GendeskError(f"Could not write {path}: {e}") from e

    _log.info("Desktop file: wrote %s", path)
    return path
