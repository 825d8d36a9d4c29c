"""Entry point for gendesk - generates .desktop files from a PKGBUILD.

\b
Notes:
  * "../PKGBUILD" is the default filename
  * _exec in the PKGBUILD can be used to specify a different executable
    for the .desktop file, e.g. _exec=('appname-gui')
  * Split packages are supported
  * Without a PKGBUILD argument, --pkgname (or $pkgname) generates a
    single entry from the other options alone
  * Categories are guessed from keywords in the package description
  * Icons are assumed to be installed to /usr/share/pixmaps/$pkgname.png
    by the PKGBUILD; if no .png is found as a file or in the PKGBUILD, one
    is downloaded from the icon search service
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gendesk import __version__
from gendesk.core.config import Config
from gendesk.core.desktop_writer import write_desktop_file
from gendesk.core.errors import GendeskError
from gendesk.core.icon_fetcher import fetch_icon, has_png_icon, write_default_icon
from gendesk.core.logger import get_logger, setup_logging
from gendesk.core.pkgbuild_parser import FieldKind, read_pkgbuild, scan_pkgbuild
from gendesk.core.resolver import ResolvedFieldSet, resolve_all, resolve_overrides
from gendesk.ui.console import Reporter

_log = get_logger("main")


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, help=__doc__)
@click.version_option(
    version=__version__,
    prog_name="gendesk",
    message="Desktop File Generator v.%(version)s",
)
@click.argument("pkgbuild", required=False, type=click.Path(dir_okay=False))
@click.option("-n", "--no-download", is_flag=True, help="Don't download anything.")
@click.option("--nocolor", is_flag=True, help="Don't use colors.")
@click.option("-q", "--quiet", is_flag=True, help="Don't output anything on stdout.")
@click.option("-f", "--force", is_flag=True, help="Overwrite existing .desktop files.")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory for the .desktop and .png files.",
)
@click.option("--pkgname", envvar="pkgname", help="Package name.")
@click.option("--pkgdesc", envvar="pkgdesc", help="Package description.")
@click.option("--exec", "exec_cmd", envvar="_exec", help="Executable to run.")
@click.option("--name", envvar="_name", help="Name shown in menus.")
@click.option("--genericname", envvar="_genericname", help="Generic name, e.g. \"Web Browser\".")
@click.option("--comment", envvar="_comment", help="Tooltip comment.")
@click.option("--categories", envvar="_categories", help="Categories, separated by ';'.")
@click.option("--mimetypes", envvar="_mimetypes", help="Mime types, separated by ';'.")
@click.option("--custom", envvar="_custom", help="Custom line(s) appended to the entry.")
@click.option("--terminal", is_flag=True, envvar="_terminal", help="Run the executable in a terminal.")
@click.option("--startupnotify", is_flag=True, help="Enable startup notification.")
def main(
    pkgbuild: str | None,
    no_download: bool,
    nocolor: bool,
    quiet: bool,
    force: bool,
    output_dir: Path,
    pkgname: str | None,
    pkgdesc: str | None,
    exec_cmd: str | None,
    name: str | None,
    genericname: str | None,
    comment: str | None,
    categories: str | None,
    mimetypes: str | None,
    custom: str | None,
    terminal: bool,
    startupnotify: bool,
) -> None:
    setup_logging()
    config = Config()
    reporter = Reporter(quiet=quiet, color=not nocolor)

    overrides = {
        FieldKind.DESCRIPTION: pkgdesc,
        FieldKind.EXECUTABLE: exec_cmd,
        FieldKind.DISPLAY_NAME: name,
        FieldKind.GENERIC_NAME: genericname,
        FieldKind.COMMENT: comment,
        FieldKind.CATEGORIES: categories,
        FieldKind.MIME_TYPES: mimetypes,
        FieldKind.CUSTOM_APPEND: custom,
    }

    try:
        if pkgname and pkgbuild is None:
            _log.info("Generating %s from explicit values", pkgname)
            packages = resolve_overrides(pkgname, overrides)
        else:
            path = pkgbuild or config.get("default_pkgbuild")
            _log.info("Generating from %s", path)
            packages = resolve_all(scan_pkgbuild(read_pkgbuild(path)))

        for fields in packages:
            _generate(
                fields,
                reporter,
                config,
                output_dir=output_dir,
                download=not no_download,
                force=force,
                terminal=terminal or bool(config.get("terminal")),
                startup_notify=startupnotify or bool(config.get("startup_notify")),
            )
    except GendeskError as e:
        reporter.error(str(e))
        sys.exit(1)


def _generate(
    fields: ResolvedFieldSet,
    reporter: Reporter,
    config: Config,
    output_dir: Path,
    download: bool,
    force: bool,
    terminal: bool,
    startup_notify: bool,
) -> None:
    """Write the .desktop file for one package and make sure it has an icon."""
    pkgname = fields.pkgname

    reporter.step(pkgname, "Generating desktop file...")
    written = write_desktop_file(
        fields,
        output_dir,
        force=force,
        terminal=terminal,
        startup_notify=startup_notify,
    )
    if written is None:
        reporter.skipped("exists (use -f to overwrite)")
    else:
        reporter.ok()

    # A PKGBUILD with an icon URL downloads the icon itself
    if not download or fields.icon_url or has_png_icon(output_dir):
        return

    reporter.step(pkgname, "Downloading icon...")
    if fetch_icon(
        pkgname,
        output_dir,
        config.get("icon_search_url"),
        timeout=config.get("download_timeout"),
    ):
        reporter.downloaded()
        return

    reporter.no()
    reporter.step(pkgname, "Using default icon instead...")
    write_default_icon(pkgname, output_dir, config.get("default_icon"))
    reporter.yes()


if __name__ == "__main__":
    main()
