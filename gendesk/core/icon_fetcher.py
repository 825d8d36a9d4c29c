"""Icon fetching for packages whose PKGBUILD does not provide a .png icon.

Resolution order:
  1. Any *.png already in the output directory (nothing to do)
  2. Icon search service (icon_search_url, capitalized package name)
  3. Local default icon (default_icon)

The search service answers unknown packages with a placeholder image rather
than an error, so that image is recognized by its MD5 and treated as "not
found".
"""

from __future__ import annotations

import hashlib
import shutil
from pathlib import Path

import requests

from gendesk.core.errors import IconError
from gendesk.core.logger import get_logger
from gendesk.core.resolver import capitalize

_log = get_logger("icon_fetcher")

NO_ICON_MD5 = "12928aa3233965175ea30f5acae593bf"
_TIMEOUT = 15  # seconds


def icon_path(pkgname: str, output_dir: str | Path = ".") -> Path:
    return Path(output_dir) / f"{pkgname}.png"


def has_png_icon(output_dir: str | Path = ".") -> bool:
    """True if the output directory already holds a .png file."""
    return any(Path(output_dir).glob("*.png"))


def icon_search_url(url_template: str, pkgname: str) -> str:
    return url_template.replace("%s", capitalize(pkgname))


def fetch_icon(
    pkgname: str,
    output_dir: str | Path,
    url_template: str,
    timeout: float = _TIMEOUT,
) -> bool:
    """Download the icon for pkgname into <pkgname>.png.

    Returns False when the service has no icon for the package. Raises
    IconError when the service is unreachable or the file can't be written.
    """
    url = icon_search_url(url_template, pkgname)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        _log.error("Icon: could not download %s: %s", url, e)
        raise IconError("Could not download icon") from e

    if resp.status_code != 200:
        _log.info("Icon: %s answered %d", url, resp.status_code)
        return False

    data = resp.content
    if hashlib.md5(data).hexdigest() == NO_ICON_MD5:
        _log.info("Icon: no icon found for %s", pkgname)
        return False

    dest = icon_path(pkgname, output_dir)
    try:
        dest.write_bytes(data)
    except OSError as e:
        raise IconError(f"Could not write icon to {dest}!") from e
    _log.info("Icon: downloaded %s to %s", url, dest)
    return True


def write_default_icon(pkgname: str, output_dir: str | Path, default_icon: str | Path) -> Path:
    """Copy the default icon to <pkgname>.png."""
    src = Path(default_icon)
    if not src.is_file():
        raise IconError(f"could not read {src}!")
    dest = icon_path(pkgname, output_dir)
    try:
        shutil.copyfile(src, dest)
    except OSError as e:
        raise IconError(f"could not write icon to {dest}!") from e
    _log.info("Icon: copied default icon %s to %s", src, dest)
    return dest
