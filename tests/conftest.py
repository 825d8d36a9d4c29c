"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from gendesk.core import config as config_module
from gendesk.core import logger as logger_module
from gendesk.core.config import Config

OVERRIDE_ENV_VARS = (
    "pkgname", "pkgdesc", "_exec", "_name", "_genericname", "_comment",
    "_categories", "_mimetypes", "_custom", "_terminal",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch) -> Path:
    """Point settings and the log file at a temp directory, clear override env vars."""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    monkeypatch.setattr(config_module, "SETTINGS_FILE", settings_dir / "settings.json")
    monkeypatch.setattr(logger_module, "CACHE_DIR", settings_dir)
    monkeypatch.setattr(logger_module, "LOG_FILE", settings_dir / "gendesk.log")
    monkeypatch.setattr(Config, "_instance", None)
    for var in OVERRIDE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return settings_dir


@pytest.fixture
def split_pkgbuild() -> str:
    """A split PKGBUILD with per-package overrides and an icon URL."""
    return textwrap.dedent("""\
        # Maintainer: Someone <someone@example.com>
        pkgbase=tuxracer
        pkgname=('tuxracer' 'tuxracer-nox' 'tuxracer-editor')
        pkgver=1.0
        pkgrel=1
        pkgdesc="Racing game with a penguin"
        arch=('x86_64')
        source=("http://example.com/icons/$pkgname.png")

        package_tuxracer() {
          _exec=('tuxracer-gl')
          install -Dm644 "$srcdir/$pkgname.png" "$pkgdir/usr/share/pixmaps/$pkgname.png"
        }

        package_tuxracer-nox() {
          pkgdesc="Headless server for the racing game"
        }

        package_tuxracer-editor() {
          pkgdesc="Level editor for tuxracer"
          _name="Tux Racer Editor"
          _genericname="Level Editor"
          _comment="Design your own tracks"
          _mimetype="application/x-tuxracer-level"
        }
    """)
