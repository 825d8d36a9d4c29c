"""gendesk - generate .desktop files and icons from a PKGBUILD."""

__version__ = "0.4.0"
