"""Exceptions raised by the gendesk collaborators (file and network I/O).

The PKGBUILD scanner, resolver and category classifier never raise.
"""


class GendeskError(Exception):
    """Base class for errors that abort a gendesk run."""


class DescriptorNotFoundError(GendeskError):
    """The PKGBUILD could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not read {path}")
        self.path = path


class IconError(GendeskError):
    """An icon could not be downloaded or written."""
