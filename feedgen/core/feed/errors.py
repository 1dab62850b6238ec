"""
Feed export errors.
"""


class FeedExportError(Exception):
    """Base error for one export phase. str() is the caller-facing message."""


class DirectoryCreationError(FeedExportError):
    """Destination directory could not be created."""


class FileOpenError(FeedExportError):
    """Feed file could not be opened for writing."""


class FeedWriteError(FeedExportError):
    """A format writer failed while serializing products."""
