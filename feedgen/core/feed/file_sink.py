"""
Output file lifecycle for a single feed file.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from .errors import DirectoryCreationError, FileOpenError


logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o775


class FileSink:
    """
    Owns one feed file: resolves its path, creates the directory, opens it
    for writing (truncating) and closes it exactly once.

    Use as a context manager so the handle is released on every exit path:

        with FileSink(root, "var/feeds", "feed", "csv") as sink:
            sink.write("...")
    """

    def __init__(
        self,
        root_path: Union[str, Path],
        directory: str,
        base_name: str,
        extension: str
    ):
        self.directory = Path(root_path) / directory
        self.path = self.directory / f"{base_name}.{extension}"
        self._handle: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> "FileSink":
        """
        Create the directory (mode 0775, parents included) and open the file.

        Raises:
            DirectoryCreationError: directory missing and could not be created
            FileOpenError: file could not be opened for writing
        """
        try:
            self.directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(f"Directory {self.directory} creation error: {e}") from e

        try:
            # newline='' keeps "\n" line endings on every platform
            self._handle = open(self.path, 'w', encoding='utf-8', newline='')
        except OSError as e:
            raise FileOpenError(f"Opening file {self.path} error: {e}") from e

        logger.debug(f"Opened feed file {self.path}")
        return self

    def write(self, text: str) -> None:
        if self._handle is None:
            raise ValueError(f"Feed file {self.path} is not open")
        self._handle.write(text)

    def close(self) -> None:
        """Close the file. Calling it again is a no-op."""
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()
        logger.debug(f"Closed feed file {self.path}")

    def __enter__(self) -> "FileSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
