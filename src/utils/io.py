"""File access helpers.

`FileReader` is the capability the loader depends on: read one named file
and return its text. `LocalFileReader` reads from a directory on disk with
aiofiles so the read can be awaited without blocking the event loop.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

import aiofiles
import aiofiles.os

from utils.logging import get_logger
from utils.path_utils import resolve_data_file

logger = get_logger(__name__)


@runtime_checkable
class FileReader(Protocol):
    """Protocol for reading a named text file."""

    async def read_text(self, name: str) -> str:
        """
        Read the full text content of ``name``.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid text in the reader's encoding
        """
        ...


class LocalFileReader:
    """Read files relative to a base directory."""

    def __init__(self, base_dir: str | Path, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir)
        self.encoding = encoding

    def path_for(self, name: str) -> Path:
        return resolve_data_file(name, self.base_dir)

    async def read_text(self, name: str) -> str:
        path = self.path_for(name)
        if not await aiofiles.os.path.isfile(path):
            raise FileNotFoundError(f"No such file: {path}")

        async with aiofiles.open(path, "r", encoding=self.encoding) as f:
            content = await f.read()

        logger.debug(f"Read {len(content)} characters from {path}")
        return content


def ensure_dir(path: str | Path) -> Path:
    """Ensure the directory exists and return the Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
