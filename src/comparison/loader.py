"""Load the raw comparison CSV through an injected file reader."""

from utils.io import FileReader
from utils.logging import get_logger

logger = get_logger(__name__)


class LoadError(Exception):
    """Raised when the comparison file cannot be read."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not load '{file_name}': {reason}")


async def load_text(reader: FileReader, file_name: str) -> str:
    """Read ``file_name`` once and return its full text.

    Missing files, I/O failures and decoding errors are all reported as
    :class:`LoadError` so callers only have one failure to handle.
    """
    logger.info(f"Loading comparison data from '{file_name}'")
    try:
        content = await reader.read_text(file_name)
    except FileNotFoundError as e:
        raise LoadError(file_name, f"file not found ({e})") from e
    except UnicodeDecodeError as e:
        raise LoadError(file_name, f"invalid text encoding ({e.reason})") from e
    except OSError as e:
        raise LoadError(file_name, f"I/O error ({e})") from e

    logger.info(f"Loaded {len(content)} characters from '{file_name}'")
    return content
