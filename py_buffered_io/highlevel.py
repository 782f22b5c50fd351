from .buffer import DEFAULT_CHUNK_SIZE
from .scanner import FileScanner
from .streams import BufferedReader


def open_reader(path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> BufferedReader:
    """Open *path* for binary reading and wrap it in a BufferedReader."""
    f = open(path, "rb")
    try:
        return BufferedReader(f, chunk_size)
    except ValueError:
        f.close()
        raise


def open_scanner(path, delimiter="\n",
                 chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileScanner:
    f = open(path, "rb")
    try:
        return FileScanner(f, delimiter, chunk_size)
    except ValueError:
        f.close()
        raise
