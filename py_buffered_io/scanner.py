from typing import Optional

from .buffer import DEFAULT_CHUNK_SIZE
from .streams import BufferedReader


class FileScanner:
    """Iterate over the text lines of a binary source.

    Lines are split on a single ASCII *delimiter* (newline by default) and
    decoded as UTF-8. After the scanner is exhausted, :meth:`reset` rewinds
    it so the same lines can be produced again.
    """

    def __init__(self, source, delimiter="\n",
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._reader = BufferedReader(source, chunk_size)
        self._delimiter = delimiter
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = self.next()
        if line is None:
            raise StopIteration
        return line

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def delimiter(self):
        return self._delimiter

    def next(self) -> Optional[str]:
        """Return the next line, or None when there are no more.

        Once None has been returned every later call returns None too,
        until reset().
        """
        if self._exhausted:
            return None
        line = self._reader.read_line(self._delimiter)
        if line is None:
            self._exhausted = True
        return line

    def set_delimiter(self, delimiter) -> None:
        self._delimiter = delimiter

    def reset(self) -> None:
        self._reader.reset()
        self._exhausted = False

    def close(self) -> None:
        self._reader.close()
