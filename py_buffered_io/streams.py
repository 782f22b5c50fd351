import logging
from typing import Optional

from .buffer import DEFAULT_CHUNK_SIZE, ByteBuffer

logger = logging.getLogger(__name__)


def _delimiter_byte(delimiter) -> Optional[int]:
    """Return the byte value of a single ASCII delimiter, or None."""
    if isinstance(delimiter, int) and not isinstance(delimiter, bool):
        value = delimiter
    elif isinstance(delimiter, str) and len(delimiter) == 1:
        value = ord(delimiter)
    elif isinstance(delimiter, (bytes, bytearray)) and len(delimiter) == 1:
        value = delimiter[0]
    else:
        return None
    if 0 <= value < 128:
        return value
    return None


class BufferedReader:
    """Synchronous buffered reader over a binary file-like object.

    The reader owns *source*: it is closed by :meth:`close` or when the
    reader is used as a context manager. Bytes are pulled from the source
    in *chunk_size* pieces only when the internal buffer cannot satisfy a
    request. Every read returns ``None`` once nothing more can be produced.
    """

    def __init__(self, source, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if (not isinstance(chunk_size, int) or isinstance(chunk_size, bool)
                or chunk_size <= 0):
            raise ValueError("chunk_size must be a positive integer")
        self._source = source
        self._chunk_size = chunk_size
        self._buffer = ByteBuffer()
        self._eof = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def closed(self) -> bool:
        return self._source is None

    def _fill(self) -> int:
        """Pull one chunk from the source into the buffer.

        Returns the number of bytes added. Zero marks the source as
        exhausted until the next reset.
        """
        if self._eof or self._source is None:
            return 0
        try:
            data = self._source.read(self._chunk_size)
        except (OSError, ValueError) as exc:
            logger.warning("read from %r failed, treating as EOF: %s",
                           self._source, exc)
            data = b""
        if not data:
            self._eof = True
            return 0
        self._buffer.append(data)
        return len(data)

    def read_bytes(self, length: int) -> Optional[bytes]:
        """Return up to *length* bytes, or None if none are left."""
        if (not isinstance(length, int) or isinstance(length, bool)
                or length <= 0):
            logger.debug("read_bytes called with invalid length %r", length)
            return None
        while len(self._buffer) < length:
            if not self._fill():
                break
        data = self._buffer.read(length)
        return data or None

    def read_record(self, delimiter) -> Optional[bytes]:
        """Return the bytes before the next *delimiter*, consuming both.

        If the source runs out before a delimiter is seen the remaining
        bytes are returned as a final record without one.
        """
        byte = _delimiter_byte(delimiter)
        if byte is None:
            logger.debug("read_record called with invalid delimiter %r",
                         delimiter)
            return None
        start = 0
        while True:
            idx = self._buffer.find(byte, start)
            if idx != -1:
                record = self._buffer.read(idx)
                self._buffer.skip(1)
                return record
            # only the newly appended bytes need searching next time
            start = len(self._buffer)
            if not self._fill():
                if self._buffer:
                    return self._buffer.read()
                return None

    def read_line(self, delimiter="\n") -> Optional[str]:
        """Like :meth:`read_record` but decoded as UTF-8.

        Undecodable records are reported as None, same as exhaustion.
        """
        record = self.read_record(delimiter)
        if record is None:
            return None
        try:
            return record.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("dropping %d byte record: %s", len(record), exc)
            return None

    def reset(self) -> None:
        """Discard buffered data and rewind the source to offset zero."""
        self._buffer.clear()
        if self._source is None:
            return
        try:
            self._source.seek(0)
        except (OSError, ValueError) as exc:
            logger.warning("seek on %r failed: %s", self._source, exc)
            self._eof = True
            return
        self._eof = False

    def close(self) -> None:
        if self._source is None:
            # already closed
            return
        source = self._source
        self._source = None
        self._buffer.clear()
        self._eof = True
        try:
            source.close()
        except OSError as exc:
            logger.debug("ignoring error closing %r: %s", source, exc)
