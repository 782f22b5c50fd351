"""Buffered sequential reading of byte sources."""

from .buffer import DEFAULT_CHUNK_SIZE, ByteBuffer
from .streams import BufferedReader
from .scanner import FileScanner
from .highlevel import open_reader, open_scanner

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ByteBuffer",
    "BufferedReader",
    "FileScanner",
    "open_reader",
    "open_scanner",
]
