import io
import os
import tempfile
import time

from py_buffered_io import DEFAULT_CHUNK_SIZE, FileScanner


def write_sample(path: str, lines: int) -> None:
    with open(path, "wb") as f:
        for i in range(lines):
            f.write(f"line {i} of the sample file\n".encode("utf-8"))


def scan_buffered(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Scan the file with FileScanner and return the number of lines."""
    count = 0
    with FileScanner(open(path, "rb"), chunk_size=chunk_size) as scanner:
        for _ in scanner:
            count += 1
    return count


def scan_unbuffered(path: str) -> int:
    """Scan the file one byte per read call on a raw FileIO."""
    count = 0
    with io.FileIO(path, "r") as f:
        line = bytearray()
        while True:
            b = f.read(1)
            if not b:
                break
            if b == b"\n":
                line.decode("utf-8")
                line.clear()
                count += 1
            else:
                line.extend(b)
    if line:
        count += 1
    return count


def _timed(func, *args) -> float:
    start = time.time()
    func(*args)
    return time.time() - start


def bench(lines: int = 1000,
          chunk_size: int = DEFAULT_CHUNK_SIZE) -> tuple[float, float]:
    """Return runtimes for (buffered, unbuffered)."""
    fd, path = tempfile.mkstemp(suffix=".txt")
    os.close(fd)
    try:
        write_sample(path, lines)
        return (_timed(scan_buffered, path, chunk_size),
                _timed(scan_unbuffered, path))
    finally:
        os.remove(path)


if __name__ == "__main__":
    btime, utime = bench()
    print(f"buffered: {btime:.6f}")
    print(f"unbuffered: {utime:.6f}")
