import sys

from py_buffered_io import open_scanner


def scan(path, delimiter="\n"):
    """Print every line of ``path`` prefixed with its line number."""
    with open_scanner(path, delimiter) as scanner:
        for number, line in enumerate(scanner, 1):
            print(f"{number:6d}  {line}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit(f"usage: {sys.argv[0]} FILE [DELIMITER]")
    scan(*sys.argv[1:3])
