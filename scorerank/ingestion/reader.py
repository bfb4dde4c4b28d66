"""
Delimited Line Reader

Both input files share one layout: a single header line followed by records
whose fields are separated by a plain comma. There is no quoting or escaping,
so a field can never contain the delimiter.
"""

from collections.abc import Iterator
from pathlib import Path

from scorerank.config import FIELD_DELIMITER, FILE_ENCODING, HEADER_LINES
from scorerank.errors import FormatError, IoOpenError, IoReadError
from scorerank.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def strip_line_ending(line: str) -> str:
    """Remove one trailing "\n", then one trailing "\r"."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def split_line(line: str) -> list[str]:
    """Strip the line ending and split on the delimiter."""
    return strip_line_ending(line).split(FIELD_DELIMITER)


def read_records(path: Path, field_count: int, label: str) -> Iterator[tuple[int, list[str]]]:
    """
    Yield the records of a delimited text file, skipping the header.

    Args:
        path: File to read
        field_count: Exact number of fields every record must have
        label: Human-readable file description used in error messages

    Yields:
        Tuples of (1-based line number, fields)

    Raises:
        IoOpenError: If the file cannot be opened
        IoReadError: If reading or decoding fails part way through
        FormatError: If a record has the wrong number of fields
    """
    try:
        handle = open(path, encoding=FILE_ENCODING, newline="\n")
    except OSError as e:
        raise IoOpenError(f"Failed to open {label} '{path}': {e.strerror or e}") from e

    with handle:
        line_number = 0
        try:
            for line in handle:
                line_number += 1
                if line_number <= HEADER_LINES:
                    continue

                if not strip_line_ending(line):
                    continue

                fields = split_line(line)
                if len(fields) != field_count:
                    raise FormatError(
                        f"Invalid {label} format: expected {field_count} fields, found {len(fields)}",
                        path,
                        line_number,
                    )

                yield line_number, fields
        except (OSError, UnicodeDecodeError) as e:
            raise IoReadError(f"Failed to read {label} '{path}' after line {line_number}: {e}") from e

    logger.debug(f"Read {max(line_number - HEADER_LINES, 0)} lines from {path}")
