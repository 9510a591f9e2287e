"""
CSV parsing utilities for bulk word import.

Input is two columns per line, ``native,foreign``, comma-separated, with
optional double-quote quoting. A line containing both "native" and "foreign"
is treated as a header and skipped, which also skips a data line that
happens to contain both words.
"""

import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Tried in order; the first that decodes wins
ENCODINGS = ('utf-8-sig', 'utf-16')


def decode_csv_bytes(data: bytes) -> Optional[str]:
    """
    Decode raw file contents.

    Args:
        data: Raw bytes of the uploaded file

    Returns:
        Decoded text, or None if the bytes are neither UTF-8 nor UTF-16
    """
    for encoding in ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return None


def split_csv_line(line: str) -> List[str]:
    """
    Split a single CSV line into fields.

    Quoted fields may contain commas; a doubled quote inside a quoted field
    stands for one literal quote. Whitespace between a closing quote and the
    next comma is skipped. The last field is always returned, even if empty.

    Examples:
        >>> split_csv_line('House,Maison')
        ['House', 'Maison']

        >>> split_csv_line('"Bonjour, Hi",Greeting')
        ['Bonjour, Hi', 'Greeting']

        >>> split_csv_line('"Say \"\"Hi\"\"\",Greeting')
        ['Say "Hi"', 'Greeting']

        >>> split_csv_line('"a","b"')
        ['a', 'b', '']
    """
    fields = []
    buffer = []
    i = 0
    end = len(line)

    while i < end:
        char = line[i]

        if char == '"':
            i += 1
            while i < end:
                if line[i] == '"':
                    if i + 1 < end and line[i + 1] == '"':
                        buffer.append('"')
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    buffer.append(line[i])
                    i += 1

            while i < end and line[i].isspace():
                i += 1
            if i < end and line[i] == ',':
                i += 1
            fields.append(''.join(buffer))
            buffer = []
        elif char == ',':
            fields.append(''.join(buffer))
            buffer = []
            i += 1
        else:
            buffer.append(char)
            i += 1

    fields.append(''.join(buffer))
    return fields


def is_header_line(line: str) -> bool:
    """Check whether a line looks like a ``native,foreign`` header row."""
    lower = line.lower()
    return 'native' in lower and 'foreign' in lower


def parse_csv(data: bytes) -> List[Tuple[str, str]]:
    """
    Parse CSV file contents into (native, foreign) pairs.

    Never raises: undecodable input yields an empty list and malformed lines
    are dropped.

    Args:
        data: Raw bytes of the CSV file

    Returns:
        List of (native, foreign) tuples in file order, both sides trimmed

    Examples:
        >>> parse_csv(b'native,foreign\\nHouse,Maison\\n')
        [('House', 'Maison')]

        >>> parse_csv(b'onlyone\\n')
        []
    """
    text = decode_csv_bytes(data)
    if text is None:
        logger.warning(f"Could not decode {len(data)} bytes of CSV as UTF-8 or UTF-16")
        return []

    pairs = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or is_header_line(line):
            continue

        fields = split_csv_line(line)
        if len(fields) < 2:
            continue

        native = fields[0].strip()
        foreign = fields[1].strip()
        if native and foreign:
            pairs.append((native, foreign))

    logger.debug(f"Parsed {len(pairs)} word pair(s) from CSV")
    return pairs
