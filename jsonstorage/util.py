from pathlib import Path
from urllib.parse import quote

# Characters kept verbatim inside a single URL path segment. ',', ';' and
# '/' are reserved for segment structure and always escaped.
_SEGMENT_SAFE = "$&+:=@"


def canonical_key(key: str) -> str:
    """Return the canonical form of a caller key (lowercased, nothing else).

    Uses `str.lower`, i.e. full Unicode case mapping: a few characters
    lower to more than one code point ("İ" becomes "i" plus a combining dot).
    """
    return key.lower()


def escape_key(key: str) -> str:
    """Percent-escape `key` so it is usable as a single file name.

    Unreserved characters and ``$&+:=@`` are kept; everything else,
    including path separators, is encoded as UTF-8 ``%XX`` sequences.
    """
    return quote(key, safe=_SEGMENT_SAFE)


def entry_path(directory: Path, key: str, extension: str) -> Path:
    return directory / (escape_key(canonical_key(key)) + extension)
