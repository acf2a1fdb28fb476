"""Summary statistics for a unified diff.

Contains:
- DiffStats: File count, line counts and touched paths of a diff
- analyze_diff: Build DiffStats from raw ``git diff`` output
"""

from dataclasses import dataclass
from typing import Optional

FILE_HEADER_PREFIX = "diff --git "
NULL_PATH = "/dev/null"


@dataclass(frozen=True)
class DiffStats:
    """Counts derived from a staged diff."""

    files_changed: int
    additions: int
    deletions: int
    paths: tuple[str, ...]


# Escapes git uses in C-style quoted paths, besides \ooo octal bytes
_C_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}
_OCTAL_DIGITS = "01234567"


def _unquote_path(path: str) -> str:
    """Undo git's C-style quoting of a path, e.g. ``"a/caf\\303\\251.md"``.

    Octal escapes are UTF-8 bytes. Unquoted paths are returned unchanged.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    raw = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            escaped = body[i + 1]
            octal = body[i + 1:i + 4]
            if len(octal) == 3 and all(digit in _OCTAL_DIGITS for digit in octal):
                raw.append(int(octal, 8) & 0xFF)
                i += 4
                continue
            if escaped in _C_ESCAPES:
                raw.extend(_C_ESCAPES[escaped].encode("utf-8"))
                i += 2
                continue
        raw.extend(char.encode("utf-8"))
        i += 1

    return raw.decode("utf-8", errors="replace")


def _quoted_token_end(text: str) -> int:
    """Index of the closing quote of the quoted token at the start of text."""
    i = 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == '"':
            return i
        i += 1
    return len(text) - 1


def _strip_side_prefix(path: str) -> str:
    """Drop the a/ or b/ prefix git puts in front of diff paths."""
    if path.startswith(("a/", "b/")):
        return path[2:]
    return path


def _split_header_paths(rest: str) -> list[str]:
    """Split the two raw paths of a ``diff --git`` header, quotes included."""
    if rest.startswith('"'):
        end = _quoted_token_end(rest)
        return [rest[:end + 1], rest[end + 1:].strip()]
    if rest.endswith('"') and ' "' in rest:
        # An unquoted path never contains a double quote
        start = rest.index(' "')
        return [rest[:start], rest[start + 1:]]
    if rest.startswith("a/") and " b/" in rest:
        old, new = rest.split(" b/", 1)
        return [old, "b/" + new]
    return rest.split()


def _paths_from_file_header(line: str) -> list[str]:
    """Extract both paths from a ``diff --git a/x b/y`` header.

    Unquoted paths with spaces are split on the `` b/`` separator; quoted
    paths are split on their quotes and unquoted.
    """
    rest = line[len(FILE_HEADER_PREFIX):].strip()
    return [
        _strip_side_prefix(_unquote_path(part))
        for part in _split_header_paths(rest)
        if part
    ]


def _path_from_marker(line: str) -> Optional[str]:
    """Extract the path from a ``--- a/x`` or ``+++ b/x`` marker line."""
    path = line[4:].split("\t", 1)[0].strip()
    if not path or path == NULL_PATH:
        return None
    return _strip_side_prefix(_unquote_path(path))


def analyze_diff(diff: str) -> DiffStats:
    """Count files, added and removed lines in a unified diff.

    The ``+++``/``---`` file markers between a ``diff --git`` header and the
    first ``@@`` hunk are not counted as changed lines. Inside a hunk, a
    removed ``-- comment`` line is a deletion like any other.

    Args:
        diff: Raw unified diff text.

    Returns:
        A DiffStats for the diff.
    """
    files_changed = 0
    additions = 0
    deletions = 0
    paths: list[str] = []
    in_header = True

    def add_path(path: Optional[str]) -> None:
        if path and path not in paths:
            paths.append(path)

    for line in diff.splitlines():
        if line.startswith(FILE_HEADER_PREFIX):
            files_changed += 1
            in_header = True
            for path in _paths_from_file_header(line):
                add_path(path)
        elif line.startswith("@@"):
            in_header = False
        elif in_header and (line.startswith("+++ ") or line.startswith("--- ")):
            add_path(_path_from_marker(line))
        elif in_header:
            # index, mode and rename lines
            continue
        elif line.startswith("+"):
            additions += 1
        elif line.startswith("-"):
            deletions += 1

    return DiffStats(
        files_changed=files_changed,
        additions=additions,
        deletions=deletions,
        paths=tuple(paths),
    )
