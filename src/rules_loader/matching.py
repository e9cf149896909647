"""Shell-style glob matching on ``/`` separated paths."""

import fnmatch
import re
from functools import lru_cache
from pathlib import Path

_RECURSIVE = "**"


def glob_match(path: str, pattern: str) -> bool:
    """
    Match a path against a glob pattern, supporting ** for recursive directories.

    Patterns without a ``/`` are also tried against the basename, so ``*.tsx``
    matches ``src/App.tsx``. A trailing ``/`` matches everything below that
    directory. An empty path matches nothing.

    Args:
        path: The file path to match, using ``/`` separators
        pattern: The glob pattern (e.g., "app/**/*.rb")

    Returns:
        True if the path matches the pattern
    """
    pattern = pattern.strip()
    if pattern.startswith("./"):
        pattern = pattern[2:]
    pattern = pattern.lstrip("/")
    if pattern.endswith("/"):
        pattern += _RECURSIVE
    if not pattern:
        return False

    path = path.strip("/")
    if not path:
        return False
    path_parts = path.split("/")

    if "/" not in pattern:
        return _match_segment(path_parts[-1], pattern)

    return _match_parts(path_parts, pattern.split("/"))


def normalize_target(target: str | Path, root: Path | None = None) -> str:
    """
    Normalize a target file path to a Unix-style path for pattern matching.

    Absolute paths inside ``root`` are made relative to it; anything else is
    kept as given.

    Args:
        target: Path of the file being edited
        root: Rules root the path may be relative to

    Returns:
        Normalized path string, without a leading ``./``
    """
    target_path = Path(target)
    if root is not None and target_path.is_absolute():
        for candidate in (target_path, target_path.resolve()):
            try:
                target_path = candidate.relative_to(root)
                break
            except ValueError:
                continue

    normalized = str(target_path).replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return "" if normalized == "." else normalized


def _match_parts(path_parts: list[str], pattern_parts: list[str]) -> bool:
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == _RECURSIVE:
        if not rest:
            # ** at end matches everything remaining
            return True
        return any(_match_parts(path_parts[k:], rest) for k in range(len(path_parts) + 1))

    if not path_parts:
        return False
    return _match_segment(path_parts[0], head) and _match_parts(path_parts[1:], rest)


def _match_segment(segment: str, pattern: str) -> bool:
    return _compile_segment(pattern).match(segment) is not None


@lru_cache(maxsize=512)
def _compile_segment(pattern: str) -> re.Pattern[str]:
    # fnmatch handles *, ? and [...] classes; segments never contain "/"
    return re.compile(fnmatch.translate(pattern))
