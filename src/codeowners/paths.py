from __future__ import annotations

import re
from pathlib import Path, PurePosixPath


def to_posix(path: str) -> str:
    return path.replace("\\", "/")


def split_path(path: str) -> tuple[tuple[str, ...], bool]:
    """Split a repo-relative query path into components.

    Returns ``(components, is_dir)``. A trailing '/' marks the path as a
    directory; leading './' and '/' and empty components are dropped.
    """
    p = to_posix(path)
    while p.startswith("./"):
        p = p[2:]
    is_dir = p.endswith("/")
    parts = tuple(seg for seg in p.split("/") if seg)
    return parts, is_dir


def normalize_repo_path(path: str, repo_root: Path | None = None) -> str:
    """Normalize a file path for matching.

    - Converts backslashes to slashes
    - If absolute and repo_root is provided, makes it relative to repo_root
    - Strips leading './' (repeatable) and leading '/'
    - Collapses repeated separators but keeps a trailing '/' (directory marker)
    """
    p = to_posix(path).strip()

    # Trim surrounding quotes (common when copying from tooling)
    if len(p) >= 2 and p[0] == p[-1] and p[0] in ("'", '"'):
        p = p[1:-1]

    if repo_root is not None:
        pp = Path(p)
        if pp.is_absolute():
            try:
                p = to_posix(str(pp.relative_to(repo_root)))
            except ValueError:
                # Outside the repository; match against the path as given.
                pass

    is_dir = p.endswith("/")
    p = re.sub(r"/{2,}", "/", p)
    while p.startswith("./"):
        p = p[2:]
    p = p.lstrip("/")
    if not p:
        return ""

    out = str(PurePosixPath(p))
    if is_dir and out != ".":
        out += "/"
    return out
