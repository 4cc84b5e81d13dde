from __future__ import annotations

import subprocess
from pathlib import Path

from .errors import GitError


def find_repo_root(cwd: Path | None = None) -> Path:
    """Top-level directory of the git work tree containing ``cwd``."""
    try:
        cp = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=str(cwd or Path.cwd()),
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitError("git not found on PATH") from e
    except subprocess.CalledProcessError as e:
        raise GitError(e.stderr.strip() or "not a git repository") from e

    top = cp.stdout.strip()
    if not top:
        raise GitError("git rev-parse returned no work tree")
    return Path(top)
