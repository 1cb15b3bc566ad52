"""Git repository detection used for config discovery."""

import os
from pathlib import Path
from typing import Optional


def find_git_root(start_path: Optional[Path] = None) -> Optional[Path]:
    """Return the nearest directory at or above start_path holding a .git entry.

    The EVTFLAGS_GIT_ROOT environment variable, when set, is returned as-is
    without checking the filesystem.

    Args:
        start_path: Directory to search from. Defaults to the current
            working directory.

    Returns:
        The repository root, or None outside a git repository.
    """
    override = os.environ.get("EVTFLAGS_GIT_ROOT")
    if override:
        return Path(override)

    current = Path.cwd() if start_path is None else Path(start_path).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None
