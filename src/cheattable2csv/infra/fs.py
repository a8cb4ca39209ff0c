from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the text I/O used to read the
source cheat table and persist the export. Acts as an abstraction over the
'os' module to keep behavior uniform across Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_text_file(path: str) -> str:
    """
    Load a whole text file decoded as UTF-8.

    A leading byte order mark is dropped, as some cheat table editors emit one.

    Args:
        path: File to read.

    Returns:
        str: The decoded file content.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file when missing.

    Args:
        path: Target file path.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


def write_text_file(path: str, content: str) -> None:
    """
    Create or overwrite a text file in a single write.

    Args:
        path: Target file path.
        content: Full text to persist.

    Raises:
        OSError: If the directory or the file cannot be written.
    """
    ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
