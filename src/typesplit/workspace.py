from __future__ import annotations

import os
from pathlib import Path

SUBDIRS = ("profiles",)


def workspace_dir() -> Path:
    env = os.environ.get("TYPESPLIT_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".typesplit").resolve()


def profiles_dir() -> Path:
    return workspace_dir() / "profiles"


def ensure_workspace() -> Path:
    """Create the workspace folders if missing and return the workspace root."""
    root = workspace_dir()
    for sub in SUBDIRS:
        (root / sub).mkdir(parents=True, exist_ok=True)
    return root
