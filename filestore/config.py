"""
filestore configuration.
Environment-driven defaults for stores built with FileStore.from_settings().
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_TRUTHY = ("1", "true", "yes", "on")


def get_settings():
    """Return settings read from the environment, after loading .env from the working directory."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings()


class Settings:
    """Store settings loaded from environment."""

    # Directory holding one file per key; must already exist
    FILESTORE_DATA_DIR: Path

    # Stage writes in a temp file and rename over the target
    FILESTORE_ATOMIC_WRITES: bool = False

    # Pretty-print JSON values (None = compact)
    FILESTORE_JSON_INDENT: Optional[int] = None

    def __init__(self):
        self.FILESTORE_DATA_DIR = Path(os.environ.get("FILESTORE_DATA_DIR") or "data")
        atomic = (os.environ.get("FILESTORE_ATOMIC_WRITES") or "").strip().lower()
        self.FILESTORE_ATOMIC_WRITES = atomic in _TRUTHY
        indent = (os.environ.get("FILESTORE_JSON_INDENT") or "").strip()
        self.FILESTORE_JSON_INDENT = int(indent) if indent.isdigit() else None
