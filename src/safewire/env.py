from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_LOADED_FROM: Optional[Path] = None


def load_dotenv_if_present(dotenv_path: Optional[str] = None, *, force: bool = False) -> bool:
    """Load SAFEWIRE_* settings from a .env file once per process.

    Path: explicit argument, else $SAFEWIRE_DOTENV_PATH, else ./.env.
    Existing environment variables always win (override=False).
    Returns True only if a file was found and loaded by this call.
    """
    global _LOADED_FROM
    if _LOADED_FROM is not None and not force:
        return False

    path = Path(dotenv_path or os.getenv("SAFEWIRE_DOTENV_PATH") or ".env").expanduser()
    if not path.is_file():
        return False

    load_dotenv(dotenv_path=path, override=False)
    _LOADED_FROM = path
    return True
