"""Location of settings files."""

from __future__ import annotations

import os


def get_settings_filename_path(file_name: str) -> str:
    """Return the path of `file_name` inside the user's home directory."""
    home = os.environ.get("HOME") or os.path.expanduser("~")
    return f"{home}{os.sep}{file_name}"