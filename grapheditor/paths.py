"""
Where the editor looks for its settings file.

From a source checkout config.json sits in the repository root, beside
app.py. A PyInstaller build reads it from the folder holding the
executable so it can be edited without rebuilding.
"""

import sys
from pathlib import Path


def get_app_dir() -> Path:
    """Folder that holds config.json for this run."""
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    return get_app_dir() / "config.json"
