from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def open_with_default_app(path: Path) -> None:
    """Hand the file to the OS so it opens in its associated application."""
    if sys.platform.startswith("win"):
        os.startfile(str(path))  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", str(path)], start_new_session=True)
    else:
        subprocess.Popen(["xdg-open", str(path)], start_new_session=True)
