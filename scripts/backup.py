"""Backup the JSON data files.

Note: Copies claims.json and lecturers.json into backups/<timestamp>/.
Attachments in the Files folder are not included.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.claim_system.claim_system.storage.config import StorageConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = StorageConfig.from_path(getattr(settings, "DATA_DIR", ""))

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / ts
    out_dir.mkdir(parents=True, exist_ok=True)

    copied = 0
    for path in (storage.claims_path, storage.lecturers_path):
        if path.exists():
            shutil.copy2(path, out_dir / path.name)
            copied += 1

    if not copied:
        raise SystemExit(f"No data files found in {storage.data_dir}")
    print(f"OK: Backup created: {out_dir} ({copied} file(s))")


if __name__ == "__main__":
    main()
