"""Backup the JSON data directory.

Note: copies every collection file into backups/data_<timestamp>/.
"""

from __future__ import annotations

import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.hr_management.hr_management.main import load_settings


def main() -> None:
    data_dir = Path(str(load_settings()["DATA_DIR"]))
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = REPO_ROOT / "backups" / f"data_{ts}"
    out_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(data_dir.glob("*.json"))
    for f in files:
        shutil.copy2(f, out_dir / f.name)
    print(f"OK: Backup created: {out_dir} ({len(files)} files)")


if __name__ == "__main__":
    main()
