from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.hr_management.hr_management.core.constants import COLLECTION_FILES
from src.hr_management.hr_management.main import load_settings
from src.hr_management.hr_management.storage.json_store import save_collection


def main() -> None:
    data_dir = Path(str(load_settings()["DATA_DIR"]))
    created = []
    for filename in COLLECTION_FILES.values():
        path = data_dir / filename
        if not path.exists():
            save_collection(path, [])
            created.append(filename)

    print(f"OK: Data directory {data_dir} ready (created={len(created)}: {', '.join(created) or '-'})")


if __name__ == "__main__":
    main()
