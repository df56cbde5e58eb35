"""Export the workers, teams and containers collections to one JSON file.

Note: reads through the configured storage backend, so it works for both the
json and the mysql backends.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.container_payroll.container_payroll.container import build_backend
from src.container_payroll.container_payroll.core.enums import Collection
from src.container_payroll.container_payroll.storage.repository import Repository


def export_collections(repository: Repository) -> dict:
    return {c.value: repository.get_all(c) for c in Collection}


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(
        getattr(settings, "STORAGE_BACKEND", "json"),
        data_dir=getattr(settings, "DATA_DIR", "data"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    repository = Repository(backend)
    repository.initialize()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"container_payroll_{ts}.json"
    out_file.write_text(json.dumps(export_collections(repository), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
