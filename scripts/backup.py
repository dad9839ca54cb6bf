"""Backup the current attendance state.

Note: Reads through the same coordinator as the API (Redis first, local file as
fallback) and writes one JSON snapshot under `backups/`.
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

from src.attendance_sync.attendance_sync.container import build_container
from src.attendance_sync.attendance_sync.core.exceptions import ReliabilityError


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_config=dict(settings.STORE_CONFIG), admin_password=settings.ADMIN_PASSWORD)

    try:
        db = container.sync_service.snapshot()
    except ReliabilityError as e:
        raise SystemExit(f"Cannot back up: {e}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.json"
    out_file.write_text(json.dumps(db.to_dict(), indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} (mode={container.coordinator.mode.value}, records={len(db.records)})")


if __name__ == "__main__":
    main()
