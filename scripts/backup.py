"""Backup database.

Note: Needs `mysqldump` on PATH (MySQL client tools).
"""

from __future__ import annotations

import importlib
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv

from business_manager.config import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db = settings.DB_CONFIG

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{db['database']}_{ts}.sql"

    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-P{db.get('port', 3306)}",
        f"-u{db['user']}",
        "--single-transaction",
        "--default-character-set=utf8mb4",
        db["database"],
    ]
    env = {**os.environ, "MYSQL_PWD": str(db["password"])}

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True, env=env)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("mysqldump not found. Install the MySQL client tools.")


if __name__ == "__main__":
    main()
