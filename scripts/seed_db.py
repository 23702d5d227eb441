from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv

from business_manager.config import get_settings_module
from business_manager.database.bootstrap import apply_seed_sql, ensure_admin_user


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    created = ensure_admin_user(
        db_config,
        username=getattr(settings, "ADMIN_USERNAME", None),
        password=getattr(settings, "ADMIN_PASSWORD", None),
    )

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
        f" (admin {'created' if created else 'unchanged'})"
    )


if __name__ == "__main__":
    main()
