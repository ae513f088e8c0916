"""Example: build a report through the service layer (no Flask).

Controllers stay thin; the accounting lives in the report assembler.
"""

import importlib
import json
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "shift_attendance"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from shift_attendance.container import build_container
from shift_attendance.reports.payload import report_to_dict


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.report_service.build_attendance_report(
        employee_id="emp-001",
        start=date(2025, 9, 1),
        end=date(2025, 9, 3),
    )
    print(json.dumps(report_to_dict(report), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
