from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.claim_system.claim_system.main import create_container
from src.claim_system.claim_system.reports.model import NoResults


def main() -> None:
    container = create_container()
    report = container.report_service.report_approved()

    if isinstance(report, NoResults):
        print(report.message)
        return

    for line in report:
        print(f"{line.date_submitted} - {line.lecturer_name} ({line.lecturer_id}): Total R{line.total_amount:.2f}")


if __name__ == "__main__":
    main()
