"""Example: drive the service layer without a UI.

Goal: show that screens stay thin; the business rules live in the services.
"""

from src.claim_system.claim_system.core.exceptions import DomainError
from src.claim_system.claim_system.main import create_container
from src.claim_system.claim_system.reports.model import NoClaims


def main():
    container = create_container()

    try:
        container.lecturer_service.register(
            lecturer_id="L001", full_name="Jane Doe", email="jane@example.com", password="secret"
        )
    except DomainError as e:
        print(e)

    claim = container.claim_service.submit_claim(
        lecturer_name="Jane Doe",
        lecturer_id="L001",
        lecturer_email="jane@example.com",
        hours_worked="10",
        hourly_rate="15",
        notes="Marking",
    )
    print(claim.claim_id, claim.total_amount, claim.status.value)

    session = container.auth_service.login("L001", "secret")
    print(f"Welcome, {session.lecturer.full_name}: {len(session.claims)} claim(s)")

    invoice = container.report_service.invoice_for("L001")
    if isinstance(invoice, NoClaims):
        print(invoice.message)
    else:
        for line in invoice.lines:
            print(f"{line.date_submitted} - {line.notes} - Total R{line.total_amount} - Status: {line.status.value}")


if __name__ == "__main__":
    main()
