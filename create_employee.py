"""
Create the Employee record for test user 1001 if it does not exist yet.

Exit status: 0 when the employee was created or already existed,
1 when the user is missing or the database call failed.
"""

import logging
import sys

from db import SessionLocal
from schemas import EmployeeProvisioning
from services.employee_provisioning import provision_employee

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(session_factory=SessionLocal, config: EmployeeProvisioning | None = None) -> int:
    config = config or EmployeeProvisioning()
    db = None
    try:
        db = session_factory()
        result = provision_employee(db, config, progress=print)

        if result.outcome == "user_not_found":
            print("User not found. Run create_test_user.py first")
        elif result.outcome == "failed":
            print(f"Error: {result.error}", file=sys.stderr)
        elif result.outcome == "already_exists":
            print(f"Employee record already exists: {result.employee_id}")
            print(f"   Employee ID: {result.employee_id}")
            print(f"   Job category: {result.job_category}")
        else:
            print(f"Employee created! ID: {result.employee_id}")
            print(f"   Employee ID: {result.employee_id}")
            print(f"   User ID: {result.user_id}")
            print(f"   Employee number: {result.employee_number}")
            print(f"   Job category: {result.job_category}")
        return result.exit_code
    except Exception as e:
        logger.exception("Employee provisioning aborted")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if db is not None:
            db.close()


if __name__ == "__main__":
    sys.exit(main())
