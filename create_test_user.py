"""
Create (or reset) the test user used by the mobile app login.
"""

import logging
import sys

from db import SessionLocal
from services.mobile_login import ensure_test_user

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEST_EMPLOYEE_NUMBER = "1001"
TEST_PIN = "1234"


def main(session_factory=SessionLocal) -> int:
    db = session_factory()
    try:
        user, created, team_created = ensure_test_user(db, TEST_EMPLOYEE_NUMBER, TEST_PIN)
        if team_created:
            print("No team found - test team created")
        if created:
            print("Test employee created!")
        else:
            print(f"Test employee updated (PIN reset to {TEST_PIN})")

        print("\nLogin credentials for mobile app:")
        print(f"   Employee number: {user.employee_number}")
        print(f"   PIN: {TEST_PIN}")
        print(f"   Name: {user.name}")
        print(f"   Active: {user.is_active}")
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Test user setup failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
