"""
Employee Provisioning - make sure a User has its linked Employee record
"""

import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from models import Employee, User
from schemas import EmployeeProvisioning, ProvisionResult

logger = logging.getLogger(__name__)


def _silent(message: str) -> None:
    pass


def find_user_with_employee(db: Session, employee_number: str) -> Optional[User]:
    # Single fetch: user plus its linked employee (if any)
    return (
        db.query(User)
        .options(joinedload(User.employee))
        .filter(User.employee_number == employee_number)
        .first()
    )


def provision_employee(
    db: Session,
    config: Optional[EmployeeProvisioning] = None,
    progress: Callable[[str], None] = _silent,
) -> ProvisionResult:
    """
    Create the Employee record for the user identified by
    config.employee_number unless one already exists.

    progress is called with a line of text as each step starts, so a
    failing insert is reported after "Creating employee record...".

    Never updates or deletes an existing Employee. Database errors are
    rolled back and reported as a "failed" result instead of raised.

    Returns:
        ProvisionResult: created | already_exists | user_not_found | failed
    """
    config = config or EmployeeProvisioning()
    number = config.employee_number
    user_id = None

    try:
        progress(f"Finding user {number}...")
        user = find_user_with_employee(db, number)
        if not user:
            logger.warning("No user with employee_number=%s", number)
            return ProvisionResult(outcome="user_not_found", employee_number=number)

        user_id = user.id
        progress(f"User found: {user.name}")

        if user.employee:
            logger.info("Employee %s already linked to user %s", user.employee.id, user.id)
            return ProvisionResult(
                outcome="already_exists",
                employee_number=user.employee.employee_number,
                user_id=user.id,
                user_name=user.name,
                employee_id=user.employee.id,
                job_category=user.employee.job_category,
            )

        progress("Creating employee record...")
        employee = Employee(
            user_id=user.id,
            employee_number=number,
            job_category=config.job_category,
            agreement_type=config.agreement_type,
            employment_date=config.employment_date,
            work_time_type=config.work_time_type,
            base_salary=config.base_salary,
            department=config.department,
            location=config.location,
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)

        logger.info("Created employee %s for user %s", employee.id, employee.user_id)
        return ProvisionResult(
            outcome="created",
            employee_number=employee.employee_number,
            user_id=employee.user_id,
            user_name=user.name,
            employee_id=employee.id,
            job_category=employee.job_category,
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Provisioning employee %s failed: %s", number, e)
        return ProvisionResult(outcome="failed", employee_number=number, user_id=user_id, error=str(e))
